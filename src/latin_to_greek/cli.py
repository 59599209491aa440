"""
latin-to-greek CLI

Command-line interface for Beta Code to Greek transliteration.

Usage:
    latin-to-greek "a)/nqrwpo/s e)stin."      # convert arguments, one line each
    latin-to-greek -f iliad.txt               # convert a file line by line
    echo "lo/gos" | latin-to-greek            # convert stdin
    latin-to-greek --example                  # show the Iliad sample
"""

import argparse
import logging
import sys
from typing import Optional, Sequence

from latin_to_greek import __version__
from latin_to_greek.betacode import BetaCodeConverter

logger = logging.getLogger(__name__)

# Iliad 1.1-7 in Beta Code
ILIAD = r"""mh=nin a)/eide qea\ Phlhi"a/dew A)cilh=os
oy)lome/nhn, h(\ myri/' A)caioi=s a)/lge' e)/qhke,
polla\s d' i)fqi/moys jyca\s A)/i"di proi"/ajen
h(rw/wn, ay)toy\s de\ e(lw/ria tey=ce ky/nessin
oi)wnoi=si/ te pa=si, Dio\s d' e)telei/eto boylh/,
e)x oy(= dh\ ta\ prw=ta diasth/thn e)ri/sante
A)trei"/dhs te a)/nax a)ndrw=n kai\ di=os A)cilley/s."""


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="latin-to-greek",
        description=(
            "Beta Code to polytonic Greek converter.\n\n"
            "Follows the Perseus Digital Library convention, except that\n"
            "x = xi, y = ypsilon, c = chi, j = psi, \" = diaeresis and\n"
            "' = koronis. Characters that are not converted are copied\n"
            "as-is and end the current word."
        ),
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog=(
            "Examples:\n"
            "  latin-to-greek \"a)/nqrwpo/s e)stin.\"\n"
            "  latin-to-greek -f iliad.txt\n"
            "  echo \"lo/gos\" | latin-to-greek\n\n"
            "A koronis (') goes on vowels only. An elided consonant such as\n"
            "d' cannot carry one and is printed as typed, as in the --example\n"
            "sample (πολλὰς d' ἰφθίμους).\n"
        ),
    )

    parser.add_argument(
        "text",
        nargs="*",
        help="Beta Code lines to convert (default: read FILE or stdin)",
    )
    parser.add_argument(
        "-f", "--file",
        default=None,
        help="Read Beta Code from FILE, one line at a time",
    )
    parser.add_argument(
        "--no-final-sigma",
        action="store_true",
        help="Keep medial sigma at word ends",
    )
    parser.add_argument(
        "--example",
        action="store_true",
        help=(
            "Print the Iliad 1.1-7 sample in Beta Code and Greek, then exit "
            "(elided d' stays as typed)"
        ),
    )
    parser.add_argument(
        "-v", "--verbose",
        action="store_true",
        help="Log units that could not be converted",
    )
    parser.add_argument(
        "--version",
        action="version",
        version=f"%(prog)s {__version__}",
    )
    return parser


def main(argv: Optional[Sequence[str]] = None) -> int:
    args = _build_parser().parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
        stream=sys.stderr,
    )

    converter = BetaCodeConverter(final_sigma=not args.no_final_sigma)

    if args.example:
        print(ILIAD)
        print()
        for line in converter.convert_lines(ILIAD):
            print(line)
        return 0

    if args.text:
        lines = args.text
    elif args.file:
        try:
            with open(args.file, "r", encoding="utf-8") as f:
                lines = f.read().splitlines()
        except OSError as e:
            print(f"Error: cannot read {args.file}: {e}", file=sys.stderr)
            return 1
    else:
        lines = sys.stdin.read().splitlines()

    failed = 0
    for line in lines:
        result = converter.convert_detailed(line)
        failed += len(result.failures)
        print(result.converted)

    if failed:
        logger.info("%d unit(s) copied unchanged", failed)
    return 0


if __name__ == "__main__":
    sys.exit(main())
