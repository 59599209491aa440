"""
Beta Code to polytonic Greek converter.

Scans a line of Perseus-style Beta Code into alternating convertible runs
(mapped letters with their trailing markers) and passthrough runs
(everything else), composes each letter into precomposed Greek, and picks
final sigma at the end of each convertible run.

Convention (Perseus Digital Library, with substitutions):
    - x = ξ, y = υ, c = χ, j = ψ
    - " = diaeresis, ' = koronis, | = iota subscript
    - capital Greek = capital Latin

Any character that is not converted is copied as-is and counts as an
end-of-word boundary, so a lowercase sigma before it takes its final form.

Example:
    >>> from latin_to_greek.betacode import convert
    >>> convert("a)/nqrwpo/s e)stin.")
    'ἄνθρωπός ἐστιν.'

    >>> from latin_to_greek.betacode import BetaCodeConverter
    >>> converter = BetaCodeConverter()
    >>> converter.convert("A)cilley/s")
    'Ἀχιλλεύς'
"""

import logging
from dataclasses import dataclass, field
from typing import Optional

from latin_to_greek._letters import is_base_letter
from latin_to_greek.diacritics import CompositionError, compose, is_marker, parse_unit

__all__ = [
    "BetaCodeConverter",
    "ConversionResult",
    "Failure",
    "Run",
    "convert",
    "convert_lines",
    "finalize_sigma",
    "tokenize",
]

logger = logging.getLogger(__name__)

CONVERTIBLE = "convertible"
PASSTHROUGH = "passthrough"

_SIGMA = "σ"
_FINAL_SIGMA = "ς"

# =============================================================================
# Data Classes
# =============================================================================


@dataclass(frozen=True)
class Run:
    """A maximal stretch of a line, either convertible or passthrough."""

    kind: str
    start: int
    text: str
    # Source slice of each unit (letter + markers); empty for passthrough
    units: tuple[str, ...] = ()

    @property
    def is_convertible(self) -> bool:
        return self.kind == CONVERTIBLE


@dataclass
class Failure:
    """Record of a unit whose markers could not be composed."""

    position: int
    source: str
    reason: str


@dataclass
class ConversionResult:
    """Detailed result from conversion."""

    original: str
    converted: str
    runs: list[Run] = field(default_factory=list)
    failures: list[Failure] = field(default_factory=list)

    @property
    def ok(self) -> bool:
        """True when every unit composed."""
        return not self.failures


# =============================================================================
# Tokenizer
# =============================================================================


def tokenize(line: str) -> list[Run]:
    """
    Split a line into alternating convertible and passthrough runs.

    A convertible run is a sequence of units, each one mapped letter plus
    the maximal sequence of markers following it. Everything else,
    including markers with no letter before them, is passthrough.

    Args:
        line: One line of Beta Code

    Returns:
        Runs in order; their texts concatenate back to ``line``

    Example:
        >>> [r.text for r in tokenize("/a)/ 12")]
        ['/', 'a)/', ' 12']
    """
    runs = []
    i = 0
    n = len(line)

    while i < n:
        start = i
        if is_base_letter(line[i]):
            units = []
            while i < n and is_base_letter(line[i]):
                end = i + 1
                while end < n and is_marker(line[end]):
                    end += 1
                units.append(line[i:end])
                i = end
            runs.append(Run(CONVERTIBLE, start, line[start:i], tuple(units)))
        else:
            while i < n and not is_base_letter(line[i]):
                i += 1
            runs.append(Run(PASSTHROUGH, start, line[start:i]))

    return runs


# =============================================================================
# Sigma Finalizer
# =============================================================================


def finalize_sigma(composed: list[str]) -> list[str]:
    """
    Replace a trailing lowercase sigma with final sigma.

    ``composed`` is the composed output of a convertible run, one entry
    per unit. Only the last entry is affected; capital sigma has no final
    form and is left alone.

    Example:
        >>> finalize_sigma(["λ", "ο", "γ", "ο", "σ"])
        ['λ', 'ο', 'γ', 'ο', 'ς']
    """
    if composed and composed[-1] == _SIGMA:
        return composed[:-1] + [_FINAL_SIGMA]
    return composed


# =============================================================================
# Main Converter Class
# =============================================================================


class BetaCodeConverter:
    """
    Beta Code to polytonic Greek converter.

    Stateless between calls; one instance can be shared freely.

    Example:
        >>> converter = BetaCodeConverter()
        >>> converter.convert("fai/nei e)nqa/de.")
        'φαίνει ἐνθάδε.'
        >>> BetaCodeConverter(final_sigma=False).convert("lo/gos")
        'λόγοσ'
    """

    def __init__(self, *, final_sigma: bool = True) -> None:
        self.final_sigma = final_sigma

    def _close(self, segment: list[str]) -> list[str]:
        if self.final_sigma:
            return finalize_sigma(segment)
        return segment

    def convert(self, line: str) -> str:
        """
        Convert one line of Beta Code to Greek.

        Never fails: units that cannot be composed are copied unchanged.
        Line breaks are passthrough characters, so multi-line text
        converts each line independently.

        Args:
            line: Beta Code text

        Returns:
            Greek text with passthrough characters preserved
        """
        return self.convert_detailed(line).converted

    def convert_detailed(self, line: str) -> ConversionResult:
        """
        Convert with full details about runs and failed units.

        Args:
            line: Beta Code text

        Returns:
            ConversionResult with original, converted, runs and failures

        Example:
            >>> result = BetaCodeConverter().convert_detailed("d' e)gw/")
            >>> result.converted
            "d' ἐγώ"
            >>> result.failures[0].reason
            'koronis_on_consonant'
        """
        if not isinstance(line, str):
            raise TypeError(f"Expected str, got {type(line).__name__}")

        runs = tokenize(line)
        output = []
        failures = []

        for run in runs:
            if not run.is_convertible:
                output.append(run.text)
                continue

            position = run.start
            segment: list[str] = []
            for source in run.units:
                try:
                    segment.append(compose(parse_unit(source)))
                except CompositionError as e:
                    logger.debug("Passing through %r at %d: %s", source, position, e.reason)
                    failures.append(Failure(position=position, source=source, reason=e.reason))
                    # The literal unit ends the word for sigma purposes
                    output.extend(self._close(segment))
                    output.append(source)
                    segment = []
                position += len(source)
            output.extend(self._close(segment))

        return ConversionResult(
            original=line, converted="".join(output), runs=runs, failures=failures
        )

    def convert_lines(self, text: str) -> list[str]:
        """
        Convert multi-line text one line at a time.

        Args:
            text: Beta Code text, possibly spanning several lines

        Returns:
            Converted lines, without line terminators
        """
        return [self.convert(line) for line in text.splitlines()]


# =============================================================================
# Module-level Convenience Functions
# =============================================================================

# Singleton instance for convenience functions
_default_converter: Optional[BetaCodeConverter] = None


def _get_default() -> BetaCodeConverter:
    global _default_converter
    if _default_converter is None:
        _default_converter = BetaCodeConverter()
    return _default_converter


def convert(line: str) -> str:
    """
    Convert Beta Code to polytonic Greek.

    Convenience function that uses a shared converter instance.

    Example:
        >>> convert("A)cilley/s")
        'Ἀχιλλεύς'
    """
    return _get_default().convert(line)


def convert_lines(text: str) -> list[str]:
    """
    Convert multi-line Beta Code, one output entry per input line.

    Example:
        >>> convert_lines("lo/gos\\nqeo/s")
        ['λόγος', 'θεός']
    """
    return _get_default().convert_lines(text)
