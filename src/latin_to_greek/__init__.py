"""
latin-to-greek: Beta Code to polytonic Greek transliteration.

Converts ASCII Beta Code (Perseus Digital Library convention, with
x = ξ, y = υ, c = χ, j = ψ) into precomposed Greek Unicode.

Basic usage:
    >>> from latin_to_greek import convert
    >>> convert("a)/nqrwpo/s e)stin.")
    'ἄνθρωπός ἐστιν.'

Multi-line text:
    >>> from latin_to_greek import convert_lines
    >>> convert_lines("mh=nin a)/eide\\nqea/")
    ['μῆνιν ἄειδε', 'θεά']

Per-unit usage:
    >>> from latin_to_greek.diacritics import compose, parse_unit
    >>> compose(parse_unit("h(=|"))
    'ᾗ'
"""

from latin_to_greek.betacode import (
    BetaCodeConverter,
    ConversionResult,
    Failure,
    Run,
    convert,
    convert_lines,
    tokenize,
)
from latin_to_greek.diacritics import BetaUnit, CompositionError, compose, parse_unit

__version__ = "0.1.0"
__all__ = [
    "BetaCodeConverter",
    "ConversionResult",
    "Failure",
    "Run",
    "convert",
    "convert_lines",
    "tokenize",
    "BetaUnit",
    "CompositionError",
    "compose",
    "parse_unit",
]


# Lazy import for spaCy components (only when spacy is installed)
def __getattr__(name: str):
    if name == "GreekTransliteratorComponent":
        try:
            from latin_to_greek.spacy import GreekTransliteratorComponent
            return GreekTransliteratorComponent
        except ImportError:
            raise ImportError(
                "spaCy integration requires spacy. "
                "Install with: pip install latin-to-greek[spacy]"
            )
    raise AttributeError(f"module {__name__!r} has no attribute {name!r}")
