"""
Diacritics submodule.

Provides the Beta Unit model and the composer that turns a letter with its
breathing, accent, diaeresis, iota subscript and koronis markers into
precomposed Greek.

Basic usage:
    >>> from latin_to_greek.diacritics import compose, parse_unit
    >>> compose(parse_unit("w)=|"))
    'ᾦ'
"""

from latin_to_greek.diacritics._compose import (
    ACCENTS,
    BREATHINGS,
    KORONIS,
    MARKERS,
    BetaUnit,
    CompositionError,
    compose,
    is_marker,
    parse_unit,
)

__all__ = [
    "ACCENTS",
    "BREATHINGS",
    "KORONIS",
    "MARKERS",
    "BetaUnit",
    "CompositionError",
    "compose",
    "is_marker",
    "parse_unit",
]
