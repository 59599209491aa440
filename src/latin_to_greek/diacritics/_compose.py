"""
Diacritic composition for Beta Code units.

A Beta Unit is one base letter plus the markers that immediately follow
it. The composer resolves the unordered marker profile of a unit to a
single precomposed Greek character.

Markers:
    )   smooth breathing        /   acute accent
    (   rough breathing         \\   grave accent
    "   diaeresis               =   circumflex accent
    |   iota subscript          '   koronis

The composition table is built once at import time from unicodedata: every
profile is composed as base + combining marks in canonical order and kept
only if NFC collapses it to exactly one code point.
"""

from __future__ import annotations

import unicodedata
from dataclasses import dataclass
from types import MappingProxyType
from typing import Optional

from latin_to_greek._letters import GREEK_LETTERS, greek_letter

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

# =============================================================================
# Profile Values
# =============================================================================

SMOOTH = "smooth"
ROUGH = "rough"
BREATHINGS = (SMOOTH, ROUGH)

ACUTE = "acute"
GRAVE = "grave"
CIRCUMFLEX = "circumflex"
ACCENTS = (ACUTE, GRAVE, CIRCUMFLEX)

# Spacing koronis, written after the elided vowel
KORONIS = "\u1fbd"

# ASCII marker → (profile slot, value)
MARKERS = MappingProxyType(
    {
        ")": ("breathing", SMOOTH),
        "(": ("breathing", ROUGH),
        "/": ("accent", ACUTE),
        "\\": ("accent", GRAVE),
        "=": ("accent", CIRCUMFLEX),
        '"': ("diaeresis", True),
        "'": ("koronis", True),
        "|": ("subscript", True),
    }
)

_VOWELS = frozenset("αεηιουω")

_COMBINING = {
    SMOOTH: "\u0313",  # combining comma above
    ROUGH: "\u0314",  # combining reversed comma above
    ACUTE: "\u0301",  # combining acute accent
    GRAVE: "\u0300",  # combining grave accent
    CIRCUMFLEX: "\u0342",  # combining Greek perispomeni
}
_DIAERESIS = "\u0308"
_YPOGEGRAMMENI = "\u0345"


class CompositionError(ValueError):
    """A marker profile that has no precomposed Greek character."""

    def __init__(self, source: str, reason: str) -> None:
        super().__init__(f"Cannot compose {source!r}: {reason}")
        self.source = source
        self.reason = reason


# =============================================================================
# Beta Unit
# =============================================================================


@dataclass(frozen=True)
class BetaUnit:
    """One Greek letter with its diacritic profile."""

    letter: str
    breathing: Optional[str] = None
    accent: Optional[str] = None
    diaeresis: bool = False
    koronis: bool = False
    subscript: bool = False
    source: str = ""

    @property
    def base(self) -> str:
        """Lowercase Greek base letter."""
        return self.letter.lower()

    @property
    def is_vowel(self) -> bool:
        return self.base in _VOWELS

    @property
    def is_bare(self) -> bool:
        """True when the unit carries no markers at all."""
        return not (
            self.breathing
            or self.accent
            or self.diaeresis
            or self.koronis
            or self.subscript
        )


def is_marker(char: str) -> bool:
    """Check if character is one of the Beta Code diacritic markers."""
    return char in MARKERS


def parse_unit(source: str) -> BetaUnit:
    """
    Build a BetaUnit from a base letter and its trailing markers.

    Marker order is not significant and repeating a marker is harmless,
    but two different breathings or two different accents conflict.

    Args:
        source: One mapped Latin letter followed by zero or more markers

    Returns:
        The parsed BetaUnit

    Raises:
        CompositionError: If the markers conflict
        ValueError: If ``source`` does not start with a mapped letter

    Example:
        >>> parse_unit("a)/").accent
        'acute'
    """
    letter = greek_letter(source[:1])
    if letter is None:
        raise ValueError(f"Not a Beta Code base letter: {source[:1]!r}")

    profile: dict[str, object] = {}
    for char in source[1:]:
        if char not in MARKERS:
            raise ValueError(f"Not a Beta Code marker: {char!r}")
        slot, value = MARKERS[char]
        previous = profile.setdefault(slot, value)
        if previous != value:
            raise CompositionError(source, f"conflicting_{slot}")

    return BetaUnit(letter=letter, source=source, **profile)


# =============================================================================
# Composition Table
# =============================================================================


def _build_table() -> MappingProxyType:
    table = {}
    for base in GREEK_LETTERS:
        for letter in (base, base.upper()):
            for breathing in (None, *BREATHINGS):
                for accent in (None, *ACCENTS):
                    for diaeresis in (False, True):
                        for subscript in (False, True):
                            # Canonical order: breathing, diaeresis, accent, subscript
                            marks = "".join(
                                [
                                    _COMBINING[breathing] if breathing else "",
                                    _DIAERESIS if diaeresis else "",
                                    _COMBINING[accent] if accent else "",
                                    _YPOGEGRAMMENI if subscript else "",
                                ]
                            )
                            composed = unicodedata.normalize("NFC", letter + marks)
                            if len(composed) == 1:
                                key = (letter, breathing, accent, diaeresis, subscript)
                                table[key] = composed
    return MappingProxyType(table)


_TABLE = _build_table()


def compose(unit: BetaUnit) -> str:
    """
    Compose a BetaUnit into precomposed Greek text.

    Always a single code point, except that a koronis is written as the
    spacing koronis U+1FBD after the composed vowel. That unit yields two
    code points, the one exception to one character per unit.

    Args:
        unit: The unit to compose

    Returns:
        The composed character(s)

    Raises:
        CompositionError: If no precomposed character exists for the profile

    Example:
        >>> compose(parse_unit("a)/"))
        'ἄ'
        >>> compose(parse_unit("i\\"/"))
        'ΐ'
    """
    if unit.is_bare:
        return unit.letter

    if unit.koronis:
        if not unit.is_vowel:
            raise CompositionError(unit.source, "koronis_on_consonant")
        if unit.breathing:
            raise CompositionError(unit.source, "koronis_with_breathing")

    key = (unit.letter, unit.breathing, unit.accent, unit.diaeresis, unit.subscript)
    composed = _TABLE.get(key)
    if composed is None:
        raise CompositionError(unit.source, "no_precomposed_form")

    # Koronis is not a combining mark here: vowel plus spacing U+1FBD
    if unit.koronis:
        return composed + KORONIS
    return composed
