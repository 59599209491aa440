"""
Letter table for the Perseus-style Beta Code convention.

Maps ASCII base letters to Greek base letters, preserving case. The
convention follows the Perseus Digital Library with four substitutions:
x = ξ, y = υ, c = χ, j = ψ. The Latin letters u and v have no Greek
counterpart and are left unmapped.

Pure Python, no external dependencies.
"""

from __future__ import annotations

from typing import Optional

__all__ = ["GREEK_LETTERS", "LATIN_LETTERS", "greek_letter", "is_base_letter"]

# Latin → Greek, lowercase; uppercase is derived below
_LOWER = {
    "a": "α",
    "b": "β",
    "g": "γ",
    "d": "δ",
    "e": "ε",
    "z": "ζ",
    "h": "η",
    "q": "θ",
    "i": "ι",
    "k": "κ",
    "l": "λ",
    "m": "μ",
    "n": "ν",
    "x": "ξ",
    "o": "ο",
    "p": "π",
    "r": "ρ",
    "s": "σ",
    "t": "τ",
    "y": "υ",
    "f": "φ",
    "c": "χ",
    "j": "ψ",
    "w": "ω",
}

_TABLE = {**_LOWER, **{k.upper(): v.upper() for k, v in _LOWER.items()}}

# The 24 Latin letters of the convention, lowercase then uppercase
LATIN_LETTERS = frozenset(_TABLE)

# The 24 Greek base letters (lowercase, medial sigma)
GREEK_LETTERS = tuple(_LOWER.values())


def greek_letter(char: str) -> Optional[str]:
    """
    Return the Greek base letter for an ASCII letter, or None.

    Args:
        char: A single character

    Returns:
        The Greek letter in the same case, or None if ``char`` is not one
        of the mapped Latin letters

    Example:
        >>> greek_letter("q")
        'θ'
        >>> greek_letter("J")
        'Ψ'
        >>> greek_letter("v") is None
        True
    """
    return _TABLE.get(char)


def is_base_letter(char: str) -> bool:
    """Check if character is a mapped Latin base letter."""
    return char in _TABLE
