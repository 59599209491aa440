"""Shared fixtures for latin-to-greek tests."""

import pytest

from latin_to_greek.betacode import BetaCodeConverter
from latin_to_greek.cli import ILIAD


@pytest.fixture
def converter() -> BetaCodeConverter:
    """Return a fresh converter instance."""
    return BetaCodeConverter()


@pytest.fixture
def iliad_lines() -> list[str]:
    """The bundled Iliad 1.1-7 sample, one Beta Code line per entry."""
    return ILIAD.splitlines()
