"""Shared fixtures for Word Hunt tests."""

from __future__ import annotations

import pytest

from wordhunt.grid import Grid
from wordhunt.lexicon import Lexicon

WORDS = [
    # 2-letter
    "AT", "TO", "SO", "NO", "ON", "OR", "DO", "AS",
    # 3-letter
    "CAT", "ACT", "ARC", "CAR", "TAR", "RAT", "EAT", "TEA", "SEA",
    "SET", "NET", "TEN", "DEN", "END", "ONE", "ORE", "ROD", "DOT",
    # 4-letter
    "CATS", "ACTS", "SCAT", "TACO", "COAT", "COST", "COTS", "CARS",
    "SCAR", "STAR", "ARTS", "DOTE", "DOTS", "DOSE", "NOTE", "ONES",
    "TENS", "SEND", "ENDS", "RODE", "RODS", "ORES", "ROSE", "SORE",
    "TONE", "DENS", "NEST", "NETS",
    # 5+
    "COATS", "NOTES", "SNORE", "STONE", "TONES", "DOTES", "STORE",
    "CORSET", "COASTED",
]


@pytest.fixture
def small_lexicon() -> Lexicon:
    """~80 hand-picked words built in memory. No file I/O."""
    return Lexicon.build(WORDS)


@pytest.fixture
def cats_lexicon() -> Lexicon:
    return Lexicon.build(["CAT", "CATS", "AT"])


@pytest.fixture
def cats_grid() -> Grid:
    """C A
       T S"""
    return Grid.from_rows(["CA", "TS"])


@pytest.fixture
def board_3x3() -> Grid:
    return Grid.from_rows(["CAT", "ORS", "DEN"])


@pytest.fixture
def word_file(tmp_path):
    path = tmp_path / "words.txt"
    path.write_text("\n".join(WORDS) + "\n", encoding="utf-8")
    return path
