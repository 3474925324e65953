"""Word Hunt constants: board defaults and word point values."""

from pathlib import Path

# Standard Word Hunt board is 4x4
DEFAULT_SIZE = 4

MIN_WORD_LENGTH = 3

# Marks a cell the player hasn't filled in yet
BLANK = "."

# Lines kept free below the word list (divider + input line + margin)
RESERVED_ROWS = 3

DEFAULT_DICTIONARY_PATH = Path(__file__).resolve().parent.parent / "data" / "dictionary.txt"

# Points awarded per word length in Word Hunt.
# Words longer than the table get +400 for every extra letter.
WORD_POINTS: dict[int, int] = {
    3: 100,
    4: 400,
    5: 800,
    6: 1400,
    7: 1800,
    8: 2200,
}

POINTS_PER_EXTRA_LETTER = 400
