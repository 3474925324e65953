"""Ordering and scoring of found words."""

from __future__ import annotations

from collections.abc import Iterable, Mapping, Sequence

from wordhunt.constants import POINTS_PER_EXTRA_LETTER, WORD_POINTS
from wordhunt.solver import FoundWord, ResultSet


def rank_key(found: FoundWord) -> tuple[int, str]:
    return (-len(found.word), found.word)


def rank(results: ResultSet | Iterable[FoundWord]) -> list[FoundWord]:
    """Longest words first, alphabetical within a length.

    Accepts a result set or an already ranked sequence; words are unique
    keys so the order is total and ranking twice changes nothing.
    """
    found = results.values() if isinstance(results, Mapping) else results
    return sorted(found, key=rank_key)


def visible(ranked: Sequence[FoundWord], rows: int) -> list[FoundWord]:
    """The leading words that fit in *rows* lines. *ranked* is left untouched."""
    return list(ranked[:max(rows, 0)])


def word_points(
    word: str,
    table: Mapping[int, int] = WORD_POINTS,
    extra: int = POINTS_PER_EXTRA_LETTER,
) -> int:
    """Points for a single word under a length -> points table.

    Lengths below the table's smallest entry score nothing; lengths above
    its largest gain *extra* points per additional letter.
    """
    length = len(word)
    if not table or length < min(table):
        return 0
    if length in table:
        return table[length]
    longest = max(table)
    if length > longest:
        return table[longest] + (length - longest) * extra
    # Gap inside the table: fall back to the next shorter length
    return table[max(n for n in table if n < length)]


def total_points(found: Iterable[FoundWord], table: Mapping[int, int] = WORD_POINTS) -> int:
    return sum(word_points(fw.word, table) for fw in found)
