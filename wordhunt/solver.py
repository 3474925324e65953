"""Backtracking path search over a Word Hunt grid."""

from __future__ import annotations

from concurrent.futures import FIRST_COMPLETED, Future, ProcessPoolExecutor, wait
from dataclasses import dataclass
from typing import Protocol, TypeAlias

from wordhunt.constants import MIN_WORD_LENGTH
from wordhunt.grid import Coord, Grid, Path
from wordhunt.lexicon import Lexicon, LexiconNode

# Seconds between cancel checks while waiting on worker processes
POLL_INTERVAL = 0.05


class SearchAborted(RuntimeError):
    """The cancel token fired before the search finished."""


class CancelToken(Protocol):
    def is_set(self) -> bool: ...


@dataclass(frozen=True)
class FoundWord:
    """A dictionary word together with one path that spells it."""
    word: str
    path: Path

    def __len__(self) -> int:
        return len(self.word)


ResultSet: TypeAlias = dict[str, FoundWord]
"""Word -> FoundWord, in discovery order. First path found for a word wins."""


def _search_from(
    grid: Grid,
    root: LexiconNode,
    start: Coord,
    min_length: int,
    results: ResultSet,
    cancel: CancelToken | None = None,
) -> None:
    """Depth-first walk from *start*, adding new words to *results* in place.

    The path, visited set and letter buffer are shared down the recursion
    and restored on the way back up, so a cell blocked on one branch is
    free again on the next.
    """
    path: list[Coord] = []
    visited: set[Coord] = set()
    letters: list[str] = []

    def _dfs(coord: Coord, node: LexiconNode) -> None:
        if cancel is not None and cancel.is_set():
            raise SearchAborted("Search cancelled")

        letter = grid.letter_at(coord)
        child = node.children.get(letter)
        if child is None:
            return  # no word continues with this letter

        visited.add(coord)
        path.append(coord)
        letters.append(letter)

        if child.is_word and len(letters) >= min_length:
            word = "".join(letters)
            if word not in results:
                results[word] = FoundWord(word, tuple(path))

        for nxt in grid.neighbors(coord):
            if nxt not in visited:
                _dfs(nxt, child)

        letters.pop()
        path.pop()
        visited.discard(coord)

    _dfs(start, root)


def _merge(partials: list[ResultSet]) -> ResultSet:
    """Combine per-start results, keeping the earliest discovery of each word."""
    merged: ResultSet = {}
    for partial in partials:
        for word, found in partial.items():
            if word not in merged:
                merged[word] = found
    return merged


def search(
    grid: Grid,
    lexicon: Lexicon,
    min_length: int = MIN_WORD_LENGTH,
    *,
    workers: int = 1,
    cancel: CancelToken | None = None,
) -> ResultSet:
    """Find every lexicon word of at least *min_length* letters traceable on *grid*.

    Start cells are tried in row-major order and neighbours in the fixed
    DIRECTIONS order, so the result (including which path is kept for each
    word) is the same on every run. With ``workers > 1`` start cells are
    split across processes and merged back in the same order.

    Raises IncompleteGrid if any cell is blank, and SearchAborted if
    *cancel* is set before the search completes. Partial results are
    never returned. With ``workers > 1`` the token is only checked between
    start-cell tasks, so an abort waits for tasks already running.
    """
    if min_length < 1:
        raise ValueError(f"min_length must be at least 1, got {min_length}")
    if workers < 1:
        raise ValueError(f"workers must be at least 1, got {workers}")

    grid.ensure_complete()

    if grid.size < min_length:
        return {}

    starts = grid.coords()
    if workers > 1 and len(starts) > 1:
        return _parallel_search(grid, lexicon, min_length, starts, workers, cancel)

    results: ResultSet = {}
    for start in starts:
        _search_from(grid, lexicon.root, start, min_length, results, cancel)
    return results


# ---------------------------------------------------------------------------
# Parallel search: one task per start cell
# ---------------------------------------------------------------------------

_worker_grid: Grid | None = None
_worker_lexicon: Lexicon | None = None
_worker_min_length: int = MIN_WORD_LENGTH


def _init_worker(grid: Grid, lexicon: Lexicon, min_length: int) -> None:
    """Pool initializer: ship the grid and lexicon to each process once."""
    global _worker_grid, _worker_lexicon, _worker_min_length
    _worker_grid = grid
    _worker_lexicon = lexicon
    _worker_min_length = min_length


def _worker_task(start: Coord) -> ResultSet:
    assert _worker_grid is not None and _worker_lexicon is not None, "worker not initialized"
    results: ResultSet = {}
    _search_from(_worker_grid, _worker_lexicon.root, start, _worker_min_length, results)
    return results


def _parallel_search(
    grid: Grid,
    lexicon: Lexicon,
    min_length: int,
    starts: list[Coord],
    workers: int,
    cancel: CancelToken | None,
) -> ResultSet:
    """Run one pool task per start cell and merge the results in start order.

    Workers never see the cancel token: it is checked between completed
    tasks, and an abort still waits for tasks already running to finish.
    """
    partials: dict[Coord, ResultSet] = {}
    with ProcessPoolExecutor(
        max_workers=min(workers, len(starts)),
        initializer=_init_worker,
        initargs=(grid, lexicon, min_length),
    ) as executor:
        futures: dict[Future[ResultSet], Coord] = {
            executor.submit(_worker_task, start): start for start in starts
        }
        pending = set(futures)
        while pending:
            if cancel is not None and cancel.is_set():
                executor.shutdown(wait=False, cancel_futures=True)
                raise SearchAborted("Search cancelled")
            done, pending = wait(pending, timeout=POLL_INTERVAL, return_when=FIRST_COMPLETED)
            for future in done:
                partials[futures[future]] = future.result()

    return _merge([partials[start] for start in starts])


def trace_word(grid: Grid, word: str) -> Path | None:
    """Return the first path spelling *word* on *grid*, or None.

    Uses the same start and neighbour order as search(), so for a word
    search() found this returns the path it kept.
    """
    word = word.strip().upper()
    if not word or len(word) > grid.size:
        return None

    path: list[Coord] = []

    def _dfs(coord: Coord, i: int) -> bool:
        if grid.letter_at(coord) != word[i]:
            return False
        path.append(coord)
        if i == len(word) - 1:
            return True
        for nxt in grid.neighbors(coord):
            if nxt not in path and _dfs(nxt, i + 1):
                return True
        path.pop()
        return False

    for start in grid.coords():
        if _dfs(start, 0):
            return tuple(path)
    return None
