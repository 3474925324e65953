"""CLI entry point for the Word Hunt solver."""

from __future__ import annotations

import argparse
import sys
import time

from wordhunt.constants import DEFAULT_SIZE, MIN_WORD_LENGTH
from wordhunt.display import print_results, render_path
from wordhunt.grid import Grid, IncompleteGrid, MalformedGrid
from wordhunt.lexicon import DictionaryUnavailable, Lexicon, load_default_lexicon, load_lexicon
from wordhunt.ranking import rank
from wordhunt.solver import FoundWord, search, trace_word


def parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        description="Word Hunt Solver — find every word traceable on a letter grid",
    )
    parser.add_argument(
        "--grid", "-g",
        type=str,
        help='Board letters, row by row, e.g. "CATS DOGE RMNI LPOU" or "CATSDOGERMNILPOU"',
    )
    parser.add_argument(
        "--dict", "-d",
        dest="dictionary",
        type=str,
        help="Word list, one word per line (default: data/dictionary.txt)",
    )
    parser.add_argument(
        "--size", "-s",
        type=int,
        default=DEFAULT_SIZE,
        help=f"Board is SIZE x SIZE (default: {DEFAULT_SIZE})",
    )
    parser.add_argument(
        "--min-length", "-m",
        type=int,
        default=MIN_WORD_LENGTH,
        help=f"Shortest word to report (default: {MIN_WORD_LENGTH})",
    )
    parser.add_argument(
        "--workers", "-w",
        type=int,
        default=1,
        help="Worker processes for the search (default: 1)",
    )
    parser.add_argument(
        "--limit", "-n",
        type=int,
        default=None,
        help="Show at most this many lines (default: fit the terminal)",
    )
    parser.add_argument(
        "--show",
        type=str,
        default=None,
        help="Also print how to trace this word on the board",
    )
    args = parser.parse_args(argv)
    for flag, value in (
        ("--min-length", args.min_length),
        ("--workers", args.workers),
        ("--size", args.size),
    ):
        if value < 1:
            parser.error(f"{flag} must be at least 1, got {value}")
    return args


def parse_grid(raw: str, size: int) -> Grid:
    """Turn typed letters into a grid.

    Space-separated rows are taken as-is; a single run of letters is
    filled row-major into a size x size board.
    """
    parts = raw.split()
    if len(parts) > 1:
        return Grid.from_rows(parts)
    return Grid.from_letters(raw, size, size)


def load(args: argparse.Namespace) -> Lexicon:
    if args.dictionary:
        return load_lexicon(args.dictionary)
    return load_default_lexicon()


def solve(grid: Grid, lexicon: Lexicon, args: argparse.Namespace) -> list[FoundWord]:
    start = time.time()
    ranked = rank(search(grid, lexicon, args.min_length, workers=args.workers))
    print(f"Found {len(ranked)} words in {time.time() - start:.2f}s")
    return ranked


def show_word(grid: Grid, lexicon: Lexicon, word: str) -> None:
    """Print how to trace *word*, including words shorter than --min-length."""
    word = word.strip().upper()
    path = trace_word(grid, word) if lexicon.is_word(word) else None
    if path is None:
        print(f"\n{word} is not on this board.")
        return
    print(f"\n{word}:")
    print(render_path(grid, path))


def report(grid: Grid, ranked: list[FoundWord], lexicon: Lexicon, args: argparse.Namespace) -> None:
    if args.limit is not None:
        # Fake a terminal height that leaves room for exactly `limit` words
        print_results(grid, ranked, height=args.limit + grid.height + 5)
    else:
        print_results(grid, ranked)
    if args.show:
        show_word(grid, lexicon, args.show)


def prompt_loop(lexicon: Lexicon, args: argparse.Namespace) -> None:
    """Read boards from the keyboard until the player quits."""
    cells = args.size * args.size
    while True:
        try:
            raw = input(f"\nEnter {cells} letters row by row (blank line to quit): ").strip()
        except (EOFError, KeyboardInterrupt):
            print()
            break
        if not raw:
            break

        try:
            grid = parse_grid(raw, args.size)
            ranked = solve(grid, lexicon, args)
        except IncompleteGrid as e:
            print(f"Board isn't finished: {e}")
            continue
        except MalformedGrid as e:
            print(f"Invalid board: {e}")
            continue
        report(grid, ranked, lexicon, args)


def main(argv: list[str] | None = None) -> None:
    args = parse_args(argv)

    # 1. Load dictionary
    print("Loading dictionary...")
    try:
        lexicon = load(args)
    except DictionaryUnavailable as e:
        print(e)
        sys.exit(1)
    print(f"Loaded {lexicon.word_count} words.")

    # 2. Interactive mode
    if not args.grid:
        prompt_loop(lexicon, args)
        return

    # 3. One-shot solve
    try:
        grid = parse_grid(args.grid, args.size)
        ranked = solve(grid, lexicon, args)
    except (MalformedGrid, IncompleteGrid) as e:
        print(f"Invalid board: {e}")
        sys.exit(2)
    report(grid, ranked, lexicon, args)


if __name__ == "__main__":
    main()
