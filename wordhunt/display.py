"""Terminal rendering of the board and found words."""

from __future__ import annotations

import shutil
from collections.abc import Sequence

from wordhunt.constants import RESERVED_ROWS
from wordhunt.grid import Grid, Path
from wordhunt.ranking import total_points, visible, word_points
from wordhunt.solver import FoundWord


def render_grid(grid: Grid) -> str:
    """Render the grid as a string for terminal display."""
    if grid.size == 0:
        return "(empty grid)"
    return "\n".join(" ".join(row) for row in grid.rows)


def render_path(grid: Grid, path: Path) -> str:
    """Render the grid with each cell of *path* replaced by its step number."""
    steps = {coord: i for i, coord in enumerate(path, start=1)}
    width = len(str(len(path))) if path else 1
    lines: list[str] = []
    for r in range(grid.height):
        parts: list[str] = []
        for c in range(grid.width):
            step = steps.get((r, c))
            parts.append(f"{step:>{width}}" if step is not None else "." * width)
        lines.append(" ".join(parts))
    return "\n".join(lines)


def render_words(ranked: Sequence[FoundWord], limit: int | None = None) -> str:
    shown = ranked if limit is None else visible(ranked, limit)
    if not shown:
        return "No words found."
    pad = max(len(fw.word) for fw in shown)
    return "\n".join(f"  {fw.word:<{pad}s} {word_points(fw.word):>5d}" for fw in shown)


def print_grid(grid: Grid) -> None:
    """Print the grid to the terminal."""
    print("\n" + render_grid(grid))


def print_results(grid: Grid, ranked: Sequence[FoundWord], height: int | None = None) -> None:
    """Print the board, a summary line and as many words as fit on screen."""
    if height is None:
        height = shutil.get_terminal_size().lines

    print_grid(grid)
    header = f"\n{len(ranked)} words, {total_points(ranked)} points"
    # Board, blank line and header take space too
    rows = max(height - RESERVED_ROWS - grid.height - 2, 0)
    if rows < len(ranked):
        header += f" (showing {rows})"
    print(header)
    if not ranked:
        print(render_words(ranked))
    elif rows:
        print(render_words(ranked, rows))
