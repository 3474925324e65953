"""Fixed-size letter grid with 8-directional adjacency."""

from __future__ import annotations

from collections.abc import Iterable, Sequence

from wordhunt.constants import BLANK

Coord = tuple[int, int]
Path = tuple[Coord, ...]

# Row offset first, then column offset; search order depends on this
DIRECTIONS: tuple[Coord, ...] = (
    (-1, -1), (-1, 0), (-1, 1),
    (0, -1),           (0, 1),
    (1, -1),  (1, 0),  (1, 1),
)


class MalformedGrid(ValueError):
    """Rows of unequal length, no rows at all, or a cell that isn't a letter."""


class IncompleteGrid(ValueError):
    """The grid still has blank cells, so it can't be searched."""

    def __init__(self, blanks: Sequence[Coord]) -> None:
        self.blanks = tuple(blanks)
        cells = ", ".join(f"({r},{c})" for r, c in self.blanks)
        super().__init__(f"Grid has {len(self.blanks)} blank cell(s): {cells}")


class Grid:
    """Immutable height x width arrangement of letters.

    Cells hold an uppercase letter or BLANK. Neighbour tuples are
    precomputed once since the search asks for them at every step.
    """

    def __init__(self, cells: Sequence[Sequence[str]]) -> None:
        self._cells: tuple[tuple[str, ...], ...] = tuple(tuple(row) for row in cells)
        self.height = len(self._cells)
        self.width = len(self._cells[0]) if self._cells else 0
        self._neighbors: dict[Coord, tuple[Coord, ...]] = {
            coord: self._compute_neighbors(coord) for coord in self.coords()
        }

    @classmethod
    def from_rows(cls, rows: Iterable[str]) -> Grid:
        """Build a grid from row strings, e.g. ``["CAT", "DOG"]``.

        Raises MalformedGrid if rows differ in length or hold anything other
        than letters and the blank marker.
        """
        rows = [row.strip().upper() for row in rows]
        if not rows or not rows[0]:
            raise MalformedGrid("Grid needs at least one row and one column")
        width = len(rows[0])
        for i, row in enumerate(rows):
            if len(row) != width:
                raise MalformedGrid(
                    f"Row {i} has {len(row)} cells, expected {width}: {row!r}"
                )
            for ch in row:
                if ch != BLANK and not (ch.isascii() and ch.isalpha()):
                    raise MalformedGrid(f"Invalid cell {ch!r} in row {i}")
        return cls([list(row) for row in rows])

    @classmethod
    def from_letters(cls, letters: str, height: int, width: int) -> Grid:
        """Fill a grid row-major from typed letters.

        Whitespace is ignored. Missing trailing cells are left blank, so a
        partially typed board builds fine but won't pass ensure_complete().
        """
        if height < 1 or width < 1:
            raise MalformedGrid(f"Invalid grid size {height}x{width}")
        flat = "".join(letters.split()).upper()
        if len(flat) > height * width:
            raise MalformedGrid(
                f"Got {len(flat)} letters for a {height}x{width} grid"
            )
        flat = flat.ljust(height * width, BLANK)
        return cls.from_rows(flat[r * width:(r + 1) * width] for r in range(height))

    def _compute_neighbors(self, coord: Coord) -> tuple[Coord, ...]:
        row, col = coord
        result: list[Coord] = []
        for dr, dc in DIRECTIONS:
            r, c = row + dr, col + dc
            if 0 <= r < self.height and 0 <= c < self.width:
                result.append((r, c))
        return tuple(result)

    def in_bounds(self, coord: Coord) -> bool:
        row, col = coord
        return 0 <= row < self.height and 0 <= col < self.width

    def coords(self) -> list[Coord]:
        """All coordinates in row-major order."""
        return [(r, c) for r in range(self.height) for c in range(self.width)]

    def neighbors(self, coord: Coord) -> tuple[Coord, ...]:
        return self._neighbors[coord]

    def letter_at(self, coord: Coord) -> str:
        row, col = coord
        return self._cells[row][col]

    @property
    def rows(self) -> list[str]:
        return ["".join(row) for row in self._cells]

    @property
    def size(self) -> int:
        return self.height * self.width

    def blanks(self) -> list[Coord]:
        return [coord for coord in self.coords() if self.letter_at(coord) == BLANK]

    def is_complete(self) -> bool:
        return not self.blanks()

    def ensure_complete(self) -> None:
        blanks = self.blanks()
        if blanks:
            raise IncompleteGrid(blanks)

    def spell(self, path: Iterable[Coord]) -> str:
        return "".join(self.letter_at(coord) for coord in path)

    def is_path(self, path: Sequence[Coord]) -> bool:
        """True if *path* is in bounds, never repeats a cell and only steps to neighbours."""
        if not path or len(set(path)) != len(path):
            return False
        if not all(self.in_bounds(coord) for coord in path):
            return False
        return all(b in self._neighbors[a] for a, b in zip(path, path[1:]))

    def __eq__(self, other: object) -> bool:
        return isinstance(other, Grid) and self._cells == other._cells

    def __hash__(self) -> int:
        return hash(self._cells)

    def __repr__(self) -> str:
        return f"Grid({self.rows!r})"
