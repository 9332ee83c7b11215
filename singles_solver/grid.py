"""Board model: 81 cells with 1-based (row, column) coordinates, per-cell candidates, and the
fixed partition of the grid into nine 3x3 boxes."""

# grid.py
# Cells are addressed 1-based, matching the 'r{row}c{col}' keys used in payloads.
# Value 0 = empty.

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Iterable, Iterator, Optional, Union

from sudoku_types import Grid

from .errors import BoxNotFound, InvalidBoard

SIZE = 9
CELL_COUNT = SIZE * SIZE
DIGITS = range(1, SIZE + 1)
DIGIT_CHARS = "0123456789"


def in_bounds(r: int, c: int) -> bool:
    return 1 <= r <= SIZE and 1 <= c <= SIZE


def rc_to_key(r: int, c: int) -> str:
    return f"r{r}c{c}"


@dataclass(eq=False)
class Cell:
    row: int
    column: int
    value: int = 0
    candidates: set[int] = field(default_factory=set)

    @property
    def is_filled(self) -> bool:
        return self.value != 0

    @property
    def key(self) -> str:
        return rc_to_key(self.row, self.column)

    def __repr__(self) -> str:
        return f"Cell({self.key}={self.value})"


@dataclass(frozen=True)
class Box:
    index: int  # 1..9 left->right, top->bottom
    rows: frozenset[int]
    cols: frozenset[int]

    def contains(self, row: int, col: int) -> bool:
        return row in self.rows and col in self.cols

    def cells(self) -> list[tuple[int, int]]:
        return [(r, c) for r in sorted(self.rows) for c in sorted(self.cols)]


def _build_boxes() -> tuple[Box, ...]:
    boxes = []
    for b in range(1, SIZE + 1):
        br = (b - 1) // 3
        bc = (b - 1) % 3
        rows = frozenset(range(3 * br + 1, 3 * br + 4))
        cols = frozenset(range(3 * bc + 1, 3 * bc + 4))
        boxes.append(Box(index=b, rows=rows, cols=cols))
    return tuple(boxes)


BOXES: tuple[Box, ...] = _build_boxes()


def which_box(r: int, c: int) -> int:
    return 3 * ((r - 1) // 3) + ((c - 1) // 3) + 1


def box_for(cell: Union[Cell, int], col: Optional[int] = None) -> Box:
    """Return the box holding ``cell`` (a Cell, or a row number together with ``col``).

    Raises BoxNotFound if the coordinates are outside the grid or the table entry
    does not actually contain them.
    """
    if isinstance(cell, Cell):
        r, c = cell.row, cell.column
    else:
        if col is None:
            raise TypeError("box_for(row, col) needs a column")
        r, c = cell, col
    if not in_bounds(r, c):
        raise BoxNotFound(f"could not find correct box for r{r}c{c}")
    box = BOXES[which_box(r, c) - 1]
    if not box.contains(r, c):
        raise BoxNotFound(f"box b{box.index} does not contain r{r}c{c}")
    return box


class Board:
    """Exactly 81 cells, one per (row, column), kept in row-major order."""

    def __init__(self, cells: Iterable[Cell]):
        cells = list(cells)
        if len(cells) != CELL_COUNT:
            raise InvalidBoard(f"wrong field count: expected {CELL_COUNT}, got {len(cells)}")
        by_pos: dict[tuple[int, int], Cell] = {}
        for cell in cells:
            if not in_bounds(cell.row, cell.column):
                raise InvalidBoard(f"cell out of range: r{cell.row}c{cell.column}")
            if not 0 <= cell.value <= SIZE:
                raise InvalidBoard(f"value out of range at {cell.key}: {cell.value}")
            if (cell.row, cell.column) in by_pos:
                raise InvalidBoard(f"duplicate cell {cell.key}")
            if cell.is_filled:
                cell.candidates = set()
            by_pos[(cell.row, cell.column)] = cell
        self._cells: list[Cell] = [by_pos[(r, c)] for r in DIGITS for c in DIGITS]

    @classmethod
    def from_grid(cls, grid: Grid) -> "Board":
        """Build from a 9x9 list of lists; row/column indices become 1-based."""
        if len(grid) != SIZE or any(len(row) != SIZE for row in grid):
            count = sum(len(row) for row in grid)
            raise InvalidBoard(f"wrong field count: expected {CELL_COUNT}, got {count}")
        return cls(
            Cell(row=r, column=c, value=int(grid[r - 1][c - 1]))
            for r in DIGITS
            for c in DIGITS
        )

    @classmethod
    def from_string(cls, text: str) -> "Board":
        """Build from 81 characters, row-major; '0' or '.' marks an empty cell."""
        chars = [ch for ch in text if not ch.isspace()]
        if len(chars) != CELL_COUNT:
            raise InvalidBoard(f"wrong field count: expected {CELL_COUNT}, got {len(chars)}")
        cells = []
        for i, ch in enumerate(chars):
            if ch == ".":
                ch = "0"
            if ch not in DIGIT_CHARS:
                raise InvalidBoard(f"not a digit at position {i + 1}: {ch!r}")
            cells.append(Cell(row=i // SIZE + 1, column=i % SIZE + 1, value=int(ch)))
        return cls(cells)

    @classmethod
    def empty(cls) -> "Board":
        return cls(Cell(row=r, column=c) for r in DIGITS for c in DIGITS)

    def get(self, row: int, col: int) -> Cell:
        if not in_bounds(row, col):
            raise IndexError(f"no cell r{row}c{col}")
        return self._cells[(row - 1) * SIZE + (col - 1)]

    def set(self, row: int, col: int, value: int) -> None:
        if not 0 <= value <= SIZE:
            raise ValueError(f"value out of range: {value}")
        cell = self.get(row, col)
        cell.value = value
        if value:
            cell.candidates = set()

    def __iter__(self) -> Iterator[Cell]:
        return iter(self._cells)

    def __len__(self) -> int:
        return len(self._cells)

    def rows(self) -> list[list[Cell]]:
        return [self._cells[i : i + SIZE] for i in range(0, CELL_COUNT, SIZE)]

    def filled_count(self) -> int:
        return sum(1 for cell in self._cells if cell.is_filled)

    def is_complete(self) -> bool:
        return self.filled_count() == CELL_COUNT

    def to_grid(self) -> Grid:
        return [[cell.value for cell in row] for row in self.rows()]

    def to_string(self) -> str:
        return "".join(str(cell.value) for cell in self._cells)

    def copy(self) -> "Board":
        return Board(
            Cell(row=c.row, column=c.column, value=c.value, candidates=set(c.candidates))
            for c in self._cells
        )

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Board):
            return NotImplemented
        return self.to_grid() == other.to_grid()

    def __repr__(self) -> str:
        return f"Board({self.to_string()!r})"
