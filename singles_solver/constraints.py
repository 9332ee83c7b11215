"""Row / column / box membership queries used to compute a cell's candidates.

Two interchangeable strategies: the plain functions scan the whole board on every
call; DigitIndex keeps 9-bit presence masks per row, column and box and is updated
as digits are placed. Both give the same answers for the same board.
"""

from __future__ import annotations

from sudoku_types import Candidates

from .grid import DIGITS, SIZE, Board, Cell, box_for, which_box

ALL_MASK = (1 << SIZE) - 1


def digit_to_mask(d: int) -> int:
    return 0 if d == 0 else 1 << (d - 1)


def mask_to_digits(mask: int) -> list[int]:
    return [d for d in DIGITS if mask & (1 << (d - 1))]


def row_has_number(board: Board, cell: Cell, n: int) -> bool:
    for other in board:
        if other.row == cell.row and other.value == n:
            return True
    return False


def column_has_number(board: Board, cell: Cell, n: int) -> bool:
    for other in board:
        if other.column == cell.column and other.value == n:
            return True
    return False


def box_has_number(board: Board, cell: Cell, n: int) -> bool:
    box = box_for(cell)
    for other in board:
        if box.contains(other.row, other.column) and other.value == n:
            return True
    return False


def candidates_for(board: Board, cell: Cell) -> set[int]:
    """Digits not yet present in the cell's row, column or box."""
    return {
        n
        for n in DIGITS
        if not box_has_number(board, cell, n)
        and not column_has_number(board, cell, n)
        and not row_has_number(board, cell, n)
    }


class DigitIndex:
    """Presence masks per row, column and box (bit d-1 set = digit d present)."""

    def __init__(self, board: Board):
        self.rows = [0] * (SIZE + 1)
        self.cols = [0] * (SIZE + 1)
        self.boxes = [0] * (SIZE + 1)
        for cell in board:
            if cell.is_filled:
                self._mark(cell.row, cell.column, cell.value)

    def _mark(self, r: int, c: int, d: int) -> None:
        bit = digit_to_mask(d)
        self.rows[r] |= bit
        self.cols[c] |= bit
        self.boxes[which_box(r, c)] |= bit

    def has_in_row(self, cell: Cell, n: int) -> bool:
        return bool(self.rows[cell.row] & digit_to_mask(n))

    def has_in_column(self, cell: Cell, n: int) -> bool:
        return bool(self.cols[cell.column] & digit_to_mask(n))

    def has_in_box(self, cell: Cell, n: int) -> bool:
        return bool(self.boxes[box_for(cell).index] & digit_to_mask(n))

    def candidates_for(self, cell: Cell) -> set[int]:
        used = self.rows[cell.row] | self.cols[cell.column] | self.boxes[box_for(cell).index]
        return set(mask_to_digits(ALL_MASK & ~used))

    def place(self, cell: Cell, digit: int) -> None:
        self._mark(cell.row, cell.column, digit)


def compute_candidates(board: Board) -> Candidates:
    """Candidate digits for each empty cell, e.g. {'r1c2': [1, 2, 5], ...}."""
    cand = {}
    for cell in board:
        if not cell.is_filled:
            cand[cell.key] = sorted(candidates_for(board, cell))
    return cand
