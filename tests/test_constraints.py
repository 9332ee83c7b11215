# tests/test_constraints.py
import pytest

from singles_solver.constraints import (
    DigitIndex,
    box_has_number,
    candidates_for,
    column_has_number,
    compute_candidates,
    mask_to_digits,
    row_has_number,
)
from singles_solver.grid import Board


@pytest.fixture
def board(puzzle_grid):
    return Board.from_grid(puzzle_grid)


def test_row_column_box_queries(board):
    cell = board.get(1, 3)
    assert row_has_number(board, cell, 7)
    assert not row_has_number(board, cell, 9)
    assert column_has_number(board, cell, 8)
    assert not column_has_number(board, cell, 6)
    assert box_has_number(board, cell, 9)
    assert box_has_number(board, cell, 6)
    assert not box_has_number(board, cell, 1)


def test_candidates_hand_checked(board):
    # row {5,3,7} + column {8} + box {5,3,6,9,8}
    assert candidates_for(board, board.get(1, 3)) == {1, 2, 4}
    # row {4,8,3,1} + column {7,9,6,2,1,8} + box {6,8,3,2}
    assert candidates_for(board, board.get(5, 5)) == {5}
    assert candidates_for(board, board.get(7, 5)) == {3, 5}


def test_candidates_are_exactly_the_absent_digits(board):
    for cell in board:
        if cell.value:
            continue
        expected = {
            n
            for n in range(1, 10)
            if not row_has_number(board, cell, n)
            and not column_has_number(board, cell, n)
            and not box_has_number(board, cell, n)
        }
        assert candidates_for(board, cell) == expected


def test_empty_board_has_all_candidates():
    board = Board.empty()
    assert candidates_for(board, board.get(5, 5)) == set(range(1, 10))


def test_digit_index_agrees_with_scans(board):
    index = DigitIndex(board)
    for cell in board:
        for n in range(1, 10):
            assert index.has_in_row(cell, n) == row_has_number(board, cell, n)
            assert index.has_in_column(cell, n) == column_has_number(board, cell, n)
            assert index.has_in_box(cell, n) == box_has_number(board, cell, n)
        if not cell.value:
            assert index.candidates_for(cell) == candidates_for(board, cell)


def test_digit_index_place_updates_masks(board):
    index = DigitIndex(board)
    cell = board.get(5, 5)
    other = board.get(5, 2)
    assert 5 in index.candidates_for(other)
    cell.value = 5
    index.place(cell, 5)
    assert 5 not in index.candidates_for(other)
    assert index.candidates_for(other) == candidates_for(board, other)


def test_mask_to_digits():
    assert mask_to_digits(0) == []
    assert mask_to_digits(0b100000001) == [1, 9]


def test_compute_candidates_payload(board):
    cand = compute_candidates(board)
    assert len(cand) == 51
    assert cand["r1c3"] == [1, 2, 4]
    assert cand["r5c5"] == [5]
    assert "r1c1" not in cand
