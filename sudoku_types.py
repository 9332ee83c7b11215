# sudoku_types.py
from __future__ import annotations

from typing import Any, TypedDict

Grid = list[list[int]]
"""A 9x9 Sudoku grid as rows of integers (0 = empty)."""

Candidates = dict[str, list[int]]
"""Map from cell key (e.g., 'r1c1') to a list of candidate digits (1..9)."""


class Move(TypedDict, total=False):
    """A single placement made by the elimination engine, in the order it happened."""

    index: int  # 1-based order in the sequence
    technique: str  # always 'naked_single' for this solver
    type: str  # 'placement'
    digit: int  # the digit being placed
    cell: str  # target cell (e.g., 'r4c7')
    sweep: int  # 1-based sweep in which the placement happened


class SolvePayload(TypedDict, total=False):
    """Tool-friendly result of a solve run, shared by the CLI and the HTTP API."""

    status: str  # 'solved' or 'stalled'
    grid: Grid
    moves: list[Move]
    stats: dict[str, Any]
    message: str
