"""Exceptions raised by the solver core."""

from __future__ import annotations

from typing import TYPE_CHECKING, Optional

if TYPE_CHECKING:
    from .engine import SolveStats
    from .grid import Board


class SolverError(Exception):
    """Base class for every error raised by singles_solver."""


class InvalidBoard(SolverError, ValueError):
    """The input does not describe a 9x9 board (cell count, ranges, malformed text)."""


class BoxNotFound(SolverError, LookupError):
    """No box of the fixed partition contains the cell. Indicates a bug, not bad input."""


class Unsolvable(SolverError):
    """Naked-single elimination made no progress within the stall threshold.

    This does not prove the puzzle has no solution; boards that need search
    end up here too. ``board`` is the board as last mutated.
    """

    def __init__(self, message: str, board: "Board", stats: Optional["SolveStats"] = None):
        super().__init__(message)
        self.board = board
        self.stats = stats
