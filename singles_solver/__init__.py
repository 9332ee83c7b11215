"""Naked-single Sudoku solver: board model, constraint queries and the elimination loop."""

from .board_io import format_board, parse_board, read_board, render_board_image
from .checks import is_valid_solution, sanity_check
from .config import SolverConfig, load_config
from .constraints import (
    DigitIndex,
    box_has_number,
    candidates_for,
    column_has_number,
    compute_candidates,
    row_has_number,
)
from .engine import SolveState, SolveStats, Solver, solve, solve_tool
from .errors import BoxNotFound, InvalidBoard, SolverError, Unsolvable
from .grid import BOXES, Board, Box, Cell, box_for

__all__ = [
    "BOXES",
    "Board",
    "Box",
    "BoxNotFound",
    "Cell",
    "DigitIndex",
    "InvalidBoard",
    "SolveState",
    "SolveStats",
    "Solver",
    "SolverConfig",
    "SolverError",
    "Unsolvable",
    "box_for",
    "box_has_number",
    "candidates_for",
    "column_has_number",
    "compute_candidates",
    "format_board",
    "is_valid_solution",
    "load_config",
    "parse_board",
    "read_board",
    "render_board_image",
    "row_has_number",
    "sanity_check",
    "solve",
    "solve_tool",
]
