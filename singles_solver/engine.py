"""Naked-single elimination loop.

Sweeps the board row-major. Every empty cell visited gets its candidates recomputed
from scratch; a cell left with exactly one candidate is filled. A run ends SOLVED when
a sweep counts 81 filled cells, or STALLED when more than ``stall_threshold``
consecutive empty-cell visits pass without a placement. Stalling only means this
rule ran out of deductions; the puzzle may still have a solution reachable by search.

All progress counters live on the Solver instance created per call, so independent
boards can be solved concurrently.
"""

from __future__ import annotations

import enum
import logging
from dataclasses import asdict, dataclass
from typing import Callable, Optional

from sudoku_types import Grid, Move, SolvePayload

from .config import SolverConfig
from .constraints import DigitIndex, candidates_for
from .errors import Unsolvable
from .grid import CELL_COUNT, Board, Cell

log = logging.getLogger(__name__)

PlaceCallback = Callable[[Move], None]


class SolveState(enum.Enum):
    SCANNING = "scanning"
    SOLVED = "solved"
    STALLED = "stalled"


@dataclass
class SolveStats:
    sweeps: int = 0
    visits: int = 0  # empty-cell visits over the whole run
    stall_counter: int = 0  # empty-cell visits since the last placement
    solved_counter: int = 0  # filled cells counted so far in the current sweep
    placements: int = 0

    def to_dict(self) -> dict:
        return asdict(self)


class Solver:
    """Per-call solving context: owns the board for the duration of run()."""

    def __init__(
        self,
        board: Board,
        config: Optional[SolverConfig] = None,
        on_place: Optional[PlaceCallback] = None,
    ):
        self.board = board
        self.config = (config or SolverConfig()).validate()
        self.on_place = on_place
        self.stats = SolveStats()
        self.state = SolveState.SCANNING
        self.moves: list[Move] = []
        self._index: Optional[DigitIndex] = None

    def _candidates(self, cell: Cell) -> set[int]:
        if self._index is not None:
            return self._index.candidates_for(cell)
        return candidates_for(self.board, cell)

    def _place(self, cell: Cell, digit: int) -> None:
        cell.value = digit
        cell.candidates = set()
        if self._index is not None:
            self._index.place(cell, digit)
        self.stats.placements += 1
        self.stats.stall_counter = 0
        move: Move = {
            "index": self.stats.placements,
            "technique": "naked_single",
            "type": "placement",
            "cell": cell.key,
            "digit": digit,
            "sweep": self.stats.sweeps,
        }
        log.debug("sweep %d: %s = %d", self.stats.sweeps, cell.key, digit)
        if self.config.record_moves:
            self.moves.append(move)
        if self.on_place is not None:
            self.on_place(move)

    def _visit(self, cell: Cell) -> None:
        cell.candidates = self._candidates(cell)
        self.stats.visits += 1
        self.stats.stall_counter += 1
        if len(cell.candidates) == 1:
            self._place(cell, next(iter(cell.candidates)))
        if self.stats.stall_counter > self.config.stall_threshold:
            self.state = SolveState.STALLED
            log.warning(
                "stalled after %d visits without a placement (%d/%d filled)",
                self.stats.stall_counter,
                self.board.filled_count(),
                CELL_COUNT,
            )
            raise Unsolvable(
                "too many iterations since last solve. Might be an unsolvable board",
                board=self.board,
                stats=self.stats,
            )

    def _sweep(self) -> None:
        self.stats.sweeps += 1
        self.stats.solved_counter = 0
        for cell in self.board:
            if cell.is_filled:
                self.stats.solved_counter += 1
                if self.stats.solved_counter == CELL_COUNT:
                    self.state = SolveState.SOLVED
                    return
                continue
            self._visit(cell)
        log.debug(
            "sweep %d done: %d placements so far", self.stats.sweeps, self.stats.placements
        )

    def run(self) -> Board:
        if self.config.strategy == "indexed":
            self._index = DigitIndex(self.board)
        while self.state is SolveState.SCANNING:
            self._sweep()
        log.info(
            "solved in %d sweep(s), %d placement(s)", self.stats.sweeps, self.stats.placements
        )
        return self.board


def solve(
    board: Board,
    config: Optional[SolverConfig] = None,
    on_place: Optional[PlaceCallback] = None,
) -> Board:
    """Fill every naked single until the board is complete.

    Mutates and returns ``board``. Raises Unsolvable (carrying the partially filled
    board) when the stall threshold is exceeded.
    """
    return Solver(board, config, on_place).run()


def solve_tool(grid: Grid, config: Optional[SolverConfig] = None) -> SolvePayload:
    """Solve a 9x9 grid and return a JSON-friendly payload; a stall is reported, not raised."""
    solver = Solver(Board.from_grid(grid), config)
    try:
        board = solver.run()
    except Unsolvable as e:
        return {
            "status": SolveState.STALLED.value,
            "grid": e.board.to_grid(),
            "moves": solver.moves,
            "stats": solver.stats.to_dict(),
            "message": str(e),
        }
    return {
        "status": SolveState.SOLVED.value,
        "grid": board.to_grid(),
        "moves": solver.moves,
        "stats": solver.stats.to_dict(),
        "message": "Solved successfully.",
    }
