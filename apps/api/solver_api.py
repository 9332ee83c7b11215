# solver_api.py
# Optional FastAPI wrapper for the solver tool functions.
# Run with: uvicorn apps.api.solver_api:app --reload

from fastapi import FastAPI, HTTPException
from pydantic import BaseModel

from singles_solver.board_io import format_board
from singles_solver.checks import sanity_check
from singles_solver.config import SolverConfig, merge_overrides
from singles_solver.constraints import compute_candidates
from singles_solver.engine import solve_tool
from singles_solver.errors import InvalidBoard
from singles_solver.grid import Board

app = FastAPI(title="Sudoku Singles Solver API")


class GridModel(BaseModel):
    grid: list[list[int]]


class SolveRequest(BaseModel):
    grid: list[list[int]]
    stall_threshold: int | None = None
    strategy: str | None = None


class SanityRequest(BaseModel):
    original: list[list[int]]
    current: list[list[int]]


def _board(grid: list[list[int]]) -> Board:
    try:
        return Board.from_grid(grid)
    except InvalidBoard as e:
        raise HTTPException(status_code=422, detail=str(e))


@app.post("/solve")
def api_solve(req: SolveRequest):
    _board(req.grid)
    try:
        cfg = merge_overrides(SolverConfig(), stall_threshold=req.stall_threshold, strategy=req.strategy)
    except ValueError as e:
        raise HTTPException(status_code=422, detail=str(e))
    return solve_tool(req.grid, cfg)


@app.post("/candidates")
def api_cands(payload: GridModel):
    return {"candidates": compute_candidates(_board(payload.grid))}


@app.post("/sanity_check")
def api_sanity(req: SanityRequest):
    _board(req.original)
    _board(req.current)
    return sanity_check(req.original, req.current)


@app.post("/format")
def api_format(payload: GridModel):
    return {"text": format_board(_board(payload.grid))}
