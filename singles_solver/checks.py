"""Consistency checks over grids: overwritten givens, duplicate digits per row/column/box,
and full-solution validation."""

from __future__ import annotations

from typing import Dict

from sudoku_types import Grid

from .grid import BOXES, DIGITS, Board, rc_to_key


def _duplicates_in_unit(vals) -> set[int]:
    seen = set()
    dups = set()
    for v in vals:
        if v == 0:
            continue
        if v in seen:
            dups.add(v)
        seen.add(v)
    return dups


def sanity_check(original: Grid, current: Grid) -> Dict:
    issues = []
    for r in DIGITS:
        for c in DIGITS:
            given = original[r - 1][c - 1]
            if given != 0 and current[r - 1][c - 1] not in (0, given):
                issues.append(
                    {
                        "type": "given_overwritten",
                        "cell": rc_to_key(r, c),
                        "given": given,
                        "found": current[r - 1][c - 1],
                    }
                )
    # rows
    for r in DIGITS:
        dups = _duplicates_in_unit(current[r - 1])
        if dups:
            cells = [rc_to_key(r, c) for c in DIGITS if current[r - 1][c - 1] in dups]
            issues.append({"type": "duplicate", "unit": f"r{r}", "digits": sorted(dups), "cells": cells})
    # cols
    for c in DIGITS:
        col = [current[r - 1][c - 1] for r in DIGITS]
        dups = _duplicates_in_unit(col)
        if dups:
            cells = [rc_to_key(r, c) for r in DIGITS if current[r - 1][c - 1] in dups]
            issues.append({"type": "duplicate", "unit": f"c{c}", "digits": sorted(dups), "cells": cells})
    # boxes
    for box in BOXES:
        coords = box.cells()
        vals = [current[r - 1][c - 1] for r, c in coords]
        dups = _duplicates_in_unit(vals)
        if dups:
            bad = [rc_to_key(*coords[i]) for i, v in enumerate(vals) if v in dups]
            issues.append({"type": "duplicate", "unit": f"b{box.index}", "digits": sorted(dups), "cells": bad})
    return {"ok": len(issues) == 0, "issues": issues}


def is_valid_solution(board: Board) -> bool:
    """True iff every cell is filled and each row, column and box holds 1..9 exactly once."""
    if not board.is_complete():
        return False
    full = set(DIGITS)
    grid = board.to_grid()
    for i in DIGITS:
        if set(grid[i - 1]) != full:
            return False
        if {grid[r - 1][i - 1] for r in DIGITS} != full:
            return False
    for box in BOXES:
        if {grid[r - 1][c - 1] for r, c in box.cells()} != full:
            return False
    return True
