# apps/cli/solve_cli.py
"""
Solve a Sudoku text file with naked-single elimination and print the grid.

Input: 9 lines of 9 digits, 0 = empty.

Usage:
  sudoku-singles puzzles/easy.txt
  sudoku-singles puzzles/easy.txt --threshold 200 --strategy indexed --trace
  sudoku-singles puzzles/easy.txt --json out/easy.json --png out/easy.png

Exit codes: 0 solved, 1 stalled (partial grid is still printed), 2 bad input.
"""

from __future__ import annotations

import argparse
import json
import logging
import sys
from pathlib import Path

import yaml

from singles_solver.board_io import format_board, read_board, render_board_image
from singles_solver.config import STRATEGIES, load_config
from singles_solver.engine import solve_tool
from singles_solver.errors import InvalidBoard
from singles_solver.grid import Board

log = logging.getLogger("sudoku_singles")

EXIT_SOLVED = 0
EXIT_STALLED = 1
EXIT_BAD_INPUT = 2


def build_parser() -> argparse.ArgumentParser:
    ap = argparse.ArgumentParser(prog="sudoku-singles", description=__doc__.splitlines()[1])
    ap.add_argument("path", help="Board file: 9 lines of 9 digits (0 = empty)")
    ap.add_argument("--config", type=str, default=None, help="YAML file with a 'solver:' section")
    ap.add_argument("--threshold", type=int, default=None,
                    help="Empty-cell visits without a placement before giving up (default 100)")
    ap.add_argument("--strategy", type=str, default=None, choices=list(STRATEGIES),
                    help="Row/column/box lookup strategy (default scan)")
    ap.add_argument("--json", type=str, default=None, help="Write full payload JSON here")
    ap.add_argument("--png", type=str, default=None, help="Render the resulting grid to this image")
    ap.add_argument("--trace", action="store_true", help="Print every placement in order")
    ap.add_argument("-v", "--verbose", action="store_true", help="Debug logging")
    return ap


def main(argv=None) -> int:
    args = build_parser().parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format="%(levelname)s %(name)s: %(message)s",
    )

    try:
        cfg = load_config(args.config, stall_threshold=args.threshold, strategy=args.strategy)
    except (ValueError, OSError, yaml.YAMLError) as e:
        print(f"{args.config or 'options'}: {e}", file=sys.stderr)
        return EXIT_BAD_INPUT
    try:
        board = read_board(args.path)
    except (InvalidBoard, OSError, UnicodeDecodeError) as e:
        print(f"{args.path}: {e}", file=sys.stderr)
        return EXIT_BAD_INPUT

    givens = board.to_grid()
    log.info("solving %s (%d/81 given)", Path(args.path).name, board.filled_count())
    payload = solve_tool(givens, cfg)
    result = Board.from_grid(payload["grid"])

    if args.trace:
        for mv in payload["moves"]:
            print(f"{mv['index']:>3}. sweep {mv['sweep']}: {mv['cell']} = {mv['digit']}")

    print(format_board(result))

    if args.png:
        Path(args.png).parent.mkdir(parents=True, exist_ok=True)
        render_board_image(result, args.png, givens=givens)
    if args.json:
        Path(args.json).parent.mkdir(parents=True, exist_ok=True)
        out = dict(payload, source=str(args.path), original=givens)
        Path(args.json).write_text(json.dumps(out, indent=2), encoding="utf-8")

    if payload["status"] != "solved":
        print(payload["message"], file=sys.stderr)
        return EXIT_STALLED
    return EXIT_SOLVED


if __name__ == "__main__":
    raise SystemExit(main())
