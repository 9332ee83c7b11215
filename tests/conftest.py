# tests/conftest.py
import sys
from pathlib import Path

import pytest

# Add project root to sys.path so "apps", "singles_solver", "sudoku_types" can be imported in tests
ROOT = Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

# Wikipedia's example puzzle; naked singles alone are enough to finish it.
PUZZLE = (
    "530070000"
    "600195000"
    "098000060"
    "800060003"
    "400803001"
    "700020006"
    "060000280"
    "000419005"
    "000080079"
)

SOLUTION = (
    "534678912"
    "672195348"
    "198342567"
    "859761423"
    "426853791"
    "713924856"
    "961537284"
    "287419635"
    "345286179"
)


def to_grid(s):
    return [[int(ch) for ch in s[i : i + 9]] for i in range(0, 81, 9)]


@pytest.fixture
def puzzle_grid():
    return to_grid(PUZZLE)


@pytest.fixture
def solution_grid():
    return to_grid(SOLUTION)


@pytest.fixture
def puzzle_text():
    return "\n".join(PUZZLE[i : i + 9] for i in range(0, 81, 9)) + "\n"
