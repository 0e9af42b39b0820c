# tests/conftest.py
import sys
from pathlib import Path

import pytest

# Add project root to sys.path so "challenger" can be imported in tests
ROOT = Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))


# Interior block:
#   1 2 3 4 | 10
#   5 6 7 8 | 26
#   9 1 2 3 | 15
#   4 5 6 7 | 22
# Column sums 19 14 18 22, both diagonals 16.
SOLVED_TABLE = [
    [0, 0, 0, 0, 16],
    [1, 2, 3, 4, 10],
    [5, 6, 7, 8, 26],
    [9, 1, 2, 3, 15],
    [4, 5, 6, 7, 22],
    [19, 14, 18, 22, 16],
]

# Same puzzle with four cells blanked in rows 1 and 4.
PUZZLE_TABLE = [
    [0, 0, 0, 0, 16],
    [0, 0, 3, 4, 10],
    [5, 6, 7, 8, 26],
    [9, 1, 2, 3, 15],
    [4, 5, 0, 0, 22],
    [19, 14, 18, 22, 16],
]


@pytest.fixture
def solved_table():
    return [row[:] for row in SOLVED_TABLE]


@pytest.fixture
def puzzle_table():
    return [row[:] for row in PUZZLE_TABLE]
