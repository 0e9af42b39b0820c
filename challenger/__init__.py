"""
Challenger Grid Solver

This package contains modules for:
- Building a typed grid from a table of integers
- Checking row, column and diagonal sums
- Enumerating candidate digits for one row at a time
- Solving the puzzle and presenting the result
"""

from .grid import Cell, Grid, build_grid, MIN_VALUE, MAX_VALUE
from .validity import is_valid
from .enumerator import next_row, reset_row
from .solver import (
    Solver,
    RowSweepSolver,
    SolveResult,
    SolveStatus,
    solve_table,
    validate_table,
)

__version__ = "1.0.0"
__author__ = "Challenger Project Team"
