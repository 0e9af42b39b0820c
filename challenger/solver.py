"""
Row-sweep Challenger solver with basic safety checks.
"""

from abc import ABC, abstractmethod
from dataclasses import dataclass
from enum import Enum

import numpy as np

from .enumerator import next_row, reset_row
from .grid import Grid, MAX_VALUE
from .validity import is_valid

DEFAULT_MAX_STEPS = 200000


class SolveStatus(Enum):
    SEARCHING = "searching"
    SOLVED = "solved"
    FAILED = "failed"
    BUDGET_EXHAUSTED = "budget_exhausted"


@dataclass
class SolveResult:
    status: SolveStatus
    grid: Grid
    steps: int
    message: str = ""

    @property
    def solved(self) -> bool:
        return self.status is SolveStatus.SOLVED


class Solver(ABC):
    """Strategy that drives a grid to SOLVED, FAILED or BUDGET_EXHAUSTED."""

    @abstractmethod
    def solve(self, grid: Grid) -> SolveResult:
        ...


class RowSweepSolver(Solver):
    """
    Per-row generate-and-test search.

    The searchable rows act like an odometer: row 1 walks through its
    candidates, and when it runs out it is reset and the next row advances by
    one candidate. The whole grid is re-validated after every single-row
    advance. There is no joint backtracking across rows.
    """

    def __init__(self, max_steps: int | None = None, debug: bool = False):
        """
        Args:
            max_steps (int | None): Cap on single-row advances, None for no cap
            debug (bool): Print every advance and reset
        """
        self.max_steps = max_steps
        self.debug = debug

    def solve(self, grid: Grid) -> SolveResult:
        steps = 0
        last_row = grid.row_count - 2

        while True:
            if is_valid(grid):
                return SolveResult(SolveStatus.SOLVED, grid, steps, f"Solved in {steps} steps")

            if self.max_steps is not None and steps >= self.max_steps:
                return SolveResult(
                    SolveStatus.BUDGET_EXHAUSTED, grid, steps,
                    f"Stopped after {steps} steps (limit {self.max_steps})",
                )

            steps += 1
            for r in grid.searchable_rows:
                candidate = next_row(grid.row(r))
                if candidate is not None:
                    grid.replace_row(r, candidate)
                    if self.debug:
                        print(f"      step {steps}: row {r} -> {[c.value for c in candidate[:-1]]}")
                    break

                if r == last_row:
                    return SolveResult(SolveStatus.FAILED, grid, steps, "No solution found")

                row = reset_row(grid.row(r))
                first = next_row(row)
                if first is None:
                    # No candidate below all nines; leave the row at its reset state.
                    reset_row(row)
                    if self.debug:
                        print(f"      step {steps}: row {r} exhausted, kept at reset state")
                    continue

                grid.replace_row(r, first)
                if self.debug:
                    print(f"      step {steps}: row {r} exhausted, reset to {[c.value for c in first[:-1]]}")


def validate_table(table) -> tuple[bool, str]:
    """Check the table shape and givens; fails fast before any search."""
    try:
        values = np.asarray(table)
    except ValueError:
        return False, "Table rows have different lengths"

    if values.dtype == object:
        return False, "Table rows have different lengths"
    if values.ndim != 2:
        return False, f"Table must be 2-D, got {values.ndim} dimension(s)"
    if not np.issubdtype(values.dtype, np.integer):
        if not np.issubdtype(values.dtype, np.floating) or not np.all(np.mod(values, 1) == 0):
            return False, "Table must contain integers only"

    row_count, column_count = values.shape
    if row_count < 3 or column_count < 2:
        return False, f"Table must be at least 3x2, got {row_count}x{column_count}"

    if np.any(values < 0):
        return False, "Table contains negative values"

    interior = values[1:-1, :-1]
    if np.any(interior > MAX_VALUE):
        r, c = np.argwhere(interior > MAX_VALUE)[0]
        return False, f"Cell ({r + 2},{c + 1}) holds {interior[r, c]}, above {MAX_VALUE}"

    return True, ""


def solve_table(table, max_steps: int | None = DEFAULT_MAX_STEPS,
                debug: bool = False) -> tuple[np.ndarray | None, str]:
    """
    Return a solved copy of the table, or (None, reason) if unsolvable or invalid.
    Limits the search to max_steps single-row advances to avoid runaway loops.
    """
    ok, reason = validate_table(table)
    if not ok:
        return None, reason

    grid = Grid.from_table(np.asarray(table, dtype=int))
    result = RowSweepSolver(max_steps=max_steps, debug=debug).solve(grid)
    if result.solved:
        return result.grid.to_table(), result.message
    return None, result.message
