"""
Grid model for the Challenger puzzle.

Layout:
- Row 0 is the header row. Every cell except the last column is a given.
- The last row holds column sums, the last column holds row sums.
- Cell [R-1][C-1] is the main diagonal target, cell [0][C-1] the
  anti-diagonal target.
- Everything else is an addend: a given clue if non-zero, otherwise free.
"""

from dataclasses import dataclass

import numpy as np

MIN_VALUE = 1
MAX_VALUE = 9


@dataclass
class Cell:
    value: int
    is_fixed: bool = False
    is_sum: bool = False

    @property
    def is_free(self) -> bool:
        return not self.is_fixed and not self.is_sum

    def assign(self, value: int) -> None:
        """Write a new value; givens are immutable."""
        if self.is_fixed:
            raise ValueError(f"Cannot overwrite fixed cell holding {self.value}")
        self.value = value


class Grid:
    """
    Rectangular arrangement of cells, mutated in place by the solver.

    Only free cells of rows 1..row_count-2 ever change.
    """

    def __init__(self, rows: list[list[Cell]]):
        self.rows = rows
        self.row_count = len(rows)
        self.column_count = len(rows[0])

    @classmethod
    def from_table(cls, table) -> "Grid":
        """
        Build a grid from a rectangular table of integers.

        Args:
            table: 2-D array-like of ints (list of lists or numpy array)

        Returns:
            Grid: cells carrying their fixed/sum roles and starting values
        """
        values = np.asarray(table, dtype=int)
        row_count, column_count = values.shape
        last_row = row_count - 1
        last_col = column_count - 1

        rows = []
        for r in range(row_count):
            cells = []
            for c in range(column_count):
                cell = Cell(value=int(values[r, c]))
                cell.is_sum = r == last_row or c == last_col

                # Header givens are fixed even when they are zero.
                if cell.value != 0 or (r == 0 and c < last_col):
                    cell.is_fixed = True
                else:
                    cell.value = MAX_VALUE

                cells.append(cell)
            rows.append(cells)

        return cls(rows)

    def to_table(self) -> np.ndarray:
        """Export current values positionally; roles are dropped."""
        return np.array([[cell.value for cell in row] for row in self.rows], dtype=int)

    def fixed_mask(self) -> np.ndarray:
        return np.array([[cell.is_fixed for cell in row] for row in self.rows], dtype=bool)

    @property
    def searchable_rows(self) -> range:
        return range(1, self.row_count - 1)

    def row(self, index: int) -> list[Cell]:
        return self.rows[index]

    def replace_row(self, index: int, cells: list[Cell]) -> None:
        if len(cells) != self.column_count:
            raise ValueError(f"Row {index} needs {self.column_count} cells, got {len(cells)}")
        self.rows[index] = cells

    def free_cells(self):
        for r in self.searchable_rows:
            for cell in self.rows[r][:-1]:
                if cell.is_free:
                    yield cell

    def __getitem__(self, position: tuple[int, int]) -> Cell:
        r, c = position
        return self.rows[r][c]

    def __repr__(self):
        return f"Grid({self.row_count}x{self.column_count}, free={sum(1 for _ in self.free_cells())})"


def build_grid(table) -> Grid:
    return Grid.from_table(table)
