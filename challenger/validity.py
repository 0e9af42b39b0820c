"""
Whole-grid sum checks.

All checks are pure. The diagonals are only meaningful when the interior
block (rows 1..R-2, columns 0..C-2) is square; the sums are taken anyway.
"""

from .grid import Grid


def row_sums_are_valid(grid: Grid) -> bool:
    for r in grid.searchable_rows:
        row = grid.row(r)
        expected = row[-1].value
        actual = sum(cell.value for cell in row[:-1])
        if expected != actual:
            return False
    return True


def column_sums_are_valid(grid: Grid) -> bool:
    last_row = grid.row_count - 1
    for c in range(grid.column_count - 1):
        expected = grid[last_row, c].value
        actual = sum(grid[r, c].value for r in grid.searchable_rows)
        if expected != actual:
            return False
    return True


def diagonal_sums_are_valid(grid: Grid) -> bool:
    last_row = grid.row_count - 1
    last_col = grid.column_count - 1
    interior = [(r, c) for r in grid.searchable_rows for c in range(last_col)]

    main_actual = sum(grid[r, c].value for r, c in interior if c == r - 1)
    if main_actual != grid[last_row, last_col].value:
        return False

    anti_actual = sum(grid[r, c].value for r, c in interior if r + c == grid.row_count - 2)
    if anti_actual != grid[0, last_col].value:
        return False

    return True


def is_valid(grid: Grid) -> bool:
    return (
        row_sums_are_valid(grid)
        and column_sums_are_valid(grid)
        and diagonal_sums_are_valid(grid)
    )
