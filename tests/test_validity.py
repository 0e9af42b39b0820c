"""
Tests for the row, column and diagonal sum checks.
"""

from challenger.grid import Grid
from challenger.validity import (
    column_sums_are_valid,
    diagonal_sums_are_valid,
    is_valid,
    row_sums_are_valid,
)


def test_consistent_table_is_valid(solved_table):
    grid = Grid.from_table(solved_table)
    assert row_sums_are_valid(grid)
    assert column_sums_are_valid(grid)
    assert diagonal_sums_are_valid(grid)
    assert is_valid(grid)


def test_wrong_row_target(solved_table):
    solved_table[2][4] = 25
    grid = Grid.from_table(solved_table)
    assert not row_sums_are_valid(grid)
    assert column_sums_are_valid(grid)
    assert not is_valid(grid)


def test_wrong_column_target(solved_table):
    solved_table[5][1] = 15
    grid = Grid.from_table(solved_table)
    assert row_sums_are_valid(grid)
    assert not column_sums_are_valid(grid)
    assert not is_valid(grid)


def test_wrong_main_diagonal_target(solved_table):
    solved_table[5][4] = 17
    grid = Grid.from_table(solved_table)
    assert row_sums_are_valid(grid)
    assert column_sums_are_valid(grid)
    assert not diagonal_sums_are_valid(grid)
    assert not is_valid(grid)


def test_wrong_anti_diagonal_target(solved_table):
    solved_table[0][4] = 15
    grid = Grid.from_table(solved_table)
    assert not diagonal_sums_are_valid(grid)


def test_swapping_digits_keeps_rows_but_breaks_columns(solved_table):
    row = solved_table[1]
    row[0], row[1] = row[1], row[0]
    grid = Grid.from_table(solved_table)
    assert row_sums_are_valid(grid)
    assert not column_sums_are_valid(grid)


def test_checks_do_not_mutate(puzzle_table):
    grid = Grid.from_table(puzzle_table)
    before = grid.to_table()
    is_valid(grid)
    assert (grid.to_table() == before).all()
