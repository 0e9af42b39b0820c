"""
Candidate enumeration for a single row.

The last cell of a row is its target; the cells before it are addends. The
free addends behave like a mixed-radix counter counting down from all nines,
with the leftmost free addend as the least significant digit. Each call to
next_row advances the counter to the next state whose addends hit the target.
"""

from .grid import Cell, MIN_VALUE, MAX_VALUE


def _decrement_with_carry(addends: list[Cell]) -> None:
    last_index = len(addends) - 1
    for i, cell in enumerate(addends):
        if cell.is_fixed:
            continue

        if cell.value <= MIN_VALUE and i < last_index:
            cell.assign(MAX_VALUE)
            continue

        if cell.value > MIN_VALUE:
            cell.assign(cell.value - 1)

        break


def next_row(row: list[Cell]) -> list[Cell] | None:
    """
    Advance the row in place to its next lower combination matching the target.

    Returns:
        The row when a matching combination was found, None once no lower
        combination exists (exhausted).
    """
    addends = row[:-1]
    target = row[-1].value

    while True:
        if sum(cell.value - MIN_VALUE for cell in addends if not cell.is_fixed) == 0:
            return None

        _decrement_with_carry(addends)

        if sum(cell.value for cell in addends) == target:
            return addends + [row[-1]]


def reset_row(row: list[Cell]) -> list[Cell]:
    """Put every free addend back to its starting value."""
    for cell in row[:-1]:
        if cell.is_free:
            cell.assign(MAX_VALUE)
    return row
