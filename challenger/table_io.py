"""
Loading, saving and printing Challenger tables.

A table file holds one grid row per line, integers separated by commas or
whitespace. Zeros mark free cells (except in the header row).
"""

from pathlib import Path

import numpy as np

DEFAULT_ROWS = 6
DEFAULT_COLUMNS = 5


def empty_table(rows: int = DEFAULT_ROWS, columns: int = DEFAULT_COLUMNS) -> np.ndarray:
    """Blank layout: a 6x5 grid of zeros unless told otherwise."""
    return np.zeros((rows, columns), dtype=int)


def load_table(path: str | Path) -> np.ndarray:
    """
    Read a table of integers from a CSV or whitespace separated file.

    Raises:
        ValueError: if the file is missing or does not hold a 2-D integer table
    """
    path = Path(path)
    if not path.exists():
        raise ValueError(f"Table file not found: {path}")

    text = path.read_text()
    delimiter = "," if "," in text else None
    try:
        table = np.loadtxt(path, delimiter=delimiter, dtype=int, ndmin=2, comments="#")
    except ValueError as e:
        raise ValueError(f"Could not parse table from {path}: {e}") from e

    if table.size == 0:
        raise ValueError(f"Table file is empty: {path}")
    return table


def save_table(path: str | Path, table: np.ndarray) -> None:
    np.savetxt(path, np.asarray(table, dtype=int), fmt="%d", delimiter=",")


def format_table(table: np.ndarray) -> str:
    """Render the table as a human-friendly string."""
    table = np.asarray(table, dtype=int)
    row_count, column_count = table.shape
    width = max(len(str(v)) for v in table.ravel())

    lines = []
    for r, row in enumerate(table):
        parts = []
        for c, val in enumerate(row):
            is_addend = 0 < r < row_count - 1 and c < column_count - 1
            text = "." if (is_addend and val == 0) else str(val)
            if c == column_count - 1:
                parts.append("|")
            parts.append(text.rjust(width))
        line = " ".join(parts)
        if r == row_count - 1:
            lines.append("-" * len(line))
        lines.append(line)
        if r == 0:
            lines.append("-" * len(line))
    return "\n".join(lines)
