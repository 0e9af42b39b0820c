"""
Drawing a Challenger table as an image.
"""

import cv2
import numpy as np

GIVEN_COLOR = (255, 255, 255)
SOLVED_COLOR = (0, 200, 0)
SUM_COLOR = (0, 255, 255)
THIN_LINE_COLOR = (100, 100, 100)


def draw_table_lines(canvas: np.ndarray, rows: int, columns: int, cell_size: int) -> np.ndarray:
    """
    Draw cell borders, with thick lines around the header row, the sum row
    and the sum column.
    """
    h, w = canvas.shape[:2]

    for i in range(rows + 1):
        y = min(i * cell_size, h - 1)
        thick = i in (0, 1, rows - 1, rows)
        color = SUM_COLOR if thick else THIN_LINE_COLOR
        cv2.line(canvas, (0, y), (w - 1, y), color, 2 if thick else 1)

    for i in range(columns + 1):
        x = min(i * cell_size, w - 1)
        thick = i in (0, columns - 1, columns)
        color = SUM_COLOR if thick else THIN_LINE_COLOR
        cv2.line(canvas, (x, 0), (x, h - 1), color, 2 if thick else 1)

    return canvas


def render_table_image(solved: np.ndarray, original: np.ndarray, cell_size: int = 60) -> np.ndarray:
    """
    Render the solved table on a black canvas.

    Given digits (non-zero in original, or anywhere in the header row) are
    drawn in white, solved digits in green and sums in yellow.
    """
    solved = np.asarray(solved, dtype=int)
    original = np.asarray(original, dtype=int)
    rows, columns = solved.shape

    canvas = np.zeros((rows * cell_size, columns * cell_size, 3), dtype=np.uint8)
    draw_table_lines(canvas, rows, columns, cell_size)

    font = cv2.FONT_HERSHEY_SIMPLEX
    scale = cell_size / 60.0
    for r in range(rows):
        for c in range(columns):
            val = int(solved[r, c])
            if r == 0 and c < columns - 1:
                color = GIVEN_COLOR
            elif r == rows - 1 or c == columns - 1:
                color = SUM_COLOR
            elif original[r, c] != 0:
                color = GIVEN_COLOR
            else:
                color = SOLVED_COLOR
            text = str(val)
            size, _ = cv2.getTextSize(text, font, scale, 2)
            x = c * cell_size + (cell_size - size[0]) // 2
            y = r * cell_size + (cell_size + size[1]) // 2
            cv2.putText(canvas, text, (x, y), font, scale, color, 2, cv2.LINE_AA)

    return canvas


def save_image(path, image: np.ndarray) -> None:
    if not cv2.imwrite(str(path), image):
        raise ValueError(f"Could not write image to {path}")
