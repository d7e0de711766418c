# utils.py
import numpy as np
from typing import Iterator, List, Sequence, Tuple

from grid_core import Coord, Direction


def neighbours(row: int, col: int) -> Iterator[Tuple[Direction, int, int]]:
    """Yields (direction, row, col) for the four orthogonal neighbours, UP, RIGHT, DOWN, LEFT."""
    for direction in Direction:
        n_row, n_col = direction.step(row, col)
        yield direction, n_row, n_col


def path_cells(start: Coord, path: Sequence[Direction]) -> List[Coord]:
    """Returns every room visited when following path from start, start included."""
    row, col = start
    cells = [(row, col)]
    for direction in path:
        row, col = direction.step(row, col)
        cells.append((row, col))
    return cells


def manhattan_distance(a: Coord, b: Coord) -> int:
    return abs(a[0] - b[0]) + abs(a[1] - b[1])


def manhattan_field(shape: Tuple[int, int], sources: Sequence[Coord]) -> np.ndarray:
    """
    Distance from every cell of an open (wall-free) grid to the nearest source.
    Used as the reference field when checking flood fills.
    """
    rows_idx, cols_idx = np.indices(shape)
    field = np.full(shape, np.iinfo(np.int64).max, dtype=np.int64)
    for s_row, s_col in sources:
        field = np.minimum(field, np.abs(rows_idx - s_row) + np.abs(cols_idx - s_col))
    return field


def format_path(path: Sequence[Direction]) -> str:
    """Formats a path as a bracketed, comma separated list of direction names."""
    return "[" + ", ".join(direction.name for direction in path) + "]"
