# geometry.py
from typing import Dict, List, NamedTuple, Tuple

# Import from other project modules
import constants as const
from grid_core import MazeGrid


class WallRect(NamedTuple):
    """Axis-aligned block of wall rooms, in room units."""

    row: int
    col: int
    height: int  # rows covered
    width: int  # cols covered


def extract_wall_runs(grid: MazeGrid) -> List[WallRect]:
    """Collapses each row's consecutive wall rooms into single-row rectangles."""
    runs: List[WallRect] = []
    is_wall = grid.rooms == const.WALL
    for r in range(grid.rows):
        c = 0
        while c < grid.cols:
            if not is_wall[r, c]:
                c += 1
                continue
            run_start = c
            while c < grid.cols and is_wall[r, c]:
                c += 1
            runs.append(WallRect(r, run_start, 1, c - run_start))
    return runs


def extract_wall_rects(grid: MazeGrid) -> List[WallRect]:
    """
    Merges wall runs that span the same columns in consecutive rows into
    taller rectangles. Every wall room is covered by exactly one rectangle.
    """
    print("--- Extracting Wall Rectangles ---")
    runs = extract_wall_runs(grid)
    # (col, width) -> index into rects of the rectangle still open on the previous row
    open_rects: Dict[Tuple[int, int], int] = {}
    rects: List[WallRect] = []
    current_row = -1
    next_open: Dict[Tuple[int, int], int] = {}

    for run in runs:
        if run.row != current_row:
            # Rectangles only stay open across directly adjacent rows
            open_rects = next_open if run.row == current_row + 1 else {}
            next_open = {}
            current_row = run.row
        key = (run.col, run.width)
        idx = open_rects.pop(key, None)
        if idx is not None:
            rect = rects[idx]
            rects[idx] = rect._replace(height=rect.height + 1)
        else:
            idx = len(rects)
            rects.append(run)
        next_open[key] = idx

    print(f"  Merged {len(runs)} wall runs into {len(rects)} rectangles.")
    return rects


def rect_bounds(
    rect: WallRect, rows: int, cell_size: float = 1.0
) -> Tuple[float, float, float, float]:
    """
    Returns (x_min, y_min, x_max, y_max) of a rectangle in world units.
    Row 0 is the top of the maze, so y grows upwards from the last row.
    """
    x_min = rect.col * cell_size
    x_max = (rect.col + rect.width) * cell_size
    y_max = (rows - rect.row) * cell_size
    y_min = (rows - rect.row - rect.height) * cell_size
    return x_min, y_min, x_max, y_max


def cell_center(row: int, col: int, rows: int, cell_size: float = 1.0) -> Tuple[float, float]:
    """World (x, y) of a room's centre, using the same orientation as rect_bounds()."""
    return (col + 0.5) * cell_size, (rows - row - 0.5) * cell_size
