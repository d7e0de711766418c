# maze_gen.py
import random
from typing import Optional

# Import from other project modules
import constants as const
from grid_core import MazeGrid


def generate_random_maze(
    rows: int = const.DEFAULT_ROWS,
    cols: int = const.DEFAULT_COLS,
    percent_walls: float = const.PERCENT_WALLS,
    rng: Optional[random.Random] = None,
) -> MazeGrid:
    """
    Generates a random (possibly unsolvable) maze.
    Each room independently becomes a wall with probability percent_walls,
    then START is placed bottom left and EXIT top right.
    """
    if rows <= 0 or cols <= 0:
        raise ValueError(f"Maze dimensions must be positive, got {rows}x{cols}.")
    if rows == 1 and cols == 1:
        raise ValueError("A 1x1 maze cannot hold both a START and an EXIT room.")
    if not (0.0 <= percent_walls <= 1.0):
        raise ValueError(f"percent_walls must be within [0, 1], got {percent_walls}.")
    rng = rng or random.Random()

    print(f"--- Starting Random Maze Generation ({rows}x{cols}, {percent_walls:.0%} walls) ---")
    # Fill all rooms as empty, then randomly add some walls
    rooms = [[const.EMPTY] * cols for _ in range(rows)]
    wall_count = 0
    for r in range(rows):
        for c in range(cols):
            if rng.random() < percent_walls:
                rooms[r][c] = const.WALL
                wall_count += 1

    # Add start and exit (may overwrite walls)
    for r, c in ((rows - 1, 0), (0, cols - 1)):
        if rooms[r][c] == const.WALL:
            wall_count -= 1
    rooms[rows - 1][0] = const.START  # bottom left
    rooms[0][cols - 1] = const.EXIT  # top right

    print(f"--- Maze Generation Complete: {wall_count}/{rows * cols} rooms are walls. ---")
    return MazeGrid(rooms)
