# maze_io.py
"""
Reading, writing and printing mazes in the text format:

    3 5
    S...*
    ***.*
    ....E

The first line holds the dimensions (rows cols); each following line is one
row of rooms using the symbols in constants.py.
"""
import os
from typing import Iterable, List, Optional, Sequence

import numpy as np

# Import from other project modules
import constants as const
from errors import InvalidMazeError
from grid_core import Coord, MazeGrid


def parse_maze(text: str) -> MazeGrid:
    """Parses maze text (dimension header plus rows) into a MazeGrid."""
    lines = [line.rstrip() for line in text.splitlines()]
    while lines and not lines[-1]:
        lines.pop()
    if not lines:
        raise InvalidMazeError("Maze text is empty.")

    header = lines[0].split()
    if len(header) != 2:
        raise InvalidMazeError(
            f"Line 1: expected 'rows cols' header, got {lines[0]!r}."
        )
    try:
        rows, cols = int(header[0]), int(header[1])
    except ValueError:
        raise InvalidMazeError(
            f"Line 1: maze dimensions must be integers, got {lines[0]!r}."
        ) from None
    if rows <= 0 or cols <= 0:
        raise InvalidMazeError(f"Line 1: maze dimensions must be positive, got {rows}x{cols}.")

    body = lines[1:]
    if len(body) < rows:
        raise InvalidMazeError(
            f"Line {len(body) + 2}: header declares {rows} rows but the maze ends after {len(body)}."
        )
    if len(body) > rows:
        raise InvalidMazeError(
            f"Line {rows + 2}: unexpected extra row {body[rows]!r}; header declares {rows} rows."
        )
    for i, line in enumerate(body):
        if len(line) != cols:
            raise InvalidMazeError(
                f"Line {i + 2}: expected {cols} rooms, got {len(line)} in {line!r}."
            )
    return MazeGrid(body)


def load_maze(filename: str) -> MazeGrid:
    """Loads a maze from a text file."""
    print(f"--- Loading Maze: {filename} ---")
    with open(filename, "r", encoding="utf-8") as f:
        try:
            text = f.read()
        except UnicodeDecodeError as e:
            raise InvalidMazeError(f"{filename}: not valid UTF-8 text") from e
    grid = parse_maze(text)
    print(f"  Loaded {grid.rows}x{grid.cols} maze.")
    return grid


def dump_maze(grid: MazeGrid) -> str:
    return "\n".join([f"{grid.rows} {grid.cols}"] + grid.to_lines()) + "\n"


def save_maze(grid: MazeGrid, filename: str):
    """Writes a maze in the same format load_maze() reads."""
    directory = os.path.dirname(filename)
    if directory:
        os.makedirs(directory, exist_ok=True)
    with open(filename, "w", encoding="utf-8") as f:
        f.write(dump_maze(grid))
    print(f"  Maze saved to {filename}")


def format_maze(
    grid: MazeGrid,
    visited: Optional[np.ndarray] = None,
    path_cells: Optional[Iterable[Coord]] = None,
) -> str:
    """
    Renders the maze as text for debugging.
    Visited rooms (other than START) show as 'o', rooms on the path as '+'.
    """
    chars: List[List[str]] = [list(line) for line in grid.to_lines()]
    if visited is not None:
        for r, c in np.argwhere(visited):
            if chars[r][c] != const.START:
                chars[r][c] = const.VISITED_MARKER
    if path_cells is not None:
        for r, c in path_cells:
            if grid.rooms[r, c] == const.EMPTY:
                chars[r][c] = const.PATH_MARKER
    return "\n".join("".join(row) for row in chars)


def print_maze(grid: MazeGrid, visited: Optional[np.ndarray] = None,
               path_cells: Optional[Sequence[Coord]] = None):
    """Prints maze to stdout for debugging."""
    print(format_maze(grid, visited, path_cells))
