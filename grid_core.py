# grid_core.py
import numpy as np
from enum import Enum
from typing import List, Tuple, Optional, Sequence, Union

# Import from other project modules
import constants as const
from errors import InvalidMazeError, NoStartFound, NoExitFound

Coord = Tuple[int, int]


class CellKind(Enum):
    """The kinds of room a maze cell can hold, keyed by their text symbol."""

    EMPTY = const.EMPTY
    WALL = const.WALL
    START = const.START
    EXIT = const.EXIT

    @property
    def symbol(self) -> str:
        return self.value


VALID_SYMBOLS = frozenset(kind.value for kind in CellKind)


class Direction(Enum):
    """Orthogonal moves, declared in search priority order."""

    UP = (-1, 0)
    RIGHT = (0, 1)
    DOWN = (1, 0)
    LEFT = (0, -1)

    @property
    def delta(self) -> Coord:
        return self.value

    def step(self, row: int, col: int) -> Coord:
        """Returns the coordinates one move from (row, col) in this direction."""
        d_row, d_col = self.value
        return row + d_row, col + d_col

    def __str__(self) -> str:
        return self.name


class MazeGrid:
    """
    Rectangular maze layout of rooms (EMPTY, WALL, START, EXIT).

    The layout is stored as a read-only numpy array of symbols and never
    changes after construction; search state lives in the solver.
    """

    def __init__(self, rooms: Union[Sequence[Sequence[str]], np.ndarray]):
        if isinstance(rooms, str):
            raise InvalidMazeError(
                f"Maze rooms must be a sequence of rows, not a single string {rooms!r}."
            )
        if isinstance(rooms, np.ndarray):
            if rooms.ndim != 2:
                raise InvalidMazeError(
                    f"Maze array must be 2D, got {rooms.ndim} dimension(s)."
                )
            rooms = rooms.tolist()

        rows = [list(row) for row in rooms]
        if not rows:
            raise InvalidMazeError("Maze must have at least one row.")
        width = len(rows[0])
        if width == 0:
            raise InvalidMazeError("Maze must have at least one column.")

        for r, row in enumerate(rows):
            if len(row) != width:
                raise InvalidMazeError(
                    f"Maze is not rectangular: row {r} has {len(row)} rooms, expected {width}."
                )
            for c, symbol in enumerate(row):
                if symbol not in VALID_SYMBOLS:
                    raise InvalidMazeError(
                        f"Unexpected room type {symbol!r} at ({r}, {c}); "
                        f"expected one of {''.join(sorted(VALID_SYMBOLS))!r}."
                    )

        self._rooms = np.array(rows, dtype="<U1")
        self._rooms.setflags(write=False)

    @property
    def rooms(self) -> np.ndarray:
        """Read-only (rows, cols) array of room symbols."""
        return self._rooms

    @property
    def rows(self) -> int:
        return self._rooms.shape[0]

    @property
    def cols(self) -> int:
        return self._rooms.shape[1]

    @property
    def shape(self) -> Tuple[int, int]:
        return self.rows, self.cols

    def size(self) -> int:
        """Returns the total number of rooms in the grid."""
        return self.rows * self.cols

    def in_bounds(self, row: int, col: int) -> bool:
        return 0 <= row < self.rows and 0 <= col < self.cols

    def get_room(self, row: int, col: int) -> Optional[CellKind]:
        """Safely retrieves the room kind at (row, col); None when out of bounds."""
        if not self.in_bounds(row, col):
            return None
        return CellKind(self._rooms[row, col])

    def is_wall(self, row: int, col: int) -> bool:
        return self.in_bounds(row, col) and self._rooms[row, col] == const.WALL

    def is_exit(self, row: int, col: int) -> bool:
        return self.in_bounds(row, col) and self._rooms[row, col] == const.EXIT

    def find_all(self, kind: CellKind) -> List[Coord]:
        """Coordinates of every room of the given kind, in row-major order."""
        return [(int(r), int(c)) for r, c in np.argwhere(self._rooms == kind.value)]

    def count(self, kind: CellKind) -> int:
        return int(np.count_nonzero(self._rooms == kind.value))

    def _first(self, kind: CellKind) -> Optional[Coord]:
        matches = np.argwhere(self._rooms == kind.value)
        if len(matches) == 0:
            return None
        r, c = matches[0]
        return int(r), int(c)

    def start_coordinates(self) -> Coord:
        """Returns (row, col) of the first START room in row-major order."""
        coords = self._first(CellKind.START)
        if coords is None:
            raise NoStartFound("No START room found for maze.")
        return coords

    def exit_coordinates(self) -> Coord:
        """Returns (row, col) of the first EXIT room in row-major order."""
        coords = self._first(CellKind.EXIT)
        if coords is None:
            raise NoExitFound("No EXIT room found for maze.")
        return coords

    def to_lines(self) -> List[str]:
        return ["".join(row) for row in self._rooms.tolist()]

    def __str__(self) -> str:
        return "\n".join(self.to_lines())

    def __repr__(self) -> str:
        return f"MazeGrid({self.rows}x{self.cols})"

    def __eq__(self, other):
        return isinstance(other, MazeGrid) and np.array_equal(self._rooms, other._rooms)

    def __hash__(self):
        return hash(tuple(self.to_lines()))
