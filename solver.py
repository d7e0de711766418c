# solver.py
import numpy as np
from collections import deque
from dataclasses import dataclass, field
from typing import List, Optional

# Import from other project modules
import constants as const
from errors import RelaxationLimitExceeded
from grid_core import Coord, Direction, MazeGrid, CellKind
from utils import neighbours, format_path


@dataclass
class SolveResult:
    """Outcome of a solve session on one maze."""

    start: Coord
    exit: Coord
    solvable: bool
    distance: int  # Steps from start to the nearest exit, -1 if unreachable
    path: List[Direction] = field(default_factory=list)

    @property
    def length(self) -> int:
        return len(self.path)


class MazeSolver:
    """
    Answers reachability, distance and shortest path questions for one maze.

    The grid is never modified. The solver owns the search state: the visited
    array of the most recent reachability search and the cached distance field.
    A solver must not be shared between concurrent solves.
    """

    def __init__(self, grid: MazeGrid, method: str = const.DISTANCE_METHOD_BFS):
        if method not in (const.DISTANCE_METHOD_BFS, const.DISTANCE_METHOD_RELAXATION):
            raise ValueError(f"Unknown distance method: {method!r}")
        self.grid = grid
        self.method = method
        self.visited: np.ndarray = np.zeros(grid.shape, dtype=bool)
        self._distances: Optional[np.ndarray] = None

    @property
    def distances(self) -> Optional[np.ndarray]:
        """Copy of the distance field, or None until compute_distances() runs."""
        if self._distances is None:
            return None
        return self._distances.copy()

    # --- Reachability ---
    def is_reachable(self, row: int, col: int) -> bool:
        """
        Returns True if an EXIT can be reached from (row, col).

        Depth-first search in the order UP, RIGHT, DOWN, LEFT. Positions outside
        the grid and walls are dead ends. A fresh visited array is used for
        every call and kept on the solver afterwards for rendering.
        Existence only: this search is not distance aware.
        """
        grid = self.grid
        rooms = grid.rooms
        visited = np.zeros(grid.shape, dtype=bool)
        self.visited = visited

        # Neighbours pushed in reverse so UP is explored first
        stack: List[Coord] = [(row, col)]
        while stack:
            r, c = stack.pop()
            if not grid.in_bounds(r, c):
                continue
            room = rooms[r, c]
            if room == const.WALL or visited[r, c]:
                continue
            if room == const.EXIT:
                return True
            visited[r, c] = True
            for _, n_row, n_col in reversed(list(neighbours(r, c))):
                stack.append((n_row, n_col))
        return False

    # --- Distance Field ---
    def compute_distances(
        self, method: Optional[str] = None, max_steps: Optional[int] = None
    ) -> np.ndarray:
        """
        Computes the distance from each room to the nearest EXIT and caches it.

        Every EXIT is a distance 0 source. Walls and rooms with no route to an
        exit get -1. Returns a copy of the field.
        """
        method = method or self.method
        if method == const.DISTANCE_METHOD_BFS:
            distances = self._distances_bfs()
        elif method == const.DISTANCE_METHOD_RELAXATION:
            distances = self._distances_relaxation(
                const.MAX_RELAXATION_STEPS if max_steps is None else max_steps
            )
        else:
            raise ValueError(f"Unknown distance method: {method!r}")
        self._distances = distances
        return distances.copy()

    def _distances_bfs(self) -> np.ndarray:
        """Multi-source breadth-first sweep; each room is finalized on first visit."""
        grid = self.grid
        rooms = grid.rooms
        distances = np.full(grid.shape, const.UNREACHABLE, dtype=int)

        queue = deque()
        for r, c in grid.find_all(CellKind.EXIT):
            distances[r, c] = 0
            queue.append((r, c))

        while queue:
            r, c = queue.popleft()
            next_dist = distances[r, c] + 1
            for _, n_row, n_col in neighbours(r, c):
                if not grid.in_bounds(n_row, n_col):
                    continue
                if rooms[n_row, n_col] == const.WALL:
                    continue
                if distances[n_row, n_col] == const.UNREACHABLE:
                    distances[n_row, n_col] = next_dist
                    queue.append((n_row, n_col))
        return distances

    def _distances_relaxation(self, max_steps: int) -> np.ndarray:
        """
        Eager relaxation flood fill from each EXIT in turn.

        A room takes a candidate distance when it is unset or strictly greater,
        then offers candidate + 1 to all four neighbours again. Rooms may be
        revisited many times; the number of offers is capped by max_steps.
        """
        grid = self.grid
        rooms = grid.rooms
        distances = np.full(grid.shape, const.UNSET_DISTANCE, dtype=int)
        steps = 0

        for exit_r, exit_c in grid.find_all(CellKind.EXIT):
            stack = [
                (n_row, n_col, 1)
                for _, n_row, n_col in reversed(list(neighbours(exit_r, exit_c)))
            ]
            while stack:
                r, c, dist = stack.pop()
                steps += 1
                if steps > max_steps:
                    raise RelaxationLimitExceeded(
                        f"Distance relaxation exceeded {max_steps} steps on {grid!r}.",
                        steps=steps,
                    )
                if not grid.in_bounds(r, c):
                    continue
                room = rooms[r, c]
                if room == const.EXIT:
                    continue  # Stays 0
                if room == const.WALL:
                    distances[r, c] = const.UNREACHABLE
                    continue
                current = distances[r, c]
                if current == const.UNSET_DISTANCE or current > dist:
                    distances[r, c] = dist
                    for _, n_row, n_col in reversed(list(neighbours(r, c))):
                        stack.append((n_row, n_col, dist + 1))

        # Now make unreachable rooms distance -1
        unset = (distances == const.UNSET_DISTANCE) & (rooms != const.EXIT)
        distances[unset] = const.UNREACHABLE
        return distances

    # --- Path Reconstruction ---
    def shortest_path(self) -> List[Direction]:
        """
        Returns the moves from the START room to an EXIT, or an empty list if
        the maze is not solvable from the start.
        """
        if self._distances is None:
            self.compute_distances()
        distances = self._distances
        rooms = self.grid.rooms

        r, c = self.grid.start_coordinates()
        start_distance = int(distances[r, c])
        if start_distance == const.UNREACHABLE:  # No path to exit
            return []

        path: List[Direction] = []
        while rooms[r, c] != const.EXIT:
            direction = self._find_dir_to_min_neighbour(r, c)
            if direction is None or len(path) >= start_distance:
                raise RuntimeError(
                    f"Distance field is inconsistent at ({r}, {c}); cannot descend to an exit."
                )
            path.append(direction)
            r, c = direction.step(r, c)
        return path

    def _find_dir_to_min_neighbour(self, row: int, col: int) -> Optional[Direction]:
        """Direction of the neighbour with the smallest non-negative distance; ties go to the earlier direction."""
        best_dir: Optional[Direction] = None
        best_dist = None
        for direction, n_row, n_col in neighbours(row, col):
            if not self.grid.in_bounds(n_row, n_col):
                continue
            dist = int(self._distances[n_row, n_col])
            if dist >= 0 and (best_dist is None or dist < best_dist):
                best_dist = dist
                best_dir = direction
        return best_dir

    # --- Solve Session ---
    def solve(self) -> SolveResult:
        """
        Checks reachability from the canonical START, computes distances and
        reconstructs a shortest path.

        Raises NoStartFound / NoExitFound if the maze lacks either room.
        """
        print(f"--- Solving Maze {self.grid.rows}x{self.grid.cols} ({self.method}) ---")
        start = self.grid.start_coordinates()
        exit_ = self.grid.exit_coordinates()
        print(f"  Start: {start}, Exit: {exit_}")

        solvable = self.is_reachable(*start)
        print(
            f"  Reachability search visited {int(self.visited.sum())}/{self.grid.size()} rooms: "
            f"{'solvable' if solvable else 'not solvable'}"
        )

        distances = self.compute_distances()
        distance = int(distances[start])
        path = self.shortest_path()
        if solvable != (distance != const.UNREACHABLE):
            print("  WARNING: Reachability search and distance field disagree!")

        print(f"  Shortest path: {format_path(path)}")
        if path:
            print(f"  Path length: {len(path)} moves.")
        return SolveResult(start=start, exit=exit_, solvable=solvable, distance=distance, path=path)
