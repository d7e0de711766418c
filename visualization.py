# visualization.py
import matplotlib
import matplotlib.pyplot as plt
import matplotlib.colors as mcolors
import matplotlib.patches as mpatches
import numpy as np
from typing import List, Optional, Sequence, Tuple

# Import from other project modules
from grid_core import Direction, MazeGrid
from solver import MazeSolver
from utils import path_cells as follow_path
import constants as const

_ROOM_COLORS = {
    const.EMPTY: const.VIS_EMPTY_COLOR,
    const.WALL: const.VIS_WALL_COLOR,
    const.START: const.VIS_START_COLOR,
    const.EXIT: const.VIS_EXIT_COLOR,
}


# --- Visualization Helpers ---
def _setup_grid_plot(grid: MazeGrid) -> Tuple[plt.Figure, plt.Axes]:
    """
    Creates an axis where room (r, c) spans [c, c+1] x [r, r+1], row 0 at the
    top. Rooms appear square and the maze is centred in the figure.
    """
    longest = max(grid.rows, grid.cols)
    fig_w = const.VIS_FIGURE_SIZE * grid.cols / longest
    fig_h = const.VIS_FIGURE_SIZE * grid.rows / longest
    fig, ax = plt.subplots(figsize=(max(fig_w, 2.0), max(fig_h, 2.0)))
    ax.set_xlim(0, grid.cols)
    ax.set_ylim(grid.rows, 0)  # Row 0 at the top
    ax.set_aspect("equal")
    ax.set_axis_off()
    return fig, ax


def _room_image(grid: MazeGrid) -> np.ndarray:
    """RGBA image with one pixel per room, coloured by room kind."""
    image = np.zeros((grid.rows, grid.cols, 4))
    for symbol, color in _ROOM_COLORS.items():
        image[grid.rooms == symbol] = mcolors.to_rgba(color)
    return image


def _draw_rooms(ax: plt.Axes, grid: MazeGrid):
    """Fills each room with its kind's colour and outlines the rooms."""
    ax.imshow(
        _room_image(grid),
        extent=(0, grid.cols, grid.rows, 0),
        interpolation="nearest",
    )
    for r in range(grid.rows + 1):
        ax.plot([0, grid.cols], [r, r], color=const.VIS_CELL_EDGE_COLOR, lw=const.VIS_CELL_EDGE_LW)
    for c in range(grid.cols + 1):
        ax.plot([c, c], [0, grid.rows], color=const.VIS_CELL_EDGE_COLOR, lw=const.VIS_CELL_EDGE_LW)


def _draw_visited(ax: plt.Axes, visited: np.ndarray) -> int:
    """Marks rooms visited by the reachability search with green dots."""
    count = 0
    for r, c in np.argwhere(visited):
        ax.add_patch(
            mpatches.Circle((c + 0.5, r + 0.5), const.VIS_VISITED_RADIUS, color=const.VIS_VISITED_COLOR)
        )
        count += 1
    return count


def _draw_distances(ax: plt.Axes, distances: np.ndarray):
    """Writes each room's distance to the nearest exit at its centre."""
    for (r, c), dist in np.ndenumerate(distances):
        ax.text(
            c + 0.5,
            r + 0.5,
            str(dist),
            ha="center",
            va="center",
            fontsize=const.VIS_DISTANCE_FONT_SIZE,
        )


def _draw_path(ax: plt.Axes, start: Tuple[int, int], path: Sequence[Direction]):
    """Draws the path from start with small magenta dots, one per room left."""
    cells = follow_path(start, path)
    for r, c in cells[:-1]:
        ax.add_patch(
            mpatches.Circle((c + 0.5, r + 0.5), const.VIS_PATH_RADIUS, color=const.VIS_PATH_COLOR)
        )
    xs = [c + 0.5 for _, c in cells]
    ys = [r + 0.5 for r, _ in cells]
    ax.plot(xs, ys, color=const.VIS_PATH_COLOR, lw=1.0, alpha=0.6)


# --- Main Visualization Functions ---

def visualize_maze_solution(
    solver: MazeSolver,
    filename: str = "maze_solution.png",
    path: Optional[List[Direction]] = None,
    title: Optional[str] = None,
) -> str:
    """
    Draws the maze: rooms coloured by kind, rooms visited by the last
    reachability search, distances (once computed) and the given path.
    """
    print(f"--- Generating Maze Solution Visualization: {filename} ---")
    grid = solver.grid
    fig, ax = _setup_grid_plot(grid)
    _draw_rooms(ax, grid)
    visited_count = _draw_visited(ax, solver.visited)
    print(f"  Marked {visited_count} visited rooms.")

    distances = solver.distances
    if distances is not None:
        _draw_distances(ax, distances)
    if path:
        print(f"  Visualizing solution path ({len(path)} moves)...")
        _draw_path(ax, grid.start_coordinates(), path)

    ax.set_title(title or f"Maze {grid.rows}x{grid.cols}")
    plt.savefig(filename, dpi=const.VIS_DPI, bbox_inches="tight")
    plt.close(fig)
    print(f"  Solution visualization saved to {filename}")
    return filename


def visualize_distance_field(solver: MazeSolver, filename: str = "maze_distances.png") -> str:
    """Colours each room by its distance to the nearest exit; unreachable rooms grey."""
    print(f"--- Generating Distance Field Visualization: {filename} ---")
    grid = solver.grid
    distances = solver.distances
    if distances is None:
        distances = solver.compute_distances()

    reachable = distances != const.UNREACHABLE
    reachable_count = int(np.count_nonzero(reachable))
    max_distance = int(distances.max()) if reachable_count else 0
    print(f"  {reachable_count}/{grid.size()} rooms reach an exit (max distance {max_distance}).")

    fig, ax = _setup_grid_plot(grid)
    cmap = matplotlib.colormaps[const.VIS_DISTANCE_CMAP].copy()
    cmap.set_bad(const.VIS_UNREACHABLE_COLOR)
    norm = mcolors.Normalize(vmin=0, vmax=max(1, max_distance))
    image = ax.imshow(
        np.ma.masked_where(~reachable, distances),
        cmap=cmap,
        norm=norm,
        extent=(0, grid.cols, grid.rows, 0),
        interpolation="nearest",
    )
    cbar = plt.colorbar(image, ax=ax, shrink=0.7, aspect=20, pad=0.04)
    cbar.set_label("Distance to Nearest Exit")
    if reachable_count < grid.size():
        cbar.ax.set_title("Grey = Unreachable", fontsize=8, color="red")

    ax.set_title(f"Distance Field ({reachable_count}/{grid.size()} Reachable)")
    plt.savefig(filename, dpi=const.VIS_DPI, bbox_inches="tight")
    plt.close(fig)
    print(f"  Distance field visualization saved to {filename}")
    return filename
