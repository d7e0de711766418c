# mesh_builder.py

import numpy as np
import trimesh
import trimesh.creation
from typing import List, Optional, Sequence

import constants as const

# Import from other project modules
from grid_core import Coord, MazeGrid
from geometry import cell_center, extract_wall_rects, rect_bounds


def _box(x_min: float, y_min: float, x_max: float, y_max: float,
         z_min: float, z_max: float) -> trimesh.Trimesh:
    """Axis-aligned box mesh spanning the given bounds."""
    extents = [x_max - x_min, y_max - y_min, z_max - z_min]
    box = trimesh.creation.box(extents=extents)
    box.apply_translation(
        [(x_min + x_max) / 2.0, (y_min + y_max) / 2.0, (z_min + z_max) / 2.0]
    )
    return box


def _create_path_trail(
    path_cells: Sequence[Coord],
    rows: int,
    cell_size: float,
    trail_height: float,
    trail_width: float,
) -> List[trimesh.Trimesh]:
    """One flat box per move, joining consecutive room centres."""
    half_w = trail_width / 2.0
    segments: List[trimesh.Trimesh] = []
    for (r1, c1), (r2, c2) in zip(path_cells, path_cells[1:]):
        x1, y1 = cell_center(r1, c1, rows, cell_size)
        x2, y2 = cell_center(r2, c2, rows, cell_size)
        segments.append(
            _box(
                min(x1, x2) - half_w,
                min(y1, y2) - half_w,
                max(x1, x2) + half_w,
                max(y1, y2) + half_w,
                0.0,
                trail_height,
            )
        )
    return segments


def create_maze_mesh(
    grid: MazeGrid,
    path_cells: Optional[Sequence[Coord]] = None,
    cell_size: float = const.STL_CELL_SIZE,
    wall_height: float = const.STL_WALL_HEIGHT,
    base_thickness: float = const.STL_BASE_THICKNESS,
    path_height: float = const.STL_PATH_HEIGHT,
) -> trimesh.Trimesh:
    """
    Builds a printable mesh of the maze: a base slab with its top at z=0,
    one extruded block per wall rectangle, and optionally a low raised trail
    along the solution path.
    """
    if cell_size <= 0 or wall_height <= 0 or base_thickness < 0:
        raise ValueError("cell_size and wall_height must be positive, base_thickness non-negative.")

    width = grid.cols * cell_size
    depth = grid.rows * cell_size
    print(f"--- Building Maze Mesh ({grid.rows}x{grid.cols}, cell={cell_size:.2f}) ---")
    print(f"    Wall H={wall_height:.2f}, Base T={base_thickness:.2f}")

    meshes: List[trimesh.Trimesh] = []
    if base_thickness > 0:
        meshes.append(_box(0.0, 0.0, width, depth, -base_thickness, 0.0))

    rects = extract_wall_rects(grid)
    for rect in rects:
        x_min, y_min, x_max, y_max = rect_bounds(rect, grid.rows, cell_size)
        meshes.append(_box(x_min, y_min, x_max, y_max, 0.0, wall_height))

    if path_cells and len(path_cells) > 1 and path_height > 0:
        trail = _create_path_trail(
            path_cells,
            grid.rows,
            cell_size,
            path_height,
            cell_size * const.STL_PATH_WIDTH_RATIO,
        )
        print(f"  Adding solution trail ({len(trail)} segments)...")
        meshes.extend(trail)

    if not meshes:
        raise ValueError("Nothing to build: maze has no walls and base_thickness is 0.")

    combined = trimesh.util.concatenate(meshes)
    combined.merge_vertices()
    print(f"  Combined mesh: {len(combined.vertices)}V, {len(combined.faces)}F")
    return combined


def create_maze_stl(
    grid: MazeGrid,
    output_filename: str,
    path_cells: Optional[Sequence[Coord]] = None,
    **mesh_kwargs,
) -> trimesh.Trimesh:
    """Builds the maze mesh and exports it as STL."""
    print(f"\n--- Generating Maze STL: {output_filename} ---")
    mesh = create_maze_mesh(grid, path_cells=path_cells, **mesh_kwargs)
    extents = np.round(mesh.extents, 3)
    print(f"  Exporting {len(mesh.faces)} faces (extents {extents.tolist()}) to {output_filename}...")
    mesh.export(output_filename)
    print("  Export complete.")
    return mesh
