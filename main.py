# main.py
import argparse
import os
import random
import sys
import time
import traceback
from typing import List, Optional

# Import project modules
import constants as const
from errors import MazeError
from grid_core import MazeGrid
from maze_gen import generate_random_maze
from maze_io import load_maze, print_maze
from mesh_builder import create_maze_stl
from solver import MazeSolver, SolveResult
from utils import path_cells
from visualization import visualize_distance_field, visualize_maze_solution


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="Solve grid mazes: reachability, distance field and shortest path."
    )
    parser.add_argument("files", nargs="*", help="Maze text files to solve (default: one random maze)")
    parser.add_argument("--rows", type=int, default=const.DEFAULT_ROWS, help="Rows of the random maze")
    parser.add_argument("--cols", type=int, default=const.DEFAULT_COLS, help="Columns of the random maze")
    parser.add_argument(
        "--percent-walls",
        type=float,
        default=const.PERCENT_WALLS,
        help="Fraction of random maze rooms that are walls",
    )
    parser.add_argument("--seed", type=int, default=None, help="Seed for the random maze")
    parser.add_argument("--output-dir", default="output", help="Directory for images and STL files")
    parser.add_argument("--no-plots", action="store_true", help="Skip the matplotlib images")
    parser.add_argument("--stl", action="store_true", help="Export a 3D printable STL of each maze")
    parser.add_argument(
        "--relaxation",
        action="store_true",
        help="Use the relaxation flood fill instead of breadth-first search for distances",
    )
    return parser


def solve_and_report(
    grid: MazeGrid, name: str, args: argparse.Namespace
) -> SolveResult:
    """Solves one maze, prints it and writes the requested artefacts."""
    method = const.DISTANCE_METHOD_RELAXATION if args.relaxation else const.DISTANCE_METHOD_BFS
    solver = MazeSolver(grid, method=method)
    result = solver.solve()

    cells = path_cells(result.start, result.path) if result.path else None
    print_maze(grid, solver.visited, cells)

    if not args.no_plots:
        try:
            visualize_maze_solution(
                solver,
                filename=os.path.join(args.output_dir, f"{name}_solution.png"),
                path=result.path,
                title=f"{name}: {'solvable' if result.solvable else 'not solvable'}",
            )
            visualize_distance_field(
                solver, filename=os.path.join(args.output_dir, f"{name}_distances.png")
            )
        except Exception as e:
            print(f"An error occurred during visualization generation: {e}")
            traceback.print_exc()

    if args.stl:
        try:
            create_maze_stl(grid, os.path.join(args.output_dir, f"{name}.stl"), path_cells=cells)
        except Exception as e:
            print(f"An error occurred during STL generation: {e}")
            traceback.print_exc()
    return result


def main(argv: Optional[List[str]] = None) -> int:
    args = build_parser().parse_args(argv)
    start_time = time.time()
    if args.stl or not args.no_plots:
        os.makedirs(args.output_dir, exist_ok=True)
    failures = 0

    if not args.files:
        print("Random maze...")
        rng = random.Random(args.seed)
        try:
            grid = generate_random_maze(args.rows, args.cols, args.percent_walls, rng=rng)
            solve_and_report(grid, "random", args)
        except (MazeError, ValueError) as e:
            print(f"ERROR: {e}")
            failures += 1

    for filename in args.files:
        name = os.path.splitext(os.path.basename(filename))[0]
        try:
            grid = load_maze(filename)
            solve_and_report(grid, name, args)
        except (MazeError, OSError) as e:
            print(f"ERROR {filename}: {e}")
            failures += 1

    end_time = time.time()
    print(f"\n--- Total Execution Time: {end_time - start_time:.2f} seconds ---")
    return 1 if failures else 0


if __name__ == "__main__":
    sys.exit(main())
