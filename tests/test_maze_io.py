#!/usr/bin/env python3
"""
Unit tests for maze file loading, saving and text rendering.
"""

import tempfile
import unittest
import sys
import os

# Add the project root to the path
PROJECT_ROOT = os.path.join(os.path.dirname(__file__), '..')
sys.path.insert(0, PROJECT_ROOT)

from errors import InvalidMazeError
from grid_core import MazeGrid
from maze_io import dump_maze, format_maze, load_maze, parse_maze, save_maze
from solver import MazeSolver
from utils import format_path, path_cells

MAZES_DIR = os.path.join(PROJECT_ROOT, 'mazes')
SAMPLE_TEXT = "3 5\nS...*\n***.*\n....E\n"


class TestParseMaze(unittest.TestCase):
    """Parsing the 'rows cols' header format."""

    def test_parse_sample(self):
        grid = parse_maze(SAMPLE_TEXT)
        self.assertEqual(grid.to_lines(), ["S...*", "***.*", "....E"])

    def test_trailing_blank_lines_and_crlf(self):
        grid = parse_maze("2 3\r\nS..\r\n..E\r\n\r\n\n")
        self.assertEqual(grid.shape, (2, 3))

    def test_bad_header(self):
        for text in ("", "3\nS..", "a b\nS..", "0 3\n", "3 5 7\nS..."):
            with self.subTest(text=text):
                with self.assertRaises(InvalidMazeError):
                    parse_maze(text)

    def test_row_count_mismatch(self):
        with self.assertRaises(InvalidMazeError) as ctx:
            parse_maze("3 3\nS..\n..E\n")
        self.assertIn("Line 4", str(ctx.exception))
        self.assertIn("3 rows", str(ctx.exception))

    def test_extra_row_names_its_line(self):
        with self.assertRaises(InvalidMazeError) as ctx:
            parse_maze("2 3\nS..\n..E\n...\n")
        self.assertIn("Line 4", str(ctx.exception))
        self.assertIn("'...'", str(ctx.exception))

    def test_row_width_mismatch(self):
        with self.assertRaises(InvalidMazeError) as ctx:
            parse_maze("2 3\nS..\n.E\n")
        self.assertIn("Line 3", str(ctx.exception))

    def test_unknown_symbol(self):
        with self.assertRaises(InvalidMazeError):
            parse_maze("1 3\nS#E\n")


class TestMazeFiles(unittest.TestCase):
    """Loading the bundled mazes and writing mazes back out."""

    def test_load_bundled_mazes(self):
        maze0 = load_maze(os.path.join(MAZES_DIR, 'maze0.txt'))
        self.assertEqual(maze0, parse_maze(SAMPLE_TEXT))
        self.assertTrue(MazeSolver(load_maze(os.path.join(MAZES_DIR, 'maze1.txt'))).solve().solvable)
        self.assertFalse(MazeSolver(load_maze(os.path.join(MAZES_DIR, 'maze2.txt'))).solve().solvable)

    def test_save_then_load(self):
        grid = parse_maze(SAMPLE_TEXT)
        with tempfile.TemporaryDirectory() as tmp:
            filename = os.path.join(tmp, 'nested', 'maze.txt')
            save_maze(grid, filename)
            self.assertEqual(load_maze(filename), grid)

    def test_dump_format(self):
        self.assertEqual(dump_maze(parse_maze(SAMPLE_TEXT)), SAMPLE_TEXT)

    def test_non_utf8_file(self):
        with tempfile.TemporaryDirectory() as tmp:
            filename = os.path.join(tmp, 'binary.txt')
            with open(filename, 'wb') as f:
                f.write(b'1 3\nS\xff E\n')
            with self.assertRaises(InvalidMazeError) as ctx:
                load_maze(filename)
            self.assertIn("not valid UTF-8", str(ctx.exception))
            self.assertIsInstance(ctx.exception.__cause__, UnicodeDecodeError)

    def test_missing_file(self):
        with self.assertRaises(OSError):
            load_maze(os.path.join(MAZES_DIR, 'does_not_exist.txt'))


class TestFormatMaze(unittest.TestCase):
    """Debug text rendering."""

    def setUp(self):
        self.grid = MazeGrid(["S...*", "***.*", "....E"])
        self.solver = MazeSolver(self.grid)
        self.solver.is_reachable(0, 0)

    def test_plain(self):
        self.assertEqual(format_maze(self.grid), "S...*\n***.*\n....E")

    def test_visited_rooms(self):
        self.assertEqual(
            format_maze(self.grid, self.solver.visited), "Sooo*\n***o*\n...oE"
        )

    def test_path_rooms(self):
        path = self.solver.shortest_path()
        cells = path_cells(self.grid.start_coordinates(), path)
        self.assertEqual(
            format_maze(self.grid, self.solver.visited, cells), "S+++*\n***+*\n...+E"
        )

    def test_format_path(self):
        self.assertEqual(format_path(self.solver.shortest_path()), "[RIGHT, RIGHT, RIGHT, DOWN, DOWN, RIGHT]")
        self.assertEqual(format_path([]), "[]")


if __name__ == '__main__':
    unittest.main()
