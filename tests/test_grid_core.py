#!/usr/bin/env python3
"""
Unit tests for the maze grid: validation, lookups and canonical start/exit.
"""

import unittest
import numpy as np
import sys
import os

# Add the project root to the path
sys.path.insert(0, os.path.join(os.path.dirname(__file__), '..'))

from grid_core import CellKind, Direction, MazeGrid
from errors import InvalidMazeError, MazeError, NoExitFound, NoStartFound


SAMPLE = ["S...*", "***.*", "....E"]


class TestMazeGridConstruction(unittest.TestCase):
    """Grid construction and rejection of malformed layouts."""

    def test_dimensions(self):
        grid = MazeGrid(SAMPLE)
        self.assertEqual(grid.rows, 3)
        self.assertEqual(grid.cols, 5)
        self.assertEqual(grid.shape, (3, 5))
        self.assertEqual(grid.size(), 15)

    def test_accepts_nested_lists_and_arrays(self):
        from_lists = MazeGrid([list(row) for row in SAMPLE])
        from_array = MazeGrid(np.array([list(row) for row in SAMPLE]))
        self.assertEqual(from_lists, MazeGrid(SAMPLE))
        self.assertEqual(from_array, MazeGrid(SAMPLE))

    def test_rejects_empty_maze(self):
        with self.assertRaises(InvalidMazeError):
            MazeGrid([])
        with self.assertRaises(InvalidMazeError):
            MazeGrid([""])

    def test_rejects_ragged_rows(self):
        with self.assertRaises(InvalidMazeError) as ctx:
            MazeGrid(["S..", "..", "..E"])
        self.assertIn("row 1", str(ctx.exception))

    def test_rejects_unknown_symbol(self):
        with self.assertRaises(InvalidMazeError) as ctx:
            MazeGrid(["S.X", "..E"])
        self.assertIn("(0, 2)", str(ctx.exception))

    def test_rejects_combined_start_and_exit_cell(self):
        # A single room cannot be both START and EXIT
        with self.assertRaises(InvalidMazeError):
            MazeGrid([["SE"]])
        with self.assertRaises(InvalidMazeError):
            MazeGrid(["B"])

    def test_rejects_bare_string(self):
        with self.assertRaises(InvalidMazeError):
            MazeGrid("S.E")

    def test_rejects_non_2d_array(self):
        with self.assertRaises(InvalidMazeError):
            MazeGrid(np.array(["S", "E"]))

    def test_invalid_maze_error_is_value_error(self):
        self.assertTrue(issubclass(InvalidMazeError, ValueError))
        self.assertTrue(issubclass(InvalidMazeError, MazeError))

    def test_rooms_are_read_only(self):
        grid = MazeGrid(SAMPLE)
        with self.assertRaises(ValueError):
            grid.rooms[0, 1] = "*"
        self.assertEqual(grid.to_lines(), SAMPLE)


class TestMazeGridLookups(unittest.TestCase):
    """Room lookups, bounds and canonical coordinates."""

    def setUp(self):
        self.grid = MazeGrid(SAMPLE)

    def test_in_bounds(self):
        self.assertTrue(self.grid.in_bounds(0, 0))
        self.assertTrue(self.grid.in_bounds(2, 4))
        self.assertFalse(self.grid.in_bounds(-1, 0))
        self.assertFalse(self.grid.in_bounds(0, 5))
        self.assertFalse(self.grid.in_bounds(3, 0))

    def test_get_room(self):
        self.assertEqual(self.grid.get_room(0, 0), CellKind.START)
        self.assertEqual(self.grid.get_room(0, 4), CellKind.WALL)
        self.assertEqual(self.grid.get_room(0, 1), CellKind.EMPTY)
        self.assertEqual(self.grid.get_room(2, 4), CellKind.EXIT)
        self.assertIsNone(self.grid.get_room(5, 5))

    def test_wall_and_exit_predicates(self):
        self.assertTrue(self.grid.is_wall(1, 0))
        self.assertFalse(self.grid.is_wall(1, 3))
        self.assertFalse(self.grid.is_wall(-1, 0))
        self.assertTrue(self.grid.is_exit(2, 4))
        self.assertFalse(self.grid.is_exit(0, 0))

    def test_find_all_is_row_major(self):
        self.assertEqual(self.grid.find_all(CellKind.WALL), [(0, 4), (1, 0), (1, 1), (1, 2), (1, 4)])
        self.assertEqual(self.grid.count(CellKind.WALL), 5)

    def test_canonical_coordinates(self):
        self.assertEqual(self.grid.start_coordinates(), (0, 0))
        self.assertEqual(self.grid.exit_coordinates(), (2, 4))

    def test_first_start_and_exit_in_scan_order_are_canonical(self):
        grid = MazeGrid(["E.S", "S.E"])
        self.assertEqual(grid.start_coordinates(), (0, 2))
        self.assertEqual(grid.exit_coordinates(), (0, 0))

    def test_missing_start_or_exit(self):
        with self.assertRaises(NoStartFound):
            MazeGrid(["..E"]).start_coordinates()
        with self.assertRaises(NoExitFound):
            MazeGrid(["S.."]).exit_coordinates()

    def test_str(self):
        self.assertEqual(str(self.grid), "S...*\n***.*\n....E")
        self.assertEqual(repr(self.grid), "MazeGrid(3x5)")


class TestDirection(unittest.TestCase):
    """Direction order and movement."""

    def test_priority_order(self):
        self.assertEqual(list(Direction), [Direction.UP, Direction.RIGHT, Direction.DOWN, Direction.LEFT])

    def test_step(self):
        self.assertEqual(Direction.UP.step(2, 2), (1, 2))
        self.assertEqual(Direction.RIGHT.step(2, 2), (2, 3))
        self.assertEqual(Direction.DOWN.step(2, 2), (3, 2))
        self.assertEqual(Direction.LEFT.step(2, 2), (2, 1))
        self.assertEqual(Direction.LEFT.delta, (0, -1))
        self.assertEqual(str(Direction.DOWN), "DOWN")


if __name__ == '__main__':
    unittest.main()
