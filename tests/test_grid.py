#!/usr/bin/env python3
"""Tests for Grid and flood_fill.

Run with: pytest tests/test_grid.py -v
"""

import random
import sys
from pathlib import Path

sys.path.insert(0, str(Path(__file__).parent.parent))

import pytest
from bear_tui.grid import Grid, flood_fill


def connected_region(rows, start):
    """Cells 4-connected to start through its color (reference, breadth-first)."""
    target = rows[start[0]][start[1]]
    seen = {start}
    frontier = [start]
    while frontier:
        next_frontier = []
        for r, c in frontier:
            for nr, nc in ((r + 1, c), (r - 1, c), (r, c + 1), (r, c - 1)):
                if (0 <= nr < len(rows) and 0 <= nc < len(rows[0])
                        and (nr, nc) not in seen and rows[nr][nc] == target):
                    seen.add((nr, nc))
                    next_frontier.append((nr, nc))
        frontier = next_frontier
    return seen


def random_grid(rng, rows, cols, colors="AB"):
    return Grid.from_rows([[rng.choice(colors) for _ in range(cols)] for _ in range(rows)])


class TestGridBasics:
    """Construction, access and dimensions."""

    def test_uniform_grid(self):
        grid = Grid(4, 3, "brown")
        assert grid.shape == (4, 3)
        assert grid.rows == 4 and grid.cols == 3
        assert grid.count("brown") == 12

    def test_row_major_indexing(self):
        grid = Grid.from_rows([["a", "b", "c"], ["d", "e", "f"]])
        assert grid[0, 2] == "c"
        assert grid[1, 0] == "d"
        grid[1, 2] = "z"
        assert grid.to_rows() == [["a", "b", "c"], ["d", "e", "z"]]

    def test_dimensions_are_read_only(self):
        grid = Grid(2, 2, "A")
        with pytest.raises(AttributeError):
            grid.rows = 5
        with pytest.raises(AttributeError):
            grid.cols = 5

    @pytest.mark.parametrize("rows,cols", [(0, 3), (3, 0), (-1, 2)])
    def test_rejects_empty_dimensions(self, rows, cols):
        with pytest.raises(ValueError):
            Grid(rows, cols, "A")

    def test_from_rows_rejects_ragged(self):
        with pytest.raises(ValueError):
            Grid.from_rows([["A", "B"], ["A"]])

    def test_from_rows_rejects_empty(self):
        with pytest.raises(ValueError):
            Grid.from_rows([])

    def test_negative_index_does_not_wrap(self):
        grid = Grid(3, 3, "A")
        with pytest.raises(IndexError):
            grid[-1, 0]
        with pytest.raises(IndexError):
            grid[0, 3] = "B"

    def test_to_rows_is_a_copy(self):
        grid = Grid(2, 2, "A")
        rows = grid.to_rows()
        rows[0][0] = "B"
        assert grid[0, 0] == "A"

    def test_paint_all(self):
        grid = Grid.from_rows([["A", "B"], ["C", "D"]])
        grid.paint_all("E")
        assert grid == Grid(2, 2, "E")
        assert grid.shape == (2, 2)

    def test_iterates_rows(self):
        grid = Grid.from_rows([["A", "B"], ["C", "D"]])
        assert list(grid) == [["A", "B"], ["C", "D"]]


class TestFloodFillScenarios:
    """Hand-picked fills."""

    def test_uniform_grid_fills_everything(self):
        grid = Grid(3, 3, "A")
        flood_fill(grid, 1, 1, "B")
        assert grid == Grid(3, 3, "B")

    def test_corner_surrounded_by_other_color(self):
        """Corners A, center and edges B: only the tapped corner changes."""
        grid = Grid.from_rows([
            ["A", "B", "A"],
            ["B", "B", "B"],
            ["A", "B", "A"],
        ])
        flood_fill(grid, 0, 0, "C")
        assert grid.to_rows() == [
            ["C", "B", "A"],
            ["B", "B", "B"],
            ["A", "B", "A"],
        ]

    def test_checkerboard_only_start_cell(self):
        grid = Grid.from_rows([
            ["A", "B", "A"],
            ["B", "A", "B"],
            ["A", "B", "A"],
        ])
        flood_fill(grid, 1, 1, "C")
        assert grid.count("C") == 1
        assert grid[1, 1] == "C"

    def test_diagonal_neighbours_do_not_connect(self):
        grid = Grid.from_rows([
            ["A", "B"],
            ["B", "A"],
        ])
        flood_fill(grid, 0, 0, "C")
        assert grid.to_rows() == [["C", "B"], ["B", "A"]]

    def test_disconnected_regions_stay_separate(self):
        """Two A patches split by a B wall: filling one leaves the other."""
        grid = Grid.from_rows([
            ["A", "A", "B", "A", "A"],
            ["A", "A", "B", "A", "A"],
            ["A", "A", "B", "A", "A"],
        ])
        flood_fill(grid, 1, 0, "C")
        assert grid.to_rows() == [
            ["C", "C", "B", "A", "A"],
            ["C", "C", "B", "A", "A"],
            ["C", "C", "B", "A", "A"],
        ]

    def test_winding_path(self):
        grid = Grid.from_rows([
            ["A", "A", "A", "A"],
            ["B", "B", "B", "A"],
            ["A", "A", "A", "A"],
            ["A", "B", "B", "B"],
        ])
        flood_fill(grid, 3, 0, "C")
        assert grid.count("A") == 0
        assert grid.count("B") == 6

    def test_method_form(self):
        grid = Grid(2, 3, "A")
        grid.flood_fill(0, 0, "B")
        assert grid == Grid(2, 3, "B")

    def test_returns_none(self):
        assert flood_fill(Grid(2, 2, "A"), 0, 0, "B") is None

    def test_single_cell_grid(self):
        grid = Grid(1, 1, "A")
        flood_fill(grid, 0, 0, "B")
        assert grid[0, 0] == "B"


class TestFloodFillNoOps:
    """Same-color fills and out-of-bounds taps change nothing and never raise."""

    def test_same_color_is_noop(self):
        grid = Grid.from_rows([["A", "B"], ["B", "A"]])
        before = grid.to_rows()
        flood_fill(grid, 0, 1, "B")
        assert grid.to_rows() == before

    @pytest.mark.parametrize("row,col", [(-1, 0), (0, -1), (3, 0), (0, 4), (99, 99), (-5, -5)])
    def test_out_of_bounds_is_noop(self, row, col):
        grid = Grid.from_rows([["A", "B", "C", "D"]] * 3)
        before = grid.to_rows()
        flood_fill(grid, row, col, "Z")
        assert grid.to_rows() == before

    def test_second_fill_is_noop(self):
        grid = Grid.from_rows([
            ["A", "A", "B"],
            ["B", "A", "B"],
        ])
        flood_fill(grid, 0, 0, "C")
        after_first = grid.to_rows()
        flood_fill(grid, 1, 1, "C")
        assert grid.to_rows() == after_first


class TestFloodFillProperties:
    """Compare against a reference region search on random grids."""

    @pytest.mark.parametrize("seed", range(25))
    def test_fills_exactly_the_connected_region(self, seed):
        rng = random.Random(seed)
        rows, cols = rng.randint(1, 10), rng.randint(1, 10)
        grid = random_grid(rng, rows, cols, colors="ABC")
        before = grid.to_rows()
        start = (rng.randrange(rows), rng.randrange(cols))

        flood_fill(grid, start[0], start[1], "Z")

        region = connected_region(before, start)
        for r in range(rows):
            for c in range(cols):
                if (r, c) in region:
                    assert grid[r, c] == "Z"
                else:
                    assert grid[r, c] == before[r][c]

    def test_large_uniform_grid_has_no_depth_limit(self):
        """A work-list fill handles grids far larger than any bear part."""
        grid = Grid(300, 300, "A")
        flood_fill(grid, 150, 150, "B")
        assert grid.count("B") == 300 * 300
