"""Tests for flood fill over grids and trees."""
import random

import pytest
from gameai.core.flood_fill import (
    GridAdjacents,
    StochasticGridAdjacents,
    TreeAdjacents,
    FloodFillRecursive,
    FloodFillIterative,
    fill_grid,
    fill_tree,
)
from gameai.core.open_list import Queue, Stack, get_open_list
from gameai.core.tree_search import TreeNode

METHODS = ["recursive", "queue", "stack"]


@pytest.fixture
def grid():
    """3x3 grid with a three-cell region in the top-left."""
    return [
        [0, 0, 1],
        [1, 0, 1],
        [0, 1, 0],
    ]


class TestOpenList:
    """Test cases for queue and stack wrappers."""

    def test_queue_is_fifo(self):
        """Test queue pop order."""
        q = Queue()
        for item in (1, 2, 3):
            q.push(item)

        assert [q.pop(), q.pop(), q.pop()] == [1, 2, 3]
        assert q.is_empty()

    def test_stack_is_lifo(self):
        """Test stack pop order."""
        s = Stack()
        for item in (1, 2, 3):
            s.push(item)

        assert [s.pop(), s.pop(), s.pop()] == [3, 2, 1]

    def test_clear(self):
        """Test that clear empties the list."""
        s = Stack()
        s.push(1)
        s.clear()

        assert s.is_empty()
        assert len(s) == 0

    def test_unknown_name(self):
        """Test that an unknown open list name is rejected."""
        with pytest.raises(ValueError):
            get_open_list("heap")


class TestGridAdjacents:
    """Test cases for grid neighbour functors."""

    def test_order_west_east_north_south(self):
        """Test neighbour order on an open grid."""
        adjacents = GridAdjacents([[0] * 3 for _ in range(3)])

        assert adjacents((1, 1)) == [(1, 0), (1, 2), (0, 1), (2, 1)]

    def test_skips_blocked_and_edges(self, grid):
        """Test that blocked cells and off-grid cells are not returned."""
        adjacents = GridAdjacents(grid)

        assert adjacents((0, 0)) == [(0, 1)]
        assert adjacents((1, 1)) == [(0, 1)]

    def test_outside_key(self, grid):
        """Test that a key outside the grid has no neighbours."""
        assert GridAdjacents(grid)((5, 5)) == []

    def test_non_square_rejected(self):
        """Test that a non-square grid is rejected."""
        with pytest.raises(ValueError):
            GridAdjacents([[0, 0], [0]])

    def test_stochastic_same_set(self):
        """Test that shuffled neighbours are the same cells."""
        grid = [[0] * 3 for _ in range(3)]
        adjacents = StochasticGridAdjacents(grid, random.Random(3))

        assert sorted(adjacents((1, 1))) == sorted(GridAdjacents(grid)((1, 1)))


class TestFillGrid:
    """Test cases for grid flood fill."""

    @pytest.mark.parametrize("method", METHODS)
    def test_fills_connected_region(self, grid, method):
        """Test that only the connected empty region is painted."""
        filled = fill_grid(grid, (0, 0), 2, method=method)

        assert filled == 3
        assert grid == [
            [2, 2, 1],
            [1, 2, 1],
            [0, 1, 0],
        ]

    @pytest.mark.parametrize("method", METHODS)
    def test_stochastic_fills_same_region(self, method):
        """Test that shuffling the neighbour order does not change the result."""
        grid = [[0] * 4 for _ in range(4)]
        grid[1][1] = 9

        filled = fill_grid(grid, (0, 0), 5, method=method, stochastic=True, rng=random.Random(7))

        assert filled == 15
        assert grid[1][1] == 9
        assert all(cell == 5 for row in grid for cell in row if cell != 9)

    def test_isolated_start_is_filled(self, grid):
        """Test that an empty start cell with no empty neighbours is still painted."""
        filled = fill_grid(grid, (2, 0), 7)

        assert filled == 1
        assert grid[2][0] == 7

    def test_open_grid_iterative(self):
        """Test that queue and stack fills cover an open grid."""
        for method in ("queue", "stack"):
            grid = [[0] * 5 for _ in range(5)]
            assert fill_grid(grid, (2, 2), 1, method=method) == 25

    def test_zero_color_rejected(self, grid):
        """Test that painting with the empty value is rejected."""
        with pytest.raises(ValueError):
            fill_grid(grid, (0, 0), 0)

    def test_start_outside_rejected(self, grid):
        """Test that a start outside the grid is rejected."""
        with pytest.raises(ValueError):
            fill_grid(grid, (3, 0), 2)

    def test_unknown_method_rejected(self, grid):
        """Test that an unknown method is rejected."""
        with pytest.raises(ValueError):
            fill_grid(grid, (0, 0), 2, method="spiral")

    def test_recursive_size_limit(self):
        """Test that the recursive method refuses grids above the limit."""
        grid = [[0] * 30 for _ in range(30)]

        with pytest.raises(ValueError):
            fill_grid(grid, (0, 0), 1, method="recursive", max_recursive_cells=625)

    def test_recursive_default_limit(self):
        """Test that the recursive method is limited without an explicit cap."""
        grid = [[0] * 60 for _ in range(60)]

        with pytest.raises(ValueError):
            fill_grid(grid, (0, 0), 1, method="recursive")

        assert grid[0][0] == 0
        assert fill_grid(grid, (0, 0), 1, method="queue") == 3600

    def test_fillers_report_count(self, grid):
        """Test that the fill classes count painted cells."""
        assert FloodFillRecursive(GridAdjacents(grid)).run((0, 0), 3) == 3
        assert FloodFillIterative(GridAdjacents(grid), "stack").run((0, 0), 3) == 0


class TestFillTree:
    """Test cases for tree flood fill."""

    TREE = "r {3 x {1 x {0 } } y {1 x {0 } } x {0 } } "

    def test_tree_adjacents(self):
        """Test that only children holding the fill mark are returned."""
        root = TreeNode.from_string(self.TREE)

        assert [c.value for c in TreeAdjacents()(root)] == ["x", "x"]

    @pytest.mark.parametrize("method", METHODS)
    def test_fills_reachable_marks(self, method):
        """Test that marks below a non-mark node are not reached."""
        root = TreeNode.from_string(self.TREE)

        filled = fill_tree(root, "o", method=method)

        assert filled == 3
        assert root.to_string() == "r {3 o {1 o {0 } } y {1 x {0 } } o {0 } } "

    def test_stochastic_tree_fill(self):
        """Test that the shuffled variant paints the same nodes."""
        root = TreeNode.from_string(self.TREE)

        assert fill_tree(root, "o", stochastic=True, rng=random.Random(1)) == 3

    def test_fill_with_mark_rejected(self):
        """Test that painting with the fill mark itself is rejected."""
        with pytest.raises(ValueError):
            fill_tree(TreeNode.from_string(self.TREE), "x")
