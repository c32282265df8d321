"""Tests for Dijkstra grid pathfinding."""
import pytest
from gameai.core.dijkstra import Dijkstra, GridStepAdjacents, find_path

MOVES = {"W": (0, -1), "E": (0, 1), "N": (-1, 0), "S": (1, 0)}


def walk(grid, start, path):
    """Apply moves to start, asserting every visited cell is empty."""
    j, i = start
    for move in path:
        dj, di = MOVES[move]
        j, i = j + dj, i + di
        assert grid[j][i] == 0
    return (j, i)


@pytest.fixture
def walled_grid():
    """3x3 grid with a wall down the middle column, open at the bottom."""
    return [
        [0, 1, 0],
        [0, 1, 0],
        [0, 0, 0],
    ]


class TestGridStepAdjacents:
    """Test cases for grid step generation."""

    def test_directions_in_order(self):
        """Test that steps are produced west, east, north, south."""
        adjacents = GridStepAdjacents([[0] * 3 for _ in range(3)])

        steps = adjacents((1, 1))

        assert [s.direction for s in steps] == ["W", "E", "N", "S"]
        assert [s.key for s in steps] == [(1, 0), (1, 2), (0, 1), (2, 1)]
        assert all(s.cost == 10 for s in steps)

    def test_blocked_cells_skipped(self, walled_grid):
        """Test that walls produce no steps."""
        steps = GridStepAdjacents(walled_grid)((0, 0))

        assert [s.direction for s in steps] == ["S"]


class TestDijkstra:
    """Test cases for Dijkstra search."""

    def test_open_grid_cost(self):
        """Test the path length and cost on an open grid."""
        grid = [[0] * 3 for _ in range(3)]

        result = find_path(grid, (0, 0), (2, 2))

        assert result.found
        assert result.cost == 40
        assert len(result.path) == 4
        assert walk(grid, (0, 0), result.path) == (2, 2)

    def test_path_around_wall(self, walled_grid):
        """Test that the only shortest path around a wall is found."""
        result = find_path(walled_grid, (0, 0), (0, 2))

        assert result.path == ["S", "S", "E", "E", "N", "N"]
        assert result.cost == 60

    def test_unreachable_target(self):
        """Test that an enclosed target reports not found."""
        grid = [
            [0, 1],
            [1, 0],
        ]

        result = find_path(grid, (0, 0), (1, 1))

        assert not result.found
        assert result.path == []
        assert result.expanded == 1

    def test_start_is_target(self):
        """Test that start == target yields an empty found path."""
        result = find_path([[0, 0], [0, 0]], (1, 1), (1, 1))

        assert result.found
        assert result.path == []
        assert result.cost == 0

    def test_run_returns_moves(self, walled_grid):
        """Test the class interface and last_result."""
        search = Dijkstra(GridStepAdjacents(walled_grid))

        path = search.run((2, 2), (0, 2))

        assert path == ["N", "N"]
        assert search.last_result.cost == 20

    def test_out_of_bounds_rejected(self, walled_grid):
        """Test that start and target are validated."""
        with pytest.raises(ValueError):
            find_path(walled_grid, (0, 0), (3, 3))
        with pytest.raises(ValueError):
            find_path(walled_grid, (-1, 0), (0, 0))

    def test_non_square_rejected(self):
        """Test that a non-square grid is rejected."""
        with pytest.raises(ValueError):
            find_path([[0, 0, 0], [0, 0, 0]], (0, 0), (1, 1))

    def test_to_dict(self, walled_grid):
        """Test result conversion."""
        data = find_path(walled_grid, (2, 2), (2, 0)).to_dict()

        assert data == {"path": ["W", "W"], "cost": 20, "found": True, "expanded": data["expanded"]}
