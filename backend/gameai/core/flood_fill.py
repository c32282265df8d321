"""Flood fill over grids and trees with recursive and iterative strategies.

Both strategies are driven by a domain functor that returns the fillable
neighbours of a key and knows how to paint one:

- ``GridAdjacents``: square int grid, ``0`` is an empty cell, keys are
  ``(j, i)`` (row, column).
- ``TreeAdjacents``: ``TreeNode`` tree, a child holding ``"x"`` is fillable.
"""
import logging
import random
from typing import Any, Hashable, List, Optional, Sequence, Tuple

from .open_list import get_open_list
from .tree_search import TreeNode

logger = logging.getLogger(__name__)

Key = Tuple[int, int]

EMPTY = 0
TREE_FILL_MARK = "x"

FILL_METHODS = ("recursive", "queue", "stack")

# Largest grid (25x25) the recursive fill accepts by default
MAX_RECURSIVE_CELLS = 625


class GridAdjacents:
    """Returns empty 4-neighbours of a grid cell (west, east, north, south)."""

    def __init__(self, grid: List[List[int]]):
        size = len(grid)
        if any(len(row) != size for row in grid):
            raise ValueError("Grid must be square")
        self.grid = grid
        self.size = size

    def in_bounds(self, key: Key) -> bool:
        j, i = key
        return 0 <= j < self.size and 0 <= i < self.size

    def is_fillable(self, key: Key) -> bool:
        return self.in_bounds(key) and self.grid[key[0]][key[1]] == EMPTY

    def paint(self, key: Key, color: int) -> None:
        self.grid[key[0]][key[1]] = color

    def __call__(self, key: Key) -> List[Key]:
        if not self.in_bounds(key):
            return []
        j, i = key
        candidates = [(j, i - 1), (j, i + 1), (j - 1, i), (j + 1, i)]
        return [c for c in candidates if self.is_fillable(c)]


class StochasticGridAdjacents(GridAdjacents):
    """GridAdjacents with the neighbour order shuffled."""

    def __init__(self, grid: List[List[int]], rng: Optional[random.Random] = None):
        super().__init__(grid)
        self._rng = rng or random.Random()

    def __call__(self, key: Key) -> List[Key]:
        adjacents = super().__call__(key)
        self._rng.shuffle(adjacents)
        return adjacents


class TreeAdjacents:
    """Returns the children of a node that still hold the fill mark."""

    def is_fillable(self, node: TreeNode) -> bool:
        return node.value == TREE_FILL_MARK

    def paint(self, node: TreeNode, color: Any) -> None:
        node.value = color

    def __call__(self, node: TreeNode) -> List[TreeNode]:
        return [child for child in node.children if self.is_fillable(child)]


class StochasticTreeAdjacents(TreeAdjacents):
    """TreeAdjacents with the child order shuffled."""

    def __init__(self, rng: Optional[random.Random] = None):
        self._rng = rng or random.Random()

    def __call__(self, node: TreeNode) -> List[TreeNode]:
        adjacents = super().__call__(node)
        self._rng.shuffle(adjacents)
        return adjacents


class FloodFillRecursive:
    """Depth-first flood fill through recursion."""

    def __init__(self, get_adjacents):
        self.get_adjacents = get_adjacents
        self.filled = 0

    def run(self, start: Hashable, color: Any) -> int:
        """Fill the region around start and return the number of painted cells."""
        self.filled = 0
        if self.get_adjacents.is_fillable(start):
            self.get_adjacents.paint(start, color)
            self.filled += 1
        self._fill(start, color)
        return self.filled

    def _fill(self, key: Hashable, color: Any) -> None:
        for adjacent in self.get_adjacents(key):
            self.get_adjacents.paint(adjacent, color)
            self.filled += 1
            self._fill(adjacent, color)


class FloodFillIterative:
    """Flood fill with an explicit open list; a queue fills breadth-first, a stack depth-first."""

    def __init__(self, get_adjacents, open_list: str = "queue"):
        self.get_adjacents = get_adjacents
        self.open_list = get_open_list(open_list)
        self.filled = 0

    def run(self, start: Hashable, color: Any) -> int:
        """Fill the region around start and return the number of painted cells."""
        self.filled = 0
        self.open_list.clear()
        if self.get_adjacents.is_fillable(start):
            self.get_adjacents.paint(start, color)
            self.filled += 1
        self.open_list.push(start)
        while not self.open_list.is_empty():
            current = self.open_list.pop()
            for adjacent in self.get_adjacents(current):
                self.get_adjacents.paint(adjacent, color)
                self.filled += 1
                self.open_list.push(adjacent)
        return self.filled


def make_filler(get_adjacents, method: str):
    """Create a fill strategy by method name."""
    if method == "recursive":
        return FloodFillRecursive(get_adjacents)
    if method in ("queue", "stack"):
        return FloodFillIterative(get_adjacents, method)
    raise ValueError(f"Invalid method. Must be one of: {list(FILL_METHODS)}")


def fill_grid(
    grid: List[List[int]],
    start: Sequence[int],
    color: int,
    method: str = "queue",
    stochastic: bool = False,
    rng: Optional[random.Random] = None,
    max_recursive_cells: Optional[int] = None,
) -> int:
    """
    Flood fill a square grid in place.

    Args:
        grid: Square grid, 0 marks an empty cell.
        start: (row, column) to start from.
        color: Value painted into the filled cells (must not be 0).
        method: "recursive", "queue" or "stack".
        stochastic: Shuffle neighbour order.
        rng: Random source for the stochastic variant.
        max_recursive_cells: Largest grid the recursive method accepts,
            MAX_RECURSIVE_CELLS when None.

    Returns:
        Number of cells painted.
    """
    if color == EMPTY:
        raise ValueError("Fill color must differ from the empty value 0")
    if stochastic:
        adjacents = StochasticGridAdjacents(grid, rng)
    else:
        adjacents = GridAdjacents(grid)
    key = (int(start[0]), int(start[1]))
    if not adjacents.in_bounds(key):
        raise ValueError(f"Start {key} is outside the {adjacents.size}x{adjacents.size} grid")
    if max_recursive_cells is None:
        max_recursive_cells = MAX_RECURSIVE_CELLS
    cells = adjacents.size * adjacents.size
    if method == "recursive" and cells > max_recursive_cells:
        raise ValueError(
            f"Grid of {cells} cells is too large for recursive fill (max {max_recursive_cells})"
        )

    filled = make_filler(adjacents, method).run(key, color)
    logger.debug("Grid fill from %s with %s (%s): %d cells", key, color, method, filled)
    return filled


def fill_tree(
    root: TreeNode,
    color: Any,
    method: str = "queue",
    stochastic: bool = False,
    rng: Optional[random.Random] = None,
) -> int:
    """Flood fill the "x" nodes reachable from root in place; returns the number painted."""
    if color == TREE_FILL_MARK:
        raise ValueError(f"Fill value must differ from the fill mark '{TREE_FILL_MARK}'")
    adjacents = StochasticTreeAdjacents(rng) if stochastic else TreeAdjacents()
    filled = make_filler(adjacents, method).run(root, color)
    logger.debug("Tree fill with %s (%s): %d nodes", color, method, filled)
    return filled
