"""Dijkstra's shortest path on a square grid of empty (0) and blocked cells."""
import heapq
import itertools
import logging
from dataclasses import dataclass, field
from typing import Dict, List, Optional, Sequence, Tuple

logger = logging.getLogger(__name__)

Key = Tuple[int, int]

STEP_COST = 10


@dataclass
class Step:
    """A move to a neighbouring cell."""
    key: Key
    cost: int
    direction: str


@dataclass
class SearchNode:
    """Open/closed list record."""
    key: Key
    g: int = 0
    direction: str = ""
    parent: Optional["SearchNode"] = None


@dataclass
class DijkstraResult:
    """Outcome of a single search."""
    path: List[str] = field(default_factory=list)
    cost: int = 0
    found: bool = False
    expanded: int = 0

    def to_dict(self) -> Dict:
        """Convert to dictionary."""
        return {
            "path": self.path,
            "cost": self.cost,
            "found": self.found,
            "expanded": self.expanded,
        }


class GridStepAdjacents:
    """Returns steps to the empty 4-neighbours of a cell (W, E, N, S)."""

    def __init__(self, grid: List[List[int]], step_cost: int = STEP_COST):
        size = len(grid)
        if any(len(row) != size for row in grid):
            raise ValueError("Grid must be square")
        self.grid = grid
        self.size = size
        self.step_cost = step_cost

    def in_bounds(self, key: Key) -> bool:
        j, i = key
        return 0 <= j < self.size and 0 <= i < self.size

    def __call__(self, key: Key) -> List[Step]:
        steps: List[Step] = []
        if not self.in_bounds(key):
            return steps
        j, i = key
        for dj, di, direction in ((0, -1, "W"), (0, 1, "E"), (-1, 0, "N"), (1, 0, "S")):
            nxt = (j + dj, i + di)
            if self.in_bounds(nxt) and self.grid[nxt[0]][nxt[1]] == 0:
                steps.append(Step(nxt, self.step_cost, direction))
        return steps


class Dijkstra:
    """Uniform-cost search that returns the moves from start to target."""

    def __init__(self, get_adjacents):
        self.get_adjacents = get_adjacents
        self.last_result: Optional[DijkstraResult] = None

    def run(self, start: Key, target: Key) -> List[str]:
        """
        Find the cheapest path from start to target.

        Args:
            start: (row, column) of the starting cell.
            target: (row, column) of the target cell.

        Returns:
            Direction characters of the path, empty when start equals
            target or when the target is unreachable (see last_result.found).
        """
        counter = itertools.count()
        open_nodes: Dict[Key, SearchNode] = {start: SearchNode(start)}
        heap: List[Tuple[int, int, Key]] = [(0, next(counter), start)]
        closed: Dict[Key, SearchNode] = {}
        current: Optional[SearchNode] = None

        while heap:
            g, _, key = heapq.heappop(heap)
            node = open_nodes.get(key)
            # Stale heap entry: the node was closed or improved since
            if node is None or node.g != g:
                continue
            del open_nodes[key]
            closed[key] = node

            if key == target:
                current = node
                break

            for step in self.get_adjacents(key):
                if step.key in closed:
                    continue
                tentative_g = node.g + step.cost
                found = open_nodes.get(step.key)
                if found is None:
                    open_nodes[step.key] = SearchNode(step.key, tentative_g, step.direction, node)
                    heapq.heappush(heap, (tentative_g, next(counter), step.key))
                elif tentative_g < found.g:
                    found.g = tentative_g
                    found.parent = node
                    found.direction = step.direction
                    heapq.heappush(heap, (tentative_g, next(counter), step.key))

        result = DijkstraResult(expanded=len(closed))
        if current is not None:
            result.found = True
            result.cost = current.g
            result.path = self._get_path(current)
        else:
            logger.info("No path from %s to %s (%d cells expanded)", start, target, len(closed))
        self.last_result = result
        return result.path

    @staticmethod
    def _get_path(node: SearchNode) -> List[str]:
        moves: List[str] = []
        while node.parent is not None:
            moves.append(node.direction)
            node = node.parent
        moves.reverse()
        return moves


def find_path(
    grid: List[List[int]], start: Sequence[int], target: Sequence[int]
) -> DijkstraResult:
    """Run Dijkstra on a grid and return the full result."""
    adjacents = GridStepAdjacents(grid)
    start_key = (int(start[0]), int(start[1]))
    target_key = (int(target[0]), int(target[1]))
    for name, key in (("Start", start_key), ("Target", target_key)):
        if not adjacents.in_bounds(key):
            raise ValueError(f"{name} {key} is outside the {adjacents.size}x{adjacents.size} grid")

    search = Dijkstra(adjacents)
    search.run(start_key, target_key)
    return search.last_result
