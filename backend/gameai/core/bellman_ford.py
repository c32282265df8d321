"""Bellman-Ford single-source shortest paths over a dense cost matrix."""
import logging
import math
from typing import List, Optional, Sequence, Tuple, Union

logger = logging.getLogger(__name__)

Number = Union[int, float]

INF = math.inf
NULL = -1


class BellmanFord:
    """
    Shortest paths from one node to all others, with negative cycle detection.

    ``matrix[j][i]`` is the cost of the edge j -> i, ``INF`` when there is
    no edge. Diagonal entries are ignored.
    """

    def __init__(self, matrix: Sequence[Sequence[Number]]):
        size = len(matrix)
        if any(len(row) != size for row in matrix):
            raise ValueError("Cost matrix must be square")
        self.matrix = [list(row) for row in matrix]
        self.size = size
        self.start: Optional[int] = None
        self.distance: List[Number] = []
        self.predecessor: List[int] = []
        self.rounds = 0

    def run(self, start: int = 0) -> bool:
        """
        Relax all edges until nothing changes.

        Args:
            start: Index of the source node.

        Returns:
            False if a negative cycle is reachable from start, True otherwise.
        """
        if not self.size:
            return True
        if not 0 <= start < self.size:
            raise ValueError(f"Start node {start} is out of range 0..{self.size - 1}")

        self.start = start
        self.distance = [INF] * self.size
        self.predecessor = [NULL] * self.size
        self.distance[start] = 0
        self.rounds = 0

        for _ in range(self.size):
            self.rounds += 1
            relaxations = 0
            for j in range(self.size):
                if self.distance[j] == INF:
                    continue
                row = self.matrix[j]
                for i in range(self.size):
                    if i == j or row[i] == INF:
                        continue
                    new_dist = self.distance[j] + row[i]
                    if new_dist < self.distance[i]:
                        self.distance[i] = new_dist
                        self.predecessor[i] = j
                        relaxations += 1
            if relaxations == 0:
                logger.debug("Bellman-Ford converged after %d rounds", self.rounds)
                return True

        logger.info("Negative cycle reachable from node %d", start)
        return False

    def _check_ran(self, target: int) -> None:
        if self.start is None:
            raise RuntimeError("run() must be called before reading paths")
        if not 0 <= target < self.size:
            raise ValueError(f"Target node {target} is out of range 0..{self.size - 1}")

    def _walk_back(self, target: int) -> List[int]:
        nodes: List[int] = []
        seen = set()
        i = target
        while self.predecessor[i] != NULL:
            if i in seen:
                raise RuntimeError("Predecessor chain contains a negative cycle")
            seen.add(i)
            nodes.append(i)
            i = self.predecessor[i]
        return nodes

    def get_path(self, target: int) -> List[int]:
        """Node indices after the start up to target; empty if unreachable."""
        self._check_ran(target)
        path = self._walk_back(target)
        path.reverse()
        return path

    def get_route(self, target: int) -> List[Tuple[int, int, Number]]:
        """(source, destination, hop cost) triples along the path to target."""
        self._check_ran(target)
        route = [[self.predecessor[i], i, self.distance[i]] for i in self._walk_back(target)]
        for k in range(len(route) - 1):
            route[k][2] -= route[k + 1][2]
        route.reverse()
        return [tuple(hop) for hop in route]

    def __str__(self) -> str:
        distances = ",".join("inf" if d == INF else str(d) for d in self.distance)
        predecessors = ",".join("null" if p == NULL else str(p) for p in self.predecessor)
        return f"[{distances}] [{predecessors}]"
