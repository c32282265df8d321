"""Minimax adversarial search for tic-tac-toe."""
import logging
from typing import Iterable, List, Optional

logger = logging.getLogger(__name__)

WIN_SCORE = 10
LOSE_SCORE = -10
TIE_SCORE = 0


class Grid:
    """3x3 tic-tac-toe board."""

    width = 3
    height = 3

    x = "x"
    o = "o"
    _ = " "

    LINES = (
        (0, 1, 2), (3, 4, 5), (6, 7, 8),
        (0, 3, 6), (1, 4, 7), (2, 5, 8),
        (0, 4, 8), (2, 4, 6),
    )

    def __init__(self, squares: Optional[Iterable[str]] = None):
        self.squares: List[str] = [self._] * (self.width * self.height)
        if squares is not None:
            values = list(squares)
            if len(values) != len(self.squares):
                raise ValueError(f"Grid needs {len(self.squares)} squares, got {len(values)}")
            for i, value in enumerate(values):
                if value not in (self.x, self.o, self._):
                    raise ValueError(f"Invalid mark {value!r} at square {i}")
                self.squares[i] = value

    def copy(self) -> "Grid":
        return Grid(self.squares)

    def set(self, i: int, c: str) -> None:
        self.squares[i] = c

    def clear(self, i: int) -> None:
        self.squares[i] = self._

    def empty_indices(self) -> List[int]:
        """Indices of all empty squares, e.g. [0, 1, 3] for "  o x"."""
        return [i for i, square in enumerate(self.squares) if square == self._]

    def winning(self, player: str) -> bool:
        return any(all(self.squares[i] == player for i in line) for line in self.LINES)

    def __eq__(self, other) -> bool:
        return isinstance(other, Grid) and self.squares == other.squares

    def __str__(self) -> str:
        rows = [
            ",".join(self.squares[r * self.width:(r + 1) * self.width])
            for r in range(self.height)
        ]
        return "[" + "\n ".join(rows) + "]"


class Move:
    """A node of the game tree: resulting grid, its score and the replies."""

    def __init__(
        self,
        grid: Grid,
        score: int = 0,
        next_moves: Optional[List["Move"]] = None,
        best_move: int = -1,
    ):
        self.grid = grid
        self.score = score
        self.next = next_moves if next_moves is not None else []
        self.best_move = best_move
        self.spot_index = -1

    def at(self, i: int) -> "Move":
        return self.next[i]

    def get_score(self) -> int:
        return self.score

    def set_spot_index(self, i: int) -> None:
        self.spot_index = i

    def best(self) -> Optional["Move"]:
        """Best reply, None on terminal positions."""
        if self.best_move < 0:
            return None
        return self.next[self.best_move]

    def count_nodes(self) -> int:
        return 1 + sum(move.count_nodes() for move in self.next)

    def __str__(self) -> str:
        return f"{self.grid}\n{self.score}\n{len(self.next)}\n{self.best_move}\n"


def minimax(grid: Grid, player: str, maximizer: str, minimizer: str) -> Move:
    """
    Build the full game tree below grid and score it.

    For the initial call pass the maximizer as player. The chosen line of
    play is not necessarily the shortest win.

    Args:
        grid: Current position (not modified).
        player: Side to move.
        maximizer: Side scoring +10 on a win.
        minimizer: Side scoring -10 on a win.

    Returns:
        Root Move; best_move indexes the first child with the best score.
    """
    if grid.winning(minimizer):
        return Move(grid.copy(), LOSE_SCORE)
    if grid.winning(maximizer):
        return Move(grid.copy(), WIN_SCORE)

    avail_spots = grid.empty_indices()
    if not avail_spots:
        return Move(grid.copy(), TIE_SCORE)

    work = grid.copy()
    opponent = minimizer if player == maximizer else maximizer
    next_moves: List[Move] = []
    for spot in avail_spots:
        work.set(spot, player)
        move = minimax(work, opponent, maximizer, minimizer)
        move.set_spot_index(spot)
        next_moves.append(move)
        work.clear(spot)

    scores = [move.get_score() for move in next_moves]
    best_score = max(scores) if player == maximizer else min(scores)
    best_move = scores.index(best_score)

    return Move(grid.copy(), best_score, next_moves, best_move)


def best_spot(grid: Grid, player: str, opponent: str) -> Optional[int]:
    """Square index the player should take next, None if the game is over."""
    root = minimax(grid, player, player, opponent)
    best = root.best()
    if best is None:
        return None
    logger.debug("Best spot for %r is %d (score %d)", player, best.spot_index, root.score)
    return best.spot_index
