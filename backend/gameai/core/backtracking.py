"""Backtracking search with a single explicit stack, applied to Sudoku.

The engine is generic: it is parameterised by a ``next_location`` functor
(first unassigned cell or ``None``) and a ``next_candidate`` functor (next
value to try in a cell, ``0`` when exhausted). One-dimensional Sudoku fills
a row with a permutation of ``1..n``; two-dimensional Sudoku is the usual
row/column/box puzzle on an ``n x n`` board with ``sqrt(n)`` boxes.
"""
import logging
import math
from typing import Callable, List, Optional

from .errors import SearchLimitExceeded

logger = logging.getLogger(__name__)

EMPTY = 0
NO_CANDIDATE = 0


class Location:
    """Handle to one cell of a flat board."""

    def __init__(self, board: List[int], index: int):
        self.board = board
        self.index = index

    def get_value(self) -> int:
        return self.board[self.index]

    def set_value(self, value: int) -> None:
        self.board[self.index] = value

    def clear_value(self) -> None:
        self.board[self.index] = EMPTY

    def __repr__(self) -> str:
        return f"Location({self.index}={self.get_value()})"


class NextLocationSudoku1D:
    """First empty cell of a 1-D board."""

    def __init__(self, board: List[int]):
        self.board = board

    def __call__(self) -> Optional[Location]:
        for index, value in enumerate(self.board):
            if value == EMPTY:
                return Location(self.board, index)
        return None


class NextLocationSudoku2D(NextLocationSudoku1D):
    """First empty cell of a flattened square board in row-major order."""


class NextCandidateSudoku1D:
    """Next value above the current one that is not used anywhere in the row."""

    def __init__(self, board: List[int]):
        self.board = board

    def __call__(self, location: Location) -> int:
        used = set(self.board)
        value = location.get_value()
        while value < len(self.board):
            value += 1
            if value not in used:
                return value
        return NO_CANDIDATE


class NextCandidateSudoku2D:
    """Next value above the current one that is free in the cell's row, column and box."""

    def __init__(self, board: List[int], width: int):
        self.board = board
        self.width = width
        self.box = math.isqrt(width)

    def conflicts(self, index: int, value: int) -> bool:
        row, col = divmod(index, self.width)
        board, width = self.board, self.width
        if any(board[row * width + c] == value for c in range(width) if c != col):
            return True
        if any(board[r * width + col] == value for r in range(width) if r != row):
            return True
        top, left = row - row % self.box, col - col % self.box
        for r in range(top, top + self.box):
            for c in range(left, left + self.box):
                if (r, c) != (row, col) and board[r * width + c] == value:
                    return True
        return False

    def __call__(self, location: Location) -> int:
        value = location.get_value()
        while value < self.width:
            value += 1
            if not self.conflicts(location.index, value):
                return value
        return NO_CANDIDATE


class Backtracking:
    """Depth-first assignment search driven by one stack of locations."""

    def __init__(
        self,
        next_location: Callable[[], Optional[Location]],
        next_candidate: Callable[[Location], int],
    ):
        self.next_location = next_location
        self.next_candidate = next_candidate
        self.stack: List[Location] = []
        self.solved = False
        self.exhausted = False
        self.iterations = 0

    def solve(self) -> bool:
        """
        Perform one step of the search.

        Returns:
            True when the search is over (check ``solved``), False when
            another step is needed.
        """
        self.iterations += 1
        if not self.stack:
            location = self.next_location()
            if location is None:
                self.solved = True
                return True
            self.stack.append(location)

        location = self.stack[-1]
        candidate = self.next_candidate(location)
        if candidate != NO_CANDIDATE:
            location.set_value(candidate)
            nxt = self.next_location()
            if nxt is None:
                self.solved = True
                return True
            self.stack.append(nxt)
        else:
            location.clear_value()
            self.stack.pop()
            if not self.stack:
                self.exhausted = True
                return True
        return False

    def run(self, max_iterations: Optional[int] = None) -> bool:
        """Step until the search finishes; returns whether a solution was found."""
        while not self.solve():
            if max_iterations is not None and self.iterations >= max_iterations:
                raise SearchLimitExceeded("Backtracking", max_iterations)
        logger.debug(
            "Backtracking finished after %d iterations (solved=%s)",
            self.iterations, self.solved,
        )
        return self.solved


def solve_sudoku_1d(
    board: List[int], max_iterations: Optional[int] = None
) -> Optional[List[int]]:
    """Fill the zeros of a row with the missing values of 1..n; None if impossible."""
    size = len(board)
    given = [v for v in board if v != EMPTY]
    if any(not 0 <= v <= size for v in board):
        raise ValueError(f"Values must be between 0 and {size}")
    if len(given) != len(set(given)):
        raise ValueError("Board contains duplicate values")

    work = list(board)
    search = Backtracking(NextLocationSudoku1D(work), NextCandidateSudoku1D(work))
    return work if search.run(max_iterations) else None


def solve_sudoku_2d(
    grid: List[List[int]], max_iterations: Optional[int] = None
) -> Optional[List[List[int]]]:
    """
    Solve an n x n Sudoku (n a perfect square).

    Args:
        grid: Rows of the puzzle, 0 for empty cells.
        max_iterations: Optional guard on search steps.

    Returns:
        The solved grid, or None when the puzzle has no solution.
    """
    width = len(grid)
    if width == 0 or any(len(row) != width for row in grid):
        raise ValueError("Sudoku grid must be square and non-empty")
    if math.isqrt(width) ** 2 != width:
        raise ValueError(f"Sudoku side {width} is not a perfect square")

    work = [value for row in grid for value in row]
    if any(not 0 <= v <= width for v in work):
        raise ValueError(f"Values must be between 0 and {width}")

    candidates = NextCandidateSudoku2D(work, width)
    for index, value in enumerate(work):
        if value != EMPTY and candidates.conflicts(index, value):
            raise ValueError(f"Given value {value} at cell {divmod(index, width)} conflicts")

    search = Backtracking(NextLocationSudoku2D(work), candidates)
    if not search.run(max_iterations):
        return None
    return [work[r * width:(r + 1) * width] for r in range(width)]
