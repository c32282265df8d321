"""Sudoku and tic-tac-toe API routes."""
from fastapi import APIRouter, Depends, HTTPException

from ...config import Settings
from ...models.schemas import (
    SudokuRequest,
    SudokuResponse,
    TicTacToeRequest,
    TicTacToeResponse,
)
from ...core.errors import SearchLimitExceeded
from ...core.backtracking import solve_sudoku_1d, solve_sudoku_2d
from ...core.minimax import Grid, minimax
from ..deps import get_app_settings

router = APIRouter(prefix="/api", tags=["puzzles"])


@router.post("/puzzles/sudoku", response_model=SudokuResponse)
async def solve_sudoku(
    request: SudokuRequest,
    settings: Settings = Depends(get_app_settings),
) -> SudokuResponse:
    """
    Solve a one- or two-dimensional Sudoku by backtracking.

    Args:
        request: SudokuRequest with either `row` or `grid`.
        settings: Settings dependency (iteration guard).

    Returns:
        SudokuResponse with the solution, or solved=False.
    """
    if (request.row is None) == (request.grid is None):
        raise HTTPException(status_code=400, detail="Exactly one of 'row' or 'grid' must be provided")

    limit = settings.search_max_iterations
    try:
        if request.row is not None:
            row = solve_sudoku_1d(request.row, limit)
            return SudokuResponse(solved=row is not None, row=row)
        grid = solve_sudoku_2d(request.grid, limit)
        return SudokuResponse(solved=grid is not None, grid=grid)
    except (ValueError, SearchLimitExceeded) as e:
        raise HTTPException(status_code=400, detail=f"Sudoku failed: {str(e)}")


@router.post("/games/tictactoe/move", response_model=TicTacToeResponse)
async def tictactoe_move(request: TicTacToeRequest) -> TicTacToeResponse:
    """
    Pick the best square for the side to move with full minimax.

    Args:
        request: TicTacToeRequest with nine squares and the player.

    Returns:
        TicTacToeResponse with the chosen square and its score.
    """
    if request.player not in (Grid.x, Grid.o):
        raise HTTPException(status_code=400, detail=f"Invalid player. Must be one of: {[Grid.x, Grid.o]}")
    opponent = Grid.o if request.player == Grid.x else Grid.x

    try:
        grid = Grid(request.squares)
    except ValueError as e:
        raise HTTPException(status_code=400, detail=f"Move search failed: {str(e)}")

    root = minimax(grid, request.player, request.player, opponent)
    best = root.best()
    return TicTacToeResponse(
        spot=best.spot_index if best is not None else None,
        score=root.get_score(),
        nodes=root.count_nodes(),
    )
