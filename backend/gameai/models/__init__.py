"""Data models package.

This package contains the request/response schemas of the API.
"""
from .schemas import (
    TreeSearchRequest,
    TreeSearchResponse,
    GridFillRequest,
    GridFillResponse,
    TreeFillRequest,
    TreeFillResponse,
    DijkstraRequest,
    DijkstraResponse,
    BellmanFordRequest,
    BellmanFordResponse,
    SudokuRequest,
    SudokuResponse,
    TicTacToeRequest,
    TicTacToeResponse,
    BehaviorRunRequest,
    BehaviorRunResponse,
    DesirabilityRequest,
    DesirabilityResponse,
    GeneticRunRequest,
    GeneticRunResponse,
)

__all__ = [
    # Search
    "TreeSearchRequest",
    "TreeSearchResponse",
    "GridFillRequest",
    "GridFillResponse",
    "TreeFillRequest",
    "TreeFillResponse",
    # Pathfinding
    "DijkstraRequest",
    "DijkstraResponse",
    "BellmanFordRequest",
    "BellmanFordResponse",
    # Puzzles & games
    "SudokuRequest",
    "SudokuResponse",
    "TicTacToeRequest",
    "TicTacToeResponse",
    # Decision making
    "BehaviorRunRequest",
    "BehaviorRunResponse",
    "DesirabilityRequest",
    "DesirabilityResponse",
    "GeneticRunRequest",
    "GeneticRunResponse",
]
