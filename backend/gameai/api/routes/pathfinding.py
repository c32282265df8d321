"""Shortest path API routes."""
from fastapi import APIRouter, HTTPException

from ...models.schemas import (
    DijkstraRequest,
    DijkstraResponse,
    BellmanFordRequest,
    BellmanFordResponse,
)
from ...core.dijkstra import find_path
from ...core.bellman_ford import BellmanFord
from ...utils.helpers import validate_square_grid, parse_cost_matrix, json_number

router = APIRouter(prefix="/api/pathfinding", tags=["pathfinding"])


@router.post("/dijkstra", response_model=DijkstraResponse)
async def dijkstra(request: DijkstraRequest) -> DijkstraResponse:
    """
    Find the cheapest W/E/N/S path between two cells of a grid.

    Args:
        request: DijkstraRequest with grid, start and target.

    Returns:
        DijkstraResponse with the moves and total cost.
    """
    is_valid, error = validate_square_grid(request.grid)
    if not is_valid:
        raise HTTPException(status_code=400, detail=f"Pathfinding failed: {error}")

    try:
        result = find_path(request.grid, request.start, request.target)
    except ValueError as e:
        raise HTTPException(status_code=400, detail=f"Pathfinding failed: {str(e)}")

    return DijkstraResponse(**result.to_dict())


@router.post("/bellman-ford", response_model=BellmanFordResponse)
async def bellman_ford(request: BellmanFordRequest) -> BellmanFordResponse:
    """
    Run Bellman-Ford from a source node over a dense cost matrix.

    Args:
        request: BellmanFordRequest with matrix, start and optional target.

    Returns:
        BellmanFordResponse with distances, predecessors and, when a target
        is given and no negative cycle exists, its path and route.
    """
    try:
        solver = BellmanFord(parse_cost_matrix(request.matrix))
        converged = solver.run(request.start)
        if request.target is not None and request.target >= solver.size:
            raise ValueError(f"Target node {request.target} is out of range")
    except ValueError as e:
        raise HTTPException(status_code=400, detail=f"Bellman-Ford failed: {str(e)}")

    response = BellmanFordResponse(
        negative_cycle=not converged,
        distance=[json_number(d) for d in solver.distance],
        predecessor=solver.predecessor,
    )
    if converged and request.target is not None and solver.size:
        response.path = solver.get_path(request.target)
        response.route = solver.get_route(request.target)
    return response
