"""Tree search and flood fill API routes."""
import logging
import random

from fastapi import APIRouter, Depends, HTTPException

from ...config import Settings
from ...models.schemas import (
    TreeSearchRequest,
    TreeSearchResponse,
    GridFillRequest,
    GridFillResponse,
    TreeFillRequest,
    TreeFillResponse,
)
from ...core.tree_search import TreeNode, SEARCH_METHODS
from ...core.flood_fill import fill_grid, fill_tree
from ...utils.helpers import validate_square_grid, format_grid
from ..deps import get_app_settings, get_rng

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api", tags=["search"])


@router.post("/tree/search", response_model=TreeSearchResponse)
async def search_tree(request: TreeSearchRequest) -> TreeSearchResponse:
    """
    Search a serialized tree breadth- or depth-first.

    Args:
        request: TreeSearchRequest with the tree text, value and method.

    Returns:
        TreeSearchResponse with the root-to-node path when found.
    """
    search = SEARCH_METHODS.get(request.method)
    if search is None:
        raise HTTPException(
            status_code=400,
            detail=f"Search failed: Invalid method. Must be one of: {list(SEARCH_METHODS)}",
        )

    root = TreeNode.from_string(request.tree)
    node = search(root, request.looking_for)
    if node is None:
        return TreeSearchResponse(found=False)
    return TreeSearchResponse(found=True, path=node.get_path())


@router.post("/flood-fill/grid", response_model=GridFillResponse)
async def flood_fill_grid(
    request: GridFillRequest,
    settings: Settings = Depends(get_app_settings),
    rng: random.Random = Depends(get_rng),
) -> GridFillResponse:
    """
    Flood fill a square grid from a start cell.

    Args:
        request: GridFillRequest with grid, start, color and method.
        settings: Settings dependency (recursive fill size limit).
        rng: Random source for the stochastic variant.

    Returns:
        GridFillResponse with the painted grid.
    """
    is_valid, error = validate_square_grid(request.grid)
    if not is_valid:
        raise HTTPException(status_code=400, detail=f"Flood fill failed: {error}")

    grid = [list(row) for row in request.grid]
    try:
        filled = fill_grid(
            grid,
            request.start,
            request.color,
            method=request.method,
            stochastic=request.stochastic,
            rng=rng,
            max_recursive_cells=settings.flood_fill_max_recursive_cells,
        )
    except ValueError as e:
        raise HTTPException(status_code=400, detail=f"Flood fill failed: {str(e)}")

    logger.debug("Filled grid:\n%s", format_grid(grid))
    return GridFillResponse(grid=grid, filled=filled)


@router.post("/flood-fill/tree", response_model=TreeFillResponse)
async def flood_fill_tree(
    request: TreeFillRequest,
    rng: random.Random = Depends(get_rng),
) -> TreeFillResponse:
    """Flood fill the 'x' nodes of a serialized tree."""
    root = TreeNode.from_string(request.tree)
    try:
        filled = fill_tree(
            root,
            request.value,
            method=request.method,
            stochastic=request.stochastic,
            rng=rng,
        )
    except ValueError as e:
        raise HTTPException(status_code=400, detail=f"Flood fill failed: {str(e)}")

    return TreeFillResponse(tree=root.to_string(), filled=filled)
