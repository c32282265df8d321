"""Utility helper functions."""
import math
from typing import Any, List, Optional, Sequence, Tuple


def validate_square_grid(grid: Any) -> Tuple[bool, Optional[str]]:
    """
    Validate a square grid of integers.

    Args:
        grid: Candidate grid (list of rows).

    Returns:
        Tuple of (is_valid, error_message).
    """
    if not isinstance(grid, list) or not grid:
        return False, "Grid must be a non-empty list of rows"

    size = len(grid)
    for j, row in enumerate(grid):
        if not isinstance(row, list):
            return False, f"Row {j} must be an array"
        if len(row) != size:
            return False, f"Row {j} has {len(row)} cells, expected {size}"
        for i, cell in enumerate(row):
            if isinstance(cell, bool) or not isinstance(cell, int):
                return False, f"Cell ({j}, {i}) must be an integer"

    return True, None


def parse_cost_matrix(rows: Sequence[Sequence[Optional[float]]]) -> List[List[float]]:
    """Convert a JSON cost matrix (null = no edge) into one using math.inf."""
    size = len(rows)
    matrix: List[List[float]] = []
    for j, row in enumerate(rows):
        if len(row) != size:
            raise ValueError(f"Row {j} has {len(row)} entries, expected {size}")
        matrix.append([math.inf if cost is None else cost for cost in row])
    return matrix


def json_number(value: float) -> Optional[float]:
    """Map infinity to None so it can be sent as JSON null."""
    if value is None or math.isinf(value):
        return None
    return value


def format_grid(grid: Sequence[Sequence[Any]]) -> str:
    """Render a grid as aligned text rows, e.g. for debug logging."""
    if not grid:
        return ""
    width = max(len(str(cell)) for row in grid for cell in row)
    return "\n".join(" ".join(str(cell).rjust(width) for cell in row) for row in grid)
