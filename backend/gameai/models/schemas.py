"""Pydantic schemas for API request/response validation."""
from pydantic import BaseModel, Field
from typing import Dict, List, Any, Optional, Tuple


# ===== Tree Search =====

class TreeSearchRequest(BaseModel):
    """Request schema for searching a serialized tree."""
    tree: str = Field(..., description="Serialized tree, e.g. 'a {2 b {0 } c {0 } } '")
    looking_for: str = Field(..., description="Value to search for")
    method: str = Field(default="bfs", description="Search method (bfs/dfs)")


class TreeSearchResponse(BaseModel):
    """Response schema for tree search."""
    found: bool = Field(..., description="Whether the value was found")
    path: List[str] = Field(default=[], description="Values from the root to the found node")


# ===== Flood Fill =====

class GridFillRequest(BaseModel):
    """Request schema for grid flood fill."""
    grid: List[List[int]] = Field(..., description="Square grid, 0 = empty cell")
    start: Tuple[int, int] = Field(..., description="Start cell (row, column)")
    color: int = Field(default=1, description="Value painted into filled cells")
    method: str = Field(default="queue", description="Fill method (recursive/queue/stack)")
    stochastic: bool = Field(default=False, description="Shuffle neighbour order")


class GridFillResponse(BaseModel):
    """Response schema for grid flood fill."""
    grid: List[List[int]] = Field(..., description="Filled grid")
    filled: int = Field(..., ge=0, description="Number of cells painted")


class TreeFillRequest(BaseModel):
    """Request schema for tree flood fill."""
    tree: str = Field(..., description="Serialized tree; nodes holding 'x' are fillable")
    value: str = Field(..., min_length=1, description="Value painted into filled nodes")
    method: str = Field(default="queue", description="Fill method (recursive/queue/stack)")
    stochastic: bool = Field(default=False, description="Shuffle child order")


class TreeFillResponse(BaseModel):
    """Response schema for tree flood fill."""
    tree: str = Field(..., description="Serialized filled tree")
    filled: int = Field(..., ge=0, description="Number of nodes painted")


# ===== Pathfinding =====

class DijkstraRequest(BaseModel):
    """Request schema for grid shortest path."""
    grid: List[List[int]] = Field(..., description="Square grid, 0 = walkable cell")
    start: Tuple[int, int] = Field(..., description="Start cell (row, column)")
    target: Tuple[int, int] = Field(..., description="Target cell (row, column)")


class DijkstraResponse(BaseModel):
    """Response schema for grid shortest path."""
    found: bool = Field(..., description="Whether the target is reachable")
    path: List[str] = Field(default=[], description="Moves (W/E/N/S) from start to target")
    cost: int = Field(default=0, description="Total path cost")
    expanded: int = Field(default=0, description="Cells closed during the search")


class BellmanFordRequest(BaseModel):
    """Request schema for Bellman-Ford."""
    matrix: List[List[Optional[float]]] = Field(..., description="Cost matrix, null = no edge")
    start: int = Field(default=0, ge=0, description="Source node")
    target: Optional[int] = Field(default=None, ge=0, description="Node to return a path to")


class BellmanFordResponse(BaseModel):
    """Response schema for Bellman-Ford."""
    negative_cycle: bool = Field(..., description="Whether a negative cycle is reachable")
    distance: List[Optional[float]] = Field(default=[], description="Distances, null = unreachable")
    predecessor: List[int] = Field(default=[], description="Predecessors, -1 = none")
    path: List[int] = Field(default=[], description="Nodes after the start up to the target")
    route: List[Tuple[int, int, float]] = Field(default=[], description="(from, to, cost) hops")


# ===== Puzzles & Games =====

class SudokuRequest(BaseModel):
    """Request schema for Sudoku solving (give either row or grid)."""
    row: Optional[List[int]] = Field(default=None, description="One-dimensional puzzle")
    grid: Optional[List[List[int]]] = Field(default=None, description="Two-dimensional puzzle")


class SudokuResponse(BaseModel):
    """Response schema for Sudoku solving."""
    solved: bool = Field(..., description="Whether a solution exists")
    row: Optional[List[int]] = Field(default=None, description="Solved one-dimensional puzzle")
    grid: Optional[List[List[int]]] = Field(default=None, description="Solved two-dimensional puzzle")


class TicTacToeRequest(BaseModel):
    """Request schema for tic-tac-toe move search."""
    squares: List[str] = Field(..., min_length=9, max_length=9, description="Nine squares: 'x', 'o' or ' '")
    player: str = Field(default="x", description="Side to move")


class TicTacToeResponse(BaseModel):
    """Response schema for tic-tac-toe move search."""
    spot: Optional[int] = Field(default=None, description="Best square, null if the game is over")
    score: int = Field(..., description="Minimax score from the player's point of view")
    nodes: int = Field(..., description="Game tree size")


# ===== Behavior Trees =====

class BehaviorRunRequest(BaseModel):
    """Request schema for running a behavior tree."""
    tree: Dict[str, Any] = Field(..., description="Nested node description")
    ticks: int = Field(default=1, ge=1, le=100, description="Times to run the root")


class BehaviorRunResponse(BaseModel):
    """Response schema for running a behavior tree."""
    state: str = Field(..., description="Root state after the last tick")
    trace: List[str] = Field(default=[], description="Execution trace lines")


# ===== Fuzzy Logic =====

class DesirabilityRequest(BaseModel):
    """Request schema for weapon desirability."""
    distance: float = Field(..., ge=0, le=1000, description="Distance to target")
    ammo: float = Field(..., ge=0, le=100, description="Rounds left")
    method: str = Field(default="max_av", description="Defuzzify method (max_av/centroid)")


class DesirabilityResponse(BaseModel):
    """Response schema for weapon desirability."""
    desirability: float = Field(..., ge=0, le=100, description="Crisp desirability (0-100)")
    method: str = Field(..., description="Defuzzify method used")


# ===== Genetic Algorithm =====

class GeneticRunRequest(BaseModel):
    """Request schema for a genetic algorithm run."""
    fitness: str = Field(default="nbits", description="Fitness function (accumulate/nbits/8queens)")
    chromosome_size: int = Field(default=16, ge=1, le=256, description="Genes per chromosome")
    gene_max: int = Field(default=2, ge=1, description="Genes are seeded in [0, gene_max)")
    population_size: int = Field(default=100, ge=2, le=2000, description="Individuals per generation")
    mutation_probability: int = Field(default=70, ge=0, le=100, description="Mutation chance (percent)")
    crossover: str = Field(default="middle", description="Crossover method (middle/random)")
    target_fitness: Optional[int] = Field(default=None, description="Stop fitness (default from settings)")
    max_generations: Optional[int] = Field(default=None, ge=0, description="Generation limit (default from settings)")
    seed: Optional[int] = Field(default=None, description="Random seed for a reproducible run")


class GeneticRunResponse(BaseModel):
    """Response schema for a genetic algorithm run."""
    genes: List[int] = Field(..., description="Genes of the fittest individual")
    fitness: int = Field(..., description="Fitness of the fittest individual")
    generation: int = Field(..., description="Generations bred")
    solved: bool = Field(..., description="Whether the target fitness was reached")
    history: List[int] = Field(default=[], description="Best fitness per generation")
