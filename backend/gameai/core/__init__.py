"""Core algorithms package.

Each module implements one classical game-AI algorithm on its own; the
modules do not depend on each other beyond the shared open list and
error types.
"""
from .errors import SearchLimitExceeded
from .tree_search import TreeNode, bfs, dfs
from .flood_fill import FloodFillRecursive, FloodFillIterative, fill_grid, fill_tree
from .dijkstra import Dijkstra, find_path
from .bellman_ford import BellmanFord
from .backtracking import Backtracking, solve_sudoku_1d, solve_sudoku_2d
from .minimax import Grid, Move, minimax, best_spot
from .behavior_tree import State, Task, build_tree
from .fuzzy import FuzzyModule, DefuzzifyMethod, weapon_desirability
from .genetic import GeneticAlgorithm, CrossoverMethod, FITNESS_FUNCTIONS

__all__ = [
    "SearchLimitExceeded",
    "TreeNode",
    "bfs",
    "dfs",
    "FloodFillRecursive",
    "FloodFillIterative",
    "fill_grid",
    "fill_tree",
    "Dijkstra",
    "find_path",
    "BellmanFord",
    "Backtracking",
    "solve_sudoku_1d",
    "solve_sudoku_2d",
    "Grid",
    "Move",
    "minimax",
    "best_spot",
    "State",
    "Task",
    "build_tree",
    "FuzzyModule",
    "DefuzzifyMethod",
    "weapon_desirability",
    "GeneticAlgorithm",
    "CrossoverMethod",
    "FITNESS_FUNCTIONS",
]
