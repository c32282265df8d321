"""API routes package.

This package contains all API route handlers for the application.
"""
from . import search
from . import pathfinding
from . import puzzles
from . import decision

__all__ = [
    "search",
    "pathfinding",
    "puzzles",
    "decision",
]
