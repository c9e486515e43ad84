"""Composed two-leg solver."""

from .pathfinder import MazeSolver, SolveResult, solve

__all__ = [
    'MazeSolver',
    'SolveResult',
    'solve'
]
