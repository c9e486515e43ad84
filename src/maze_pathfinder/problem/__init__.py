"""Maze problem definitions."""

from .maze import MazeProblem, MOVES, MUD_COST
from .demo_mazes import DEMO_MAZES

__all__ = [
    'MazeProblem',
    'MOVES',
    'MUD_COST',
    'DEMO_MAZES'
]
