"""Core data models, problem interface and errors."""

from .data_models import Action, MazeState, SearchNode, SearchTree
from .exceptions import (
    PathfinderError, NoSolutionError, EmptyFrontierError,
    SearchBudgetExceededError, MazeFormatError
)
from .problem import BaseProblem

__all__ = [
    'Action',
    'MazeState',
    'SearchNode',
    'SearchTree',
    'BaseProblem',
    'PathfinderError',
    'NoSolutionError',
    'EmptyFrontierError',
    'SearchBudgetExceededError',
    'MazeFormatError'
]
