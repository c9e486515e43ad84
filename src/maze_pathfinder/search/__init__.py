"""Search algorithms for the maze pathfinder.

This module implements the best-first search kernel, its frontier and the
path reconstruction used by the solver.
"""

from .astar import (
    AStarSearcher, SearchConfig, SearchResult, SearchStatistics, create_astar_searcher
)
from .frontier import Frontier
from .heuristics import SearchStrategy, make_strategy, manhattan_distance
from .path import build_path

__all__ = [
    'AStarSearcher',
    'SearchConfig',
    'SearchResult',
    'SearchStatistics',
    'create_astar_searcher',
    'Frontier',
    'SearchStrategy',
    'make_strategy',
    'manhattan_distance',
    'build_path'
]
