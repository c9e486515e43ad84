"""Heuristic strategies for the search kernel.

A search call either heads for one exact state or for whichever goal the
problem recognizes. Each mode bundles a heuristic and a termination test into
a ``SearchStrategy`` so the kernel runs a single code path for both.
"""

from dataclasses import dataclass
from functools import partial
from typing import Callable, Hashable, Tuple

from maze_pathfinder.core.problem import BaseProblem

GOAL_MODE = "goal"
EXACT_MODE = "exact"


@dataclass(frozen=True)
class SearchStrategy:
    """Heuristic and termination predicate for one search call."""
    mode: str
    heuristic: Callable[[Hashable], float]
    is_terminal: Callable[[Hashable], bool]


def _distance_to(problem: BaseProblem, target: Hashable, state: Hashable) -> float:
    return problem.distance(state, target)


def _is_state(target: Hashable, state: Hashable) -> bool:
    return state == target


def make_strategy(problem: BaseProblem, target: Hashable) -> SearchStrategy:
    """Select the strategy for a search towards ``target``.

    If the problem declares ``target`` a goal, any goal terminates the search
    and the heuristic is the distance to the nearest goal. Otherwise the
    search must reach ``target`` itself and uses the pairwise distance.

    Args:
        problem: Problem supplying heuristics and goal recognition
        target: State the caller asked to reach

    Returns:
        Strategy for the search call
    """
    if problem.is_goal(target):
        return SearchStrategy(
            mode=GOAL_MODE,
            heuristic=problem.distance_to_goal,
            is_terminal=problem.is_goal,
        )

    return SearchStrategy(
        mode=EXACT_MODE,
        heuristic=partial(_distance_to, problem, target),
        is_terminal=partial(_is_state, target),
    )


def manhattan_distance(a: Tuple[int, int], b: Tuple[int, int]) -> int:
    """Calculate Manhattan distance between two (col, row) points."""
    return abs(a[0] - b[0]) + abs(a[1] - b[1])
