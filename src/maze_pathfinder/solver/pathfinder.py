"""Two-leg maze solver: initial state to key, then key to a goal."""

import logging
import time
from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional

from maze_pathfinder.core.data_models import Action
from maze_pathfinder.core.problem import BaseProblem
from maze_pathfinder.search.astar import AStarSearcher, SearchResult, create_astar_searcher

logger = logging.getLogger(__name__)

NO_KEY = "no_key"
NO_GOAL = "no_goal"


@dataclass
class SolveResult:
    """Outcome of a composed two-leg solve.

    ``actions`` is ``None`` on failure; it is never a truncated first leg.
    """
    success: bool
    actions: Optional[List[Action]] = None
    legs: List[SearchResult] = field(default_factory=list)
    termination_reason: str = "unknown"
    computation_time: float = 0.0

    @property
    def length(self) -> Optional[int]:
        return len(self.actions) if self.actions is not None else None

    @property
    def cost(self) -> Optional[float]:
        """Total path cost of both legs, or None on failure."""
        if not self.success:
            return None
        return sum(leg.cost for leg in self.legs)

    def to_dict(self) -> Dict[str, Any]:
        return {
            'success': self.success,
            'actions': list(self.actions) if self.actions is not None else None,
            'length': self.length,
            'cost': self.cost,
            'termination_reason': self.termination_reason,
            'computation_time': self.computation_time,
            'legs': [leg.to_dict() for leg in self.legs]
        }


class MazeSolver:
    """Composes two kernel runs into one solution."""

    def __init__(self, searcher: Optional[AStarSearcher] = None):
        self.searcher = searcher or create_astar_searcher()

    def solve_problem(self, problem: BaseProblem) -> SolveResult:
        """Solve ``problem`` and report both legs.

        Args:
            problem: Problem with an initial state, a key and goal states

        Returns:
            SolveResult; ``success`` is false if either leg fails
        """
        start_time = time.perf_counter()

        if problem.key_state is None:
            logger.warning("Problem has no key state; no solution")
            return SolveResult(success=False, termination_reason=NO_KEY,
                               computation_time=time.perf_counter() - start_time)
        if not problem.goal_states:
            logger.warning("Problem has no goal states; no solution")
            return SolveResult(success=False, termination_reason=NO_GOAL,
                               computation_time=time.perf_counter() - start_time)

        legs = []
        waypoints = [
            (problem.initial_state, problem.key_state),
            (problem.key_state, problem.goal_states[0]),
        ]
        for leg_number, (start, target) in enumerate(waypoints, 1):
            leg = self.searcher.search(start, target, problem)
            legs.append(leg)
            if not leg.success:
                logger.warning(f"Leg {leg_number} ({start} -> {target}) failed: {leg.termination_reason}")
                return SolveResult(
                    success=False,
                    legs=legs,
                    termination_reason=f"leg{leg_number}_{leg.termination_reason}",
                    computation_time=time.perf_counter() - start_time
                )

        actions = legs[0].actions + legs[1].actions
        logger.info(f"Solved with {len(actions)} actions "
                    f"({len(legs[0].actions)} to key, {len(legs[1].actions)} to goal)")
        return SolveResult(
            success=True,
            actions=actions,
            legs=legs,
            termination_reason="solved",
            computation_time=time.perf_counter() - start_time
        )

    def solve(self, problem: BaseProblem) -> Optional[List[Action]]:
        """Actions leading from the initial state through the key to a goal, or None."""
        return self.solve_problem(problem).actions


def solve(problem: BaseProblem, searcher: Optional[AStarSearcher] = None) -> Optional[List[Action]]:
    """Solve ``problem`` with a fresh solver.

    Returns:
        Action list such as ``["R", "R", "D"]``, or None if there is no solution
    """
    return MazeSolver(searcher).solve(problem)
