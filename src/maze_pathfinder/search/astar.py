"""A* search kernel for the maze pathfinder.

This module implements best-first search over an abstract problem: nodes are
kept in a per-run arena, the frontier is a priority queue ordered by
``cost + heuristic`` (``cost`` sums ``step_cost`` from the start of the run,
ties go to the lower cost), and a state discovered once is never inserted
again. Closed states are not reopened when a cheaper path shows up
later, so with an inconsistent heuristic the returned path can be longer
than the optimum.
"""

import logging
import time
from dataclasses import dataclass, field
from typing import Any, Dict, Hashable, List, Optional, Set

from maze_pathfinder.core.data_models import Action, SearchNode, SearchTree
from maze_pathfinder.core.exceptions import NoSolutionError, SearchBudgetExceededError
from maze_pathfinder.core.problem import BaseProblem
from maze_pathfinder.search.frontier import Frontier
from maze_pathfinder.search.heuristics import SearchStrategy, make_strategy
from maze_pathfinder.search.path import build_path

logger = logging.getLogger(__name__)

GOAL_REACHED = "goal_reached"
SEARCH_EXHAUSTED = "search_exhausted"
MAX_NODES_REACHED = "max_nodes_reached"
TIMEOUT = "timeout"


@dataclass
class SearchStatistics:
    """Counters collected during one search run."""
    nodes_expanded: int = 0
    nodes_generated: int = 0
    duplicate_states: int = 0
    max_frontier_size: int = 0
    max_depth_reached: int = 0

    def to_dict(self) -> Dict[str, Any]:
        """Convert statistics to dictionary."""
        return {
            'nodes_expanded': self.nodes_expanded,
            'nodes_generated': self.nodes_generated,
            'duplicate_states': self.duplicate_states,
            'max_frontier_size': self.max_frontier_size,
            'max_depth_reached': self.max_depth_reached
        }


@dataclass
class SearchResult:
    """Result from one search run.

    ``actions`` is ``None`` whenever ``success`` is false; an empty list means
    the start already satisfied the termination test.
    """
    success: bool
    actions: Optional[List[Action]] = None
    final_state: Optional[Hashable] = None
    cost: float = 0.0
    mode: str = ""
    nodes_expanded: int = 0
    nodes_generated: int = 0
    computation_time: float = 0.0
    termination_reason: str = "unknown"
    stats: Dict[str, Any] = field(default_factory=dict)

    def to_dict(self) -> Dict[str, Any]:
        return {
            'success': self.success,
            'actions': list(self.actions) if self.actions is not None else None,
            'final_state': str(self.final_state) if self.final_state is not None else None,
            'cost': self.cost,
            'mode': self.mode,
            'nodes_expanded': self.nodes_expanded,
            'nodes_generated': self.nodes_generated,
            'computation_time': self.computation_time,
            'termination_reason': self.termination_reason,
            'stats': dict(self.stats)
        }


@dataclass
class SearchConfig:
    """Configuration for A* search."""
    max_nodes_expanded: int = 100000  # Expansion budget per run
    max_computation_time: float = 10.0  # Seconds per run


class SearchRun:
    """State owned by a single search run."""

    def __init__(self):
        self.tree = SearchTree()
        self.frontier = Frontier()
        self.explored: Set[Hashable] = set()

    def is_known(self, state: Hashable) -> bool:
        """True if the state was already expanded or is waiting in the frontier."""
        return state in self.explored or self.frontier.contains_state(state)


class AStarSearcher:
    """Best-first search kernel with node and time budgets."""

    def __init__(self, config: Optional[SearchConfig] = None):
        """Initialize A* searcher.

        Args:
            config: Search configuration parameters
        """
        self.config = config or SearchConfig()
        self.statistics = SearchStatistics()

        logger.debug(f"A* searcher initialized with max_nodes={self.config.max_nodes_expanded}, "
                     f"max_time={self.config.max_computation_time}s")

    def search(self, start: Hashable, target: Hashable, problem: BaseProblem) -> SearchResult:
        """Search for an action sequence leading from ``start`` to ``target``.

        When ``problem.is_goal(target)`` holds, any goal state ends the search;
        otherwise ``target`` itself must be reached.

        Args:
            start: State to navigate from
            target: State to navigate to
            problem: Problem supplying transitions and heuristics

        Returns:
            SearchResult with the action sequence and statistics
        """
        start_time = time.perf_counter()
        deadline = start_time + self.config.max_computation_time
        self.statistics = SearchStatistics()

        strategy = make_strategy(problem, target)
        logger.info(f"Starting A* search ({strategy.mode} mode): {start} -> {target}")

        run = SearchRun()
        root = run.tree.add_root(start, strategy.heuristic(start))
        run.frontier.insert(root)
        self.statistics.nodes_generated = 1
        self.statistics.max_frontier_size = 1

        while True:
            if not run.frontier:
                termination_reason = SEARCH_EXHAUSTED
                break
            if self.statistics.nodes_expanded >= self.config.max_nodes_expanded:
                termination_reason = MAX_NODES_REACHED
                break
            if time.perf_counter() > deadline:
                termination_reason = TIMEOUT
                break

            current = run.frontier.extract_min()
            run.explored.add(current.state)

            if strategy.is_terminal(current.state):
                computation_time = time.perf_counter() - start_time
                actions = build_path(run.tree, current)
                logger.info(f"Reached {current.state} with {len(actions)} actions after "
                            f"{self.statistics.nodes_expanded} expansions")
                return self._create_result(
                    strategy, computation_time, GOAL_REACHED,
                    actions=actions, final_state=current.state, cost=current.cost
                )

            self._expand(current, run, problem, strategy)

        computation_time = time.perf_counter() - start_time
        logger.info(f"A* search from {start} to {target} failed: {termination_reason}")
        return self._create_result(strategy, computation_time, termination_reason)

    def go_from_to(self, start: Hashable, target: Hashable, problem: BaseProblem) -> List[Action]:
        """Return the actions leading from ``start`` to ``target``.

        Raises:
            NoSolutionError: If the target is unreachable
            SearchBudgetExceededError: If the node or time budget ran out
        """
        result = self.search(start, target, problem)
        if result.success:
            return result.actions

        if result.termination_reason == SEARCH_EXHAUSTED:
            raise NoSolutionError(f"No path from {start} to {target}")
        raise SearchBudgetExceededError(
            f"Search from {start} to {target} stopped: {result.termination_reason}",
            reason=result.termination_reason
        )

    def _expand(self, node: SearchNode, run: SearchRun,
                problem: BaseProblem, strategy: SearchStrategy) -> None:
        """Insert the unseen successors of ``node`` into the frontier."""
        self.statistics.nodes_expanded += 1

        for action, next_state in problem.transitions(node.state).items():
            if run.is_known(next_state):
                self.statistics.duplicate_states += 1
                continue

            cost = node.cost + problem.step_cost(node.state, action, next_state)
            priority = cost + strategy.heuristic(next_state)
            child = run.tree.add_child(node, next_state, action, priority, cost)
            run.frontier.insert(child)

            self.statistics.nodes_generated += 1
            self.statistics.max_depth_reached = max(self.statistics.max_depth_reached, child.depth)

        self.statistics.max_frontier_size = max(self.statistics.max_frontier_size, len(run.frontier))
        logger.debug(f"Expanded {node}: frontier size {len(run.frontier)}")

    def _create_result(self, strategy: SearchStrategy, computation_time: float,
                       termination_reason: str, actions: Optional[List[Action]] = None,
                       final_state: Optional[Hashable] = None, cost: float = 0.0) -> SearchResult:
        return SearchResult(
            success=actions is not None,
            actions=actions,
            final_state=final_state,
            cost=cost,
            mode=strategy.mode,
            nodes_expanded=self.statistics.nodes_expanded,
            nodes_generated=self.statistics.nodes_generated,
            computation_time=computation_time,
            termination_reason=termination_reason,
            stats=self.statistics.to_dict()
        )

    def get_search_stats(self) -> Dict[str, Any]:
        """Get statistics of the most recent run."""
        return {
            **self.statistics.to_dict(),
            'config': {
                'max_nodes_expanded': self.config.max_nodes_expanded,
                'max_computation_time': self.config.max_computation_time
            }
        }


def create_astar_searcher(max_nodes_expanded: Optional[int] = None,
                          max_computation_time: Optional[float] = None) -> AStarSearcher:
    """Factory function to create an A* searcher.

    Budgets not given explicitly are taken from the loaded configuration's
    ``search`` section, falling back to ``SearchConfig`` defaults.

    Args:
        max_nodes_expanded: Maximum expansions per run
        max_computation_time: Maximum seconds per run

    Returns:
        Configured AStarSearcher instance
    """
    from maze_pathfinder.config import get_config

    defaults = SearchConfig()
    cfg = get_config()
    search_cfg = cfg.get('search', {}) if cfg is not None else {}

    if max_nodes_expanded is None:
        max_nodes_expanded = int(search_cfg.get('max_nodes_expanded', defaults.max_nodes_expanded))
    if max_computation_time is None:
        max_computation_time = float(search_cfg.get('max_computation_time', defaults.max_computation_time))

    return AStarSearcher(SearchConfig(
        max_nodes_expanded=max_nodes_expanded,
        max_computation_time=max_computation_time
    ))
