"""Shared fixtures and synthetic problems for the test suite."""

import math
import time
from collections import deque

import pytest

from maze_pathfinder.config import reset_config
from maze_pathfinder.core.problem import BaseProblem


class GraphProblem(BaseProblem):
    """Explicit directed graph with unit edge costs.

    ``costs`` maps ``(state, next_state)`` pairs to other edge costs. Without a
    ``heuristic`` table the heuristics are exact hop distances (a perfect,
    consistent heuristic); with one, ``distance`` and ``distance_to_goal``
    read the table and default to 0. Every ``transitions`` call is recorded
    in ``expanded``.
    """

    def __init__(self, edges, initial, key=None, goals=(), heuristic=None, costs=None):
        self.edges = edges
        self.costs = costs or {}
        self._initial = initial
        self._key = key
        self._goals = list(goals)
        self.heuristic = heuristic
        self.expanded = []
        self._hop_cache = {}

    @property
    def initial_state(self):
        return self._initial

    @property
    def key_state(self):
        return self._key

    @property
    def goal_states(self):
        return list(self._goals)

    def _hops_from(self, source):
        if source not in self._hop_cache:
            dist = {source: 0}
            queue = deque([source])
            while queue:
                state = queue.popleft()
                for next_state in self.edges.get(state, {}).values():
                    if next_state not in dist:
                        dist[next_state] = dist[state] + 1
                        queue.append(next_state)
            self._hop_cache[source] = dist
        return self._hop_cache[source]

    def hops(self, a, b):
        return self._hops_from(a).get(b, math.inf)

    def is_goal(self, state):
        return state in self._goals

    def distance(self, a, b):
        if self.heuristic is not None:
            return self.heuristic.get(a, 0)
        return self.hops(a, b)

    def distance_to_goal(self, state):
        if self.heuristic is not None:
            return self.heuristic.get(state, 0)
        return min((self.hops(state, goal) for goal in self._goals), default=math.inf)

    def step_cost(self, state, action, next_state):
        return self.costs.get((state, next_state), 1)

    def transitions(self, state):
        self.expanded.append(state)
        return dict(self.edges.get(state, {}))


class CounterProblem(BaseProblem):
    """Infinite line of integers; nothing is ever a goal."""

    def __init__(self, delay: float = 0.0):
        self.delay = delay

    @property
    def initial_state(self):
        return 0

    @property
    def key_state(self):
        return None

    @property
    def goal_states(self):
        return []

    def is_goal(self, state):
        return False

    def distance(self, a, b):
        return 0

    def distance_to_goal(self, state):
        return 0

    def transitions(self, state):
        if self.delay:
            time.sleep(self.delay)
        return {"dec": state - 1, "inc": state + 1}


def apply_actions(problem, start, actions):
    """Follow ``actions`` from ``start`` through ``problem.transitions``."""
    state = start
    for action in actions:
        state = problem.transitions(state)[action]
    return state


@pytest.fixture(autouse=True)
def clean_global_config():
    """Keep the global configuration from leaking between tests."""
    reset_config()
    yield
    reset_config()


@pytest.fixture
def diamond_graph():
    """Graph with a unique shortest path S-A-C-T and a longer branch via B."""
    return {
        "S": {"r": "A", "d": "B"},
        "A": {"r": "C"},
        "B": {"d": "E"},
        "E": {"r": "F"},
        "F": {"u": "C"},
        "C": {"r": "T"},
        "T": {},
    }
