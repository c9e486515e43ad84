"""Abstract problem interface consumed by the search kernel."""

from abc import ABC, abstractmethod
from typing import Dict, Hashable, Optional, Sequence

from maze_pathfinder.core.data_models import Action


class BaseProblem(ABC):
    """Transition model and heuristics for a two-stage search.

    The kernel never inspects the underlying representation; it only calls
    the methods below. ``transitions`` must iterate deterministically so that
    tie-breaking between equal priorities is reproducible.
    """

    @property
    @abstractmethod
    def initial_state(self) -> Hashable:
        """State the first leg starts from."""
        pass

    @property
    @abstractmethod
    def key_state(self) -> Optional[Hashable]:
        """Intermediate state the first leg must reach, if any."""
        pass

    @property
    @abstractmethod
    def goal_states(self) -> Sequence[Hashable]:
        """Recognized goal states, in a stable order."""
        pass

    @abstractmethod
    def is_goal(self, state: Hashable) -> bool:
        pass

    @abstractmethod
    def distance_to_goal(self, state: Hashable) -> float:
        """Heuristic estimate from ``state`` to the nearest goal."""
        pass

    @abstractmethod
    def distance(self, a: Hashable, b: Hashable) -> float:
        """Heuristic estimate between two arbitrary states."""
        pass

    def step_cost(self, state: Hashable, action: Action, next_state: Hashable) -> float:
        """Cost of moving from ``state`` to ``next_state`` by ``action``.

        The kernel sums step costs along a path, so a node's cost is always
        measured from the start of the current search. Unit cost by default.
        """
        return 1

    @abstractmethod
    def transitions(self, state: Hashable) -> Dict[Action, Hashable]:
        """Legal moves from ``state`` as a mapping of action to next state."""
        pass
