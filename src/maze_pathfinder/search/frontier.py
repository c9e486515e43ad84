"""Priority-ordered frontier for best-first search."""

import heapq
import itertools
from typing import Dict, Hashable, List, Tuple

from maze_pathfinder.core.data_models import SearchNode
from maze_pathfinder.core.exceptions import EmptyFrontierError


class Frontier:
    """Min-heap of search nodes keyed by priority.

    Equal priorities are extracted lowest path cost first, then in insertion
    order: every entry carries the node cost and an insertion sequence number
    as secondary keys. The frontier also keeps a
    count of entries per state so membership tests are O(1).
    """

    def __init__(self):
        self._heap: List[Tuple[float, float, int, SearchNode]] = []
        self._state_counts: Dict[Hashable, int] = {}
        self._sequence = itertools.count()

    def insert(self, node: SearchNode) -> None:
        """Add a node to the frontier."""
        heapq.heappush(self._heap, (node.priority, node.cost, next(self._sequence), node))
        self._state_counts[node.state] = self._state_counts.get(node.state, 0) + 1

    def extract_min(self) -> SearchNode:
        """Remove and return the node with the smallest priority.

        Raises:
            EmptyFrontierError: If the frontier holds no nodes
        """
        if not self._heap:
            raise EmptyFrontierError("Cannot extract from an empty frontier")

        _, _, _, node = heapq.heappop(self._heap)
        remaining = self._state_counts[node.state] - 1
        if remaining:
            self._state_counts[node.state] = remaining
        else:
            del self._state_counts[node.state]
        return node

    def contains_state(self, state: Hashable) -> bool:
        """True if some node currently in the frontier holds ``state``."""
        return state in self._state_counts

    def __len__(self) -> int:
        return len(self._heap)

    def __bool__(self) -> bool:
        return bool(self._heap)
