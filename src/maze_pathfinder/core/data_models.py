"""Core data models for the maze pathfinder."""

from dataclasses import dataclass
from typing import Hashable, Iterator, List, Optional

# Actions are short string labels such as "U" or "R".
Action = str


@dataclass(frozen=True)
class MazeState:
    """A (col, row) position in the maze."""

    col: int
    row: int

    def __str__(self) -> str:
        return f"({self.col},{self.row})"


@dataclass(eq=False)
class SearchNode:
    """Node in the search tree.

    Nodes are stored in a ``SearchTree`` arena; ``parent`` is the arena index
    of the parent node, or ``None`` for the root. ``cost`` is the path cost
    accumulated from the root. Two nodes are duplicates when they hold the
    same state, whatever their priority or path.
    """
    state: Hashable
    priority: float
    cost: float = 0.0
    action: Optional[Action] = None
    parent: Optional[int] = None
    depth: int = 0
    index: int = 0

    @property
    def is_root(self) -> bool:
        return self.parent is None

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, SearchNode):
            return NotImplemented
        return self.state == other.state

    def __hash__(self) -> int:
        return hash(self.state)

    def __str__(self) -> str:
        return f"({self.priority} , {self.state})"


class SearchTree:
    """Arena owning every node created during one search run.

    Parent links are arena indices, so the whole tree is released at once
    when the run drops the arena.
    """

    def __init__(self):
        self._nodes: List[SearchNode] = []

    def add_root(self, state: Hashable, priority: float) -> SearchNode:
        """Create the root node.

        Raises:
            ValueError: If the tree already has a root
        """
        if self._nodes:
            raise ValueError("Search tree already has a root")
        node = SearchNode(state=state, priority=priority, index=0)
        self._nodes.append(node)
        return node

    def add_child(self, parent: SearchNode, state: Hashable,
                  action: Action, priority: float, cost: float) -> SearchNode:
        """Create a node reached from ``parent`` by ``action``.

        Args:
            parent: Node that was expanded
            state: Resulting state
            action: Action label leading from parent to state
            priority: Frontier priority of the new node
            cost: Path cost from the root to the new node

        Returns:
            The new node, already stored in the arena
        """
        if action is None:
            raise ValueError("Only the root node may have no action")
        if not 0 <= parent.index < len(self._nodes) or self._nodes[parent.index] is not parent:
            raise ValueError(f"Parent node {parent} does not belong to this tree")
        node = SearchNode(
            state=state,
            priority=priority,
            cost=cost,
            action=action,
            parent=parent.index,
            depth=parent.depth + 1,
            index=len(self._nodes),
        )
        self._nodes.append(node)
        return node

    def parent_of(self, node: SearchNode) -> Optional[SearchNode]:
        if node.parent is None:
            return None
        return self._nodes[node.parent]

    def __getitem__(self, index: int) -> SearchNode:
        return self._nodes[index]

    def __len__(self) -> int:
        return len(self._nodes)

    def __iter__(self) -> Iterator[SearchNode]:
        return iter(self._nodes)
