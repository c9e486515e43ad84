"""Action sequence reconstruction from the search tree."""

from typing import List

from maze_pathfinder.core.data_models import Action, SearchNode, SearchTree


def build_path(tree: SearchTree, node: SearchNode) -> List[Action]:
    """Get the sequence of actions from the root to ``node``.

    Args:
        tree: Arena the node belongs to
        node: Terminal node of a successful search

    Returns:
        Actions in start-to-target order; empty for the root itself
    """
    actions = []
    current = node
    while current.parent is not None:
        actions.append(current.action)
        current = tree[current.parent]
    actions.reverse()
    return actions
