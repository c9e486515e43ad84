"""Grid maze problem with a key and one or more goals."""

import logging
from typing import Dict, List, Optional, Sequence

import numpy as np

from maze_pathfinder.core.data_models import Action, MazeState
from maze_pathfinder.core.exceptions import MazeFormatError
from maze_pathfinder.core.problem import BaseProblem
from maze_pathfinder.search.heuristics import manhattan_distance

logger = logging.getLogger(__name__)

WALL = 'X'
OPEN = '.'
INITIAL = 'I'
KEY = 'K'
GOAL = 'G'
MUD = 'M'
PATH_MARK = '*'

CELL_TYPES = frozenset({WALL, OPEN, INITIAL, KEY, GOAL, MUD})

MUD_COST = 3

# Action label -> (d_col, d_row); iteration order is the transition order.
MOVES: Dict[Action, tuple] = {
    "U": (0, -1),
    "D": (0, 1),
    "L": (-1, 0),
    "R": (1, 0),
}


class MazeProblem(BaseProblem):
    """Maze given as rows of cell characters.

    - ``X`` wall, ``.`` open floor, ``M`` mud (passable, costlier)
    - ``I`` initial state (exactly one), ``K`` key (at most one)
    - ``G`` goal (at least one)

    States are ``MazeState(col, row)`` and actions are ``U``, ``D``, ``L``,
    ``R``. Heuristics are Manhattan distances, which never overestimate on a
    4-connected grid.
    """

    def __init__(self, maze: Sequence[str], mud_cost: int = MUD_COST):
        """Parse the maze.

        Args:
            maze: Maze rows, all of the same width
            mud_cost: Cost of entering a mud cell

        Raises:
            MazeFormatError: If the maze is malformed
        """
        if mud_cost < 1:
            raise ValueError(f"mud_cost must be at least 1, got {mud_cost}")
        self.mud_cost = mud_cost
        self.grid = self._parse_grid(maze)
        self.rows, self.cols = self.grid.shape

        initial = self._find_cells(INITIAL)
        if len(initial) != 1:
            raise MazeFormatError(f"Maze must contain exactly one '{INITIAL}' cell, found {len(initial)}")
        keys = self._find_cells(KEY)
        if len(keys) > 1:
            raise MazeFormatError(f"Maze must contain at most one '{KEY}' cell, found {len(keys)}")
        goals = self._find_cells(GOAL)
        if not goals:
            raise MazeFormatError(f"Maze must contain at least one '{GOAL}' cell")

        self._initial_state = initial[0]
        self._key_state = keys[0] if keys else None
        self._goal_states = goals
        self._goal_set = frozenset(goals)
        self._goal_coords = np.array([(g.col, g.row) for g in goals], dtype=np.int64)

        if self._key_state is None:
            logger.warning("Maze has no key cell; it cannot be solved")
        logger.debug(f"Parsed {self.rows}x{self.cols} maze with {len(goals)} goal(s)")

    @classmethod
    def from_text(cls, text: str, mud_cost: int = MUD_COST) -> 'MazeProblem':
        """Build a maze from newline-separated text, ignoring blank lines."""
        rows = [line.strip() for line in text.splitlines() if line.strip()]
        return cls(rows, mud_cost=mud_cost)

    @staticmethod
    def _parse_grid(maze: Sequence[str]) -> np.ndarray:
        if not maze:
            raise MazeFormatError("Maze has no rows")

        width = len(maze[0])
        if width == 0:
            raise MazeFormatError("Maze rows must not be empty")
        for row_index, row in enumerate(maze):
            if len(row) != width:
                raise MazeFormatError(
                    f"Row {row_index} has width {len(row)}, expected {width}"
                )
            unknown = set(row) - CELL_TYPES
            if unknown:
                raise MazeFormatError(
                    f"Row {row_index} contains unknown cell(s): {''.join(sorted(unknown))}"
                )

        return np.array([list(row) for row in maze], dtype='<U1')

    def _find_cells(self, cell: str) -> List[MazeState]:
        """Positions of ``cell`` in row-major order."""
        rows, cols = np.nonzero(self.grid == cell)
        return [MazeState(int(c), int(r)) for r, c in zip(rows, cols)]

    @property
    def initial_state(self) -> MazeState:
        return self._initial_state

    @property
    def key_state(self) -> Optional[MazeState]:
        return self._key_state

    @property
    def goal_states(self) -> List[MazeState]:
        return list(self._goal_states)

    def cell(self, state: MazeState) -> str:
        return str(self.grid[state.row, state.col])

    def is_goal(self, state: MazeState) -> bool:
        return state in self._goal_set

    def distance(self, a: MazeState, b: MazeState) -> int:
        return manhattan_distance((a.col, a.row), (b.col, b.row))

    def distance_to_goal(self, state: MazeState) -> int:
        """Manhattan distance to the nearest goal."""
        offsets = np.abs(self._goal_coords - np.array([state.col, state.row]))
        return int(offsets.sum(axis=1).min())

    def get_cost(self, state: MazeState) -> int:
        """Cost of entering ``state``."""
        return self.mud_cost if self.cell(state) == MUD else 1

    def step_cost(self, state: MazeState, action: Action, next_state: MazeState) -> int:
        return self.get_cost(next_state)

    def transitions(self, state: MazeState) -> Dict[Action, MazeState]:
        result = {}
        for action, (d_col, d_row) in MOVES.items():
            col, row = state.col + d_col, state.row + d_row
            if 0 <= col < self.cols and 0 <= row < self.rows and self.grid[row, col] != WALL:
                result[action] = MazeState(col, row)
        return result

    def path_cost(self, actions: Sequence[Action]) -> int:
        """Total cost of following ``actions`` from the initial state."""
        return sum(self.get_cost(state) for state in self.trace(actions)[1:])

    def trace(self, actions: Sequence[Action]) -> List[MazeState]:
        """States visited when following ``actions`` from the initial state.

        Raises:
            ValueError: If an action is not legal where it is taken
        """
        state = self._initial_state
        visited = [state]
        for step, action in enumerate(actions):
            moves = self.transitions(state)
            if action not in moves:
                raise ValueError(f"Illegal action {action!r} at step {step} from {state}")
            state = moves[action]
            visited.append(state)
        return visited

    def render_path(self, actions: Sequence[Action]) -> List[str]:
        """Draw the route of ``actions`` over the maze, marking open cells with '*'."""
        canvas = self.grid.copy()
        for state in self.trace(actions):
            if canvas[state.row, state.col] == OPEN:
                canvas[state.row, state.col] = PATH_MARK
        return [''.join(row) for row in canvas]
