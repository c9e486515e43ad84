"""Exception hierarchy for the maze pathfinder."""

from typing import Optional


class PathfinderError(Exception):
    """Base class for all pathfinder failures."""
    pass


class NoSolutionError(PathfinderError):
    """Raised when the frontier is exhausted before the target is reached."""
    pass


class EmptyFrontierError(PathfinderError):
    """Raised when extracting from an empty frontier.

    The search kernel checks the frontier before every extraction, so this
    escaping a search run indicates a defect rather than an unsolvable maze.
    """
    pass


class SearchBudgetExceededError(PathfinderError):
    """Raised when a search run exceeds its node or time budget."""

    def __init__(self, message: str, reason: Optional[str] = None):
        super().__init__(message)
        self.reason = reason


class MazeFormatError(PathfinderError):
    """Raised when maze text cannot be parsed into a problem."""
    pass
