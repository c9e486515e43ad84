"""Command-line interface for the maze pathfinder.

This module provides CLI commands for solving a maze file, a JSON set of
mazes, or the built-in demo mazes.
"""

from .main import main_cli
from .commands import solve_command, batch_command, demo_command, config_command
from .utils import setup_logging

__all__ = [
    'main_cli',
    'solve_command',
    'batch_command',
    'demo_command',
    'config_command',
    'setup_logging'
]
