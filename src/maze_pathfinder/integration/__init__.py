"""File I/O for mazes and results."""

from .io import load_maze_from_file, load_mazes_from_json, save_results

__all__ = [
    'load_maze_from_file',
    'load_mazes_from_json',
    'save_results'
]
