"""Maze pathfinder: best-first search from an initial cell through a key to a goal."""

__version__ = "0.1.0"
