"""Loading mazes from disk and saving solver results."""

import json
import logging
from pathlib import Path
from typing import Any, Dict, List, Union

logger = logging.getLogger(__name__)


def load_maze_from_file(file_path: Union[str, Path]) -> List[str]:
    """Load maze rows from a text file.

    Each non-blank line is one maze row; surrounding whitespace is stripped.

    Args:
        file_path: Path to the maze text file

    Returns:
        Maze rows

    Raises:
        FileNotFoundError: If file doesn't exist
    """
    file_path = Path(file_path)

    if not file_path.exists():
        raise FileNotFoundError(f"Maze file not found: {file_path}")

    with open(file_path, 'r') as f:
        rows = [line.strip() for line in f if line.strip()]

    logger.debug(f"Loaded {len(rows)} maze rows from {file_path}")
    return rows


def load_mazes_from_json(file_path: Union[str, Path]) -> Dict[str, List[str]]:
    """Load several mazes from a JSON file.

    The file holds either an object mapping names to row lists, or a list of
    row lists (named ``maze_0``, ``maze_1``, ...).

    Raises:
        FileNotFoundError: If file doesn't exist
        ValueError: If file format is invalid
    """
    file_path = Path(file_path)

    if not file_path.exists():
        raise FileNotFoundError(f"Maze file not found: {file_path}")

    try:
        with open(file_path, 'r') as f:
            data = json.load(f)
    except json.JSONDecodeError as e:
        raise ValueError(f"Invalid JSON in {file_path}: {e}")

    if isinstance(data, list):
        data = {f"maze_{i}": rows for i, rows in enumerate(data)}
    if not isinstance(data, dict):
        raise ValueError(f"Expected an object or a list of mazes in {file_path}")

    mazes = {}
    for name, rows in data.items():
        if not isinstance(rows, list) or not all(isinstance(row, str) for row in rows):
            raise ValueError(f"Maze {name!r} in {file_path} must be a list of strings")
        mazes[str(name)] = rows
    return mazes


def save_results(results: Dict[str, Any],
                 output_path: Union[str, Path],
                 pretty: bool = True) -> None:
    """Save results to JSON file.

    Args:
        results: Results dictionary
        output_path: Output file path
        pretty: Whether to pretty-print JSON
    """
    output_path = Path(output_path)
    output_path.parent.mkdir(parents=True, exist_ok=True)

    with open(output_path, 'w') as f:
        if pretty:
            json.dump(results, f, indent=2, sort_keys=True)
        else:
            json.dump(results, f)

    logger.info(f"Results saved to {output_path}")
