"""CLI command implementations."""

import json
import logging
import time
from pathlib import Path
from typing import Any, Dict, List, Optional, Tuple

from omegaconf import DictConfig, OmegaConf

from maze_pathfinder import __version__
from maze_pathfinder.config import load_config, validate_config, ConfigValidationError
from maze_pathfinder.core.exceptions import MazeFormatError
from maze_pathfinder.integration.io import load_maze_from_file, load_mazes_from_json, save_results
from maze_pathfinder.problem import DEMO_MAZES, MazeProblem, MUD_COST
from maze_pathfinder.search.astar import create_astar_searcher
from maze_pathfinder.solver import MazeSolver

from .utils import format_duration

logger = logging.getLogger(__name__)


def _build_overrides(args) -> List[str]:
    overrides = []
    if getattr(args, 'max_nodes', None) is not None:
        overrides.append(f"search.max_nodes_expanded={args.max_nodes}")
    if getattr(args, 'timeout', None) is not None:
        overrides.append(f"search.max_computation_time={args.timeout}")
    if getattr(args, 'config', None):
        overrides.append(args.config)
    return overrides


def _mud_cost(config: Optional[DictConfig]) -> int:
    if config is None:
        return MUD_COST
    return int(OmegaConf.select(config, 'problem.mud_cost', default=MUD_COST))


def solve_command(args) -> int:
    """Handle solve command.

    Args:
        args: Parsed command line arguments

    Returns:
        Exit code (0 if a solution was found)
    """
    try:
        logger.info(f"Loading maze from {args.maze_file}")
        rows = load_maze_from_file(args.maze_file)

        config = load_config(overrides=_build_overrides(args))
        problem = MazeProblem(rows, mud_cost=_mud_cost(config))
        solver = MazeSolver(create_astar_searcher())

        start_time = time.perf_counter()
        solve_result = solver.solve_problem(problem)
        total_time = time.perf_counter() - start_time

    except (FileNotFoundError, MazeFormatError, ConfigValidationError) as e:
        logger.error(f"Cannot solve {args.maze_file}: {e}")
        return 1

    result: Dict[str, Any] = solve_result.to_dict()
    result.update({
        'maze_file': str(args.maze_file),
        'solver_version': __version__,
        'total_time': total_time
    })

    if args.output:
        save_results(result, args.output)
    else:
        print(json.dumps(result, indent=2))

    if not args.quiet:
        status = "solved" if solve_result.success else "no solution"
        print(f"\nMaze: {Path(args.maze_file).name} - {status} in {format_duration(total_time)}")
        if args.show and solve_result.success:
            print("\n".join(problem.render_path(solve_result.actions)))

    return 0 if solve_result.success else 1


def _solve_named_mazes(mazes: Dict[str, List[str]], config: Optional[DictConfig]) -> Tuple[Dict[str, Any], int]:
    """Solve each named maze, printing one ``name: actions`` line per maze.

    Returns:
        The results keyed by maze name and the number of malformed mazes
    """
    solver = MazeSolver(create_astar_searcher())
    mud_cost = _mud_cost(config)

    results: Dict[str, Any] = {}
    malformed = 0
    for name, rows in mazes.items():
        try:
            problem = MazeProblem(rows, mud_cost=mud_cost)
        except MazeFormatError as e:
            logger.error(f"Skipping maze {name}: {e}")
            results[name] = {'error': str(e)}
            malformed += 1
            print(f"{name}: error: {e}")
            continue

        actions = solver.solve(problem)
        results[name] = actions
        print(f"{name}: {json.dumps(actions)}")

    return results, malformed


def demo_command(args) -> int:
    """Solve the built-in demo mazes and print each solution (or null)."""
    config = load_config(overrides=_build_overrides(args))
    results, _ = _solve_named_mazes(DEMO_MAZES, config)

    if args.output:
        save_results(results, args.output)

    return 0


def batch_command(args) -> int:
    """Handle batch command.

    Solves every maze in a JSON file. A malformed maze is reported and
    skipped; the others are still solved.

    Returns:
        Exit code (1 if the file could not be read or any maze was malformed)
    """
    try:
        logger.info(f"Loading mazes from {args.mazes_file}")
        mazes = load_mazes_from_json(args.mazes_file)
        config = load_config(overrides=_build_overrides(args))
    except (FileNotFoundError, ValueError, ConfigValidationError) as e:
        logger.error(f"Cannot run batch {args.mazes_file}: {e}")
        return 1

    start_time = time.perf_counter()
    results, malformed = _solve_named_mazes(mazes, config)
    total_time = time.perf_counter() - start_time

    if args.output:
        save_results(results, args.output)

    if not args.quiet:
        solved = sum(1 for actions in results.values() if isinstance(actions, list))
        print(f"\nSolved {solved}/{len(results)} mazes in {format_duration(total_time)}")

    return 1 if malformed else 0


def config_command(args) -> int:
    """Handle config command.

    Args:
        args: Parsed command line arguments

    Returns:
        Exit code
    """
    overrides = [args.config] if getattr(args, 'config', None) else []

    if args.config_action == 'show':
        config = load_config(overrides=overrides)
        print("Current Configuration:")
        print("=" * 50)
        print(OmegaConf.to_yaml(config, resolve=True))
        return 0

    elif args.config_action == 'validate':
        try:
            config = load_config(overrides=overrides, validate=False)
            validate_config(config)
            print("Configuration is valid")
            return 0
        except ConfigValidationError as e:
            print(f"Configuration validation failed: {e}")
            return 1

    print("Unknown config action")
    return 1
