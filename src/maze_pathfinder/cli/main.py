"""Command line entry point for the maze pathfinder."""

import sys
import argparse
import logging
from typing import List, Optional

from . import commands
from .utils import setup_logging


def _add_budget_arguments(parser: argparse.ArgumentParser) -> None:
    parser.add_argument(
        '--max-nodes',
        type=int,
        default=None,
        help='Expansion budget for each leg (defaults to search.max_nodes_expanded)'
    )
    parser.add_argument(
        '--timeout', '-t',
        type=float,
        default=None,
        help='Seconds allowed for each leg (defaults to search.max_computation_time)'
    )


def create_parser() -> argparse.ArgumentParser:
    """Build the ``maze-pathfinder`` argument parser."""
    parser = argparse.ArgumentParser(
        prog='maze-pathfinder',
        description='Find a route from I to the key K and on to a goal G in a text maze.',
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Maze cells: X wall, . open, M mud, I start, K key, G goal.

Usage examples:
  maze-pathfinder solve maze.txt --show            # solve and draw the route
  maze-pathfinder -c problem.mud_cost=5 solve m.txt  # make mud more expensive
  maze-pathfinder batch mazes.json -o routes.json  # solve a JSON set of mazes
  maze-pathfinder demo                             # run the bundled mazes
  maze-pathfinder config validate                  # check the configuration
        """
    )

    parser.add_argument(
        '--config', '-c',
        type=str,
        help='Hydra-style override applied to the configuration, e.g. problem.mud_cost=5'
    )
    parser.add_argument(
        '--verbose', '-v',
        action='count',
        default=0,
        help='Log search progress (-v) or every expansion (-vv)'
    )
    parser.add_argument(
        '--quiet', '-q',
        action='store_true',
        help='Print only the routes, no summaries or warnings'
    )
    parser.add_argument(
        '--output', '-o',
        type=str,
        help='Write the routes to this JSON file'
    )

    subparsers = parser.add_subparsers(
        dest='command',
        help='What to do',
        metavar='COMMAND'
    )

    solve_parser = subparsers.add_parser(
        'solve',
        help='Solve one maze file',
        description='Solve a maze stored as text, one row of cells per line'
    )
    solve_parser.add_argument(
        'maze_file',
        type=str,
        help='Text file holding the maze'
    )
    _add_budget_arguments(solve_parser)
    solve_parser.add_argument(
        '--show',
        action='store_true',
        help='Print the maze with the route marked by *'
    )

    batch_parser = subparsers.add_parser(
        'batch',
        help='Solve every maze in a JSON file',
        description='Solve a JSON object of named mazes, or a JSON list of mazes, '
                    'each given as a list of row strings'
    )
    batch_parser.add_argument(
        'mazes_file',
        type=str,
        help='JSON file holding the mazes'
    )
    _add_budget_arguments(batch_parser)

    subparsers.add_parser(
        'demo',
        help='Solve the bundled example mazes',
        description='Solve the bundled example mazes and print one route per line'
    )

    config_parser = subparsers.add_parser(
        'config',
        help='Inspect the configuration',
        description='Print or check the composed search configuration'
    )
    config_subparsers = config_parser.add_subparsers(
        dest='config_action',
        help='Configuration actions'
    )
    config_subparsers.add_parser(
        'show',
        help='Print the composed configuration as YAML'
    )
    config_subparsers.add_parser(
        'validate',
        help='Check budgets and mud cost are in range'
    )

    return parser


def main_cli(args: Optional[List[str]] = None) -> int:
    """Parse ``args`` and run the chosen command.

    Args:
        args: Command line arguments (``sys.argv`` when None)

    Returns:
        Process exit code
    """
    parser = create_parser()
    parsed_args = parser.parse_args(args)

    if parsed_args.quiet:
        log_level = logging.ERROR
    elif parsed_args.verbose == 0:
        log_level = logging.WARNING
    elif parsed_args.verbose == 1:
        log_level = logging.INFO
    else:
        log_level = logging.DEBUG

    setup_logging(log_level)
    logger = logging.getLogger(__name__)

    handlers = {
        'solve': commands.solve_command,
        'batch': commands.batch_command,
        'demo': commands.demo_command,
        'config': commands.config_command,
    }

    try:
        if not parsed_args.command:
            parser.print_help()
            return 1

        return handlers[parsed_args.command](parsed_args)

    except KeyboardInterrupt:
        logger.info("Interrupted")
        return 130
    except Exception as e:
        logger.error(f"{parsed_args.command} failed: {e}")
        return 1


def main() -> None:
    sys.exit(main_cli())


if __name__ == '__main__':
    main()
