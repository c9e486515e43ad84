"""Configuration validation for the maze pathfinder."""

import logging
from omegaconf import DictConfig

logger = logging.getLogger(__name__)


class ConfigValidationError(Exception):
    """Exception raised when configuration validation fails."""
    pass


def _is_positive_int(value) -> bool:
    return isinstance(value, int) and not isinstance(value, bool) and value > 0


def _is_positive_number(value) -> bool:
    return isinstance(value, (int, float)) and not isinstance(value, bool) and value > 0


def validate_config(config: DictConfig) -> None:
    """Validate the complete configuration.

    Args:
        config: Configuration to validate

    Raises:
        ConfigValidationError: If validation fails
    """
    try:
        validate_search_config(config.get('search', {}))
        validate_solver_config(config.get('solver', {}))
        validate_problem_config(config.get('problem', {}))
    except ConfigValidationError:
        raise
    except Exception as e:
        raise ConfigValidationError(f"Configuration validation failed: {e}") from e

    logger.debug("Configuration validation passed")


def validate_search_config(search_config: DictConfig) -> None:
    """Validate search configuration section.

    Args:
        search_config: Search configuration section
    """
    if not search_config:
        return

    max_nodes = search_config.get('max_nodes_expanded', 100000)
    if not _is_positive_int(max_nodes):
        raise ConfigValidationError(
            f"search.max_nodes_expanded must be positive integer, got {max_nodes}"
        )

    max_time = search_config.get('max_computation_time', 10.0)
    if not _is_positive_number(max_time):
        raise ConfigValidationError(
            f"search.max_computation_time must be positive number, got {max_time}"
        )


def validate_solver_config(solver_config: DictConfig) -> None:
    """Validate solver configuration section."""
    if not solver_config:
        return

    name = solver_config.get('name', 'maze-pathfinder')
    if not isinstance(name, str) or not name:
        raise ConfigValidationError(f"solver.name must be non-empty string, got {name}")


def validate_problem_config(problem_config: DictConfig) -> None:
    """Validate problem configuration section."""
    if not problem_config:
        return

    mud_cost = problem_config.get('mud_cost', 3)
    if not _is_positive_int(mud_cost):
        raise ConfigValidationError(
            f"problem.mud_cost must be positive integer, got {mud_cost}"
        )
