"""CLI configuration and logging setup."""

import os
import sys

import click
from loguru import logger

LOG_LEVEL_ENV = "STATIC_BUNDLER_LOG_LEVEL"
DEFAULT_LOG_LEVEL = "WARNING"
LOG_FORMAT = "<level>{level: <8}</level> | {message}"


def get_log_level(verbose: int = 0) -> str:
    """Resolve the log level: -v gives INFO, -vv gives DEBUG, else the environment."""
    if verbose >= 2:
        return "DEBUG"
    if verbose == 1:
        return "INFO"
    return os.environ.get(LOG_LEVEL_ENV, DEFAULT_LOG_LEVEL).upper()


def _stderr_sink(message) -> None:
    sys.stderr.write(str(message))


def configure_logging(verbose: int = 0) -> str:
    """Route loguru output to stderr; stdout carries only the bundle."""
    level = get_log_level(verbose)
    logger.remove()
    try:
        logger.add(_stderr_sink, level=level, format=LOG_FORMAT, colorize=False)
    except ValueError as e:
        raise click.BadParameter(f"Unknown log level {level!r} in {LOG_LEVEL_ENV}") from e
    return level
