"""Helpers for parsing logger-level CLI options.

Parses options of the form NAME=LEVEL, given repeatedly or as one
comma/space-separated string (as read from an environment variable), into a
mapping of logger names to numeric levels.
"""

import logging
import re

import click

from datamount.config import DEFAULT_LOGGER_LEVELS


def _normalize_items(value: str | list[str] | tuple[str, ...]) -> list[str]:
    """Split the option value(s) on commas and whitespace, dropping empty fragments."""
    values = [value] if isinstance(value, str) else list(value)
    return [item for v in values for item in re.split(r"[,\s]+", v) if item]


def parse_log_level(
    ctx: click.Context | None,  # pylint: disable=unused-argument
    param: click.Parameter | None,  # pylint: disable=unused-argument
    value: str | list[str] | tuple[str, ...],
) -> dict[str, int]:
    """Click callback that parses NAME=LEVEL pairs into a name->level dict.

    Starts from `DEFAULT_LOGGER_LEVELS`; later items override earlier ones.

    Args:
        ctx: Click context (unused).
        param: Click parameter (unused).
        value: The raw option value(s).

    Returns:
        dict[str, int]: Mapping of logger names to numeric logging levels.

    Raises:
        click.BadParameter: If an item is not NAME=LEVEL or LEVEL is unknown.
    """
    levels = dict(DEFAULT_LOGGER_LEVELS)
    for item in _normalize_items(value):
        try:
            name, level_str = item.split("=", 1)
        except ValueError as e:
            raise click.BadParameter(f"Expected NAME=LEVEL, got {item!r}") from e
        lvl = logging.getLevelName(level_str.strip().upper())
        if not isinstance(lvl, int):
            raise click.BadParameter(f"Invalid log level: {level_str}")
        levels[name.strip()] = lvl
    return levels
