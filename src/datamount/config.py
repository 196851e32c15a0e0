"""Configuration utilities for DATAMOUNT.

This module centralizes small helpers and constants related to application
configuration. Settings are read from ``DATAMOUNT_*`` environment variables.
"""

import logging
import os
from typing import Final

ENVVAR_PREFIX: Final = "DATAMOUNT"  # pragma: no mutate
LOG_LEVEL_ENVVAR: Final = f"{ENVVAR_PREFIX}_LOG_LEVEL"  # pragma: no mutate

DEFAULT_LOG_LEVEL: Final = logging.WARNING
LEVEL_STEP: Final = 10

# Third-party loggers quieted unless overridden with -L NAME=LEVEL.
DEFAULT_LOGGER_LEVELS: Final[dict[str, int]] = {
    "click_extra": logging.WARNING,
    "markdown_it": logging.WARNING,
}


class InvalidLogLevelError(Exception):
    """Raised when DATAMOUNT_LOG_LEVEL does not name a logging level."""

    def __init__(self, value: str) -> None:
        super().__init__(f"{LOG_LEVEL_ENVVAR} is not a valid log level: {value!r}")
        self.value = value


def get_base_log_level() -> int:
    """Get the base console log level from the environment.

    Returns:
        The numeric level named by `DATAMOUNT_LOG_LEVEL` (e.g. ``INFO``), or
        ``logging.WARNING`` when the variable is unset or empty.

    Raises:
        InvalidLogLevelError: If the variable is set to an unknown level name.
    """
    if not (value := os.environ.get(LOG_LEVEL_ENVVAR, "").strip()):
        return DEFAULT_LOG_LEVEL
    level = logging.getLevelName(value.upper())
    if not isinstance(level, int):
        raise InvalidLogLevelError(value)
    return level


def effective_log_level(base: int, verbose_count: int = 0, quiet_count: int = 0) -> int:
    """Shift ``base`` one level down per ``-v`` and one level up per ``-q``.

    Args:
        base: Starting level, usually from `get_base_log_level`.
        verbose_count: Number of ``-v`` flags.
        quiet_count: Number of ``-q`` flags.

    Returns:
        The resulting level, clamped to [DEBUG, CRITICAL].
    """
    level = base - (LEVEL_STEP * verbose_count) + (LEVEL_STEP * quiet_count)
    return max(logging.DEBUG, min(logging.CRITICAL, level))
