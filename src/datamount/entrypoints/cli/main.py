"""DATAMOUNT CLI entry point.

Defines the top-level ``datamount`` command (via Click-Extra) and registers
the size commands.

Available commands
- ``datamount show``: display a size in its largest whole unit.
- ``datamount add`` / ``datamount subtract``: combine sizes.
- ``datamount max-value`` / ``datamount fits``: capacity checks.

Notes
- The CLI version is sourced from `datamount.__version__` and displayed by
  Click-Extra (``--version``).
- The base console level comes from ``DATAMOUNT_LOG_LEVEL`` (default WARNING)
  and is shifted by ``-v``/``-q``.

Examples
    $ datamount --version
    $ datamount -v show 8000 bits
"""

import logging
from functools import partial
from pathlib import Path
from typing import TYPE_CHECKING

import click
import click_extra as clickx
from platformdirs import user_log_dir

from datamount import __version__, config
from datamount.logging import (
    close_handlers,
    config_console_handler,
    config_flight_recorder,
    log_startup,
)

from .helpers.log_level_parser import parse_log_level
from .sizes import COMMANDS

if TYPE_CHECKING:
    from logging import Handler

logger = logging.getLogger(__name__)


HELP = """DATAMOUNT command-line interface.

    Build amounts of data from bits, bytes, kilobytes or megabytes (decimal
    multiples), add and subtract them without silent overflow, and check whether
    a value fits in a field of a given width.
    """


@clickx.extra_group(
    version=__version__,
    help=HELP,
    params=[
        clickx.ColorOption(show_envvar=True),
        clickx.TimerOption(show_envvar=True),
        clickx.ExtraVersionOption(),
    ],
)
@click.option(
    "--verbose",
    "-v",
    "verbose_count",
    count=True,
    help="Lower the console log level by one step per repetition.",
    default=0,
)
@click.option(
    "--quiet",
    "-q",
    "quiet_count",
    count=True,
    help="Raise the console log level by one step per repetition.",
    default=0,
)
@click.option(
    "--debug/--no-debug",
    is_flag=True,
    help="Enable debug mode (DEBUG console output with logger names and source paths).",
    default=False,
)
@click.option(
    "--log-path",
    type=click.Path(dir_okay=False, path_type=Path),
    help="Path the flight recorder writes to.",
    default=Path(user_log_dir("datamount", appauthor=False, ensure_exists=True))
    / "latest.log",
    envvar="DATAMOUNT_LOG_PATH",
    show_default=True,
    show_envvar=True,
)
@click.option(
    "--flight-recorder-capacity",
    type=click.IntRange(min=1),
    default=500,
    hidden=True,
    envvar="DATAMOUNT_FLIGHT_RECORDER_CAPACITY",
    show_envvar=True,
    help="Capacity of the flight recorder (in number of log records).",
)
@click.option(
    "--flight-recorder/--no-flight-recorder",
    "flight_recorder",
    is_flag=True,
    help=(
        "Keep the last N log records at DEBUG granularity (unaffected by -v/-q) "
        "and write them to --log-path when a WARNING or ERROR occurs, or on exit "
        "if --force-flush is set."
    ),
    default=True,
    show_envvar=True,
)
@click.option(
    "--force-flush/--no-force-flush",
    "force_flush_flight_recorder",
    is_flag=True,
    help="Write the flight recorder buffer to --log-path on exit.",
    default=False,
    show_default=True,
    show_envvar=True,
)
@click.option(
    "-L",
    "--logger-level",
    "logger_levels",
    multiple=True,
    callback=parse_log_level,
    help=(
        "Set MINIMUM LEVEL for specific LOGGERS (NAME=LEVEL). Applies to both "
        "console and flight recorder. Repeatable, or a comma/space list in "
        "DATAMOUNT_LOGGER_LEVELS."
    ),
    envvar="DATAMOUNT_LOGGER_LEVELS",
    show_envvar=True,
)
@clickx.pass_context
def datamount(  # pylint: disable=too-many-arguments, too-many-positional-arguments
    ctx: click.Context,
    verbose_count: int,
    quiet_count: int,
    debug: bool,
    log_path: Path,
    flight_recorder_capacity: int,
    flight_recorder: bool,
    force_flush_flight_recorder: bool,
    logger_levels: dict[str, int],
) -> None:
    """DATAMOUNT command-line interface."""

    # 0) compute effective verbosity
    try:
        base_level = config.get_base_log_level()
    except config.InvalidLogLevelError as e:
        raise click.ClickException(str(e)) from e
    level = config.effective_log_level(base_level, verbose_count, quiet_count)

    handlers: list[Handler] = []

    # 1) console
    use_color = ctx.color is not False  # None or True => allow color
    handlers.append(
        config_console_handler(level=level, debug_mode=debug, color=use_color)
    )

    # 2) flight recorder
    if flight_recorder:
        handlers.append(
            config_flight_recorder(
                path=log_path,
                capacity=flight_recorder_capacity,
                flush_on_close=force_flush_flight_recorder,
            )
        )

    # 3) root logger captures everything; handlers filter
    logging.basicConfig(level=logging.DEBUG, handlers=handlers, force=True)

    # 4) per-logger overrides
    for name, lvl in logger_levels.items():
        logging.getLogger(name).setLevel(lvl)

    log_startup(
        logger,
        app_version=__version__,
        level=level,
        handlers=handlers,
        log_path=log_path if flight_recorder else None,
        flight_recorder=flight_recorder,
        logger_levels=logger_levels,
    )

    ctx.call_on_close(partial(close_handlers, handlers))


for command in COMMANDS:
    datamount.add_command(command)
