"""DATAMOUNT size commands.

Build, combine and capacity-check data sizes from the shell.

Behavior
- Results go to **stdout**; notices and log records go to **stderr**.
- Units are given by name (``bit``/``bits``, ``byte``/``bytes``, ``kilobyte``/
  ``kilobytes``, ``megabyte``/``megabytes``), case-insensitive.

Failure modes
- Overflow, underflow and other `DataSizeError` cases → ``ClickException``
  (exit status 1) carrying the domain error message.

Examples
    $ datamount show 16000 bits
    2 kilobytes
    $ datamount add -s 2 bytes -s 4 bits
    2 bytes
    $ datamount fits 65535 2 bytes
    true
"""

from __future__ import annotations

import json
import logging
from typing import NoReturn

import click

from datamount.domain.capacity import fits_in
from datamount.domain.errors import DataSizeError
from datamount.domain.units import Unit
from datamount.domain.value_objects import DataSize

from .helpers import UNIT, success, warn

logger = logging.getLogger(__name__)

AMOUNT = click.IntRange(min=0)


def _fail(exc: DataSizeError) -> NoReturn:
    logger.warning("%s: %s", type(exc).__name__, exc)
    raise click.ClickException(str(exc)) from exc


def _build(amount: int, unit: Unit) -> DataSize:
    try:
        size = DataSize.from_unit(amount, unit)
    except DataSizeError as e:
        _fail(e)
    logger.debug("Built %r from %s %s", size, amount, unit.plural)
    return size


def _build_all(sizes: tuple[tuple[int, Unit], ...]) -> list[DataSize]:
    return [_build(amount, unit) for amount, unit in sizes]


size_option = click.option(
    "--size",
    "-s",
    "sizes",
    type=(AMOUNT, UNIT),
    multiple=True,
    required=True,
    metavar="AMOUNT UNIT",
    help="A size operand, e.g. '-s 2 bytes'. Repeatable.",
)


@click.command()
@click.argument("amount", type=AMOUNT)
@click.argument("unit", type=UNIT)
@click.option(
    "--json",
    "as_json",
    is_flag=True,
    help="Print every unit's (truncated) amount as JSON.",
)
def show(amount: int, unit: Unit, as_json: bool) -> None:
    """Show AMOUNT UNIT in its largest whole unit."""
    size = _build(amount, unit)
    if as_json:
        breakdown = {u.value: size.in_unit(u) for u in Unit}
        breakdown["display"] = str(size)
        click.echo(json.dumps(breakdown))
    else:
        click.echo(str(size))


@click.command()
@size_option
def add(sizes: tuple[tuple[int, Unit], ...]) -> None:
    """Add all sizes together."""
    first, *rest = _build_all(sizes)
    total = first
    for operand in rest:
        try:
            total = total + operand
        except DataSizeError as e:
            _fail(e)
    logger.info("Sum of %d sizes: %r", len(sizes), total)
    click.echo(str(total))


@click.command()
@size_option
def subtract(sizes: tuple[tuple[int, Unit], ...]) -> None:
    """Subtract every following size from the first one."""
    first, *rest = _build_all(sizes)
    remainder = first
    for operand in rest:
        try:
            remainder = remainder - operand
        except DataSizeError as e:
            _fail(e)
    logger.info("Remainder after %d subtractions: %r", len(rest), remainder)
    click.echo(str(remainder))


@click.command("max-value")
@click.argument("width", type=AMOUNT)
@click.argument("unit", type=UNIT, default=Unit.BITS.plural)
def max_value(width: int, unit: Unit) -> None:
    """Print the largest unsigned value a WIDTH UNIT wide field can hold."""
    click.echo(str(_build(width, unit).max_value()))


@click.command()
@click.argument("value", type=AMOUNT)
@click.argument("width", type=AMOUNT)
@click.argument("unit", type=UNIT, default=Unit.BITS.plural)
def fits(value: int, width: int, unit: Unit) -> None:
    """Check whether VALUE fits in a field WIDTH UNIT wide.

    Prints 'true' or 'false'.
    """
    capacity = _build(width, unit)
    result = fits_in(value, capacity)
    if result:
        success(f"{value} fits in {capacity.bits()} bits.")
    else:
        warn(f"{value} does not fit in {capacity.bits()} bits.")
    click.echo("true" if result else "false")


COMMANDS = (show, add, subtract, max_value, fits)
