"""Click parameter type for size units."""

from __future__ import annotations

from typing import Any

import click

from datamount.domain.units import Unit


class UnitChoice(click.Choice):
    """A case-insensitive choice of unit names that converts to a `Unit`.

    Accepts singular and plural names (``byte``/``bytes``).
    """

    name = "unit"

    def __init__(self) -> None:
        super().__init__(Unit.names(), case_sensitive=False)

    def convert(
        self, value: Any, param: click.Parameter | None, ctx: click.Context | None
    ) -> Unit:
        if isinstance(value, Unit):
            return value
        return Unit.from_name(super().convert(value, param, ctx))


UNIT = UnitChoice()
