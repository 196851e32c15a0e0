"""Shorthand constructors for `DataSize`.

Meant to be used through the module so the names read like units::

    from datamount import shorthand as ds

    ds.bytes(2) + ds.bits(4) == ds.bits(20)
    ds.datasize(4, "kilobytes") == ds.kilobytes(4)
"""

from __future__ import annotations

from datamount.domain.units import Unit
from datamount.domain.value_objects import DataSize

# pylint: disable=redefined-builtin

__all__ = ["bits", "bytes", "kilobytes", "megabytes", "datasize"]


def bits(amount: int) -> DataSize:
    """Create a DataSize from a number of bits, e.g. ``bits(4)``."""
    return DataSize.from_bits(amount)


def bytes(amount: int) -> DataSize:
    """Create a DataSize from a number of bytes, e.g. ``bytes(4)``."""
    return DataSize.from_bytes(amount)


def kilobytes(amount: int) -> DataSize:
    """Create a DataSize from a number of kilobytes, e.g. ``kilobytes(4)``."""
    return DataSize.from_kilobytes(amount)


def megabytes(amount: int) -> DataSize:
    """Create a DataSize from a number of megabytes, e.g. ``megabytes(4)``."""
    return DataSize.from_megabytes(amount)


def datasize(amount: int, unit: Unit | str) -> DataSize:
    """Create a DataSize from an amount and any unit, e.g. ``datasize(4, "kilobytes")``.

    Args:
        amount: Nonnegative whole number of ``unit``.
        unit: A `Unit` member or a unit name (singular or plural,
            case-insensitive).

    Returns:
        The new size.

    Raises:
        UnsupportedUnitError: If ``unit`` names no known unit.
        UnitConversionOverflowError: If the size does not fit in 32 bits.
        TypeError: If ``unit`` is neither a `Unit` nor a ``str``.
    """
    if not isinstance(unit, Unit):
        unit = Unit.from_name(unit)
    return DataSize.from_unit(amount, unit)
