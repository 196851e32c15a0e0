"""Capacity checks: does an unsigned value fit in a field of a given width?

These helpers read a `DataSize`'s bit count as the *width* of a field, not as
an amount of data.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from .units import BIT_COUNT_WIDTH, MAX_BIT_COUNT
from .utils import require_amount

if TYPE_CHECKING:
    from .value_objects import DataSize


def max_value_for_width(bit_width: int) -> int:
    """Return the largest unsigned integer representable in ``bit_width`` bits.

    Results are unsigned 32-bit values: a width of 0 gives 0, and any width of
    32 or more gives ``MAX_BIT_COUNT``.

    Args:
        bit_width: Number of bits available.

    Returns:
        ``2**bit_width - 1``, capped at ``MAX_BIT_COUNT``.

    Raises:
        NegativeAmountError: If ``bit_width`` is negative.
        TypeError: If ``bit_width`` is not an ``int``.
    """
    require_amount(bit_width)
    if bit_width >= BIT_COUNT_WIDTH:
        return MAX_BIT_COUNT
    return (1 << bit_width) - 1


def fits_in(value: int, capacity: DataSize) -> bool:
    """Whether ``value`` fits in a field ``capacity.bits()`` bits wide.

    Args:
        value: The unsigned value to test. Negative values never fit.
        capacity: Size whose bit count is used as the field width.

    Returns:
        True if ``0 <= value <= capacity.max_value()``.

    Raises:
        TypeError: If ``value`` is not an ``int``.
    """
    if isinstance(value, bool) or not isinstance(value, int):
        raise TypeError(f"Value must be an int, got {type(value).__name__}")
    return 0 <= value <= capacity.max_value()
