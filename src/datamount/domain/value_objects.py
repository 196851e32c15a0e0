"""Module including value objects used across the domain layer."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Callable

from .capacity import max_value_for_width
from .errors import (
    AdditionOverflowError,
    DataSizeUnderflowError,
    UnitConversionOverflowError,
)
from .units import (
    BITS_PER_BYTE,
    BYTES_PER_KILOBYTE,
    KILOBYTES_PER_MEGABYTE,
    MAX_BIT_COUNT,
    Unit,
)
from .utils import require_amount

# Largest unit first; bits are the fallback.
_DISPLAY_ORDER = (Unit.MEGABYTES, Unit.KILOBYTES, Unit.BYTES)


@dataclass(frozen=True, slots=True, order=True)
class DataSize:
    """An amount of data, stored as a number of bits.

    Readable as an amount of bits, bytes, kilobytes or megabytes (decimal
    multiples). The bit count must fit in an unsigned 32-bit integer, so the
    largest representable size is ``MAX_BIT_COUNT`` bits. Equality and
    ordering compare the bit count only.

    Instances are immutable; ``+`` and ``-`` return new sizes and raise
    instead of wrapping when the result is out of range.
    """

    num_bits: int

    def __post_init__(self) -> None:
        require_amount(self.num_bits)
        if self.num_bits > MAX_BIT_COUNT:
            raise UnitConversionOverflowError(self.num_bits, Unit.BITS.plural)

    # ------------------------------------------------------------------
    # Construction
    # ------------------------------------------------------------------

    @classmethod
    def from_unit(cls, amount: int, unit: Unit) -> DataSize:
        """Create a DataSize from an amount of ``unit``.

        Args:
            amount: Nonnegative whole number of ``unit``.
            unit: The unit ``amount`` is expressed in.

        Returns:
            The new size.

        Raises:
            UnitConversionOverflowError: If ``amount`` expressed in bits exceeds
                ``MAX_BIT_COUNT``.
            NegativeAmountError: If ``amount`` is negative.
            TypeError: If ``amount`` is not an ``int``.
        """
        require_amount(amount)
        num_bits = amount * unit.bits_per_unit
        if num_bits > MAX_BIT_COUNT:
            raise UnitConversionOverflowError(amount, unit.plural)
        return cls(num_bits)

    @classmethod
    def from_bits(cls, num_bits: int) -> DataSize:
        """Create a DataSize from a number of bits."""
        return cls.from_unit(num_bits, Unit.BITS)

    @classmethod
    def from_bytes(cls, num_bytes: int) -> DataSize:
        """Create a DataSize from a number of bytes."""
        return cls.from_unit(num_bytes, Unit.BYTES)

    @classmethod
    def from_kilobytes(cls, num_kilobytes: int) -> DataSize:
        """Create a DataSize from a number of kilobytes."""
        return cls.from_unit(num_kilobytes, Unit.KILOBYTES)

    @classmethod
    def from_megabytes(cls, num_megabytes: int) -> DataSize:
        """Create a DataSize from a number of megabytes."""
        return cls.from_unit(num_megabytes, Unit.MEGABYTES)

    # ------------------------------------------------------------------
    # Accessors
    # ------------------------------------------------------------------

    def bits(self) -> int:
        """Return the number of bits represented by this DataSize."""
        return self.num_bits

    def bytes(self) -> int:
        """Return the (truncated) number of bytes represented by this DataSize."""
        return self.num_bits // BITS_PER_BYTE

    def kilobytes(self) -> int:
        """Return the (truncated) number of kilobytes represented by this DataSize."""
        return self.bytes() // BYTES_PER_KILOBYTE

    def megabytes(self) -> int:
        """Return the (truncated) number of megabytes represented by this DataSize."""
        return self.kilobytes() // KILOBYTES_PER_MEGABYTE

    def in_unit(self, unit: Unit) -> int:
        """Return the (truncated) amount of ``unit`` represented by this DataSize."""
        return _ACCESSORS[unit](self)

    def max_value(self) -> int:
        """Return the largest unsigned value that fits in ``num_bits`` bits.

        Here the bit count is read as the width of a field rather than as an
        amount of data; see `max_value_for_width`.
        """
        return max_value_for_width(self.num_bits)

    # ------------------------------------------------------------------
    # Arithmetic
    # ------------------------------------------------------------------

    def __add__(self, other: object) -> DataSize:
        if not isinstance(other, DataSize):
            return NotImplemented
        total = self.num_bits + other.num_bits
        if total > MAX_BIT_COUNT:
            raise AdditionOverflowError(self.num_bits, other.num_bits)
        return DataSize(total)

    def __sub__(self, other: object) -> DataSize:
        if not isinstance(other, DataSize):
            return NotImplemented
        if other.num_bits > self.num_bits:
            raise DataSizeUnderflowError(self.num_bits, other.num_bits)
        return DataSize(self.num_bits - other.num_bits)

    # ------------------------------------------------------------------
    # Display
    # ------------------------------------------------------------------

    def __str__(self) -> str:
        # Stop at the first non-zero unit; smaller units are never computed.
        for unit in _DISPLAY_ORDER:
            if (amount := self.in_unit(unit)) >= 1:
                return f"{amount} {unit.label(amount)}"
        return f"{self.num_bits} {Unit.BITS.label(self.num_bits)}"


_ACCESSORS: dict[Unit, Callable[[DataSize], int]] = {
    Unit.BITS: DataSize.bits,
    Unit.BYTES: DataSize.bytes,
    Unit.KILOBYTES: DataSize.kilobytes,
    Unit.MEGABYTES: DataSize.megabytes,
}
