"""Unit constants and the `Unit` enumeration.

All multiples are decimal: a kilobyte is 1000 bytes and a megabyte is
1000 kilobytes. Sizes are stored as a bit count that must fit in an unsigned
32-bit integer.
"""

from __future__ import annotations

from enum import Enum
from typing import Final

from .errors import UnsupportedUnitError

BIT_COUNT_WIDTH: Final[int] = 32
MAX_BIT_COUNT: Final[int] = (1 << BIT_COUNT_WIDTH) - 1

BITS_PER_BYTE: Final[int] = 8
BYTES_PER_KILOBYTE: Final[int] = 1000
KILOBYTES_PER_MEGABYTE: Final[int] = 1000

BITS_PER_KILOBYTE: Final[int] = BYTES_PER_KILOBYTE * BITS_PER_BYTE
BITS_PER_MEGABYTE: Final[int] = KILOBYTES_PER_MEGABYTE * BITS_PER_KILOBYTE


class Unit(Enum):
    """Units a `DataSize` can be built from and displayed in."""

    BITS = "bits"
    BYTES = "bytes"
    KILOBYTES = "kilobytes"
    MEGABYTES = "megabytes"

    @property
    def bits_per_unit(self) -> int:
        """Number of bits in one of this unit."""
        return _BITS_PER_UNIT[self]

    @property
    def plural(self) -> str:
        """Plural label, e.g. ``"bytes"``."""
        return self.value

    @property
    def singular(self) -> str:
        """Singular label, e.g. ``"byte"``."""
        return self.value[:-1]

    def label(self, amount: int) -> str:
        """Return the label to display next to ``amount``.

        Args:
            amount: The displayed magnitude.

        Returns:
            The singular label when ``amount == 1``, the plural otherwise.
        """
        return self.singular if amount == 1 else self.plural

    @classmethod
    def names(cls) -> list[str]:
        """All accepted unit names, singular and plural, smallest unit first."""
        return [name for unit in cls for name in (unit.singular, unit.plural)]

    @classmethod
    def from_name(cls, name: str) -> Unit:
        """Look up a unit by its singular or plural label.

        Args:
            name: Unit name such as ``"kilobytes"`` or ``"Byte"``; matching is
                case-insensitive and ignores surrounding whitespace.

        Returns:
            The matching `Unit` member.

        Raises:
            UnsupportedUnitError: If ``name`` is not a known unit.
            TypeError: If ``name`` is not a ``str``.
        """
        if not isinstance(name, str):
            raise TypeError(f"Unit name must be a str, got {type(name).__name__}")
        normalized = name.strip().lower()
        for unit in cls:
            if normalized in (unit.singular, unit.plural):
                return unit
        raise UnsupportedUnitError(name)


_BITS_PER_UNIT: Final[dict[Unit, int]] = {
    Unit.BITS: 1,
    Unit.BYTES: BITS_PER_BYTE,
    Unit.KILOBYTES: BITS_PER_KILOBYTE,
    Unit.MEGABYTES: BITS_PER_MEGABYTE,
}
