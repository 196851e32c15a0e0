"""DATAMOUNT

An immutable value type for amounts of digital data (bits, bytes, kilobytes,
megabytes) with overflow-checked construction and arithmetic, ordering,
human-readable display and a capacity check.
"""

from datamount.domain.capacity import fits_in, max_value_for_width
from datamount.domain.errors import (
    AdditionOverflowError,
    DataSizeError,
    DataSizeOverflowError,
    DataSizeUnderflowError,
    NegativeAmountError,
    UnitConversionOverflowError,
    UnsupportedUnitError,
)
from datamount.domain.units import (
    BIT_COUNT_WIDTH,
    BITS_PER_BYTE,
    BITS_PER_KILOBYTE,
    BITS_PER_MEGABYTE,
    MAX_BIT_COUNT,
    Unit,
)
from datamount.domain.value_objects import DataSize
from datamount.shorthand import datasize

__all__ = [
    "__version__",
    "AdditionOverflowError",
    "BIT_COUNT_WIDTH",
    "BITS_PER_BYTE",
    "BITS_PER_KILOBYTE",
    "BITS_PER_MEGABYTE",
    "DataSize",
    "DataSizeError",
    "DataSizeOverflowError",
    "DataSizeUnderflowError",
    "MAX_BIT_COUNT",
    "NegativeAmountError",
    "Unit",
    "UnitConversionOverflowError",
    "UnsupportedUnitError",
    "datasize",
    "fits_in",
    "max_value_for_width",
]
__version__ = "0.1.0"
