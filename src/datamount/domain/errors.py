"""Domain-layer error definitions."""

# ============================================================================
#                           General domain errors
# ============================================================================


class DomainError(Exception):
    """Base class for domain-layer errors."""


class DataSizeError(DomainError):
    """Base class for errors raised while building or combining data sizes."""


# ============================================================================
#                       Out-of-range bit counts
# ============================================================================


class DataSizeOverflowError(DataSizeError, OverflowError):
    """Raised when a result would not fit in an unsigned 32-bit bit count."""


class UnitConversionOverflowError(DataSizeOverflowError):
    """Raised when an amount of some unit has too many bits to be represented."""

    def __init__(self, amount: int, unit_name: str) -> None:
        super().__init__(
            f"Unsupported number of {unit_name}: {amount}, it cannot fit in "
            "an unsigned 32-bit integer as a number of bits."
        )
        self.amount = amount
        self.unit_name = unit_name


class AdditionOverflowError(DataSizeOverflowError):
    """Raised when the sum of two sizes exceeds the largest bit count."""

    def __init__(self, left_bits: int, right_bits: int) -> None:
        super().__init__(
            f"Addition results in an overflow: {left_bits} + {right_bits} bits "
            "cannot fit in an unsigned 32-bit integer."
        )
        self.left_bits = left_bits
        self.right_bits = right_bits


class DataSizeUnderflowError(DataSizeError, ArithmeticError):
    """Raised when a subtraction would produce a negative size."""

    def __init__(self, minuend_bits: int, subtrahend_bits: int) -> None:
        super().__init__(
            "Subtraction results in a negative number: "
            f"{minuend_bits} - {subtrahend_bits} bits."
        )
        self.minuend_bits = minuend_bits
        self.subtrahend_bits = subtrahend_bits


# ============================================================================
#                           Invalid inputs
# ============================================================================


class NegativeAmountError(DataSizeError, ValueError):
    """Raised when a size or bit width is built from a negative amount."""

    def __init__(self, amount: int) -> None:
        super().__init__(f"Amount must not be negative, got {amount}.")
        self.amount = amount


class UnsupportedUnitError(DataSizeError, ValueError):
    """Raised when a unit name does not match any known unit."""

    def __init__(self, unit_name: str) -> None:
        super().__init__(f"Unsupported size unit: {unit_name!r}.")
        self.unit_name = unit_name
