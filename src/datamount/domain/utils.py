"""Domain layer utilities."""

from .errors import NegativeAmountError


def require_amount(amount: object) -> int:
    """Validate a whole, nonnegative amount.

    Args:
        amount: The value to check.

    Returns:
        The amount, unchanged.

    Raises:
        TypeError: If ``amount`` is not an ``int`` (``bool`` is rejected too).
        NegativeAmountError: If ``amount`` is negative.
    """
    if isinstance(amount, bool) or not isinstance(amount, int):
        raise TypeError(f"Amount must be an int, got {type(amount).__name__}")
    if amount < 0:
        raise NegativeAmountError(amount)
    return amount
