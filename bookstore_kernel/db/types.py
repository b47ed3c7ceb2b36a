"""
Module: bookstore_kernel.db.types
Responsibility: Constants and utility functions for money and stock values.
    Centralizes precision, rounding and text formatting so that stores,
    storage backends and command handlers use identical rules.
Architecture position: Kernel > DB.  May be imported by models/, domain/,
    services/, selectors/ and commands/.  MUST NOT import from any of those.

Invariants enforced:
    - No floats anywhere in the kernel.  All monetary amounts use Decimal.
    - round_money() is the ONLY sanctioned rounding function; display
      formatting goes through format_money(), which delegates to it.
    - MAX_STOCK bounds every stock value to the signed 32-bit range.

Failure modes:
    - decimal.InvalidOperation on non-numeric text passed to money_from_str().
"""

from decimal import Decimal, ROUND_HALF_UP


MONEY_DECIMAL_PLACES = 2
DEFAULT_ROUNDING = ROUND_HALF_UP

MAX_STOCK = 2**31 - 1

ZERO = Decimal("0")


def money_from_str(value: str) -> Decimal:
    """
    Create a money value from its text form.

    Not rounded; callers apply round_money() where a fixed precision is
    required.

    Raises:
        decimal.InvalidOperation: If value is not a number.
    """
    return Decimal(value)


def round_money(
    value: Decimal,
    decimal_places: int = MONEY_DECIMAL_PLACES,
    rounding: str = DEFAULT_ROUNDING,
) -> Decimal:
    """
    Round a monetary value to the given number of decimal places.

    This is the only rounding path for money in the kernel.

    Example:
        round_money(Decimal("10.555")) -> Decimal("10.56")
    """
    quantizer = Decimal(10) ** -decimal_places
    return value.quantize(quantizer, rounding=rounding)


def format_money(value: Decimal) -> str:
    """Format a money value with exactly two decimal places."""
    return f"{round_money(value):.2f}"
