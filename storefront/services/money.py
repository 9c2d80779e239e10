"""
Money Utilities - Safe Decimal operations for monetary values.

Avoids float precision issues by using Decimal throughout. Totals are kept at
full precision; rounding happens only when a value is displayed.
"""
from decimal import Decimal, ROUND_HALF_UP, InvalidOperation
from typing import Optional, Union

Numeric = Union[str, int, float, Decimal]

# Display precision for money (2 decimal places)
MONEY_PRECISION = Decimal("0.01")

# Precision for whole percentages
INTEGER_PRECISION = Decimal("1")


def to_decimal(value: Union[Numeric, None]) -> Decimal:
    """
    Convert any value to Decimal safely.

    Args:
        value: Value to convert (str, int, float, Decimal, or None)

    Returns:
        Decimal representation of the value, or Decimal("0") if None/invalid
    """
    if value is None:
        return Decimal("0")

    if isinstance(value, Decimal):
        return value

    try:
        if isinstance(value, float):
            # Go through str to keep the literal the catalog sent (0.1, not 0.1000000000000000055)
            return Decimal(str(value))
        return Decimal(value)
    except (InvalidOperation, ValueError, TypeError):
        return Decimal("0")


def parse_decimal(value: Union[Numeric, None]) -> Optional[Decimal]:
    """
    Parse an optional price field.

    Unlike to_decimal, unparseable or non-finite input becomes None, so the
    field reads as absent instead of as a zero price.
    """
    if value is None or isinstance(value, bool):
        return None
    try:
        parsed = Decimal(str(value)) if isinstance(value, float) else Decimal(value)
    except (InvalidOperation, ValueError, TypeError):
        return None
    return parsed if parsed.is_finite() else None


def round_money(value: Numeric, to_int: bool = False) -> Decimal:
    """
    Round monetary value to display precision.

    Args:
        value: Value to round
        to_int: If True, round to a whole number

    Returns:
        Rounded Decimal value
    """
    decimal_value = to_decimal(value)
    precision = INTEGER_PRECISION if to_int else MONEY_PRECISION
    return decimal_value.quantize(precision, rounding=ROUND_HALF_UP)


def format_money(value: Numeric, symbol: Optional[str] = None) -> str:
    """
    Format monetary value with the storefront currency symbol.

    Args:
        value: Value to format
        symbol: Currency symbol, defaults to the configured one

    Returns:
        Formatted string, e.g. "P120.50"
    """
    if symbol is None:
        from storefront.config import get_settings
        symbol = get_settings().currency_symbol
    return f"{symbol}{round_money(value):.2f}"


def subtract(a: Numeric, b: Numeric) -> Decimal:
    """Safe subtraction of monetary values."""
    return to_decimal(a) - to_decimal(b)


def multiply(value: Numeric, factor: Numeric) -> Decimal:
    """Safe multiplication of monetary value by a factor."""
    return to_decimal(value) * to_decimal(factor)


def divide(value: Numeric, divisor: Numeric) -> Decimal:
    """Safe division of monetary value."""
    d = to_decimal(divisor)
    if d == 0:
        return Decimal("0")
    return to_decimal(value) / d


def percent_off(original: Numeric, price: Numeric) -> int:
    """
    Whole discount percentage of price relative to original, rounded half up.

    Returns 0 when price is not strictly below a positive original.
    """
    original_value = to_decimal(original)
    price_value = to_decimal(price)
    if original_value <= 0 or price_value >= original_value:
        return 0
    ratio = multiply(divide(subtract(original_value, price_value), original_value), 100)
    return int(round_money(ratio, to_int=True))

