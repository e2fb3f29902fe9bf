"""Money amounts: rounding, totals, form input and display"""

from decimal import ROUND_HALF_UP, Decimal
from typing import Union


def round_decimal(value: Decimal, decimal_places: int = 2) -> Decimal:
    """
    Round a split amount half-up to cents.

    Args:
        value: Amount to round
        decimal_places: Number of decimal places (default 2)

    Returns:
        Rounded amount
    """
    quantize_value = Decimal(10) ** -decimal_places
    return value.quantize(quantize_value, rounding=ROUND_HALF_UP)


def sum_decimals(values: list[Decimal]) -> Decimal:
    """Total of several friend balances, Decimal("0") when empty"""
    return sum(values, Decimal("0"))


def to_decimal(value: Union[Decimal, int, float, str]) -> Decimal:
    """Convert a form value to Decimal (floats go through str to avoid binary noise)"""
    if isinstance(value, Decimal):
        return value
    return Decimal(str(value))


def format_amount(value: Decimal) -> str:
    """
    Plain text for an amount in balance sentences.

    Whole amounts drop their cents ("60", not "60.00"); other amounts drop
    trailing zeros ("7.5"). Never uses exponent notation.

    Args:
        value: Amount to format

    Returns:
        Formatted amount
    """
    if value == value.to_integral_value():
        return str(value.quantize(Decimal(1)))
    return f"{value.normalize():f}"
