#!/usr/bin/env python3
"""
Currency Conversion and Handling Utilities

All financial calculations use integer cents to avoid floating-point errors.

Currency Systems:
- Internal calculations use cents: 100 cents = $1.00
- Spreadsheet exports use dollar strings: "$13,331.43"
- Display uses dollar strings with thousands separators: "$1,234.56"

Key Principles:
- Never use floating-point arithmetic for currency calculations
- Parse with Decimal, store as integer cents
- Unparsable spreadsheet cells count as zero
"""

import re
from decimal import ROUND_HALF_UP, Decimal, InvalidOperation
from typing import Union

# Currency symbol, thousands separators, and any Unicode whitespace
_CURRENCY_NOISE = re.compile(r"[$,\s]")


def clean_currency_string(currency_str: str) -> str:
    """
    Strip currency symbol, thousands separators and whitespace.

    Example:
        clean_currency_string("$ 13,331.43") -> "13331.43"
    """
    return _CURRENCY_NOISE.sub("", currency_str)


def cents_to_dollars_str(cents: int) -> str:
    """
    Convert cents to dollar string using pure integer arithmetic.

    Args:
        cents: Amount in cents

    Returns:
        Formatted dollar string with thousands separators

    Example:
        cents_to_dollars_str(123456) -> "1,234.56"
    """
    is_negative = cents < 0
    abs_cents = abs(int(cents))

    dollars = abs_cents // 100
    remainder = abs_cents % 100

    formatted = f"{dollars:,}.{remainder:02d}"
    return f"-{formatted}" if is_negative else formatted


def decimal_to_cents(amount: Decimal) -> int:
    """Round a Decimal dollar amount to the nearest cent (half up)."""
    return int((amount * 100).quantize(Decimal("1"), rounding=ROUND_HALF_UP))


def cents_to_decimal(cents: int) -> Decimal:
    """Convert integer cents to a two-place Decimal dollar amount."""
    return (Decimal(cents) / 100).quantize(Decimal("0.01"))


def safe_currency_to_cents(currency_str: Union[str, int, float, Decimal, None]) -> int:
    """
    Safely convert currency string to integer cents using decimal arithmetic.

    Handles spreadsheet-formatted values and edge cases gracefully.

    Args:
        currency_str: Currency string like '$12.34', '12.34', or '$12,345.67'

    Returns:
        Integer cents (1234 for $12.34), 0 for empty or invalid input

    Examples:
        safe_currency_to_cents('$1,200.50') -> 120050
        safe_currency_to_cents('N/A') -> 0
        safe_currency_to_cents('') -> 0
    """
    if currency_str is None:
        return 0
    try:
        if isinstance(currency_str, int):
            return currency_str * 100
        if isinstance(currency_str, (float, Decimal)):
            return decimal_to_cents(Decimal(str(currency_str)))

        clean_str = clean_currency_string(str(currency_str))
        if not clean_str:
            return 0

        amount = Decimal(clean_str)
        if not amount.is_finite():
            return 0
        return decimal_to_cents(amount)
    except (ValueError, TypeError, OverflowError, InvalidOperation):
        return 0


def parse_dollars_to_cents(dollars_str: str) -> int:
    """
    Parse dollar string to cents, raising on malformed input.

    Unlike safe_currency_to_cents, this is meant for operator-entered values
    where a typo should be reported rather than silently read as zero.

    Examples:
        parse_dollars_to_cents("12.34") -> 1234
        parse_dollars_to_cents("$1,234.56") -> 123456
        parse_dollars_to_cents("12") -> 1200

    Raises:
        ValueError: If the string is not a valid amount
    """
    clean = clean_currency_string(dollars_str)
    if not clean:
        raise ValueError(f"Empty amount: {dollars_str!r}")
    try:
        amount = Decimal(clean)
    except InvalidOperation:
        raise ValueError(f"Invalid amount: {dollars_str!r}") from None
    if not amount.is_finite():
        raise ValueError(f"Invalid amount: {dollars_str!r}")
    return decimal_to_cents(amount)


def format_cents(cents: int) -> str:
    """Format cents as dollar string with $ prefix (sign before the symbol)."""
    if cents < 0:
        return f"-${cents_to_dollars_str(-cents)}"
    return f"${cents_to_dollars_str(cents)}"
