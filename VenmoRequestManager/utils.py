"""
Utilities Module

Helpers shared by the roster, the ledger and the two front ends.

Features:
    - Decimal-safe price parsing (user input -> Decimal)
    - Half-up rounding to cents
    - Currency formatting for display
    - Name and id normalization for form input

Functions:
    parse_price: Parse user input into a non-negative Decimal, or None.
    round_money: Round a Decimal to 2 decimal places (ROUND_HALF_UP).
    format_amount: Format a Decimal as a plain 2-decimal string.
    format_currency: Format an amount with a currency symbol.
    clean_name: Trim a user-supplied name, or None if empty.
    parse_ids: Convert form values into a list of unique integer ids.
"""

from decimal import Decimal, InvalidOperation, ROUND_HALF_UP
from typing import Iterable, Optional

CENTS = Decimal("0.01")
# Keeps every sum of prices well inside the 28-digit decimal context
MAX_PRICE = Decimal("1000000000000")


def parse_price(value) -> Optional[Decimal]:
    """
    Parse a price entered by the user.

    Accepts numbers and numeric strings (surrounding whitespace ignored).
    Rejects empty input, non-numeric text, negative amounts, NaN,
    infinities and amounts above MAX_PRICE.

    Args:
        value: Raw value from a form field or API payload.

    Returns:
        Decimal | None: The price, or None when the input is not valid.
    """
    if value is None or isinstance(value, bool):
        return None
    if isinstance(value, str):
        value = value.strip()
        if not value:
            return None
    try:
        # str() first so floats keep their displayed value (0.1 -> Decimal("0.1"))
        price = Decimal(str(value))
        if not price.is_finite() or price < 0 or price > MAX_PRICE:
            return None
        price.quantize(CENTS, rounding=ROUND_HALF_UP)
    except (InvalidOperation, ValueError):
        return None
    return price


def round_money(value: Decimal) -> Decimal:
    """
    Round a Decimal to 2 decimal places.

    Uses ROUND_HALF_UP, so 0.125 becomes 0.13 rather than banker's 0.12.
    """
    return Decimal(value).quantize(CENTS, rounding=ROUND_HALF_UP)


def format_amount(value: Decimal) -> str:
    """Format an amount as a string with exactly 2 decimals, e.g. "25.00"."""
    return f"{round_money(value):.2f}"


def format_currency(amount, symbol: str = "$") -> str:
    """
    Format a monetary amount with the appropriate currency symbol.

    Args:
        amount: Decimal, number or numeric string to format.
        symbol: Currency symbol (default: $).

    Returns:
        str: Formatted string like "$1,234.56".
    """
    return f"{symbol}{round_money(Decimal(str(amount))):,.2f}"


def clean_name(value) -> Optional[str]:
    """Return the trimmed name, or None if it is missing or blank."""
    if not isinstance(value, str):
        return None
    value = value.strip()
    return value or None


def parse_ids(values: Iterable) -> list[int]:
    """
    Convert form values into integer ids.

    Order is kept and duplicates dropped. Values that are not integers
    are skipped.
    """
    ids = []
    for value in values or []:
        try:
            number = int(value)
        except (TypeError, ValueError):
            continue
        if number not in ids:
            ids.append(number)
    return ids
