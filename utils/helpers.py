# -*- coding: utf-8 -*-
"""
Utility helper functions.
"""

from datetime import datetime, date
from decimal import Decimal, InvalidOperation, ROUND_HALF_UP
from typing import Optional, Union


def format_date(
    value: Optional[Union[datetime, date, str]],
    format_str: str = "%d/%m/%Y"
) -> str:
    """
    Format a date value for display.

    Args:
        value: Date, datetime, or ISO string
        format_str: Output format string

    Returns:
        Formatted date string or empty string
    """
    if value is None or value == "":
        return ""

    if isinstance(value, str):
        try:
            value = datetime.fromisoformat(value)
        except ValueError:
            return value

    if isinstance(value, (datetime, date)):
        return value.strftime(format_str)

    return str(value)


def parse_date(value: Optional[Union[datetime, date, str]]) -> Optional[date]:
    """Parse an ISO date (or datetime) string; None when empty or malformed."""
    if value is None or value == "":
        return None
    if isinstance(value, datetime):
        return value.date()
    if isinstance(value, date):
        return value
    try:
        return datetime.fromisoformat(str(value)).date()
    except ValueError:
        return None


def parse_amount(value: Optional[Union[int, float, str, Decimal]]) -> Decimal:
    """
    Parse a money amount the store may hand back as a string or number.

    Blank, malformed or non-finite (NaN, Infinity) values count as zero.
    """
    if value is None or value == "":
        return Decimal("0")
    if isinstance(value, Decimal):
        amount = value
    else:
        try:
            amount = Decimal(str(value).replace(",", "").strip())
        except InvalidOperation:
            return Decimal("0")
    if not amount.is_finite():
        return Decimal("0")
    return amount


def format_amount(value: Optional[Union[int, float, str, Decimal]]) -> str:
    """Two-decimal string form used in store rows ("8500.00")."""
    return str(parse_amount(value).quantize(Decimal("0.01"), rounding=ROUND_HALF_UP))


def format_currency(value: Optional[Union[int, float, str, Decimal]], symbol: str = "$") -> str:
    """
    Format a money amount with thousands separator.

    Args:
        value: Amount to format
        symbol: Currency symbol prefix

    Returns:
        Formatted amount, e.g. "$25,000.00"
    """
    amount = parse_amount(value).quantize(Decimal("0.01"), rounding=ROUND_HALF_UP)
    return f"{symbol}{amount:,.2f}"


def round_half_up(value: Decimal) -> int:
    """Round to the nearest integer, halves away from zero."""
    return int(value.quantize(Decimal("1"), rounding=ROUND_HALF_UP))


def truncate_text(text: str, max_length: int = 50, suffix: str = "...") -> str:
    """
    Truncate text to a maximum length.

    Args:
        text: Text to truncate
        max_length: Maximum length
        suffix: Suffix to add when truncated

    Returns:
        Truncated text
    """
    if not text or len(text) <= max_length:
        return text

    return text[:max_length - len(suffix)] + suffix


def sanitize_filename(filename: str) -> str:
    """
    Sanitize a filename by removing invalid characters.

    Args:
        filename: Original filename

    Returns:
        Sanitized filename
    """
    invalid_chars = '<>:"/\\|?*'
    for char in invalid_chars:
        filename = filename.replace(char, "_")
    return filename
