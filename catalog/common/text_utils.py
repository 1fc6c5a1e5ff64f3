"""
Text Utilities

Helper functions for coercing and formatting product field values.
"""

import math
import re
from typing import Any, Optional
from urllib.parse import urlsplit

from .constants import CURRENCY_SYMBOL, WEB_SCHEMES

_LEADING_INT = re.compile(r'\s*([+-]?\d+)')
_LEADING_FLOAT = re.compile(r'\s*([+-]?(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?)')


def coerce_price(value: Any) -> float:
    """
    Convert a stored price to a float.

    Absent, unparsable and non-finite values become 0.
    """
    if value is None or isinstance(value, bool):
        return 0.0
    try:
        price = float(value)
    except (TypeError, ValueError):
        return 0.0
    if not math.isfinite(price):
        return 0.0
    return price


def parse_leading_int(value: str) -> Optional[int]:
    """
    Parse the integer prefix of a string ("12abc" -> 12).

    Returns:
        The integer, or None if the string does not start with digits
    """
    match = _LEADING_INT.match(value or '')
    if not match:
        return None
    return int(match.group(1))


def parse_leading_float(value: str) -> float:
    """
    Parse the decimal prefix of a string ("9.99 GBP" -> 9.99).

    Returns 0 when the string does not start with a number or the number
    is not finite.
    """
    match = _LEADING_FLOAT.match(value or '')
    if not match:
        return 0.0
    number = float(match.group(1))
    if not math.isfinite(number):
        return 0.0
    return number


def format_price(value: Any) -> str:
    """Format a price for display, e.g. 1234.5 -> '£1,234.50'."""
    return f"{CURRENCY_SYMBOL}{coerce_price(value):,.2f}"


def is_web_url(value: Any) -> bool:
    """Return True for absolute http(s) URLs with a host."""
    if not isinstance(value, str) or not value.strip():
        return False
    try:
        parts = urlsplit(value.strip())
    except ValueError:
        return False
    return parts.scheme.lower() in WEB_SCHEMES and bool(parts.netloc)


def field_text(product: dict, key: str) -> str:
    """Return a product field as text, treating None as empty."""
    value = product.get(key)
    if value is None:
        return ''
    return str(value)
