"""Tolerant scalar parsing of property values.

Malformed numbers never raise from ``int_value`` or ``long_value``; they are
reported through the logger and replaced by the caller's default.
"""

import re

from .logger import OptionLogger, ensure_logger
from .messages import get_message

INT_BITS = 32
LONG_BITS = 64

_INTEGER = re.compile(r"[+-]?[0-9]+")


def is_empty(value: str | None) -> bool:
    """Return True for an absent or zero-length value."""
    return value is None or value == ""


def parse_integer(value: str, bits: int = INT_BITS) -> int:
    """Strictly parse a signed integer that fits in ``bits`` bits.

    Surrounding whitespace, underscores and decimal points are rejected.

    Raises:
        ValueError: If ``value`` is not an integer literal or is out of range.
    """
    if _INTEGER.fullmatch(value) is None:
        raise ValueError(f"invalid integer literal: {value!r}")
    number = int(value)
    limit = 1 << (bits - 1)
    if not -limit <= number < limit:
        raise ValueError(f"value out of range for {bits}-bit integer: {value!r}")
    return number


def _number_value(
    value: str | None, default: int, bits: int, logger: OptionLogger | None
) -> int:
    if is_empty(value):
        return default
    try:
        return parse_integer(value, bits)
    except ValueError:
        ensure_logger(logger).warning(get_message("NumberFormat", value, default))
        return default


def int_value(value: str | None, default: int, logger: OptionLogger | None = None) -> int:
    """Parse a 32-bit integer, falling back to ``default``.

    Args:
        value: Raw property value; empty or None yields ``default``.
        default: Value used when ``value`` is empty or malformed.
        logger: Receives a warning naming the bad value and the default.

    Returns:
        The parsed integer or ``default``.
    """
    return _number_value(value, default, INT_BITS, logger)


def long_value(value: str | None, default: int, logger: OptionLogger | None = None) -> int:
    """Parse a 64-bit integer, falling back to ``default``."""
    return _number_value(value, default, LONG_BITS, logger)


def bool_value(value: str | None, default: bool) -> bool:
    """Parse a boolean; any non-empty value other than "true" is False."""
    if is_empty(value):
        return default
    return value.lower() == "true"
