"""Conversions between decimal text and 32-bit integers."""

from __future__ import annotations

_WHITESPACE = "\t \r\f\n\v"
_INT_MIN = -(2**31)
_INT_MAX = 2**31 - 1


def _wrap_int32(value: int) -> int:
    value &= 0xFFFFFFFF
    return value - 2**32 if value > _INT_MAX else value


def atoi(text: str) -> int:
    """Parse a leading decimal integer, skipping whitespace and one sign.

    Parsing stops at the first non-digit; text without digits yields 0.
    The result wraps to a signed 32-bit integer.
    """
    rest = text.lstrip(_WHITESPACE)
    sign = 1
    if rest[:1] in ("+", "-"):
        if rest[0] == "-":
            sign = -1
        rest = rest[1:]
    digits = ""
    for ch in rest:
        if not "0" <= ch <= "9":
            break
        digits += ch
    value = int(digits) if digits else 0
    return _wrap_int32(value * sign)


def itoa(n: int) -> str:
    """Decimal text of a signed 32-bit integer."""
    if not _INT_MIN <= n <= _INT_MAX:
        raise OverflowError(f"{n} does not fit in a signed 32-bit integer")
    return str(n)