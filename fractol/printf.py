"""A small printf-style formatter with the conversions c, s, p, d, i, u, x, X and %%.

A conversion letter that is not recognised is dropped from the output
without consuming an argument. Integers are treated as 32-bit values:
d and i wrap to a signed value; u, x and X wrap to an unsigned one.
"""

from __future__ import annotations

import operator
import sys
from typing import Any, Callable, Dict

_UINT32_MASK = 0xFFFFFFFF
_POINTER_MASK = 0xFFFFFFFFFFFFFFFF


def _as_int(value: Any) -> int:
    try:
        return operator.index(value)
    except TypeError:
        raise TypeError(f"expected an integer argument, got {value!r}") from None


def _signed32(value: Any) -> str:
    number = _as_int(value) & _UINT32_MASK
    if number > 0x7FFFFFFF:
        number -= 1 << 32
    return str(number)


def _unsigned32(value: Any) -> int:
    return _as_int(value) & _UINT32_MASK


def _char(value: Any) -> str:
    if isinstance(value, str):
        if len(value) != 1:
            raise ValueError(f"expected a single character, got {value!r}")
        return value
    return chr(_as_int(value) & 0xFF)


def _string(value: Any) -> str:
    if value is None:
        return "(null)"
    if not isinstance(value, str):
        raise TypeError(f"expected a string argument, got {value!r}")
    return value


def _pointer(value: Any) -> str:
    if value is None:
        address = 0
    elif isinstance(value, int):
        address = value & _POINTER_MASK
    else:
        address = id(value)
    return "0x" + format(address, "x")


_CONVERTERS: Dict[str, Callable[[Any], str]] = {
    "c": _char,
    "s": _string,
    "p": _pointer,
    "d": _signed32,
    "i": _signed32,
    "u": lambda value: str(_unsigned32(value)),
    "x": lambda value: format(_unsigned32(value), "x"),
    "X": lambda value: format(_unsigned32(value), "X"),
}


def format_message(fmt: str, *args: Any) -> str:
    """Expand the conversions in fmt with args, in order.

    Raises ValueError when fmt ends with a lone '%' and TypeError when
    there are fewer arguments than conversions.
    """
    pieces = []
    values = iter(args)
    chars = iter(fmt)
    for ch in chars:
        if ch != "%":
            pieces.append(ch)
            continue
        spec = next(chars, None)
        if spec is None:
            raise ValueError("format ends with a lone '%'")
        if spec == "%":
            pieces.append("%")
            continue
        converter = _CONVERTERS.get(spec)
        if converter is None:
            continue
        try:
            value = next(values)
        except StopIteration:
            raise TypeError(f"not enough arguments for format {fmt!r}") from None
        pieces.append(converter(value))
    return "".join(pieces)


def print_formatted(fmt: str, *args: Any) -> int:
    """Write the expanded format to standard output; return the characters written."""
    text = format_message(fmt, *args)
    sys.stdout.write(text)
    return len(text)