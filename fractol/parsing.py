"""Command-line validation and number parsing for the fractal viewer."""

from __future__ import annotations

import enum
from dataclasses import dataclass
from functools import reduce
from itertools import takewhile
from typing import Sequence

from fractol.chars import is_digit
from fractol.text_search import strncmp

USAGE = "Use: ./fractol [mandelbrot | julia <value> <value>]"


class UsageError(ValueError):
    """Raised when the command-line arguments do not name a valid fractal."""


class FractalKind(enum.Enum):
    """The fractals the viewer can draw."""

    MANDELBROT = "mandelbrot"
    JULIA = "julia"


@dataclass(frozen=True)
class Arguments:
    """The validated command line: which fractal and, for Julia, its constant."""

    kind: FractalKind
    c_re: float = 0.0
    c_im: float = 0.0


def _leading_digits(text: str) -> str:
    return "".join(takewhile(is_digit, text))


def parse_double(text: str) -> float:
    """Parse a decimal number: leading spaces, an optional '-', digits, '.' and digits.

    Parsing stops at the first character that does not fit; a '+' sign is
    not accepted and yields 0.
    """
    rest = text.lstrip(" ")
    sign = 1.0
    if rest.startswith("-"):
        sign = -1.0
        rest = rest[1:]
    integer_digits = _leading_digits(rest)
    rest = rest[len(integer_digits):]
    integer = reduce(lambda acc, d: acc * 10.0 + (ord(d) - 48), integer_digits, 0.0)
    fraction = 0.0
    if rest.startswith("."):
        fraction_digits = _leading_digits(rest[1:])
        if fraction_digits:
            fraction = int(fraction_digits) / 10 ** len(fraction_digits)
    return sign * (integer + fraction)


def compare_input(first: str, second: str, n: int) -> int:
    """Compare two words: 1 when their lengths differ, else as strncmp over n."""
    if len(first) != len(second):
        return 1
    return strncmp(first, second, n)


def _is_valid_number(text: str) -> bool:
    chars = iter(text)
    for ch in chars:
        if ch == ",":
            return False
        if ch in "-+.":
            ch = next(chars, None)
            if ch is None:
                break
        if not is_digit(ch):
            return False
    return True


def is_valid_julia(argv: Sequence[str]) -> bool:
    """True for the arguments 'julia <value> <value>' (program name excluded).

    Each value may hold digits and the characters '-', '+' and '.', each of
    which must be followed by a digit or the end; a comma is never allowed.
    """
    if len(argv) != 3 or compare_input(argv[0], "julia", 5) != 0:
        return False
    return all(_is_valid_number(value) for value in argv[1:])


def parse_arguments(argv: Sequence[str]) -> Arguments:
    """Turn the arguments after the program name into Arguments.

    Raises UsageError for anything but 'mandelbrot' or a valid Julia line.
    """
    if len(argv) == 1 and compare_input(argv[0], "mandelbrot", 10) == 0:
        return Arguments(FractalKind.MANDELBROT)
    if len(argv) == 3 and is_valid_julia(argv):
        return Arguments(FractalKind.JULIA, parse_double(argv[1]), parse_double(argv[2]))
    raise UsageError(f"Invalid Input\n\n{USAGE}")