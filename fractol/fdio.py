"""Writing characters, text and integers to a text stream."""

from __future__ import annotations

from typing import TextIO

from fractol.numbers import itoa


def put_char(c: str, stream: TextIO) -> None:
    """Write one character to stream."""
    if not isinstance(c, str) or len(c) != 1:
        raise ValueError(f"expected a single character, got {c!r}")
    stream.write(c)


def put_str(text: str, stream: TextIO) -> None:
    """Write text to stream."""
    stream.write(text)


def put_endl(text: str, stream: TextIO) -> None:
    """Write text followed by a newline to stream."""
    stream.write(text)
    stream.write("\n")


def put_nbr(n: int, stream: TextIO) -> None:
    """Write the decimal form of a signed 32-bit integer to stream."""
    stream.write(itoa(n))