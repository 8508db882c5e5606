"""Copying, joining, trimming, splitting and mapping text."""

from __future__ import annotations

from typing import Callable, List, MutableSequence, Optional, Tuple


def strlcpy(src: str, size: int) -> Tuple[str, int]:
    """Copy src into a buffer of size characters, terminator included.

    Returns the copied text and the full length of src.
    """
    if size < 0:
        raise ValueError(f"size must not be negative, got {size}")
    copied = src[: size - 1] if size > 0 else ""
    return copied, len(src)


def strlcat(dst: str, src: str, size: int) -> Tuple[str, int]:
    """Append src to dst within a buffer of size characters, terminator included.

    Returns the resulting text and the length the full result would have had;
    when size does not exceed len(dst), dst is unchanged and the length is
    len(src) + size.
    """
    if size < 0:
        raise ValueError(f"size must not be negative, got {size}")
    dlen = len(dst)
    if size <= dlen:
        return dst, len(src) + size
    return dst + src[: size - dlen - 1], len(src) + dlen


def strdup(text: str) -> str:
    """A copy of text."""
    return "".join(text)


def substr(text: str, start: int, length: int) -> str:
    """At most length characters of text from start; empty past the end."""
    if start < 0 or length < 0:
        raise ValueError("start and length must not be negative")
    return text[start:start + length]


def strjoin(first: str, second: str) -> str:
    """first followed by second."""
    return first + second


def strtrim(text: str, charset: str) -> str:
    """text with every leading and trailing character from charset removed."""
    if not charset:
        return text
    return text.strip(charset)


def split(text: str, separator: str) -> List[str]:
    """The non-empty pieces of text between occurrences of separator."""
    if not isinstance(separator, str) or len(separator) != 1:
        raise ValueError(f"separator must be a single character, got {separator!r}")
    return [piece for piece in text.split(separator) if piece]


def strmapi(text: str, func: Callable[[int, str], str]) -> str:
    """New text made of func(index, character) for each character."""
    return "".join(func(index, ch) for index, ch in enumerate(text))


def striteri(
    text: MutableSequence[str], func: Callable[[int, str], Optional[str]]
) -> None:
    """Call func(index, character) on each element of a mutable character sequence.

    A result other than None replaces that character in place.
    """
    for index, ch in enumerate(text):
        replacement = func(index, ch)
        if replacement is not None:
            text[index] = replacement