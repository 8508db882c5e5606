"""Length, character search, comparison and substring search on text."""

from __future__ import annotations

from typing import Optional


def _char(c: str) -> str:
    if not isinstance(c, str) or len(c) != 1:
        raise ValueError(f"expected a single character, got {c!r}")
    return c


def strlen(text: str) -> int:
    """Number of characters in text."""
    return len(text)


def strchr(text: str, c: str) -> Optional[int]:
    """Index of the first occurrence of c in text, or None.

    Searching for the terminator "\\0" finds the end of the text.
    """
    c = _char(c)
    index = text.find(c)
    if index >= 0:
        return index
    return len(text) if c == "\0" else None


def strrchr(text: str, c: str) -> Optional[int]:
    """Index of the last occurrence of c in text, or None.

    Searching for the terminator "\\0" finds the end of the text.
    """
    c = _char(c)
    if c == "\0":
        return len(text)
    index = text.rfind(c)
    return index if index >= 0 else None


def strncmp(first: str, second: str, n: int) -> int:
    """Compare at most n characters.

    Returns the code difference of the first differing pair, or 0 when the
    compared parts are equal. A shorter text compares as if ended by "\\0".
    """
    if n < 0:
        raise ValueError(f"count must not be negative, got {n}")
    for i in range(n):
        a = ord(first[i]) if i < len(first) else 0
        b = ord(second[i]) if i < len(second) else 0
        if a != b or a == 0:
            return a - b
    return 0


def strnstr(haystack: str, needle: str, length: int) -> Optional[int]:
    """Index of the first needle found within the first length characters.

    An empty needle is found at index 0. Returns None when the needle does
    not lie wholly inside the searched part.
    """
    if length < 0:
        raise ValueError(f"length must not be negative, got {length}")
    if not needle:
        return 0
    limit = min(len(haystack), length) - len(needle)
    for start in range(limit + 1):
        if haystack.startswith(needle, start):
            return start
    return None