"""Byte-buffer helpers working on bytes and bytearray objects.

Every count is checked against the buffers it touches; reaching past
the end raises ValueError.
"""

from __future__ import annotations

from typing import Optional, Union

Buffer = Union[bytes, bytearray, memoryview]


def _check_count(n: int, *buffers: Buffer) -> None:
    if n < 0:
        raise ValueError(f"byte count must not be negative, got {n}")
    for buffer in buffers:
        if n > len(buffer):
            raise ValueError(f"byte count {n} exceeds buffer length {len(buffer)}")


def memset(buffer: bytearray, c: int, n: int) -> bytearray:
    """Fill the first n bytes of buffer with the low byte of c."""
    _check_count(n, buffer)
    buffer[:n] = bytes([c & 0xFF]) * n
    return buffer


def bzero(buffer: bytearray, n: int) -> None:
    """Set the first n bytes of buffer to zero."""
    memset(buffer, 0, n)


def calloc(count: int, size: int) -> bytearray:
    """Return a zero-filled buffer of count elements of size bytes each."""
    if count < 0 or size < 0:
        raise ValueError("count and size must not be negative")
    return bytearray(count * size)


def memchr(data: Buffer, c: int, n: int) -> Optional[int]:
    """Index of the first byte equal to the low byte of c among the first n, or None."""
    _check_count(n, data)
    target = c & 0xFF
    return next((i for i, byte in enumerate(data[:n]) if byte == target), None)


def memcmp(first: Buffer, second: Buffer, n: int) -> int:
    """Difference of the first unequal byte pair within n bytes, or 0."""
    if first is second:
        return 0
    _check_count(n, first, second)
    for a, b in zip(first[:n], second[:n]):
        if a != b:
            return a - b
    return 0


def memcpy(dst: bytearray, src: Buffer, n: int) -> bytearray:
    """Copy the first n bytes of src to the start of dst."""
    _check_count(n, dst, src)
    dst[:n] = bytes(src[:n])
    return dst


def memmove(buffer: bytearray, dst_offset: int, src_offset: int, n: int) -> bytearray:
    """Move n bytes inside buffer from src_offset to dst_offset; ranges may overlap."""
    if dst_offset < 0 or src_offset < 0:
        raise ValueError("offsets must not be negative")
    _check_count(n, buffer[src_offset:], buffer[dst_offset:])
    if dst_offset != src_offset:
        buffer[dst_offset:dst_offset + n] = bytes(buffer[src_offset:src_offset + n])
    return buffer