"""Mapping escape-time iteration counts to packed 0xRRGGBB colours."""

from __future__ import annotations

from typing import Any

import numpy as np

from fractol.formula import MAX_ITER


def colour(iterations: Any, mouse_x: Any = 0, mouse_y: Any = 0, alternate: bool = False) -> Any:
    """Colour for an iteration count; points that never escaped are black.

    The default palette packs red, green and blue from the count alone. The
    alternate palette shifts each channel by the mouse position and swaps red
    and blue. The result wraps to a signed 32-bit integer. Arrays of counts
    give arrays of colours.
    """
    counts = np.asarray(iterations, dtype=np.int64)
    if (counts < 0).any():
        raise ValueError("iteration counts must not be negative")
    if alternate:
        red = 50 + (counts % 8) * 32 + mouse_x
        green = 50 + (counts % 16) * 16 + mouse_y
        blue = 50 + (counts % 32) * 8 - mouse_x
        packed = (blue * 65536) | (green * 256) | red
    else:
        red = (counts % 8) * 32
        green = (counts % 16) * 16
        blue = (counts % 32) * 8
        packed = (red * 65536) | (green * 256) | blue
    packed = np.where(counts == MAX_ITER, 0, packed).astype(np.int64) & 0xFFFFFFFF
    packed = np.where(packed > 0x7FFFFFFF, packed - (1 << 32), packed)
    return int(packed) if packed.ndim == 0 else packed