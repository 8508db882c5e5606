"""Escape-time iteration counts for the Mandelbrot and Julia sets.

Both functions accept plain numbers, returning an int, or numpy arrays
(broadcast together), returning an integer array of the same shape.
"""

from __future__ import annotations

from typing import Any

import numpy as np

WIDTH = 1080
HEIGHT = 1080
MAX_ITER = 30


def _escape_counts(z_re: Any, z_im: Any, c_re: Any, c_im: Any) -> Any:
    arrays = np.broadcast_arrays(
        *(np.asarray(value, dtype=np.float64) for value in (z_re, z_im, c_re, c_im))
    )
    zr, zi, cr, ci = (array.copy() for array in arrays)
    counts = np.zeros(zr.shape, dtype=np.int64)
    with np.errstate(all="ignore"):
        active = zr * zr + zi * zi <= 4
        for _ in range(MAX_ITER):
            if not active.any():
                break
            new_re = zr * zr - zi * zi + cr
            new_im = 2 * zr * zi + ci
            zr = np.where(active, new_re, zr)
            zi = np.where(active, new_im, zi)
            counts += active
            active &= zr * zr + zi * zi <= 4
    return int(counts) if counts.ndim == 0 else counts


def mandelbrot_iterations(x: Any, y: Any) -> Any:
    """Iterations of z -> z*z + c from z = 0 with c = x + iy, up to MAX_ITER."""
    return _escape_counts(0.0, 0.0, x, y)


def julia_iterations(x: Any, y: Any, c_re: Any, c_im: Any) -> Any:
    """Iterations of z -> z*z + c from z = x + iy with c = c_re + i c_im, up to MAX_ITER."""
    return _escape_counts(x, y, c_re, c_im)