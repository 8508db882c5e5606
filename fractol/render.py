"""Turning a FractalState into pixel colours."""

from __future__ import annotations

import numpy as np

from fractol.colours import colour
from fractol.formula import HEIGHT, MAX_ITER, WIDTH, julia_iterations, mandelbrot_iterations
from fractol.view import FractalState


def pixel_colour(state: FractalState, x: int, y: int) -> int:
    """Packed 0xRRGGBB colour of pixel (x, y).

    Mandelbrot points that never escape are black; Julia points that never
    escape get the value MAX_ITER.
    """
    vp = state.viewport
    if state.is_julia:
        c_re, c_im = state.julia_constant()
        iterations = julia_iterations(vp.to_real(x), vp.to_imag(y), c_re, c_im)
        if iterations == MAX_ITER:
            return MAX_ITER
    else:
        iterations = mandelbrot_iterations(vp.to_real(x), vp.to_imag(y))
        if iterations == MAX_ITER:
            return 0
    return colour(iterations, state.mouse_x, state.mouse_y, state.colour_mode)


def render_image(state: FractalState) -> np.ndarray:
    """The whole frame as a (HEIGHT, WIDTH) array of packed colours."""
    vp = state.viewport
    real = vp.to_real(np.arange(WIDTH))[np.newaxis, :]
    imag = vp.to_imag(np.arange(HEIGHT))[:, np.newaxis]
    if state.is_julia:
        c_re, c_im = state.julia_constant()
        counts = julia_iterations(real, imag, c_re, c_im)
    else:
        counts = mandelbrot_iterations(real, imag)
    colours = np.asarray(
        colour(counts, state.mouse_x, state.mouse_y, state.colour_mode), dtype=np.int64
    )
    if state.is_julia:
        colours = np.where(counts == MAX_ITER, MAX_ITER, colours)
    return colours.astype(np.int64)