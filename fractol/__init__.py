"""Interactive Mandelbrot and Julia set explorer, with small text and buffer helpers."""

__version__ = "0.1.0"