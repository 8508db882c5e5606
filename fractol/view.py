"""The visible region of the complex plane and the viewer's interactive state."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Tuple

from fractol.formula import HEIGHT, WIDTH
from fractol.parsing import Arguments, FractalKind


@dataclass
class Viewport:
    """The rectangle of the complex plane mapped onto the window."""

    start_x: float = -2.0
    end_x: float = 2.0
    start_y: float = -2.0
    end_y: float = 2.0

    def to_real(self, x: Any) -> Any:
        """Real part for a pixel column (or an array of columns)."""
        return self.start_x + (x / WIDTH) * (self.end_x - self.start_x)

    def to_imag(self, y: Any) -> Any:
        """Imaginary part for a pixel row (or an array of rows)."""
        return self.start_y + (y / HEIGHT) * (self.end_y - self.start_y)

    def zoom(self, x: int, y: int, factor: float) -> None:
        """Scale the view by factor, keeping the point under pixel (x, y) in place.

        A factor above 1 zooms in, below 1 zooms out.
        """
        if factor <= 0:
            raise ValueError(f"zoom factor must be positive, got {factor}")
        x_math = self.to_real(x)
        y_math = self.to_imag(y)
        new_x_range = (self.end_x - self.start_x) / factor
        new_y_range = (self.end_y - self.start_y) / factor
        self.start_x = x_math - (x / WIDTH) * new_x_range
        self.end_x = self.start_x + new_x_range
        self.start_y = y_math - (y / HEIGHT) * new_y_range
        self.end_y = self.start_y + new_y_range


@dataclass
class FractalState:
    """Everything that decides what the next frame looks like."""

    arguments: Arguments
    viewport: Viewport = field(default_factory=Viewport)
    mouse_x: int = 0
    mouse_y: int = 0
    checker: bool = False
    params_set: bool = False
    colour_mode: bool = False

    @property
    def is_julia(self) -> bool:
        """True when the state draws a Julia set."""
        return self.arguments.kind is FractalKind.JULIA

    def julia_constant(self) -> Tuple[float, float]:
        """The constant c of the Julia set to draw.

        Until the mouse has taken over, c comes from the command line and the
        stored mouse position is set to its truncated parts; afterwards c is
        the mouse position divided by 1000.
        """
        if not self.params_set:
            self.mouse_x = int(self.arguments.c_re)
            self.mouse_y = int(self.arguments.c_im)
            return self.arguments.c_re, self.arguments.c_im
        return self.mouse_x / 1000.0, self.mouse_y / 1000.0

    def press_space(self) -> None:
        """Space held down: follow the mouse, which now drives the Julia constant."""
        self.checker = True
        self.params_set = True

    def release_keys(self) -> None:
        """Stop following the mouse."""
        self.checker = False

    def toggle_colour_mode(self) -> None:
        """Switch to the mouse-driven palette; it stays on from then on."""
        self.colour_mode = True