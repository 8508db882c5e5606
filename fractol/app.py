"""The interactive window: event handling, drawing and the command entry point."""

from __future__ import annotations

import sys
from typing import Optional, Sequence, Tuple

import numpy as np
import pygame

from fractol.formula import HEIGHT, WIDTH
from fractol.parsing import Arguments, UsageError, parse_arguments
from fractol.printf import print_formatted
from fractol.render import render_image
from fractol.view import FractalState

ZOOM_FACTOR = 1.5
INSTRUCTIONS = (
    ("press 9 + hold space + move mouse = color mode", 10),
    ("hold space + move mouse = change Julia set", 30),
    ("scroll = zoom", 50),
    ("esc = close window", 70),
)


class FractolApp:
    """A fractal viewer window driven by keyboard, wheel and mouse."""

    def __init__(self, arguments: Arguments) -> None:
        self.state = FractalState(arguments)
        self.image: Optional[np.ndarray] = None
        self.running = True
        self.screen: Optional[pygame.Surface] = None
        self._font: Optional[pygame.font.Font] = None

    def handle_key(self, key: int, repeat: bool) -> None:
        """React to a key event; repeat is True while the key is held down."""
        if key == pygame.K_ESCAPE:
            self.running = False
            return
        if key == pygame.K_SPACE and repeat:
            self.state.press_space()
        else:
            self.state.release_keys()
        if key == pygame.K_9:
            self.state.toggle_colour_mode()

    def handle_scroll(self, ydelta: float, mouse_pos: Tuple[int, int]) -> None:
        """Zoom around the mouse: in for a positive delta, out for a negative one."""
        x, y = mouse_pos
        if ydelta < 0:
            self.state.viewport.zoom(x, y, 1 / ZOOM_FACTOR)
        elif ydelta > 0:
            self.state.viewport.zoom(x, y, ZOOM_FACTOR)
        self.redraw()

    def handle_motion(self, mouse_pos: Tuple[int, int]) -> bool:
        """Track the mouse while space is held; return True if the frame was redrawn."""
        if not self.state.checker:
            return False
        previous = (self.state.mouse_x, self.state.mouse_y)
        self.state.mouse_x, self.state.mouse_y = mouse_pos
        if (self.state.mouse_x, self.state.mouse_y) == previous:
            return False
        self.redraw()
        return True

    def redraw(self) -> None:
        """Render a fresh frame and show it if the window is open."""
        self.image = render_image(self.state)
        if self.screen is not None:
            self._present()

    def _present(self) -> None:
        assert self.screen is not None and self.image is not None
        packed = self.image & 0xFFFFFF
        rgb = np.stack(
            ((packed >> 16) & 0xFF, (packed >> 8) & 0xFF, packed & 0xFF), axis=-1
        ).astype(np.uint8)
        surface = pygame.surfarray.make_surface(rgb.transpose(1, 0, 2))
        self.screen.blit(surface, (0, 0))
        if self._font is not None:
            for text, top in INSTRUCTIONS:
                self.screen.blit(self._font.render(text, True, (255, 255, 255)), (10, top))
        pygame.display.flip()

    def run(self) -> None:
        """Open the window and process events until it is closed."""
        pygame.init()
        try:
            self.screen = pygame.display.set_mode((WIDTH, HEIGHT))
            pygame.display.set_caption("Fract'ol")
            pygame.key.set_repeat(300, 30)
            self._font = pygame.font.Font(None, 24)
            self.redraw()
            clock = pygame.time.Clock()
            held = set()
            while self.running:
                for event in pygame.event.get():
                    if event.type == pygame.QUIT:
                        self.running = False
                    elif event.type == pygame.KEYDOWN:
                        repeat = event.key in held
                        held.add(event.key)
                        self.handle_key(event.key, repeat)
                    elif event.type == pygame.KEYUP:
                        held.discard(event.key)
                        self.handle_key(event.key, False)
                    elif event.type == pygame.MOUSEWHEEL:
                        self.handle_scroll(event.y, pygame.mouse.get_pos())
                if self.running:
                    self.handle_motion(pygame.mouse.get_pos())
                clock.tick(60)
        finally:
            self.screen = None
            self._font = None
            pygame.quit()


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Start the viewer for 'mandelbrot' or 'julia <re> <im>'; return the exit status."""
    if argv is None:
        argv = sys.argv[1:]
    try:
        arguments = parse_arguments(list(argv))
    except UsageError as exc:
        print_formatted("\n%s\n\n", str(exc))
        return 1
    try:
        FractolApp(arguments).run()
    except pygame.error as exc:
        print_formatted("Error: %s\n", str(exc))
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())