"""A small drawing and keyboard layer over a pygame window."""

from __future__ import annotations

import os
from enum import IntEnum

os.environ.setdefault("PYGAME_HIDE_SUPPORT_PROMPT", "1")

import pygame  # noqa: E402

SCREEN_WIDTH = 1200
SCREEN_HEIGHT = 700

_QUIT_EXIT_CODE = 3


class Color(IntEnum):
    BLACK = 0
    RED = 1
    GREEN = 2
    BLUE = 3
    CYAN = 4
    MAGENTA = 5
    YELLOW = 6
    WHITE = 7

    @property
    def rgb(self) -> tuple[int, int, int]:
        """The colour as an (r, g, b) triple."""
        return _RGB[self]


_RGB: dict[Color, tuple[int, int, int]] = {
    Color.BLACK: (0, 0, 0),
    Color.RED: (255, 0, 0),
    Color.GREEN: (0, 255, 0),
    Color.BLUE: (0, 0, 255),
    Color.CYAN: (0, 255, 255),
    Color.MAGENTA: (255, 0, 255),
    Color.YELLOW: (255, 255, 0),
    Color.WHITE: (255, 255, 255),
}


def _box(x1: int, y1: int, x2: int, y2: int) -> pygame.Rect:
    """Rectangle covering both corners, edges included."""
    left, right = sorted((int(x1), int(x2)))
    top, bottom = sorted((int(y1), int(y2)))
    return pygame.Rect(left, top, right - left + 1, bottom - top + 1)


class Graphics:
    """A window to draw on, with simple keyboard input.

    Closing the window raises ``SystemExit(3)`` from the input methods.
    """

    def __init__(self, width: int = SCREEN_WIDTH, height: int = SCREEN_HEIGHT) -> None:
        try:
            pygame.display.init()
        except pygame.error as exc:
            raise RuntimeError(f"Couldn't initialize display: {exc}") from exc
        try:
            self.surface = pygame.display.set_mode((width, height))
        except pygame.error as exc:
            pygame.quit()
            raise RuntimeError(f"Window could not be created: {exc}") from exc
        pygame.display.set_caption("Tetris")
        self._width = width
        self._height = height
        self._font: pygame.font.Font | None = None
        pygame.time.wait(10)

    def __enter__(self) -> Graphics:
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.close()

    def pixel(self, x: int, y: int, color: Color) -> None:
        self.surface.set_at((int(x), int(y)), Color(color).rgb)

    def line(self, x1: int, y1: int, x2: int, y2: int, color: Color) -> None:
        pygame.draw.line(
            self.surface, Color(color).rgb, (int(x1), int(y1)), (int(x2), int(y2))
        )

    def circle(self, x: int, y: int, r: int, color: Color) -> None:
        pygame.draw.circle(self.surface, Color(color).rgb, (int(x), int(y)), int(r), width=1)

    def filled_triangle(
        self, x1: int, y1: int, x2: int, y2: int, x3: int, y3: int, color: Color
    ) -> None:
        points = [(int(x1), int(y1)), (int(x2), int(y2)), (int(x3), int(y3))]
        pygame.draw.polygon(self.surface, Color(color).rgb, points)

    def filled_rect(self, x1: int, y1: int, x2: int, y2: int, color: Color) -> None:
        self.surface.fill(Color(color).rgb, _box(x1, y1, x2, y2))

    def filled_circle(self, x: int, y: int, r: int, color: Color) -> None:
        pygame.draw.circle(self.surface, Color(color).rgb, (int(x), int(y)), int(r))

    def rect(self, x1: int, y1: int, x2: int, y2: int, color: Color) -> None:
        pygame.draw.rect(self.surface, Color(color).rgb, _box(x1, y1, x2, y2), width=1)

    def textout(self, x: int, y: int, text: str, color: Color) -> None:
        if self._font is None:
            pygame.font.init()
            self._font = pygame.font.Font(None, 16)
        rendered = self._font.render(text, False, Color(color).rgb)
        self.surface.blit(rendered, (int(x), int(y)))

    def screen_width(self) -> int:
        return self._width

    def screen_height(self) -> int:
        return self._height

    def update_screen(self) -> None:
        """Show what was drawn, then clear the canvas to black."""
        pygame.display.flip()
        self.surface.fill(Color.BLACK.rgb)

    def poll_key(self) -> int | None:
        """Key of the first pending key press, or None if there is none."""
        while (event := pygame.event.poll()).type != pygame.NOEVENT:
            if event.type == pygame.KEYDOWN:
                return event.key
            if event.type == pygame.QUIT:
                raise SystemExit(_QUIT_EXIT_CODE)
        return None

    def get_key(self) -> int:
        """Wait for a key press and return its key."""
        while True:
            event = pygame.event.wait()
            if event.type == pygame.KEYDOWN:
                return event.key
            if event.type == pygame.QUIT:
                raise SystemExit(_QUIT_EXIT_CODE)

    def is_key_down(self, key: int) -> bool:
        """Whether the key is held down right now."""
        pygame.event.pump()
        for event in pygame.event.get(pygame.QUIT):
            if event.type == pygame.QUIT:
                raise SystemExit(_QUIT_EXIT_CODE)
        return bool(pygame.key.get_pressed()[key])

    def close(self) -> None:
        pygame.quit()