"""Drawing of the field, the next piece and the game-over text."""

from __future__ import annotations

from .blocks import (
    BLOCK_DIMENSION,
    BLOCK_SPACING,
    FIELD_HEIGHT,
    FIELD_WIDTH,
    FINAL_TEXT,
    PEG_HEIGHT,
    is_axis,
    is_movable,
)
from .model import GameModel
from .primlib import Color

_STEP = BLOCK_DIMENSION + BLOCK_SPACING
_PEG_OFFSET = (FIELD_WIDTH + 1) // 2 * _STEP
_NEXT_MARGIN = 200


def _block_color(block: int) -> Color:
    if is_movable(block):
        return Color.YELLOW if is_axis(block) else Color.GREEN
    return Color.BLACK if block == 0 else Color.RED


class View:
    """Renders a game model onto a graphics surface."""

    def __init__(self, graphics) -> None:
        self.graphics = graphics

    @property
    def _center_x(self) -> float:
        return self.graphics.screen_width() / 2

    @property
    def _left_peg(self) -> float:
        return self._center_x - _PEG_OFFSET

    @property
    def _right_peg(self) -> float:
        return self._center_x + _PEG_OFFSET

    def draw_game(self, model: GameModel) -> None:
        self.draw_pegs()
        self.draw_board(model)
        self.draw_next(model)

    def draw_pegs(self) -> None:
        """Draw the two vertical walls either side of the field."""
        bottom = self.graphics.screen_height()
        top = bottom - PEG_HEIGHT
        left = int(self._left_peg - 1)
        right = int(self._right_peg)
        self.graphics.line(left, bottom, left, top, Color.YELLOW)
        self.graphics.line(right, bottom, right, top, Color.YELLOW)

    def draw_block(self, x_center: int, y_center: int, width: int, color: Color) -> None:
        half = int(width / 2)
        self.graphics.filled_rect(
            x_center - half, y_center - half, x_center + half, y_center + half, color
        )

    def draw_board(self, model: GameModel) -> None:
        x_origin = self._left_peg + BLOCK_DIMENSION // 2
        y_origin = self.graphics.screen_height() - PEG_HEIGHT + BLOCK_DIMENSION // 2
        for y in range(FIELD_HEIGHT):
            for x, column in enumerate(model.field):
                self.draw_block(
                    int(x * _STEP + x_origin),
                    int(y * _STEP + y_origin),
                    BLOCK_DIMENSION,
                    _block_color(column[y]),
                )

    def draw_next(self, model: GameModel) -> None:
        data = model.next.data
        for y in range(len(data[0])):
            for x, column in enumerate(data):
                block = column[y]
                color = _block_color(block) if is_movable(block) else Color.BLACK
                self.draw_block(
                    int(x * _STEP + self._right_peg + _NEXT_MARGIN),
                    int(y * _STEP + _NEXT_MARGIN),
                    BLOCK_DIMENSION,
                    color,
                )

    def draw_final_text(self) -> None:
        self.graphics.textout(
            self.graphics.screen_width() // 2,
            self.graphics.screen_height() // 2,
            FINAL_TEXT,
            Color.YELLOW,
        )

    def clear_screen(self) -> None:
        self.graphics.filled_rect(
            0,
            0,
            self.graphics.screen_width() - 1,
            self.graphics.screen_height() - 1,
            Color.BLACK,
        )