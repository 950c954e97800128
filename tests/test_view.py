import random
from collections import Counter
from dataclasses import dataclass, field

from tetrisgame.blocks import (
    BLOCK_DIMENSION,
    BLOCK_SPACING,
    FIELD_HEIGHT,
    FIELD_WIDTH,
    FINAL_TEXT,
    PEG_HEIGHT,
    PIECE_SIZE,
)
from tetrisgame.model import GameModel
from tetrisgame.primlib import Color
from tetrisgame.view import View


@dataclass
class _Recorder:
    width: int = 1200
    height: int = 700
    calls: list = field(default_factory=list)

    def screen_width(self):
        return self.width

    def screen_height(self):
        return self.height

    def filled_rect(self, x1, y1, x2, y2, color):
        self.calls.append(("filled_rect", x1, y1, x2, y2, color))

    def line(self, x1, y1, x2, y2, color):
        self.calls.append(("line", x1, y1, x2, y2, color))

    def textout(self, x, y, text, color):
        self.calls.append(("textout", x, y, text, color))

    def of(self, kind):
        return [c for c in self.calls if c[0] == kind]


def _setup(seed=0):
    recorder = _Recorder()
    return recorder, View(recorder), GameModel(random.Random(seed))


def test_draw_block_is_square_around_center():
    recorder, view, _ = _setup()
    view.draw_block(100, 100, 30, Color.RED)
    assert recorder.calls == [("filled_rect", 85, 85, 115, 115, Color.RED)]


def test_empty_board_is_all_black():
    recorder, view, model = _setup()
    view.draw_board(model)
    rects = recorder.of("filled_rect")
    assert len(rects) == FIELD_WIDTH * FIELD_HEIGHT
    assert {r[5] for r in rects} == {Color.BLACK}


def test_board_blocks_are_evenly_spaced_and_sized():
    recorder, view, model = _setup()
    view.draw_board(model)
    rects = recorder.of("filled_rect")
    assert rects[1][1] - rects[0][1] == BLOCK_DIMENSION + BLOCK_SPACING
    assert rects[FIELD_WIDTH][2] - rects[0][2] == BLOCK_DIMENSION + BLOCK_SPACING
    assert all(r[3] - r[1] == BLOCK_DIMENSION for r in rects)


def test_board_fits_between_pegs_and_on_screen():
    recorder, view, model = _setup()
    view.draw_pegs()
    view.draw_board(model)
    left, right = recorder.of("line")
    rects = recorder.of("filled_rect")
    assert min(r[1] for r in rects) > left[1]
    assert max(r[3] for r in rects) < right[1]
    assert max(r[4] for r in rects) < recorder.height


def test_falling_piece_colors():
    recorder, view, model = _setup()
    model.forward_pieces()
    view.draw_board(model)
    counts = Counter(r[5] for r in recorder.of("filled_rect"))
    assert counts[Color.YELLOW] == 1
    assert counts[Color.GREEN] == 3
    assert counts[Color.RED] == 0


def test_settled_blocks_are_red():
    recorder, view, model = _setup()
    model.forward_pieces()
    model.immobilise_current()
    view.draw_board(model)
    counts = Counter(r[5] for r in recorder.of("filled_rect"))
    assert counts[Color.RED] == 4
    assert counts[Color.GREEN] + counts[Color.YELLOW] == 0


def test_pegs_are_vertical_and_symmetric():
    recorder, view, _ = _setup()
    view.draw_pegs()
    left, right = recorder.of("line")
    for line in (left, right):
        assert line[1] == line[3]
        assert line[2] == recorder.height
        assert line[4] == recorder.height - PEG_HEIGHT
        assert line[5] == Color.YELLOW
    assert (left[1] + 1 + right[1]) / 2 == recorder.width / 2


def test_draw_next():
    recorder, view, model = _setup(3)
    view.draw_next(model)
    rects = recorder.of("filled_rect")
    assert len(rects) == PIECE_SIZE * PIECE_SIZE
    counts = Counter(r[5] for r in rects)
    assert counts[Color.YELLOW] == 1
    assert counts[Color.GREEN] == 3
    assert counts[Color.BLACK] == PIECE_SIZE * PIECE_SIZE - 4


def test_draw_game_draws_everything():
    recorder, view, model = _setup()
    view.draw_game(model)
    assert len(recorder.of("line")) == 2
    assert len(recorder.of("filled_rect")) == FIELD_WIDTH * FIELD_HEIGHT + PIECE_SIZE**2


def test_final_text():
    recorder, view, _ = _setup()
    view.draw_final_text()
    assert recorder.calls == [
        ("textout", recorder.width // 2, recorder.height // 2, FINAL_TEXT, Color.YELLOW)
    ]


def test_clear_screen():
    recorder, view, _ = _setup()
    view.clear_screen()
    assert recorder.calls == [
        ("filled_rect", 0, 0, recorder.width - 1, recorder.height - 1, Color.BLACK)
    ]