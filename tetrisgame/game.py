"""The game loop: keyboard handling, gravity and game over."""

from __future__ import annotations

import argparse
import random

import pygame

from .blocks import FRAMERATE_DELAY, MOVE_DOWN_EVERY_N_FRAMES
from .model import Direction, GameModel, GameState
from .primlib import Graphics
from .view import View


class Game:
    """State of one game, advanced one frame at a time."""

    def __init__(self, rng: random.Random | None = None) -> None:
        self.model = GameModel(rng)
        self.counter = 0
        self.inserted = self.model.forward_pieces()
        self.state = GameState.GOING

    def step(self, key: int | None) -> bool:
        """Advance one frame given the key pressed; False means quit."""
        if self.state is GameState.GOING:
            self._step_going(key)
        elif key == pygame.K_RETURN:
            self.model.reset()
            self.inserted = self.model.forward_pieces()
            self.state = GameState.GOING
        elif key == pygame.K_ESCAPE:
            return False
        return True

    def _step_going(self, key: int | None) -> None:
        model = self.model
        if key == pygame.K_LEFT:
            model.attempt_move(Direction.LEFT)
        elif key == pygame.K_RIGHT:
            model.attempt_move(Direction.RIGHT)
        elif key == pygame.K_DOWN:
            while model.attempt_move(Direction.DOWN):
                pass
            self.inserted = False

        if key == pygame.K_SPACE:
            model.attempt_rotate()

        gravity_due = self.counter == MOVE_DOWN_EVERY_N_FRAMES
        self.counter += 1
        if gravity_due:
            self.inserted = model.attempt_move(Direction.DOWN)
            model.clear_rows()
            self.counter = 0

        if not self.inserted:
            model.immobilise_current()
            self.inserted = model.forward_pieces()
            if not self.inserted:
                self.state = GameState.OVER


def _render(game: Game, view: View) -> None:
    view.clear_screen()
    if game.state is GameState.GOING:
        view.draw_game(game.model)
        view.draw_board(game.model)
    else:
        view.draw_final_text()


def main(argv: list[str] | None = None) -> int:
    """Open the window and play until Escape is pressed after a game over."""
    argparse.ArgumentParser(prog="tetrisgame", description="Play tetris.").parse_args(argv)
    try:
        graphics = Graphics()
    except RuntimeError:
        print("Failed to initialize window.")
        return 1

    with graphics:
        view = View(graphics)
        game = Game(random.Random())
        while game.step(graphics.poll_key()):
            _render(game, view)
            graphics.update_screen()
            pygame.time.wait(FRAMERATE_DELAY)
    return 0