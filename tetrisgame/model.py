"""Game field, the next piece, and the rules that move pieces about."""

from __future__ import annotations

import random
from collections.abc import Iterator
from dataclasses import dataclass
from enum import Enum

from .blocks import (
    AXIS_OF_ROTATION,
    EMPTY_BLOCK,
    FIELD_HEIGHT,
    FIELD_WIDTH,
    PIECE_COUNT,
    ROTATION_COUNT,
    in_range,
    is_axis,
    is_movable,
    is_present,
    make_block,
    piece_id,
    rotation,
    set_immovable,
)
from .pieces import shape


class Direction(Enum):
    """Direction of a move, as a (dx, dy) step."""

    LEFT = (-1, 0)
    RIGHT = (1, 0)
    DOWN = (0, 1)

    @property
    def dx(self) -> int:
        return self.value[0]

    @property
    def dy(self) -> int:
        return self.value[1]


class GameState(Enum):
    GOING = "going"
    OVER = "over"


@dataclass(frozen=True)
class Piece:
    """A piece ready to be placed; ``data[x][y]`` holds its blocks."""

    axis_x: int
    axis_y: int
    data: tuple[tuple[int, ...], ...]

    def cells(self) -> Iterator[tuple[int, int, int]]:
        """Yield (x, y, block) for every non-empty cell, row by row."""
        height = len(self.data[0])
        for y in range(height):
            for x, column in enumerate(self.data):
                if column[y] != EMPTY_BLOCK:
                    yield x, y, column[y]


def make_piece(piece_id: int, rotation: int) -> Piece:
    """Build the blocks of a piece kind in the given rotation."""
    rows = shape(piece_id, rotation)
    data = tuple(
        tuple(
            make_block(piece_id, rotation, cell == AXIS_OF_ROTATION) if cell else EMPTY_BLOCK
            for cell in column
        )
        for column in zip(*rows)
    )
    try:
        axis_x, axis_y = next(
            (x, y)
            for x, column in enumerate(data)
            for y, block in enumerate(column)
            if is_axis(block)
        )
    except StopIteration:
        raise ValueError(f"piece {piece_id} has no axis of rotation") from None
    return Piece(axis_x, axis_y, data)


def _empty_field() -> list[list[int]]:
    return [[EMPTY_BLOCK] * FIELD_HEIGHT for _ in range(FIELD_WIDTH)]


class GameModel:
    """The playing field (indexed ``field[x][y]``) and the piece to come."""

    def __init__(self, rng: random.Random | None = None) -> None:
        self._rng = rng if rng is not None else random.Random()
        self.field: list[list[int]] = _empty_field()
        self.next: Piece = make_piece(0, 0)
        self.reset()

    def reset(self) -> None:
        """Empty the field and draw a new next piece."""
        self.field = _empty_field()
        self.prepare_random_next()

    def find_axis(self) -> tuple[int, int]:
        """Position of the falling piece's axis block."""
        for y in range(FIELD_HEIGHT):
            for x, column in enumerate(self.field):
                block = column[y]
                if is_movable(block) and is_axis(block):
                    return x, y
        raise LookupError("no falling piece on the field")

    def erase_current(self) -> None:
        """Remove every block of the falling piece."""
        for column in self.field:
            column[:] = [EMPTY_BLOCK if is_movable(b) else b for b in column]

    def immobilise_current(self) -> None:
        """Turn the falling piece into settled blocks."""
        for column in self.field:
            column[:] = [set_immovable(b) for b in column]

    def attempt_move(self, direction: Direction) -> bool:
        """Move the falling piece one step; return whether it moved."""
        return self.attempt_transform(1, direction, 0)

    def attempt_rotate(self) -> bool:
        """Rotate the falling piece once; return whether it rotated."""
        return self.attempt_transform(0, Direction.DOWN, 1)

    def attempt_transform(self, move_by: int, direction: Direction, rotate_times: int) -> bool:
        """Transform the falling piece, leaving the field as it was on failure.

        The next piece is always kept as it was.
        """
        next_backup = self.next
        field_backup = [column[:] for column in self.field]
        success = self.transform_current(move_by, direction, rotate_times)
        if not success:
            self.field = field_backup
        self.next = next_backup
        return success

    def transform_current(self, move_by: int, direction: Direction, rotate_times: int) -> bool:
        """Move and rotate the falling piece without undoing a failed attempt."""
        axis_x, axis_y = self.find_axis()
        current = self.field[axis_x][axis_y]
        self.prepare_next(
            piece_id(current), (rotation(current) + rotate_times) % ROTATION_COUNT
        )
        self.erase_current()
        return self.insert_next(
            axis_x - self.next.axis_x + direction.dx * move_by,
            axis_y - self.next.axis_y + direction.dy * move_by,
        )

    def prepare_next(self, piece_id: int, rotation: int) -> None:
        """Make the given piece kind and rotation the next piece."""
        self.next = make_piece(piece_id, rotation)

    def prepare_random_next(self) -> None:
        """Make a randomly chosen piece the next piece."""
        pid = self._rng.randrange(PIECE_COUNT)
        rot = self._rng.randrange(ROTATION_COUNT)
        self.prepare_next(pid, rot)

    def insert_next(self, x_offset: int, y_offset: int) -> bool:
        """Place the next piece at the offset, block by block.

        Stops and returns False at the first block that would leave the
        field or cover another block; blocks placed before it stay.
        """
        for x, y, block in self.next.cells():
            field_x, field_y = x + x_offset, y + y_offset
            if not in_range(field_x, field_y) or self.field[field_x][field_y] != EMPTY_BLOCK:
                return False
            self.field[field_x][field_y] = block
        return True

    def clear_rows(self) -> None:
        """Drop settled blocks over each row filled with settled blocks."""
        for y in range(FIELD_HEIGHT - 1, -1, -1):
            full = all(is_present(c[y]) and not is_movable(c[y]) for c in self.field)
            if not full:
                continue
            for y_collided in range(y, 0, -1):
                for column in self.field:
                    block = column[y_collided]
                    if is_present(block) and not is_movable(block):
                        column[y_collided] = column[y_collided - 1]

    def forward_pieces(self) -> bool:
        """Drop the next piece in at the top and draw a new next piece."""
        success = self.insert_next(FIELD_WIDTH // 2 - 1 - self.next.axis_x, 0)
        self.prepare_random_next()
        return success