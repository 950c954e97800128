"""Shapes of the seven pieces in each of their four rotations.

Each shape is four rows of four cells: 0 is empty, 1 is a block and 2 is
the block the piece rotates about.
"""

from .blocks import PIECE_COUNT, ROTATION_COUNT

Shape = tuple[tuple[int, int, int, int], ...]

_SQUARE = (
    (2, 1, 0, 0),
    (1, 1, 0, 0),
    (0, 0, 0, 0),
    (0, 0, 0, 0),
)

PIECES: tuple[tuple[Shape, ...], ...] = (
    # square
    (_SQUARE, _SQUARE, _SQUARE, _SQUARE),
    # I
    (
        ((1, 2, 1, 1), (0, 0, 0, 0), (0, 0, 0, 0), (0, 0, 0, 0)),
        ((1, 0, 0, 0), (2, 0, 0, 0), (1, 0, 0, 0), (1, 0, 0, 0)),
        ((1, 1, 2, 1), (0, 0, 0, 0), (0, 0, 0, 0), (0, 0, 0, 0)),
        ((1, 0, 0, 0), (1, 0, 0, 0), (2, 0, 0, 0), (1, 0, 0, 0)),
    ),
    # L
    (
        ((1, 0, 0, 0), (2, 0, 0, 0), (1, 1, 0, 0), (0, 0, 0, 0)),
        ((1, 2, 1, 0), (1, 0, 0, 0), (0, 0, 0, 0), (0, 0, 0, 0)),
        ((1, 1, 0, 0), (0, 2, 0, 0), (0, 1, 0, 0), (0, 0, 0, 0)),
        ((0, 0, 1, 0), (1, 2, 1, 0), (0, 0, 0, 0), (0, 0, 0, 0)),
    ),
    # L mirrored
    (
        ((0, 1, 0, 0), (0, 2, 0, 0), (1, 1, 0, 0), (0, 0, 0, 0)),
        ((1, 0, 0, 0), (1, 2, 1, 0), (0, 0, 0, 0), (0, 0, 0, 0)),
        ((1, 1, 0, 0), (2, 0, 0, 0), (1, 0, 0, 0), (0, 0, 0, 0)),
        ((1, 2, 1, 0), (0, 0, 1, 0), (0, 0, 0, 0), (0, 0, 0, 0)),
    ),
    # N
    (
        ((0, 1, 0, 0), (2, 1, 0, 0), (1, 0, 0, 0), (0, 0, 0, 0)),
        ((1, 2, 0, 0), (0, 1, 1, 0), (0, 0, 0, 0), (0, 0, 0, 0)),
        ((0, 1, 0, 0), (1, 2, 0, 0), (1, 0, 0, 0), (0, 0, 0, 0)),
        ((1, 1, 0, 0), (0, 2, 1, 0), (0, 0, 0, 0), (0, 0, 0, 0)),
    ),
    # N mirrored
    (
        ((1, 0, 0, 0), (2, 1, 0, 0), (0, 1, 0, 0), (0, 0, 0, 0)),
        ((0, 2, 1, 0), (1, 1, 0, 0), (0, 0, 0, 0), (0, 0, 0, 0)),
        ((1, 0, 0, 0), (1, 2, 0, 0), (0, 1, 0, 0), (0, 0, 0, 0)),
        ((0, 1, 1, 0), (1, 2, 0, 0), (0, 0, 0, 0), (0, 0, 0, 0)),
    ),
    # T
    (
        ((1, 0, 0, 0), (2, 1, 0, 0), (1, 0, 0, 0), (0, 0, 0, 0)),
        ((1, 2, 1, 0), (0, 1, 0, 0), (0, 0, 0, 0), (0, 0, 0, 0)),
        ((0, 1, 0, 0), (1, 2, 0, 0), (0, 1, 0, 0), (0, 0, 0, 0)),
        ((0, 1, 0, 0), (1, 2, 1, 0), (0, 0, 0, 0), (0, 0, 0, 0)),
    ),
)


def shape(piece_id: int, rotation: int) -> Shape:
    """Return the rows of the given piece kind in the given rotation."""
    if not 0 <= piece_id < PIECE_COUNT:
        raise ValueError(f"piece id out of range: {piece_id}")
    if not 0 <= rotation < ROTATION_COUNT:
        raise ValueError(f"rotation out of range: {rotation}")
    return PIECES[piece_id][rotation]