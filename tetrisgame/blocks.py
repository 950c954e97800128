"""Board geometry, timing constants and the bit layout of a single block.

A block is one byte:

* bit 0      - the block belongs to the falling (movable) piece
* bits 1..3  - piece kind
* bits 4..5  - rotation stage
* bit 6      - the block is the piece's axis of rotation
* bit 7      - the block is present
"""

FIELD_WIDTH = 10
FIELD_HEIGHT = 20
BLOCK_DIMENSION = 30
BLOCK_SPACING = 1
MOVE_DOWN_EVERY_N_FRAMES = 30
FINAL_TEXT = "Try again"

PEG_HEIGHT = FIELD_HEIGHT * (BLOCK_DIMENSION + BLOCK_SPACING)

FRAMERATE = 60
FRAMERATE_DELAY = 1000 // FRAMERATE

PIECE_SIZE = 4
PIECE_COUNT = 7
ROTATION_COUNT = 4
AXIS_OF_ROTATION = 2

EMPTY_BLOCK = 0x00

_MOVABLE_BIT = 0
_PIECE_ID_SHIFT = 1
_ROTATION_SHIFT = 4
_AXIS_BIT = 6
_PRESENCE_BIT = 7

_MOVABLE_MASK = 1 << _MOVABLE_BIT
_AXIS_MASK = 1 << _AXIS_BIT
_PRESENCE_MASK = 1 << _PRESENCE_BIT


def make_block(piece_id: int, rotation: int, axis: bool) -> int:
    """Return a present, movable block of the given piece kind and rotation."""
    block = _MOVABLE_MASK
    block |= (piece_id & 0x07) << _PIECE_ID_SHIFT
    block |= (rotation & 0x03) << _ROTATION_SHIFT
    if axis:
        block |= _AXIS_MASK
    return block | _PRESENCE_MASK


def is_movable(block: int) -> bool:
    """Whether the block belongs to the falling piece."""
    return bool(block & _MOVABLE_MASK)


def set_movable(block: int) -> int:
    """Return the block with its movable flag set."""
    return block | _MOVABLE_MASK


def set_immovable(block: int) -> int:
    """Return the block with its movable flag cleared."""
    return block & ~_MOVABLE_MASK & 0xFF


def piece_id(block: int) -> int:
    """Piece kind stored in the block."""
    return (block >> _PIECE_ID_SHIFT) & 0x07


def rotation(block: int) -> int:
    """Rotation stage stored in the block."""
    return (block >> _ROTATION_SHIFT) & 0x03


def is_axis(block: int) -> bool:
    """Whether the block is its piece's axis of rotation."""
    return bool(block & _AXIS_MASK)


def is_present(block: int) -> bool:
    """Whether the cell holds any block at all."""
    return block != EMPTY_BLOCK


def in_range(x: int, y: int) -> bool:
    """Whether (x, y) lies inside the playing field."""
    return 0 <= x < FIELD_WIDTH and 0 <= y < FIELD_HEIGHT