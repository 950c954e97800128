import pytest

from tetrisgame.blocks import (
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
    set_movable,
)


def test_plain_block_has_movable_and_presence_bits():
    assert make_block(0, 0, False) == 0x81


@pytest.mark.parametrize("pid", range(PIECE_COUNT))
@pytest.mark.parametrize("rot", range(ROTATION_COUNT))
@pytest.mark.parametrize("axis", [False, True])
def test_block_fields_round_trip(pid, rot, axis):
    block = make_block(pid, rot, axis)
    assert piece_id(block) == pid
    assert rotation(block) == rot
    assert is_axis(block) == axis
    assert is_movable(block)
    assert is_present(block)
    assert 0 <= block <= 0xFF


def test_set_immovable_only_clears_movable_flag():
    block = make_block(5, 3, True)
    frozen = set_immovable(block)
    assert not is_movable(frozen)
    assert piece_id(frozen) == 5
    assert rotation(frozen) == 3
    assert is_axis(frozen)
    assert is_present(frozen)
    assert set_movable(frozen) == block


def test_empty_block_is_not_present_and_stays_empty():
    assert not is_present(EMPTY_BLOCK)
    assert set_immovable(EMPTY_BLOCK) == EMPTY_BLOCK
    assert not is_movable(EMPTY_BLOCK)


@pytest.mark.parametrize(
    "x, y, expected",
    [
        (0, 0, True),
        (FIELD_WIDTH - 1, FIELD_HEIGHT - 1, True),
        (-1, 0, False),
        (0, -1, False),
        (FIELD_WIDTH, 0, False),
        (0, FIELD_HEIGHT, False),
    ],
)
def test_in_range_edges(x, y, expected):
    assert in_range(x, y) is expected