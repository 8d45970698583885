# tests/unit/test_moves.py

import itertools
from typing import Tuple

import pytest

from sprite_world.components import GridPosition
from sprite_world.directions import DIRECTIONS, Direction
from sprite_world.moves import move


@pytest.mark.parametrize(
    "start, direction, expected",
    [
        # interior, all directions
        ((10, 10), Direction.UP, (10, 9)),
        ((10, 10), Direction.DOWN, (10, 11)),
        ((10, 10), Direction.LEFT, (9, 10)),
        ((10, 10), Direction.RIGHT, (11, 10)),
        # edge wrap on a 60x40 grid
        ((59, 0), Direction.RIGHT, (0, 0)),
        ((0, 5), Direction.LEFT, (59, 5)),
        ((7, 0), Direction.UP, (7, 39)),
        ((7, 39), Direction.DOWN, (7, 0)),
        # corner
        ((0, 0), Direction.UP, (0, 39)),
        ((59, 39), Direction.RIGHT, (0, 39)),
    ],
)
def test_move_wraps_on_60x40(
    start: Tuple[int, int], direction: Direction, expected: Tuple[int, int]
) -> None:
    assert move(GridPosition(*start), direction, 60, 40) == GridPosition(*expected)


def test_move_defaults_to_configured_grid() -> None:
    assert move(GridPosition(59, 0), Direction.RIGHT) == GridPosition(0, 0)


def test_move_stays_in_bounds_everywhere() -> None:
    width, height = 5, 3
    for x, y, direction in itertools.product(range(width), range(height), DIRECTIONS):
        pos = move(GridPosition(x, y), direction, width, height)
        assert 0 <= pos.x < width
        assert 0 <= pos.y < height


def test_move_brings_out_of_range_positions_back_in() -> None:
    assert move(GridPosition(-3, 42), Direction.RIGHT, 60, 40) == GridPosition(58, 2)


def test_move_returns_new_value() -> None:
    start = GridPosition(1, 1)
    moved = move(start, Direction.DOWN, 5, 5)
    assert start == GridPosition(1, 1)
    assert moved is not start


def test_move_then_inverse_is_identity() -> None:
    for direction in DIRECTIONS:
        start = GridPosition(0, 0)
        back = move(move(start, direction, 4, 4), direction.inverse(), 4, 4)
        assert back == start


@pytest.mark.parametrize("width, height", [(0, 5), (5, 0), (-1, 3)])
def test_move_rejects_empty_grid(width: int, height: int) -> None:
    with pytest.raises(ValueError):
        move(GridPosition(0, 0), Direction.UP, width, height)
