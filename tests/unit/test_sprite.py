from typing import Any

import pytest
from pyrsistent import pvector

from sprite_world.components import Pixel, Sprite
from sprite_world.errors import SpriteFormatError, StartupResourceError
from tests.test_utils import RED, make_sprite


def test_default_sprite_is_empty() -> None:
    sprite = Sprite.default()
    assert len(sprite) == 0
    assert list(sprite) == []
    assert sprite == Sprite()


def test_from_records() -> None:
    sprite = Sprite.from_records(
        [
            {"color": [1, 0, 0, 1], "offset": [0, 0]},
            {"color": [0.5, 0.25, 0.0, 0.75], "offset": [-1, 2]},
        ]
    )
    assert list(sprite) == [
        Pixel(color=(1.0, 0.0, 0.0, 1.0), offset=(0, 0)),
        Pixel(color=(0.5, 0.25, 0.0, 0.75), offset=(-1, 2)),
    ]


def test_to_records_inverts_from_records() -> None:
    records = [{"color": [0.0, 1.0, 0.0, 1.0], "offset": [3, -4]}]
    assert Sprite.from_records(records).to_records() == records


def test_equality_is_structural_and_order_sensitive() -> None:
    a = make_sprite([(0, 0), (1, 0)])
    b = make_sprite([(0, 0), (1, 0)])
    c = make_sprite([(1, 0), (0, 0)])
    assert a == b
    assert a != c


def test_clone_is_equal_value() -> None:
    sprite = make_sprite([(0, 0), (0, 1)])
    clone = sprite.clone()
    assert clone == sprite
    assert clone is not sprite


def test_sprite_is_immutable() -> None:
    sprite = make_sprite([(0, 0)])
    with pytest.raises(AttributeError):
        sprite.pixels = pvector()  # type: ignore[misc]
    grown = sprite.pixels.append(Pixel(color=RED, offset=(1, 1)))
    assert len(sprite) == 1
    assert len(grown) == 2


@pytest.mark.parametrize(
    "record",
    [
        {"offset": [0, 0]},
        {"color": [1, 0, 0, 1]},
        {"color": [1, 0, 0], "offset": [0, 0]},
        {"color": [1, 0, 0, 1, 1], "offset": [0, 0]},
        {"color": [1.5, 0, 0, 1], "offset": [0, 0]},
        {"color": [-0.1, 0, 0, 1], "offset": [0, 0]},
        {"color": ["red", 0, 0, 1], "offset": [0, 0]},
        {"color": [True, 0, 0, 1], "offset": [0, 0]},
        {"color": [1, 0, 0, 1], "offset": [0]},
        {"color": [1, 0, 0, 1], "offset": [0.5, 0]},
        {"color": [1, 0, 0, 1], "offset": [40000, 0]},
        {"color": [1, 0, 0, 1], "offset": "00"},
        ["color", "offset"],
    ],
)
def test_invalid_records_rejected(record: Any) -> None:
    with pytest.raises(SpriteFormatError):
        Sprite.from_records([record])


def test_non_list_sprite_rejected() -> None:
    with pytest.raises(SpriteFormatError):
        Sprite.from_records({"color": [1, 0, 0, 1], "offset": [0, 0]})  # type: ignore[arg-type]
    with pytest.raises(SpriteFormatError):
        Sprite.from_records("pixels")  # type: ignore[arg-type]


def test_format_error_is_a_startup_error() -> None:
    assert issubclass(SpriteFormatError, StartupResourceError)
    assert issubclass(SpriteFormatError, ValueError)
