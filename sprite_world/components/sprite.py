"""Sprite and pixel components.

A ``Sprite`` is an ordered list of colored cell offsets relative to an
entity's anchor position. Sprites come from resource files as record lists::

    [{"color": [1.0, 0.0, 0.0, 1.0], "offset": [0, 0]}, ...]

and are immutable afterwards. The empty sprite is valid and occupies no
cells.
"""

from dataclasses import dataclass
from numbers import Real
from typing import Any, Dict, Iterator, List, Mapping, Sequence

from pyrsistent import pvector
from pyrsistent.typing import PVector

from sprite_world.errors import SpriteFormatError
from sprite_world.types import INT16_MAX, INT16_MIN, Color, Offset


@dataclass(frozen=True)
class Pixel:
    """One colored cell of a sprite.

    Attributes:
        color: RGBA color, components in ``[0, 1]``.
        offset: ``(dx, dy)`` relative to the entity anchor.
    """

    color: Color
    offset: Offset

    @classmethod
    def from_record(cls, record: Mapping[str, Any]) -> "Pixel":
        """Build a pixel from a ``{"color": [...], "offset": [...]}`` record.

        Raises:
            SpriteFormatError: If the record is missing fields or values are
                out of range.
        """
        if not isinstance(record, Mapping):
            raise SpriteFormatError(f"Pixel record must be an object, got {record!r}")
        try:
            raw_color = record["color"]
            raw_offset = record["offset"]
        except KeyError as exc:
            raise SpriteFormatError(f"Pixel record missing field {exc}") from exc

        if not isinstance(raw_color, Sequence) or len(raw_color) != 4:
            raise SpriteFormatError(f"Color must have 4 components: {raw_color!r}")
        color: List[float] = []
        for component in raw_color:
            if isinstance(component, bool) or not isinstance(component, Real):
                raise SpriteFormatError(f"Color component is not a number: {component!r}")
            if not 0.0 <= component <= 1.0:
                raise SpriteFormatError(f"Color component out of [0, 1]: {component!r}")
            color.append(float(component))

        if not isinstance(raw_offset, Sequence) or len(raw_offset) != 2:
            raise SpriteFormatError(f"Offset must have 2 components: {raw_offset!r}")
        for component in raw_offset:
            if isinstance(component, bool) or not isinstance(component, int):
                raise SpriteFormatError(f"Offset component is not an integer: {component!r}")
            if not INT16_MIN <= component <= INT16_MAX:
                raise SpriteFormatError(f"Offset component out of int16 range: {component!r}")

        return cls(
            color=(color[0], color[1], color[2], color[3]),
            offset=(raw_offset[0], raw_offset[1]),
        )

    def to_record(self) -> Dict[str, List[Any]]:
        return {"color": list(self.color), "offset": list(self.offset)}


@dataclass(frozen=True)
class Sprite:
    """Immutable shape definition.

    Equality is structural: two sprites are equal when they hold the same
    pixels in the same order.

    Attributes:
        pixels: Ordered persistent vector of pixels.
    """

    pixels: PVector[Pixel] = pvector()

    @classmethod
    def default(cls) -> "Sprite":
        """Empty sprite (occupies zero cells)."""
        return cls(pixels=pvector())

    @classmethod
    def from_records(cls, records: Sequence[Mapping[str, Any]]) -> "Sprite":
        """Build a sprite from a parsed resource record list."""
        if isinstance(records, (str, bytes)) or not isinstance(records, Sequence):
            raise SpriteFormatError(f"Sprite must be a list of pixel records, got {type(records).__name__}")
        return cls(pixels=pvector(Pixel.from_record(record) for record in records))

    def to_records(self) -> List[Dict[str, List[Any]]]:
        return [pixel.to_record() for pixel in self.pixels]

    def clone(self) -> "Sprite":
        """Return a structurally equal copy."""
        return Sprite(pixels=pvector(self.pixels))

    def __len__(self) -> int:
        return len(self.pixels)

    def __iter__(self) -> Iterator[Pixel]:
        return iter(self.pixels)
