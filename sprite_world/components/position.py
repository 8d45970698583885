"""Grid position component.

Immutable integer grid coordinates. A ``GridPosition`` is a value: moves and
offsets produce new instances, nothing is updated in place. Wraparound is
only applied by :func:`sprite_world.moves.move`; :meth:`GridPosition.offset`
projects sprite pixels without wrapping.
"""

import random
from dataclasses import dataclass
from typing import Tuple


@dataclass(frozen=True)
class GridPosition:
    """Grid coordinate.

    Attributes:
        x: Column index (0 at left).
        y: Row index (0 at top).
    """

    x: int
    y: int

    @classmethod
    def new(cls, x: int, y: int) -> "GridPosition":
        return cls(x, y)

    @classmethod
    def default(cls) -> "GridPosition":
        return cls(0, 0)

    @classmethod
    def from_tuple(cls, pos: Tuple[int, int]) -> "GridPosition":
        return cls(pos[0], pos[1])

    @classmethod
    def random(cls, rng: random.Random, max_x: int, max_y: int) -> "GridPosition":
        """Sample ``x`` in ``[0, max_x)`` and ``y`` in ``[0, max_y)`` uniformly.

        Each coordinate is drawn independently from ``rng``.

        Raises:
            ValueError: If either bound is not positive.
        """
        if max_x <= 0 or max_y <= 0:
            raise ValueError(f"Random bounds must be positive, got ({max_x}, {max_y})")
        return cls(rng.randrange(max_x), rng.randrange(max_y))

    def offset(self, dx: int, dy: int) -> "GridPosition":
        """Return ``self + (dx, dy)`` without wraparound."""
        return GridPosition(self.x + dx, self.y + dy)

    def as_tuple(self) -> Tuple[int, int]:
        return (self.x, self.y)
