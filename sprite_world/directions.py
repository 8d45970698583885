"""Direction enumeration.

``DIRECTIONS`` is the canonical ordered list of cardinal directions; the
``DIRECTION_DELTAS`` table maps each one to its ``(dx, dy)`` cell step with
``y`` growing downward.
"""

from enum import StrEnum, auto
from typing import Dict, Optional, Tuple


class Direction(StrEnum):
    """Cardinal movement directions."""

    UP = auto()
    DOWN = auto()
    LEFT = auto()
    RIGHT = auto()

    def inverse(self) -> "Direction":
        """Return the opposite direction."""
        return _INVERSE[self]

    @classmethod
    def from_key(cls, name: str) -> Optional["Direction"]:
        """Parse a key name such as ``"Up"`` or ``"LEFT"``; ``None`` if not a direction."""
        try:
            return cls(name.strip().lower())
        except ValueError:
            return None


_INVERSE: Dict[Direction, Direction] = {
    Direction.UP: Direction.DOWN,
    Direction.DOWN: Direction.UP,
    Direction.LEFT: Direction.RIGHT,
    Direction.RIGHT: Direction.LEFT,
}

DIRECTIONS = [Direction.UP, Direction.DOWN, Direction.LEFT, Direction.RIGHT]

DIRECTION_DELTAS: Dict[Direction, Tuple[int, int]] = {
    Direction.UP: (0, -1),
    Direction.DOWN: (0, 1),
    Direction.LEFT: (-1, 0),
    Direction.RIGHT: (1, 0),
}
