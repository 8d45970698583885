"""Toroidal movement on the grid.

Moving off one edge re-enters on the opposite edge. Python's ``%`` is a
Euclidean remainder for positive divisors, so stepping left from column 0
lands on ``width - 1`` rather than ``-1``.
"""

from sprite_world.components import GridPosition
from sprite_world.config import GRID_SIZE
from sprite_world.directions import DIRECTION_DELTAS, Direction


def move(
    pos: GridPosition,
    direction: Direction,
    width: int = GRID_SIZE[0],
    height: int = GRID_SIZE[1],
) -> GridPosition:
    """Return ``pos`` shifted one cell in ``direction``, wrapped to the grid.

    Args:
        pos (GridPosition): Starting position.
        direction (Direction): Cardinal direction to step in.
        width (int): Grid width in cells.
        height (int): Grid height in cells.

    Returns:
        GridPosition: New position with ``0 <= x < width`` and ``0 <= y < height``.

    Raises:
        ValueError: If the grid dimensions are not positive.
    """
    if width <= 0 or height <= 0:
        raise ValueError(f"Grid dimensions must be positive, got {width}x{height}")
    dx, dy = DIRECTION_DELTAS[direction]
    return GridPosition((pos.x + dx) % width, (pos.y + dy) % height)
