"""Grid math helpers.

Pure predicates and coordinate transforms shared by movement, occupancy and
rendering. Kept free of ``State`` so the component layer can use them.
"""

from sprite_world.components import GridPosition
from sprite_world.types import OffsetPolicy


def is_in_bounds(pos: GridPosition, width: int, height: int) -> bool:
    """Return True if ``pos`` lies within the grid rectangle."""
    return 0 <= pos.x < width and 0 <= pos.y < height


def wrap_position(pos: GridPosition, width: int, height: int) -> GridPosition:
    """Toroidal wrap for coordinates."""
    return GridPosition(pos.x % width, pos.y % height)


def clamp_position(pos: GridPosition, width: int, height: int) -> GridPosition:
    """Pin each coordinate to the nearest in-bounds cell."""
    return GridPosition(min(max(pos.x, 0), width - 1), min(max(pos.y, 0), height - 1))


def apply_offset_policy(
    pos: GridPosition, width: int, height: int, policy: OffsetPolicy
) -> GridPosition:
    if policy == OffsetPolicy.WRAP:
        return wrap_position(pos, width, height)
    if policy == OffsetPolicy.CLAMP:
        return clamp_position(pos, width, height)
    return pos
