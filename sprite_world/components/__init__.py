"""sprite_world.components
=========================

Immutable value types carried by entities: the grid coordinate and the
sprite shape it anchors. Both are plain frozen dataclasses with no behavior
beyond construction helpers; systems in ``sprite_world.systems`` do the
work. Import them from one place::

    from sprite_world.components import GridPosition, Pixel, Sprite

"""

from .position import GridPosition
from .sprite import Pixel, Sprite

__all__ = [
    "GridPosition",
    "Pixel",
    "Sprite",
]
