"""Entity value type & ID generation.

An ``Entity`` bundles an identity, an anchor ``GridPosition`` and the
``Sprite`` it owns. Entities are frozen: anything that would change one
(movement, say) builds a replacement through the world instead.

Identity is handed in by the caller. Inside a world the id comes from the
``State.next_entity_id`` counter, so an entity never needs a reference back
to the world that created it. For building entities outside a world (tests,
tools) the monotonic generator below does the same job.

Examples
--------
>>> from sprite_world.components import GridPosition, Sprite
>>> from sprite_world.entity import Entity, entity_id_generator
>>> ids = entity_id_generator()
>>> e = Entity.new(next(ids), GridPosition(3, 4), Sprite.default())
>>> e.occupied_cells()
[]
"""

from dataclasses import dataclass
from typing import Dict, Iterator, List

from sprite_world.components import GridPosition, Sprite
from sprite_world.types import EntityID, EntityState, OffsetPolicy
from sprite_world.utils.grid import apply_offset_policy


@dataclass(frozen=True)
class Entity:
    """Sprite-bearing occupant of the grid.

    Attributes:
        id: Identity token, unique within a world.
        position: Anchor cell of the sprite.
        sprite: Shape owned by this entity.
        state: Lifecycle state.
    """

    id: EntityID
    position: GridPosition
    sprite: Sprite
    state: EntityState = EntityState.DEFAULT

    @classmethod
    def new(cls, entity_id: EntityID, position: GridPosition, sprite: Sprite) -> "Entity":
        """Construct an entity in the default state with its own copy of ``sprite``."""
        return cls(id=entity_id, position=position, sprite=sprite.clone())

    def occupied_cells(self) -> List[GridPosition]:
        """Absolute cells covered by the sprite.

        Each pixel offset is projected from the anchor with
        :meth:`GridPosition.offset`. Pixels landing on the same cell collapse
        to one entry; order is that of first occurrence.
        """
        seen: Dict[GridPosition, None] = {}
        for pixel in self.sprite.pixels:
            seen.setdefault(self.position.offset(*pixel.offset), None)
        return list(seen)

    def cells(self, width: int, height: int, policy: OffsetPolicy) -> List[GridPosition]:
        """Occupied cells after applying ``policy`` for out-of-grid cells.

        Clamping or wrapping can fold distinct cells together, so the result
        is deduplicated again.
        """
        if policy == OffsetPolicy.ALLOW:
            return self.occupied_cells()
        seen: Dict[GridPosition, None] = {}
        for cell in self.occupied_cells():
            seen.setdefault(apply_offset_policy(cell, width, height, policy), None)
        return list(seen)


def entity_id_generator(start: EntityID = 0) -> Iterator[EntityID]:
    """Yield an infinite sequence of monotonically increasing entity IDs."""
    eid = start
    while True:
        yield eid
        eid += 1
