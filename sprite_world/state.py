"""Core immutable world ``State`` dataclass.

This module defines the frozen :class:`State` object that represents the
whole simulation at a single tick. Systems are pure functions that take a
``State`` and return a *new* ``State``; nothing is mutated in place, so the
renderer can never observe a half-finished tick.

Design notes:

* ``entities`` is a persistent vector in insertion (spawn) order. Entity ids
    in it are unique; :func:`sprite_world.world.is_valid_state` checks this.
* ``catalog`` maps resource names to sprites. It is filled once when the
    world is created and only ever read afterwards.
* The random source belongs to the world. It is represented by ``seed``
    and ``tick``: each tick derives its own generator from the pair (see
    :func:`tick_rng`), which keeps ``State`` a plain value and makes a run
    reproducible from its seed.
* ``next_entity_id`` is the world-owned identity counter; ids are never
    reused within a world.
* ``collisions`` records the pairs found during the last tick, for
    diagnostics only.

See :mod:`sprite_world.step` for how the reducer orchestrates systems.
"""

import random
from dataclasses import dataclass
from typing import Any, Optional

from pyrsistent import pmap, pvector
from pyrsistent.typing import PMap, PVector

from sprite_world.components import Sprite
from sprite_world.entity import Entity
from sprite_world.types import EntityID, OffsetPolicy


@dataclass(frozen=True)
class CollisionPair:
    """Unordered pair of colliding entities.

    ``claimant`` held the contested cell first (earlier in collection order);
    ``challenger`` arrived later. Equality and hashing ignore the order.
    """

    claimant: EntityID
    challenger: EntityID

    @property
    def ids(self) -> frozenset[EntityID]:
        return frozenset((self.claimant, self.challenger))

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, CollisionPair):
            return NotImplemented
        return self.ids == other.ids

    def __hash__(self) -> int:
        return hash(self.ids)


@dataclass(frozen=True)
class State:
    """Immutable world state.

    Attributes:
        width (int): Grid width in cells.
        height (int): Grid height in cells.
        spawn_sprite (str): Catalog key used for every spawned entity.
        seed (int): Base RNG seed.
        entities (PVector[Entity]): Live entities in insertion order.
        catalog (PMap[str, Sprite]): Read-only sprite catalog.
        next_entity_id (EntityID): Next identity to hand out.
        offset_policy (OffsetPolicy): Treatment of sprite cells outside the grid.
        collisions (PVector[CollisionPair]): Pairs detected in the last tick.
        tick (int): Tick counter (0-based).
    """

    # Level
    width: int
    height: int
    spawn_sprite: str
    seed: int

    # Entities
    entities: PVector[Entity] = pvector()
    catalog: PMap[str, Sprite] = pmap()
    next_entity_id: EntityID = 0
    offset_policy: OffsetPolicy = OffsetPolicy.ALLOW

    # Status
    collisions: PVector[CollisionPair] = pvector()
    tick: int = 0

    @property
    def entity_ids(self) -> PVector[EntityID]:
        return pvector(entity.id for entity in self.entities)

    def get_entity(self, eid: EntityID) -> Optional[Entity]:
        for entity in self.entities:
            if entity.id == eid:
                return entity
        return None

    def has_entity(self, eid: EntityID) -> bool:
        return self.get_entity(eid) is not None

    @property
    def description(self) -> PMap[str, Any]:
        """Sparse serialization of non-empty fields.

        Skips empty persistent collections so diagnostics stay short.

        Returns:
            PMap[str, Any]: Field name to value for every populated field.
        """
        description: PMap[str, Any] = pmap()
        for field in self.__dataclass_fields__:
            value = getattr(self, field)
            if isinstance(value, (type(pmap()), type(pvector()))) and len(value) == 0:
                continue
            description = description.set(field, value)
        return description


def tick_rng(state: State) -> random.Random:
    """Deterministic random source for the current tick."""
    return random.Random(hash((state.seed, state.tick)))


def setup_rng(state: State) -> random.Random:
    """Random source for world construction, distinct from every tick stream."""
    return random.Random(state.seed)
