"""Collision detection & resolution.

Two entities collide when their occupied cell sets intersect. Detection is a
single pass over entities in collection order with a ``cell -> claimant``
index, so the cost is linear in the total number of occupied cells rather
than quadratic in the number of entities.

Ordering rule: the claimant of a contested cell is whichever entity comes
first in ``state.entities``. Each unordered pair is reported once per tick,
however many cells the two share; an entity touching several others shows
up in several pairs.

Resolution removes every entity named in any pair. Both members of every
pair die, each exactly once, and survivors keep their order and values.
"""

import logging
from dataclasses import replace
from typing import Dict, List, Mapping, Optional, Set

from pyrsistent import pvector

from sprite_world.components import GridPosition
from sprite_world.state import CollisionPair, State
from sprite_world.systems.occupancy import occupancy_map
from sprite_world.types import EntityID

logger = logging.getLogger(__name__)


def detect_collisions(
    state: State,
    occupancy: Optional[Mapping[EntityID, List[GridPosition]]] = None,
) -> List[CollisionPair]:
    """Find colliding entity pairs.

    Args:
        state (State): Current state.
        occupancy (Mapping[EntityID, List[GridPosition]] | None): Precomputed
            occupancy in collection order; computed from ``state`` if omitted.

    Returns:
        List[CollisionPair]: Distinct pairs in detection order.
    """
    if occupancy is None:
        occupancy = occupancy_map(state)

    claimed: Dict[GridPosition, EntityID] = {}
    pairs: List[CollisionPair] = []
    seen: Set[CollisionPair] = set()
    for entity in state.entities:
        for cell in occupancy.get(entity.id, []):
            claimant = claimed.get(cell)
            if claimant is None:
                claimed[cell] = entity.id
            elif claimant != entity.id:
                pair = CollisionPair(claimant=claimant, challenger=entity.id)
                if pair not in seen:
                    seen.add(pair)
                    pairs.append(pair)
                    logger.debug(
                        "Tick %d: entity %d collides with %d at %s",
                        state.tick,
                        entity.id,
                        claimant,
                        cell.as_tuple(),
                    )
    return pairs


def colliding_ids(pairs: List[CollisionPair]) -> Set[EntityID]:
    """Distinct entity ids named in ``pairs``."""
    ids: Set[EntityID] = set()
    for pair in pairs:
        ids |= pair.ids
    return ids


def resolve_collisions(state: State, pairs: List[CollisionPair]) -> State:
    """Remove every entity that takes part in a collision.

    Returns:
        State: Same state if ``pairs`` is empty, otherwise a state without
            the colliding entities.
    """
    if not pairs:
        return state
    doomed = colliding_ids(pairs)
    survivors = pvector(entity for entity in state.entities if entity.id not in doomed)
    return replace(state, entities=survivors)


def collision_system(
    state: State,
    occupancy: Optional[Mapping[EntityID, List[GridPosition]]] = None,
) -> State:
    """Detect, record and resolve collisions for the current tick."""
    pairs = detect_collisions(state, occupancy)
    state = replace(state, collisions=pvector(pairs))
    return resolve_collisions(state, pairs)
