"""Spawn system.

Adds one entity per tick at a uniformly random cell, wearing a fresh copy of
the world's spawn sprite. The id comes from the world's counter, which is
bumped so it is never handed out again.
"""

import logging
import random
from dataclasses import replace

from sprite_world.components import GridPosition
from sprite_world.entity import Entity
from sprite_world.state import State
from sprite_world.utils.catalog import get_sprite

logger = logging.getLogger(__name__)


def spawn_system(state: State, rng: random.Random) -> State:
    """Append a newly spawned entity.

    Args:
        state (State): Current state.
        rng (random.Random): Random source for placement.

    Returns:
        State: New state with one more entity and an advanced id counter.

    Raises:
        MissingCatalogEntry: If ``state.spawn_sprite`` is not in the catalog.
    """
    sprite = get_sprite(state, state.spawn_sprite)
    position = GridPosition.random(rng, state.width, state.height)
    entity = Entity.new(state.next_entity_id, position, sprite)
    logger.debug("Tick %d: spawned entity %d at %s", state.tick, entity.id, position.as_tuple())
    return replace(
        state,
        entities=state.entities.append(entity),
        next_entity_id=state.next_entity_id + 1,
    )
