"""World construction & validation.

A world is a :class:`~sprite_world.state.State` built from a sprite catalog.
Construction is where the startup failures surface: an unreadable catalog
(:class:`~sprite_world.errors.StartupResourceError`) or a spawn sprite that
is not in it (:class:`~sprite_world.errors.MissingCatalogEntry`). Once a world
exists, ticking it cannot fail.
"""

import logging
import random
from typing import Mapping, Optional

from pyrsistent import pmap

from sprite_world.components import Sprite
from sprite_world.config import DEFAULT_SPRITE_NAME, GRID_SIZE, WorldConfig
from sprite_world.errors import MissingCatalogEntry
from sprite_world.resources import load_catalog
from sprite_world.state import State, setup_rng
from sprite_world.systems.spawn import spawn_system
from sprite_world.types import OffsetPolicy
from sprite_world.utils.catalog import get_sprite
from sprite_world.utils.grid import is_in_bounds

__all__ = ["create_world", "get_sprite", "is_valid_state", "load_world"]

logger = logging.getLogger(__name__)


def create_world(
    catalog: Mapping[str, Sprite],
    *,
    width: int = GRID_SIZE[0],
    height: int = GRID_SIZE[1],
    spawn_sprite: str = DEFAULT_SPRITE_NAME,
    seed: Optional[int] = None,
    initial_entities: int = 1,
    offset_policy: OffsetPolicy = OffsetPolicy.ALLOW,
) -> State:
    """Build a new world and spawn its initial entities.

    Args:
        catalog (Mapping[str, Sprite]): Parsed sprite catalog.
        width (int): Grid width in cells.
        height (int): Grid height in cells.
        spawn_sprite (str): Catalog key used for spawned entities.
        seed (int | None): RNG seed. ``None`` draws one from OS entropy.
        initial_entities (int): Entities placed before the first tick.
        offset_policy (OffsetPolicy): Treatment of sprite cells outside the grid.

    Returns:
        State: World at tick 0.

    Raises:
        ValueError: If the grid size or initial entity count is invalid.
        MissingCatalogEntry: If ``spawn_sprite`` is not in ``catalog``.
    """
    if width <= 0 or height <= 0:
        raise ValueError(f"Grid dimensions must be positive, got {width}x{height}")
    if initial_entities < 0:
        raise ValueError(f"initial_entities must be >= 0, got {initial_entities}")
    if spawn_sprite not in catalog:
        raise MissingCatalogEntry(spawn_sprite)
    if seed is None:
        seed = random.SystemRandom().getrandbits(64)

    state = State(
        width=width,
        height=height,
        spawn_sprite=spawn_sprite,
        seed=seed,
        catalog=pmap(catalog),
        offset_policy=offset_policy,
    )
    rng = setup_rng(state)
    for _ in range(initial_entities):
        state = spawn_system(state, rng)
    logger.info(
        "Created %dx%d world (seed=%d, sprite=%s, entities=%d)",
        width,
        height,
        seed,
        spawn_sprite,
        len(state.entities),
    )
    return state


def load_world(config: WorldConfig = WorldConfig()) -> State:
    """Load the sprite catalog from ``config.resource_dir`` and build a world."""
    catalog = load_catalog(config.resource_dir)
    return create_world(
        catalog,
        width=config.width,
        height=config.height,
        spawn_sprite=config.spawn_sprite,
        seed=config.seed,
        initial_entities=config.initial_entities,
        offset_policy=config.offset_policy,
    )


def is_valid_state(state: State) -> bool:
    """Check the world invariants.

    Entity ids are unique and below the counter, and every entity is anchored
    on the grid. Sprite pixels may still reach past the edge.
    """
    ids = [entity.id for entity in state.entities]
    if len(ids) != len(set(ids)):
        return False
    if not all(eid < state.next_entity_id for eid in ids):
        return False
    return all(
        is_in_bounds(entity.position, state.width, state.height)
        for entity in state.entities
    )
