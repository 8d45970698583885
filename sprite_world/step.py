"""State reducer and tick orchestration.

This module wires the systems together into a single *tick* transition. The
exported :func:`step` is the only entry point for advancing the simulation
and is pure: it returns a new :class:`sprite_world.state.State`.

Tick order:

1. ``spawn_system`` places one new entity at a random cell.
2. ``occupancy_map`` computes every entity's occupied cells.
3. ``collision_system`` finds cells claimed by more than one entity and
    removes every entity involved.
4. The tick counter advances.

Spawning before detection means a newcomer can die on the tick it appears.
"""

import logging
from dataclasses import replace

from sprite_world.state import State, tick_rng
from sprite_world.systems.collision import collision_system
from sprite_world.systems.occupancy import occupancy_map
from sprite_world.systems.spawn import spawn_system

logger = logging.getLogger(__name__)


def step(state: State) -> State:
    """Advance the simulation by one tick.

    Args:
        state (State): Previous immutable world state.

    Returns:
        State: Next state snapshot with ``tick`` incremented.

    Raises:
        MissingCatalogEntry: If the spawn sprite is missing from the catalog.
    """
    rng = tick_rng(state)
    state = spawn_system(state, rng)
    occupancy = occupancy_map(state)
    state = collision_system(state, occupancy)
    logger.debug(
        "Tick %d done: %d entities, %d collisions",
        state.tick,
        len(state.entities),
        len(state.collisions),
    )
    return replace(state, tick=state.tick + 1)


def run(state: State, ticks: int) -> State:
    """Apply :func:`step` ``ticks`` times."""
    if ticks < 0:
        raise ValueError(f"ticks must be >= 0, got {ticks}")
    for _ in range(ticks):
        state = step(state)
    return state
