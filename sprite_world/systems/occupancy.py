"""Occupancy query.

Computes, for every live entity, the grid cells its sprite covers after the
world's offset policy is applied. Read-only; returns plain data.
"""

from typing import Dict, List

from sprite_world.components import GridPosition
from sprite_world.state import State
from sprite_world.types import EntityID


def occupancy_map(state: State) -> Dict[EntityID, List[GridPosition]]:
    """Return ``entity id -> occupied cells`` in entity collection order."""
    return {
        entity.id: entity.cells(state.width, state.height, state.offset_policy)
        for entity in state.entities
    }
