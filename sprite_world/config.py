"""Fixed simulation configuration.

Grid dimensions, cell pixel size and tick rate are constants shared by the
core (placement bounds, wraparound) and the renderer (geometry scaling).
``WorldConfig`` bundles them for :func:`sprite_world.world.load_world`.
"""

import os
from dataclasses import dataclass
from typing import Optional, Tuple

from sprite_world.types import OffsetPolicy

GRID_SIZE: Tuple[int, int] = (60, 40)
GRID_CELL_SIZE: Tuple[int, int] = (8, 8)


def screen_size(
    grid_size: Tuple[int, int] = GRID_SIZE, cell_size: Tuple[int, int] = GRID_CELL_SIZE
) -> Tuple[int, int]:
    """Canvas size in pixels for a grid of ``grid_size`` cells."""
    return grid_size[0] * cell_size[0], grid_size[1] * cell_size[1]


SCREEN_SIZE: Tuple[int, int] = screen_size()

DESIRED_FPS: int = 4

DEFAULT_SPRITE_NAME = "TestEntity"
DEFAULT_RESOURCE_DIR = os.path.join(os.path.dirname(__file__), "assets", "Entity")

LOG_LEVEL = "INFO"


@dataclass(frozen=True)
class WorldConfig:
    """Immutable bundle of world construction parameters.

    Attributes:
        width: Grid width in cells.
        height: Grid height in cells.
        cell_size: Cell size in pixels (renderer only).
        fps: Simulation ticks per second.
        spawn_sprite: Catalog key used for every spawned entity.
        resource_dir: Directory (or glob pattern) of sprite resource files.
        initial_entities: Entities spawned when the world is created.
        offset_policy: Treatment of sprite cells outside the grid.
        seed: RNG seed; ``None`` draws one from OS entropy.
    """

    width: int = GRID_SIZE[0]
    height: int = GRID_SIZE[1]
    cell_size: Tuple[int, int] = GRID_CELL_SIZE
    fps: int = DESIRED_FPS
    spawn_sprite: str = DEFAULT_SPRITE_NAME
    resource_dir: str = DEFAULT_RESOURCE_DIR
    initial_entities: int = 1
    offset_policy: OffsetPolicy = OffsetPolicy.ALLOW
    seed: Optional[int] = None
