"""Drawable geometry for a world snapshot."""

from dataclasses import dataclass
from typing import List, Tuple

from sprite_world.config import GRID_CELL_SIZE
from sprite_world.state import State
from sprite_world.types import Color, EntityID
from sprite_world.utils.grid import apply_offset_policy


@dataclass(frozen=True)
class Rect:
    """Axis-aligned rectangle in pixels.

    Attributes:
        x: Left edge.
        y: Top edge.
        width: Width in pixels.
        height: Height in pixels.
        color: RGBA color, components in ``[0, 1]``.
        entity_id: Entity the rectangle belongs to.
    """

    x: int
    y: int
    width: int
    height: int
    color: Color
    entity_id: EntityID


def pixel_rects(
    state: State, cell_size: Tuple[int, int] = GRID_CELL_SIZE
) -> List[Rect]:
    """One rectangle per sprite pixel, in entity then pixel order.

    Each rectangle sits at ``(entity.position + pixel.offset) * cell_size``
    after the world's offset policy is applied to the cell, so pixels are
    drawn where collisions count them. Under ``ALLOW`` rectangles can fall
    outside the screen.
    """
    cell_w, cell_h = cell_size
    rects: List[Rect] = []
    for entity in state.entities:
        for pixel in entity.sprite.pixels:
            cell = apply_offset_policy(
                entity.position.offset(*pixel.offset),
                state.width,
                state.height,
                state.offset_policy,
            )
            rects.append(
                Rect(
                    x=cell.x * cell_w,
                    y=cell.y * cell_h,
                    width=cell_w,
                    height=cell_h,
                    color=pixel.color,
                    entity_id=entity.id,
                )
            )
    return rects
