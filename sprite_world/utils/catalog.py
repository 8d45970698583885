"""Sprite catalog lookups."""

from sprite_world.components import Sprite
from sprite_world.errors import MissingCatalogEntry
from sprite_world.state import State


def get_sprite(state: State, name: str) -> Sprite:
    """Return a fresh copy of catalog sprite ``name``.

    Raises:
        MissingCatalogEntry: If ``name`` is not in the catalog.
    """
    sprite = state.catalog.get(name)
    if sprite is None:
        raise MissingCatalogEntry(name)
    return sprite.clone()
