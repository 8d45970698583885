"""Common type aliases and enumerations.

``EntityID`` is the identity token handed out by the world's id counter;
``Color`` and ``Offset`` mirror the record layout of sprite resource files.
"""

from enum import StrEnum, auto
from typing import Tuple

EntityID = int

Color = Tuple[float, float, float, float]
"""RGBA color, each component in ``[0, 1]``."""

Offset = Tuple[int, int]
"""Cell offset of a sprite pixel relative to the entity anchor."""

INT16_MIN = -(2**15)
INT16_MAX = 2**15 - 1


class EntityState(StrEnum):
    """Lifecycle state of an entity (only one state exists so far)."""

    DEFAULT = auto()


class OffsetPolicy(StrEnum):
    """How occupied cells outside the grid rectangle are treated.

    Members:
        ALLOW: Keep raw coordinates; cells may lie outside the grid.
        CLAMP: Pin each coordinate to the nearest in-bounds cell.
        WRAP: Toroidal wrap, same topology as movement.
    """

    ALLOW = auto()
    CLAMP = auto()
    WRAP = auto()
