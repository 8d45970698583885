"""Rendering subpackage.

Turns immutable ``State`` snapshots into something drawable. The simulation
core stops at geometry:

* :mod:`sprite_world.renderer.geometry` produces one colored rectangle per
  sprite pixel, in screen coordinates.
* :mod:`sprite_world.renderer.image` rasterizes those rectangles into a
  Pillow image using NumPy array fills.

Both only read the state they are given.
"""

from .geometry import Rect, pixel_rects
from .image import render

__all__ = ["Rect", "pixel_rects", "render"]
