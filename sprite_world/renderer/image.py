import numpy as np
import numpy.typing as npt
from PIL import Image
from typing import Tuple

from sprite_world.config import GRID_CELL_SIZE, screen_size
from sprite_world.renderer.geometry import pixel_rects
from sprite_world.state import State
from sprite_world.types import Color

UInt8Array = npt.NDArray[np.uint8]

DEFAULT_BACKGROUND: Tuple[int, int, int, int] = (255, 255, 255, 255)


def color_to_rgba8(color: Color) -> Tuple[int, int, int, int]:
    """
    Convert a [0,1] float RGBA color to 8-bit channels, clipping out-of-range values.
    """
    channels = np.clip(np.asarray(color, dtype=np.float32), 0.0, 1.0)
    r, g, b, a = (np.rint(channels * 255.0)).astype(np.uint8).tolist()
    return r, g, b, a


def render(
    state: State,
    cell_size: Tuple[int, int] = GRID_CELL_SIZE,
    background: Tuple[int, int, int, int] = DEFAULT_BACKGROUND,
) -> Image.Image:
    """
    Renders the world as an RGBA PIL Image of (width * cell_w, height * cell_h) pixels.
    Later rectangles paint over earlier ones; rectangles outside the canvas are clipped.
    Colors are written as-is (no alpha blending).
    """
    img_w, img_h = screen_size((state.width, state.height), cell_size)

    canvas: UInt8Array = np.empty((img_h, img_w, 4), dtype=np.uint8)
    canvas[...] = np.asarray(background, dtype=np.uint8)

    for rect in pixel_rects(state, cell_size):
        x0, y0 = max(rect.x, 0), max(rect.y, 0)
        x1, y1 = min(rect.x + rect.width, img_w), min(rect.y + rect.height, img_h)
        if x0 >= x1 or y0 >= y1:
            continue
        canvas[y0:y1, x0:x1] = color_to_rgba8(rect.color)

    return Image.fromarray(canvas)
