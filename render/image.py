"""Raster rendering of ECA generations, one image row of cells per generation."""

from __future__ import annotations

import io
from typing import Tuple

import numpy as np
from PIL import Image

from eca.sequence import RowSequence

Color = Tuple[int, int, int]

BLACK: Color = (0, 0, 0)
WHITE: Color = (255, 255, 255)
GRAY: Color = (119, 119, 119)


def _check_color(name: str, color) -> np.ndarray:
    c = np.asarray(color)
    if c.shape != (3,) or np.any(c < 0) or np.any(c > 255):
        raise ValueError(f"{name} must be an RGB triple in [0,255]")
    return c.astype(np.uint8)


def render_grid(
    rows: np.ndarray,
    pixel_size: int = 4,
    on_color: Color = BLACK,
    off_color: Color = WHITE,
    border_color: Color = GRAY,
) -> np.ndarray:
    """Render a (H, W) binary grid as an RGB array.

    Each cell takes a (pixel_size+1)-pixel square: a 1-pixel border on its top
    and left edges, filled with on_color or off_color inside.

    Returns:
        uint8 array of shape (H*(pixel_size+1), W*(pixel_size+1), 3).
    """
    if int(pixel_size) < 1:
        raise ValueError("pixel_size must be >= 1")
    grid = np.asarray(rows)
    if grid.ndim != 2:
        raise ValueError("rows must be 2D (generations, width)")
    on = _check_color("on_color", on_color)
    off = _check_color("off_color", off_color)
    border = _check_color("border_color", border_color)

    cell = int(pixel_size) + 1
    upscaled = np.repeat(np.repeat(grid != 0, cell, axis=0), cell, axis=1)
    img = np.where(upscaled[..., None], on, off).astype(np.uint8)
    img[0::cell, :, :] = border
    img[:, 0::cell, :] = border
    return img


def render_rows(rows: np.ndarray, pixel_size: int = 4, **colors) -> Image.Image:
    return Image.fromarray(render_grid(rows, pixel_size, **colors))


def render_sequence(seq: RowSequence, height: int, pixel_size: int = 4, **colors) -> Image.Image:
    """Render generations 0..height-1 of `seq`. Restarts the sequence."""
    if int(height) < 1:
        raise ValueError(f"height must be >= 1 to render an image, got {height}")
    if seq.get_width() < 1:
        raise ValueError(f"width must be >= 1 to render an image, got {seq.get_width()}")
    return render_rows(seq.take(height), pixel_size, **colors)


def to_png_bytes(img: Image.Image) -> bytes:
    buf = io.BytesIO()
    img.save(buf, format="PNG")
    return buf.getvalue()
