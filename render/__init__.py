from .image import render_grid, render_rows, render_sequence, to_png_bytes

__all__ = [
    "render_grid",
    "render_rows",
    "render_sequence",
    "to_png_bytes",
]
