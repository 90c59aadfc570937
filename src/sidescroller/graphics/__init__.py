"""Graphics module: draw lists and drawing surfaces."""

from sidescroller.graphics.draw import DrawCall, DrawOp, build_draw_list, render_draw_list
from sidescroller.graphics.surface import BufferSurface, DrawingSurface

__all__ = [
    "DrawCall",
    "DrawOp",
    "build_draw_list",
    "render_draw_list",
    "BufferSurface",
    "DrawingSurface",
]
