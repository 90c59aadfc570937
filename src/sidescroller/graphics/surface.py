"""
Drawing surfaces the draw list is executed against.

A surface only needs to clear itself and fill rectangles; the numpy
implementation backs the desktop simulator and headless tests.
"""

from abc import ABC, abstractmethod

import numpy as np
from numpy.typing import NDArray

from sidescroller.graphics.primitives import Color, draw_glow, draw_rect, fill, new_buffer


class DrawingSurface(ABC):
    """Abstract base class for render targets."""

    @property
    @abstractmethod
    def width(self) -> int:
        ...

    @property
    @abstractmethod
    def height(self) -> int:
        ...

    @abstractmethod
    def clear(self, color: Color = (0, 0, 0)) -> None:
        """Clear surface to specified color."""
        ...

    @abstractmethod
    def fill_rect(self, x: float, y: float, w: float, h: float, color: Color, glow: int = 0) -> None:
        """Fill a rectangle, optionally with a halo of ``glow`` pixels."""
        ...


class BufferSurface(DrawingSurface):
    """Surface backed by an RGB numpy array of shape (height, width, 3)."""

    def __init__(self, width: int, height: int) -> None:
        self._width = width
        self._height = height
        self._buffer = new_buffer(width, height)

    @property
    def width(self) -> int:
        return self._width

    @property
    def height(self) -> int:
        return self._height

    def resize(self, width: int, height: int) -> None:
        self._width = width
        self._height = height
        self._buffer = new_buffer(width, height)

    def clear(self, color: Color = (0, 0, 0)) -> None:
        fill(self._buffer, color)

    def fill_rect(self, x: float, y: float, w: float, h: float, color: Color, glow: int = 0) -> None:
        ix, iy = int(round(x)), int(round(y))
        iw, ih = int(round(w)), int(round(h))
        if glow:
            draw_glow(self._buffer, ix, iy, iw, ih, color, radius=glow)
        draw_rect(self._buffer, ix, iy, iw, ih, color)

    def get_pixel(self, x: int, y: int) -> tuple:
        return tuple(int(c) for c in self._buffer[y, x])

    def get_buffer(self) -> NDArray[np.uint8]:
        """Get copy of current buffer."""
        return self._buffer.copy()
