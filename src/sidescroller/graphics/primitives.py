"""Basic drawing primitives for numpy frame buffers."""

from typing import Tuple
import numpy as np
from numpy.typing import NDArray

# Type aliases
Color = Tuple[int, int, int]
Buffer = NDArray[np.uint8]


def hex_color(value: str) -> Color:
    """Parse '#rrggbb' into an RGB tuple."""
    value = value.lstrip("#")
    return (int(value[0:2], 16), int(value[2:4], 16), int(value[4:6], 16))


def new_buffer(width: int, height: int) -> Buffer:
    return np.zeros((height, width, 3), dtype=np.uint8)


def fill(buffer: Buffer, color: Color) -> None:
    """Fill entire buffer with color."""
    buffer[:, :] = color


def draw_rect(
    buffer: Buffer,
    x: int,
    y: int,
    width: int,
    height: int,
    color: Color,
) -> None:
    """Fill a rectangle on the buffer, clipped to its bounds.

    Args:
        buffer: Target numpy array (height, width, 3)
        x: Left edge x coordinate
        y: Top edge y coordinate
        width: Rectangle width
        height: Rectangle height
        color: RGB color tuple
    """
    h, w = buffer.shape[:2]

    # Clamp to buffer bounds
    x1 = max(0, min(x, w))
    y1 = max(0, min(y, h))
    x2 = max(0, min(x + width, w))
    y2 = max(0, min(y + height, h))

    if x1 >= x2 or y1 >= y2:
        return

    buffer[y1:y2, x1:x2] = color


def draw_glow(
    buffer: Buffer,
    x: int,
    y: int,
    width: int,
    height: int,
    color: Color,
    radius: int = 10,
) -> None:
    """Blend a soft halo around a rectangle (drawn before the rectangle)."""
    h, w = buffer.shape[:2]
    x1, y1 = max(0, x - radius), max(0, y - radius)
    x2, y2 = min(w, x + width + radius), min(h, y + height + radius)
    if x1 >= x2 or y1 >= y2 or radius <= 0:
        return

    ys, xs = np.ogrid[y1:y2, x1:x2]
    dx = np.maximum(np.maximum(x - xs, xs - (x + width - 1)), 0)
    dy = np.maximum(np.maximum(y - ys, ys - (y + height - 1)), 0)
    dist = np.sqrt(dx * dx + dy * dy)
    alpha = np.clip(1.0 - dist / radius, 0.0, 1.0)[..., None] * 0.6

    region = buffer[y1:y2, x1:x2].astype(np.float32)
    glow = np.array(color, dtype=np.float32)
    buffer[y1:y2, x1:x2] = (region * (1 - alpha) + glow * alpha).astype(np.uint8)
