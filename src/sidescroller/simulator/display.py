"""
Pygame presentation of a BufferSurface.
"""

import pygame

from ..graphics.surface import BufferSurface


def to_pygame_surface(surface: BufferSurface, scale: int = 1) -> pygame.Surface:
    """
    Convert the numpy frame buffer to a pygame surface.

    Args:
        surface: Source surface
        scale: Integer pixel scale factor

    Returns:
        pygame.Surface with rendered frame
    """
    image = pygame.surfarray.make_surface(surface.get_buffer().swapaxes(0, 1))
    if scale == 1:
        return image
    return pygame.transform.scale(image, (surface.width * scale, surface.height * scale))
