"""Side-scrolling runner game: simulation core and desktop simulator."""

__version__ = "0.1.0"
