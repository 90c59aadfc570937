"""High score storage backends."""

from .highscore import (
    HighScoreStore,
    JsonHighScoreStore,
    MemoryHighScoreStore,
    load_high_score,
    save_high_score,
)

__all__ = [
    "HighScoreStore",
    "JsonHighScoreStore",
    "MemoryHighScoreStore",
    "load_high_score",
    "save_high_score",
]
