"""
High score persistence.

Stores never raise: a failed read counts as a high score of 0 and a
failed write is logged and skipped, so a broken disk can't end a run.
"""

import json
import logging
from abc import ABC, abstractmethod
from pathlib import Path

logger = logging.getLogger(__name__)

HIGHSCORE_KEY = "runner_highscore"


class HighScoreStore(ABC):
    """Key-value store holding a single integer high score."""

    @abstractmethod
    def get_high_score(self) -> int:
        ...

    @abstractmethod
    def set_high_score(self, value: int) -> None:
        ...


class MemoryHighScoreStore(HighScoreStore):
    """In-process store, lost on exit."""

    def __init__(self, initial: int = 0) -> None:
        self.value = initial
        self.writes = 0

    def get_high_score(self) -> int:
        return self.value

    def set_high_score(self, value: int) -> None:
        self.value = value
        self.writes += 1


class JsonHighScoreStore(HighScoreStore):
    """Persistent high score in a small JSON file."""

    def __init__(self, path: Path) -> None:
        self.path = Path(path)

    def get_high_score(self) -> int:
        try:
            if not self.path.exists():
                return 0
            with open(self.path, "r", encoding="utf-8") as f:
                data = json.load(f)
            value = int(data.get(HIGHSCORE_KEY, 0))
        except Exception as e:
            logger.error(f"Failed to load high score: {e}")
            return 0
        return max(0, value)

    def set_high_score(self, value: int) -> None:
        try:
            self.path.parent.mkdir(parents=True, exist_ok=True)
            with open(self.path, "w", encoding="utf-8") as f:
                json.dump({HIGHSCORE_KEY: int(value)}, f, indent=2)
        except Exception as e:
            logger.error(f"Failed to save high score: {e}")


def load_high_score(store: HighScoreStore) -> int:
    """Read from any store, treating failures and junk as 0."""
    try:
        value = int(store.get_high_score())
    except Exception as e:
        logger.error(f"High score store read failed: {e}")
        return 0
    return max(0, value)


def save_high_score(store: HighScoreStore, value: int) -> bool:
    try:
        store.set_high_score(value)
    except Exception as e:
        logger.error(f"High score store write failed: {e}")
        return False
    return True
