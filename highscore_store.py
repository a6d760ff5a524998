# highscore_store.py
from __future__ import annotations
import json
import logging
from pathlib import Path
from typing import Protocol

logger = logging.getLogger(__name__)

KEY = "high_score"


class ScoreStore(Protocol):
    def load(self) -> int:
        ...

    def save(self, value: int) -> None:
        ...


class HighScoreStore:
    """Single integer slot kept in a small JSON file."""

    def __init__(self, path: str | Path):
        self.path = Path(path)

    def load(self) -> int:
        # absent / unreadable / malformed -> 0
        if not self.path.exists():
            logger.debug("No high score file at %s", self.path)
            return 0
        try:
            with self.path.open("r", encoding="utf-8") as f:
                data = json.load(f)
        except (OSError, ValueError) as exc:
            logger.warning("Ignoring unreadable high score file %s: %s", self.path, exc)
            return 0

        value = data.get(KEY) if isinstance(data, dict) else None
        if isinstance(value, bool) or not isinstance(value, int) or value < 0:
            logger.warning("Ignoring invalid high score %r in %s", value, self.path)
            return 0
        logger.debug("Loaded high score %d from %s", value, self.path)
        return value

    def save(self, value: int) -> None:
        self.path.parent.mkdir(parents=True, exist_ok=True)
        with self.path.open("w", encoding="utf-8") as f:
            json.dump({KEY: int(value)}, f)
        logger.debug("Saved high score %d to %s", value, self.path)


class MemoryScoreStore:
    """In-process slot, used when nothing should touch the disk."""

    def __init__(self, value: int = 0):
        self.value = value

    def load(self) -> int:
        return self.value

    def save(self, value: int) -> None:
        self.value = value
