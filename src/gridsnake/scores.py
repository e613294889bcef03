# scores.py
from __future__ import annotations
from typing import Optional, Protocol
import json
import logging
import os

logger = logging.getLogger(__name__)

HIGH_SCORE_KEY = "snakeHighestScore"


class HighScoreStore(Protocol):
    def load(self) -> Optional[int]: ...
    def save(self, value: int) -> None: ...


class MemoryHighScoreStore:
    """Keeps the best length for the lifetime of the process only."""

    def __init__(self, value: Optional[int] = None) -> None:
        self.value = value

    def load(self) -> Optional[int]:
        return self.value

    def save(self, value: int) -> None:
        self.value = value


class JsonHighScoreStore:
    """Stores the best length in a small JSON file."""

    def __init__(self, path: str) -> None:
        self.path = path

    def load(self) -> Optional[int]:
        if not os.path.exists(self.path):
            return None
        try:
            with open(self.path, "r", encoding="utf-8") as f:
                data = json.load(f)
            return int(data[HIGH_SCORE_KEY])
        except (OSError, ValueError, KeyError, TypeError) as exc:
            logger.warning("Ignoring unreadable high score file %s: %s", self.path, exc)
            return None

    def save(self, value: int) -> None:
        parent = os.path.dirname(self.path)
        if parent:
            os.makedirs(parent, exist_ok=True)
        with open(self.path, "w", encoding="utf-8") as f:
            json.dump({HIGH_SCORE_KEY: int(value)}, f)


def default_score_path() -> str:
    return os.path.join(os.path.expanduser("~"), ".gridsnake", "highscore.json")
