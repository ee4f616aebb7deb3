"""
Best-time persistence.

The stored value is a single number kept under a named key and written
as a one-decimal fixed-point string, e.g. ``{"BlackholeJumperHighScore": "42.7"}``.
"""

from abc import ABC, abstractmethod
from pathlib import Path
import json
import logging

logger = logging.getLogger(__name__)


def format_time(seconds: float) -> str:
    """Fixed-point representation used for storage and display."""
    return f"{seconds:.1f}"


class HighScoreStore(ABC):
    """Key-value backend holding the best time."""

    @abstractmethod
    def read(self) -> float:
        """Stored best time in seconds, 0.0 if nothing stored."""
        ...

    @abstractmethod
    def write(self, value: float) -> None:
        """Persist a new best time."""
        ...


class MemoryHighScoreStore(HighScoreStore):
    """In-process store for tests and headless runs."""

    def __init__(self, initial: float = 0.0) -> None:
        self._raw: str | None = format_time(initial) if initial else None

    def read(self) -> float:
        return float(self._raw) if self._raw else 0.0

    def write(self, value: float) -> None:
        self._raw = format_time(value)

    @property
    def raw(self) -> str | None:
        return self._raw


class JsonHighScoreStore(HighScoreStore):
    """Persistent store using a small JSON file."""

    def __init__(self, path: Path, key: str = "BlackholeJumperHighScore") -> None:
        self.path = Path(path)
        self.key = key

    def _load(self) -> dict:
        if not self.path.exists():
            return {}
        try:
            with open(self.path, "r", encoding="utf-8") as f:
                data = json.load(f)
            return data if isinstance(data, dict) else {}
        except (OSError, json.JSONDecodeError) as e:
            logger.error(f"Failed to load high score from {self.path}: {e}")
            return {}

    def read(self) -> float:
        raw = self._load().get(self.key)
        if not raw:
            return 0.0
        try:
            return float(raw)
        except (TypeError, ValueError):
            logger.warning(f"Ignoring malformed high score value: {raw!r}")
            return 0.0

    def write(self, value: float) -> None:
        data = self._load()
        data[self.key] = format_time(value)
        try:
            self.path.parent.mkdir(parents=True, exist_ok=True)
            with open(self.path, "w", encoding="utf-8") as f:
                json.dump(data, f, indent=2)
            logger.info(f"High score saved: {data[self.key]}s")
        except OSError as e:
            logger.error(f"Failed to save high score to {self.path}: {e}")


class HighScoreBoard:
    """Tracks the best time, reading once at startup and writing on new records."""

    def __init__(self, store: HighScoreStore) -> None:
        self.store = store
        self._best = store.read()
        logger.info(f"Best time loaded: {format_time(self._best)}s")

    @property
    def best(self) -> float:
        return self._best

    def submit(self, elapsed: float) -> bool:
        """
        Offer a finished session's time.

        Returns:
            True if it beat the stored best and was persisted
        """
        if elapsed > self._best:
            self._best = elapsed
            self.store.write(elapsed)
            return True
        return False
