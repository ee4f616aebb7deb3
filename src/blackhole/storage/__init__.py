"""High-score persistence."""

from .highscore import (
    HighScoreBoard,
    HighScoreStore,
    JsonHighScoreStore,
    MemoryHighScoreStore,
    format_time,
)

__all__ = [
    "HighScoreBoard",
    "HighScoreStore",
    "JsonHighScoreStore",
    "MemoryHighScoreStore",
    "format_time",
]
