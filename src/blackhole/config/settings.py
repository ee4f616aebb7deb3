"""
Application settings using Pydantic.

Settings are loaded from environment variables with .env file support.
"""

from functools import lru_cache
from pathlib import Path

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class DisplaySettings(BaseSettings):
    """Canvas and window settings."""

    # Logical canvas the simulation runs in
    width: int = Field(default=400, gt=0)
    height: int = Field(default=600, gt=0)

    # Window
    scale: int = Field(default=1, ge=1)
    fps: int = Field(default=60, gt=0)
    title: str = "Blackhole Jumper"
    fullscreen: bool = False


class Settings(BaseSettings):
    """Main application settings."""

    model_config = SettingsConfigDict(
        env_prefix="BLACKHOLE_",
        env_file=".env",
        env_file_encoding="utf-8",
        env_nested_delimiter="__",
        extra="ignore",
    )

    # Gameplay
    variant: str = "shielded"
    seed: int | None = None
    debug: bool = False

    # Paths; sprite images are not bundled, see assets/README.md
    assets_path: Path = Field(default_factory=lambda: Path(__file__).parent.parent / "assets")
    variants_path: Path = Field(default_factory=lambda: Path(__file__).parent / "variants")

    # High score persistence
    high_score_path: Path = Field(
        default_factory=lambda: Path.home() / ".blackhole_jumper" / "highscore.json"
    )
    high_score_key: str = "BlackholeJumperHighScore"

    # Log file, truncated on each run
    log_file: Path = Path("blackhole.log")

    # Delay between game over and the end-of-session notification
    reset_delay_ms: int = Field(default=30, ge=0)

    # Nested settings
    display: DisplaySettings = Field(default_factory=DisplaySettings)


@lru_cache
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()
