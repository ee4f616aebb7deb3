"""Settings and game variant presets."""

from .settings import Settings, DisplaySettings, get_settings
from .variants import GameConfig, VariantNotFound, load_variant, list_variants

__all__ = [
    "Settings",
    "DisplaySettings",
    "get_settings",
    "GameConfig",
    "VariantNotFound",
    "load_variant",
    "list_variants",
]
