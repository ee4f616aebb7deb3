"""
Game variant presets and YAML loading utilities.

A variant is one complete set of tuning constants and feature flags.
Both shipped presets run through the same simulation code.
"""

from dataclasses import dataclass, field, fields, replace
from pathlib import Path
from typing import Any

import yaml

VARIANTS_PATH = Path(__file__).parent / "variants"


class VariantNotFound(LookupError):
    """Raised when a variant preset file does not exist."""


@dataclass(frozen=True)
class PhysicsConfig:
    """Difficulty curves. Every rate is per elapsed second of play."""
    base_gravity: float = 0.5
    gravity_rate: float = 0.001
    base_blackhole_strength: float = 200000.0
    blackhole_strength_rate: float = 25000.0
    min_pull_distance: float = 25.0
    pull_scale: float = 0.01
    friction_x: float = 0.98
    friction_y: float = 0.999


@dataclass(frozen=True)
class PlatformConfig:
    width: float = 70.0
    base_height: float = 10.0
    max_thinning: float = 7.0
    thinning_duration: float = 30.0
    base_fall_speed: float = 3.0
    fall_speed_rate: float = 0.05
    initial_count: int = 6
    spawn_interval_ms: float = 280.0
    hit_frames: int = 10
    offscreen_margin: float = 50.0


@dataclass(frozen=True)
class AsteroidConfig:
    min_radius: float = 10.0
    max_radius: float = 25.0
    fall_speed: float = 4.0
    drift: float = 1.5
    min_interval_ms: float = 3000.0
    max_interval_ms: float = 5000.0

    @property
    def fixed_interval(self) -> bool:
        return self.min_interval_ms == self.max_interval_ms


@dataclass(frozen=True)
class ShieldConfig:
    spawn_interval_ms: float = 10000.0
    size: float = 25.0
    hit_frames: int = 30


@dataclass(frozen=True)
class JumpConfig:
    coyote_frames: float = 6.0
    buffer_frames: float = 8.0


@dataclass(frozen=True)
class PlayerConfig:
    width: float = 30.0
    height: float = 30.0
    start_y: float = 20.0
    jump_power: float = -16.0
    move_accel: float = 0.3


@dataclass(frozen=True)
class BlackHoleConfig:
    offset_below: float = 200.0
    radius: float = 250.0
    lens_radius_factor: float = 1.5
    lens_strength: float = 10.0


@dataclass(frozen=True)
class StarfieldConfig:
    count: int = 150
    max_radius: float = 1.5
    min_speed: float = 0.1
    speed_range: float = 0.3


@dataclass(frozen=True)
class Features:
    """Feature flags distinguishing the variants."""
    shield: bool = True
    delta_time: bool = True
    lensing: bool = True
    coyote_jump: bool = True
    sprites: bool = True


@dataclass(frozen=True)
class Palette:
    """Colors used by the renderer."""
    background: str = "#141414"
    platform: str = "#4de06a"
    platform_hit: str = "#a8ffb8"
    asteroid: str = "#8d8d8d"
    player: str = "#55e6ff"
    shield_item: str = "#00bfff"
    shield_ring: str = "#00ffff"
    shield_hit: str = "#ff0000"
    star: str = "#ffffff"
    text: str = "#ffffff"
    best_text: str = "#ffdd57"
    # (offset, (r, g, b, alpha)) stops of the black hole gradient
    blackhole_stops: tuple = (
        (0.0, (0, 0, 0, 1.0)),
        (0.6, (255, 50, 0, 0.8)),
        (0.8, (255, 180, 0, 0.5)),
        (1.0, (0, 0, 0, 0.0)),
    )

    @staticmethod
    def to_rgb(hex_color: str) -> tuple[int, int, int]:
        """Convert hex color to RGB tuple."""
        hex_color = hex_color.lstrip("#")
        return tuple(int(hex_color[i:i+2], 16) for i in (0, 2, 4))

    def rgb(self, color_name: str) -> tuple[int, int, int]:
        return self.to_rgb(getattr(self, color_name))


@dataclass(frozen=True)
class GameConfig:
    """Complete variant configuration."""
    name: str = "default"
    description: str = ""

    physics: PhysicsConfig = field(default_factory=PhysicsConfig)
    platforms: PlatformConfig = field(default_factory=PlatformConfig)
    asteroids: AsteroidConfig = field(default_factory=AsteroidConfig)
    shield: ShieldConfig = field(default_factory=ShieldConfig)
    jump: JumpConfig = field(default_factory=JumpConfig)
    player: PlayerConfig = field(default_factory=PlayerConfig)
    blackhole: BlackHoleConfig = field(default_factory=BlackHoleConfig)
    stars: StarfieldConfig = field(default_factory=StarfieldConfig)
    features: Features = field(default_factory=Features)
    palette: Palette = field(default_factory=Palette)

    @classmethod
    def from_yaml(cls, data: dict[str, Any]) -> "GameConfig":
        """Create config from YAML data."""
        sections = {
            "physics": PhysicsConfig,
            "platforms": PlatformConfig,
            "asteroids": AsteroidConfig,
            "shield": ShieldConfig,
            "jump": JumpConfig,
            "player": PlayerConfig,
            "blackhole": BlackHoleConfig,
            "stars": StarfieldConfig,
            "features": Features,
        }
        kwargs: dict[str, Any] = {
            "name": data.get("name", "default"),
            "description": data.get("description", ""),
        }
        for key, section_cls in sections.items():
            if key in data:
                kwargs[key] = section_cls(**(data[key] or {}))

        if "palette" in data:
            palette = dict(data["palette"])
            if "blackhole_stops" in palette:
                palette["blackhole_stops"] = tuple(
                    (float(offset), tuple(color))
                    for offset, color in palette["blackhole_stops"]
                )
            kwargs["palette"] = Palette(**palette)

        return cls(**kwargs)

    def with_overrides(self, **sections: dict[str, Any]) -> "GameConfig":
        """Return a copy with individual section fields replaced.

        Example: ``config.with_overrides(physics={"gravity_rate": 0.0})``
        """
        changes = {}
        for section_name, values in sections.items():
            section = getattr(self, section_name)
            valid = {f.name for f in fields(section)}
            unknown = set(values) - valid
            if unknown:
                raise TypeError(f"Unknown {section_name} fields: {sorted(unknown)}")
            changes[section_name] = replace(section, **values)
        return replace(self, **changes)


def load_variant(variant_name: str, variants_path: Path | None = None) -> GameConfig:
    """
    Load a variant from YAML file.

    Args:
        variant_name: Name of the variant (without .yaml extension)
        variants_path: Path to variants directory

    Returns:
        GameConfig instance
    """
    if variants_path is None:
        variants_path = VARIANTS_PATH

    variant_file = variants_path / f"{variant_name}.yaml"

    if not variant_file.exists():
        raise VariantNotFound(
            f"Unknown variant '{variant_name}' (available: {', '.join(list_variants(variants_path))})"
        )

    with open(variant_file, encoding="utf-8") as f:
        data = yaml.safe_load(f) or {}

    data.setdefault("name", variant_name)
    return GameConfig.from_yaml(data)


def list_variants(variants_path: Path | None = None) -> list[str]:
    """List available variants."""
    if variants_path is None:
        variants_path = VARIANTS_PATH

    return sorted(f.stem for f in variants_path.glob("*.yaml"))
