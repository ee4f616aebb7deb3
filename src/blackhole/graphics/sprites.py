"""Sprite loading with Pillow.

A missing or broken image never stops the game: the renderer falls back
to flat shapes for any sprite that did not load.
"""

from collections import OrderedDict
from dataclasses import dataclass, field
from pathlib import Path
from typing import Optional
import logging

import numpy as np
from numpy.typing import NDArray
from PIL import Image, UnidentifiedImageError

logger = logging.getLogger(__name__)


@dataclass
class Sprite:
    """A decoded image plus a small cache of resized copies."""

    name: str
    path: Path
    image: Optional[Image.Image] = None
    max_cached: int = 64
    _scaled: "OrderedDict[tuple[int, int], NDArray[np.uint8]]" = field(
        default_factory=OrderedDict, init=False, repr=False
    )

    @property
    def loaded(self) -> bool:
        """Decoded successfully and has a non-zero natural size."""
        return self.image is not None and self.image.width > 0 and self.image.height > 0

    def scaled(self, width: float, height: float) -> Optional[NDArray[np.uint8]]:
        """RGB array of the sprite resized to (width, height) pixels."""
        if not self.loaded:
            return None
        size = (int(round(width)), int(round(height)))
        if size[0] <= 0 or size[1] <= 0:
            return None

        cached = self._scaled.get(size)
        if cached is not None:
            self._scaled.move_to_end(size)
            return cached

        array = np.asarray(self.image.resize(size, Image.Resampling.BILINEAR), dtype=np.uint8)
        self._scaled[size] = array
        if len(self._scaled) > self.max_cached:
            self._scaled.popitem(last=False)
        return array


def load_sprite(name: str, path: Path) -> Sprite:
    """Decode an image file. Failures are logged and yield an unloaded sprite."""
    try:
        with Image.open(path) as img:
            image = img.convert("RGB")
    except (FileNotFoundError, UnidentifiedImageError, OSError) as e:
        logger.error(f"Failed to load {path}. Proceeding without image. ({e})")
        return Sprite(name=name, path=path)

    sprite = Sprite(name=name, path=path, image=image)
    if not sprite.loaded:
        logger.error(f"Image {path} has zero size. Proceeding without image.")
    return sprite


class SpriteSheet:
    """The game's three sprites, loaded from the assets directory."""

    FILES = {
        "player": "player.jpg",
        "asteroid": "meteor.jpg",
        "platform": "step.jpg",
    }

    def __init__(self, assets_path: Path, enabled: bool = True) -> None:
        self.assets_path = Path(assets_path)
        self.enabled = enabled
        self._sprites: dict[str, Sprite] = {}
        self._done = False

    @property
    def done(self) -> bool:
        """Every load attempt has finished, successful or not."""
        return self._done

    @property
    def loaded_count(self) -> int:
        return sum(1 for sprite in self._sprites.values() if sprite.loaded)

    def load(self) -> bool:
        """
        Attempt every sprite.

        Returns:
            True if all sprites loaded
        """
        if self.enabled:
            for name, filename in self.FILES.items():
                self._sprites[name] = load_sprite(name, self.assets_path / filename)
            logger.info(f"Sprites loaded: {self.loaded_count}/{len(self.FILES)}")
        self._done = True
        return self.enabled and self.loaded_count == len(self.FILES)

    def get(self, name: str) -> Optional[Sprite]:
        """A usable sprite, or None when the fallback shape should be drawn."""
        sprite = self._sprites.get(name)
        if sprite is None or not sprite.loaded:
            return None
        return sprite
