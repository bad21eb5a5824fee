"""Ground cover texture generators for grass and sand."""

from dataclasses import dataclass
from typing import ClassVar

import numpy as np
from PIL import ImageDraw

from ..color import RGB
from .base import TextureGenerator, random_color


@dataclass
class GrassTextureGenerator(TextureGenerator):
    """Generates grassy terrain with individual blades and dirt patches.

    Creates natural ground cover with:
    - Short near-vertical blade strokes in varied greens
    - Translucent brown dirt patches layered on top

    Attributes:
        width: Texture width in pixels
        height: Texture height in pixels
        seed: Random seed for reproducibility
        base_color: Base grass colour as (R, G, B) tuple, 0-255
        blade_count: Number of grass blades
        blade_length: (min, max) blade length in pixels
        blade_drift: Maximum horizontal lean of a blade tip in pixels
        patch_count: Number of dirt patches
        patch_size: (min, max) dirt patch edge length in pixels
        patch_alpha: Opacity of dirt patches (0-1)
    """

    base_color: RGB = (0x4A, 0x7C, 0x59)
    blade_count: int = 400
    blade_length: tuple[float, float] = (3.0, 11.0)
    blade_drift: float = 1.5
    patch_count: int = 30
    patch_size: tuple[float, float] = (5.0, 20.0)
    patch_alpha: float = 0.4

    kind: ClassVar[str] = "grass"

    def _paint(
        self,
        draw: ImageDraw.ImageDraw,
        rng: np.random.Generator,
    ) -> None:
        """Draw blades, then overlay dirt patches."""
        min_len, max_len = self.blade_length
        for _ in range(self.blade_count):
            x = rng.random() * self.width
            y = rng.random() * self.height
            length = min_len + rng.random() * (max_len - min_len)
            color = random_color(rng, (60, 100, 40), (40, 60, 40))
            line_width = max(1, int(round(rng.random() * 2 + 0.5)))
            tip_x = x + (rng.random() - 0.5) * 2 * self.blade_drift
            self._line(draw, ((x, y), (tip_x, y - length)), (*color, 255), line_width)

        alpha = int(round(self.patch_alpha * 255))
        min_size, max_size = self.patch_size
        for _ in range(self.patch_count):
            color = random_color(rng, (80, 60, 30), (60, 40, 30))
            x = rng.random() * self.width
            y = rng.random() * self.height
            w = min_size + rng.random() * (max_size - min_size)
            h = min_size + rng.random() * (max_size - min_size)
            self._rect(draw, x, y, w, h, (*color, alpha))


@dataclass
class SandTextureGenerator(TextureGenerator):
    """Generates beige granular sand.

    Attributes:
        width: Texture width in pixels
        height: Texture height in pixels
        seed: Random seed for reproducibility
        base_color: Base sand colour as (R, G, B) tuple, 0-255
        grain_count: Number of sand grains
        grain_size: Edge length of each grain in pixels
    """

    base_color: RGB = (0xC2, 0xB2, 0x80)
    grain_count: int = 1000
    grain_size: int = 2

    kind: ClassVar[str] = "sand"

    def _paint(
        self,
        draw: ImageDraw.ImageDraw,
        rng: np.random.Generator,
    ) -> None:
        for _ in range(self.grain_count):
            color = random_color(rng, (180, 160, 120), (40, 40, 20))
            x = rng.random() * self.width
            y = rng.random() * self.height
            self._rect(draw, x, y, self.grain_size, self.grain_size, (*color, 255))
