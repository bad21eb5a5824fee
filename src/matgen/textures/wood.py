"""Wood grain texture generator."""

from dataclasses import dataclass
from typing import ClassVar

import numpy as np
from PIL import ImageDraw

from ..color import RGB
from .base import TextureGenerator, random_color


@dataclass
class WoodTextureGenerator(TextureGenerator):
    """Generates plank wood with wavy horizontal grain lines.

    Each grain line follows a sine wave whose phase is a whole number of
    periods across the texture, so lines meet themselves at the seam.

    Attributes:
        width: Texture width in pixels
        height: Texture height in pixels
        seed: Random seed for reproducibility
        base_color: Base wood colour as (R, G, B) tuple, 0-255
        grain_spacing: Vertical distance between grain lines in pixels
        wave_amplitude: Amplitude of the slow per-line vertical offset
        ripple_amplitude: Amplitude of the ripple along each line
        ripple_periods: Ripple periods across the texture width
    """

    base_color: RGB = (0x8B, 0x45, 0x13)  # Saddle brown
    grain_spacing: int = 8
    wave_amplitude: float = 20.0
    ripple_amplitude: float = 3.0
    ripple_periods: int = 2

    kind: ClassVar[str] = "wood"

    def _paint(
        self,
        draw: ImageDraw.ImageDraw,
        rng: np.random.Generator,
    ) -> None:
        """Draw one rippled polyline per grain row."""
        xs = np.arange(0, self.width + 1, 4, dtype=np.float64)
        ripple = np.sin(xs / self.width * 2 * np.pi * self.ripple_periods) * self.ripple_amplitude

        for y in range(0, self.height, self.grain_spacing):
            variance = np.sin(y * 0.1) * self.wave_amplitude
            color = random_color(rng, (100, 40, 10), (40, 30, 20))
            line_width = 1 + int(rng.random() * 2)
            ys = y + variance + ripple
            self._line(draw, list(zip(xs.tolist(), ys.tolist())), (*color, 255), line_width)
