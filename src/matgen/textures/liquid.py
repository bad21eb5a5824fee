"""Liquid and frozen surface texture generators for ice and lava."""

from dataclasses import dataclass
from typing import ClassVar

import numpy as np
from PIL import ImageDraw

from ..color import RGB
from .base import TextureGenerator, random_color


@dataclass
class IceTextureGenerator(TextureGenerator):
    """Generates frosted ice covered in small hexagonal crystals.

    Attributes:
        width: Texture width in pixels
        height: Texture height in pixels
        seed: Random seed for reproducibility
        base_color: Base ice colour as (R, G, B) tuple, 0-255
        crystal_count: Number of crystal outlines
        crystal_radius: (min, max) crystal radius in pixels
        alpha_range: (min, max) stroke opacity (0-1)
    """

    base_color: RGB = (0xDD, 0xEE, 0xFF)
    crystal_count: int = 200
    crystal_radius: tuple[float, float] = (2.0, 10.0)
    alpha_range: tuple[float, float] = (0.3, 0.7)

    kind: ClassVar[str] = "ice"

    # Vertices at 60 degree increments
    _ANGLES: ClassVar[np.ndarray] = np.arange(6) * (np.pi / 3)

    def _paint(
        self,
        draw: ImageDraw.ImageDraw,
        rng: np.random.Generator,
    ) -> None:
        """Draw translucent hexagonal crystal outlines."""
        min_r, max_r = self.crystal_radius
        min_a, max_a = self.alpha_range
        for _ in range(self.crystal_count):
            x = rng.random() * self.width
            y = rng.random() * self.height
            radius = min_r + rng.random() * (max_r - min_r)
            color = random_color(rng, (200, 220, 240), (55, 35, 15))
            alpha = int((min_a + rng.random() * (max_a - min_a)) * 255)
            line_width = max(1, int(round(rng.random() * 2)))

            vx = x + np.cos(self._ANGLES) * radius
            vy = y + np.sin(self._ANGLES) * radius
            outline = list(zip(vx.tolist(), vy.tolist()))
            outline.append(outline[0])
            self._line(draw, outline, (*color, alpha), line_width)


@dataclass
class LavaTextureGenerator(TextureGenerator):
    """Generates molten lava with glowing flow streams and hot cracks.

    Attributes:
        width: Texture width in pixels
        height: Texture height in pixels
        seed: Random seed for reproducibility
        base_color: Base lava colour as (R, G, B) tuple, 0-255
        stream_count: Number of flow streams
        stream_segments: Segments per flow stream
        crack_count: Number of bright straight cracks
    """

    base_color: RGB = (0xFF, 0x66, 0x00)
    stream_count: int = 50
    stream_segments: int = 10
    crack_count: int = 20

    kind: ClassVar[str] = "lava"

    def _paint(
        self,
        draw: ImageDraw.ImageDraw,
        rng: np.random.Generator,
    ) -> None:
        """Draw meandering downward streams, then thin cracks."""
        for _ in range(self.stream_count):
            color = (255, int(50 + rng.random() * 100), int(rng.random() * 50))
            line_width = int(2 + rng.random() * 5)
            x = rng.random() * self.width
            y = rng.random() * self.height
            points = [(x, y)]
            for _ in range(self.stream_segments):
                x += (rng.random() - 0.5) * 40
                y += rng.random() * 20 + 5
                points.append((x, y))
            self._line(draw, points, (*color, 255), line_width)

        for _ in range(self.crack_count):
            color = random_color(rng, (255, 200, 0), (0, 55, 100))
            start = (rng.random() * self.width, rng.random() * self.height)
            end = (rng.random() * self.width, rng.random() * self.height)
            self._line(draw, (start, end), (*color, 255))
