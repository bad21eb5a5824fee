"""Masonry texture generators for brick walls and poured concrete."""

from dataclasses import dataclass
from typing import ClassVar

import numpy as np
from PIL import ImageDraw

from ..color import RGB
from .base import TextureGenerator, random_color


@dataclass
class BrickTextureGenerator(TextureGenerator):
    """Generates running-bond brick walls.

    Creates a grid of brick outlines where every other course is shifted
    by half a brick. Mortar lines are centred on the cell edges, so a
    line on the texture border is split across both sides and the
    pattern tiles cleanly.

    Attributes:
        width: Texture width in pixels
        height: Texture height in pixels
        seed: Random seed (the brick recipe uses no randomness)
        base_color: Brick face colour as (R, G, B) tuple, 0-255
        mortar_color: Mortar line colour
        brick_width: Width of each brick cell in pixels
        brick_height: Height of each brick course in pixels
        row_offset: Horizontal shift applied to odd courses
        mortar_width: Stroke width of mortar lines in pixels
    """

    base_color: RGB = (0xB2, 0x22, 0x22)  # Firebrick
    mortar_color: RGB = (0x65, 0x43, 0x21)
    brick_width: int = 64
    brick_height: int = 32
    row_offset: int = 32
    mortar_width: int = 2

    kind: ClassVar[str] = "brick"

    def _paint(
        self,
        draw: ImageDraw.ImageDraw,
        rng: np.random.Generator,
    ) -> None:
        """Draw bed and head joints for each course."""
        fill = (*self.mortar_color, 255)
        # A stroke of width w centred on a cell edge at c starts at c - w // 2
        half = self.mortar_width // 2

        n_rows = -(-self.height // self.brick_height)
        for row in range(n_rows):
            y = row * self.brick_height
            offset = self.row_offset if row % 2 else 0

            # Bed joint along the top of the course
            self._rect(draw, 0, y - half, self.width, self.mortar_width, fill)
            # Head joints between bricks
            for x in range(offset, self.width + offset, self.brick_width):
                self._rect(draw, x - half, y, self.mortar_width, self.brick_height, fill)


@dataclass
class ConcreteTextureGenerator(TextureGenerator):
    """Generates grey concrete with aggregate speckles and darker stains.

    Attributes:
        width: Texture width in pixels
        height: Texture height in pixels
        seed: Random seed for reproducibility
        base_color: Base concrete colour as (R, G, B) tuple, 0-255
        speckle_count: Number of aggregate particles
        stain_count: Number of translucent stains
        stain_alpha: Opacity of stains (0-1)
    """

    base_color: RGB = (0x80, 0x80, 0x80)
    speckle_count: int = 800
    stain_count: int = 50
    stain_alpha: float = 0.3

    kind: ClassVar[str] = "concrete"

    def _paint(
        self,
        draw: ImageDraw.ImageDraw,
        rng: np.random.Generator,
    ) -> None:
        """Scatter speckles, then overlay stains."""
        for _ in range(self.speckle_count):
            size = 1 + rng.random() * 3
            color = random_color(rng, (100, 100, 100), (100, 100, 100))
            x = rng.random() * self.width
            y = rng.random() * self.height
            self._rect(draw, x, y, size, size, (*color, 255))

        alpha = int(round(self.stain_alpha * 255))
        for _ in range(self.stain_count):
            color = random_color(rng, (50, 50, 50), (50, 50, 50))
            x = rng.random() * self.width
            y = rng.random() * self.height
            w = rng.random() * 20
            h = rng.random() * 20
            self._rect(draw, x, y, w, h, (*color, alpha))
