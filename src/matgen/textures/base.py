"""Base class and resource types for procedural texture generators."""

from __future__ import annotations

import logging
import math
from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from enum import Enum
from typing import ClassVar, Iterator, Sequence

import numpy as np
from numpy.typing import NDArray
from PIL import Image, ImageDraw

from ..color import RGB
from ..errors import ResourceUnavailable, ValidationError

logger = logging.getLogger(__name__)

TEXTURE_SIZE = 256

RGBA = tuple[int, int, int, int]


class WrapMode(Enum):
    """Texture addressing mode outside the [0, 1] UV range."""

    REPEAT = "repeat"
    CLAMP = "clamp"


@dataclass(frozen=True)
class ProceduralRecipe:
    """Identifies how a texture was synthesized."""

    kind: str
    seed: int


@dataclass
class TextureResource:
    """A synthesized RGBA pixel buffer plus sampling parameters.

    Attributes:
        width: Texture width in pixels
        height: Texture height in pixels
        pixels: HxWx4 uint8 array in RGBA format
        recipe: Recipe the pixels were generated from, if procedural
        wrap_s: Horizontal wrap mode
        wrap_t: Vertical wrap mode
    """

    width: int
    height: int
    pixels: NDArray[np.uint8] = field(repr=False)
    recipe: ProceduralRecipe | None = None
    wrap_s: WrapMode = WrapMode.REPEAT
    wrap_t: WrapMode = WrapMode.REPEAT

    def __post_init__(self) -> None:
        if self.width <= 0 or self.height <= 0:
            raise ValidationError(
                f"Texture dimensions must be positive, got {self.width}x{self.height}"
            )
        if self.pixels.shape != (self.height, self.width, 4):
            raise ValidationError(
                f"Pixel buffer shape {self.pixels.shape} does not match "
                f"{self.width}x{self.height} RGBA"
            )

    @property
    def is_tileable(self) -> bool:
        return self.wrap_s is WrapMode.REPEAT and self.wrap_t is WrapMode.REPEAT

    def to_image(self) -> Image.Image:
        """Return the pixels as a PIL Image in RGBA mode."""
        return Image.fromarray(self.pixels)

    def copy(self) -> TextureResource:
        return TextureResource(
            width=self.width,
            height=self.height,
            pixels=self.pixels.copy(),
            recipe=self.recipe,
            wrap_s=self.wrap_s,
            wrap_t=self.wrap_t,
        )

    def save(self, path: str) -> None:
        """Save texture to file.

        Args:
            path: Output file path (e.g., 'brick.png')
        """
        self.to_image().save(path)


@dataclass
class TextureGenerator(ABC):
    """Abstract base class for procedural texture generators.

    Subclasses implement _paint() to draw onto a freshly allocated RGBA
    surface that has already been filled with base_color. All randomness
    comes from a numpy Generator seeded with ``seed``, so the same seed
    always yields the same pixels.

    Shapes should be drawn through _line() and _rect() so anything crossing
    an edge reappears on the opposite side and the texture tiles.
    """

    width: int = TEXTURE_SIZE
    height: int = TEXTURE_SIZE
    seed: int = 0

    base_color: RGB = (128, 128, 128)

    kind: ClassVar[str] = ""

    def __post_init__(self) -> None:
        if self.width <= 0 or self.height <= 0:
            raise ValidationError(
                f"Texture dimensions must be positive, got {self.width}x{self.height}"
            )

    def generate(self) -> TextureResource:
        """Synthesize the texture.

        Returns:
            A new TextureResource with repeat wrapping on both axes

        Raises:
            ResourceUnavailable: If the drawing surface cannot be allocated
        """
        rng = np.random.default_rng(self.seed)
        image, draw = self._acquire_surface()
        self._paint(draw, rng)

        logger.debug(
            "Generated %s texture %dx%d (seed=%d)",
            self.kind, self.width, self.height, self.seed,
        )
        return TextureResource(
            width=self.width,
            height=self.height,
            pixels=np.array(image, dtype=np.uint8),
            recipe=ProceduralRecipe(self.kind, self.seed),
            wrap_s=WrapMode.REPEAT,
            wrap_t=WrapMode.REPEAT,
        )

    def generate_array(self) -> NDArray[np.uint8]:
        """Generate texture as numpy array.

        Returns:
            HxWx4 uint8 array in RGBA format
        """
        return self.generate().pixels

    @abstractmethod
    def _paint(
        self,
        draw: ImageDraw.ImageDraw,
        rng: np.random.Generator,
    ) -> None:
        """Draw the recipe's pattern onto the base-filled surface."""

    def _acquire_surface(self) -> tuple[Image.Image, ImageDraw.ImageDraw]:
        """Allocate a fresh surface filled with the base colour."""
        try:
            image = Image.new("RGBA", (self.width, self.height), (*self.base_color, 255))
            draw = ImageDraw.Draw(image, "RGBA")
        except (ValueError, OSError, MemoryError) as exc:
            raise ResourceUnavailable(
                f"Could not allocate {self.width}x{self.height} surface "
                f"for {self.kind} texture: {exc}"
            ) from exc
        return image, draw

    def _wrap_offsets(
        self,
        x0: float, y0: float,
        x1: float, y1: float,
        margin: float = 0.0,
    ) -> Iterator[tuple[int, int]]:
        """Yield every tile offset at which a shape's bounds touch the surface."""
        x0, y0, x1, y1 = x0 - margin, y0 - margin, x1 + margin, y1 + margin
        for ky in range(math.ceil(-y1 / self.height), math.ceil((self.height - y0) / self.height)):
            for kx in range(math.ceil(-x1 / self.width), math.ceil((self.width - x0) / self.width)):
                yield kx * self.width, ky * self.height

    def _line(
        self,
        draw: ImageDraw.ImageDraw,
        points: Sequence[tuple[float, float]],
        fill: RGBA,
        width: int = 1,
    ) -> None:
        """Draw a polyline, repeated across the seams so the texture tiles."""
        xs = [p[0] for p in points]
        ys = [p[1] for p in points]
        for dx, dy in self._wrap_offsets(min(xs), min(ys), max(xs), max(ys), margin=width):
            draw.line([(x + dx, y + dy) for x, y in points], fill=fill, width=width)

    def _rect(
        self,
        draw: ImageDraw.ImageDraw,
        x: float, y: float,
        w: float, h: float,
        fill: RGBA,
    ) -> None:
        """Fill a w x h rectangle at (x, y), repeated across the seams."""
        if w < 1 or h < 1:
            return
        for dx, dy in self._wrap_offsets(x, y, x + w, y + h):
            draw.rectangle((x + dx, y + dy, x + w - 1 + dx, y + h - 1 + dy), fill=fill)


def random_color(
    rng: np.random.Generator,
    low: Sequence[float],
    span: Sequence[float],
) -> RGB:
    """Pick a colour with each channel uniformly in [low, low + span)."""
    return tuple(int(lo + rng.random() * sp) for lo, sp in zip(low, span))  # type: ignore[return-value]
