"""Material providers: stateless units that produce surface descriptors."""

from __future__ import annotations

import logging
from abc import ABC, abstractmethod
from dataclasses import dataclass, replace

from ..color import RGB
from ..errors import ResourceUnavailable, ValidationError
from ..textures import TEXTURE_GENERATORS, generate_texture
from .surface import ShadingModel, SurfaceDescriptor

logger = logging.getLogger(__name__)


class MaterialProvider(ABC):
    """Capability contract shared by every material.

    Providers hold only fixed, pre-validated constants. create() may be
    called any number of times and never mutates the provider.
    """

    @abstractmethod
    def create(self) -> SurfaceDescriptor:
        """Create a new surface descriptor."""


@dataclass(frozen=True)
class FlatMaterial(MaterialProvider):
    """Material defined entirely by constant surface parameters."""

    template: SurfaceDescriptor

    def create(self) -> SurfaceDescriptor:
        return replace(self.template)


@dataclass(frozen=True)
class ToonMaterial(MaterialProvider):
    """Non-PBR material rendered with a cel or unlit shader.

    Roughness and metalness are not meaningful for these shading models
    and are carried as neutral values (fully rough, non-metal).
    """

    color: RGB
    shading_model: ShadingModel = ShadingModel.TOON

    def __post_init__(self) -> None:
        if self.shading_model is ShadingModel.PBR:
            raise ValidationError("ToonMaterial requires a non-PBR shading model")
        # Build once so invalid colours fail at construction
        object.__setattr__(self, "color", self.create().base_color)

    def create(self) -> SurfaceDescriptor:
        return SurfaceDescriptor(
            base_color=self.color,
            roughness=1.0,
            metalness=0.0,
            shading_model=self.shading_model,
        )


@dataclass(frozen=True)
class TexturedMaterial(MaterialProvider):
    """Material whose albedo comes from a procedural texture.

    Every create() call synthesizes a fresh texture, so descriptors never
    share a pixel buffer. If the drawing surface cannot be acquired the
    degradation is logged and the template is returned without a texture.

    Attributes:
        template: Surface parameters; base_color tints the texture and
            is used alone by the fallback
        texture_kind: Recipe name in TEXTURE_GENERATORS
        seed: Random seed passed to the recipe
    """

    template: SurfaceDescriptor
    texture_kind: str
    seed: int = 0

    def __post_init__(self) -> None:
        if self.texture_kind not in TEXTURE_GENERATORS:
            raise ValidationError(
                f"Unknown texture recipe '{self.texture_kind}'; "
                f"expected one of {sorted(TEXTURE_GENERATORS)}"
            )

    def create(self) -> SurfaceDescriptor:
        try:
            texture = generate_texture(self.texture_kind, seed=self.seed)
        except ResourceUnavailable as exc:
            logger.warning(
                "Texture synthesis failed for '%s' recipe, using flat colour: %s",
                self.texture_kind, exc,
            )
            return self.fallback()
        return self.template.with_texture(texture)

    def fallback(self) -> SurfaceDescriptor:
        """Return the untextured descriptor used when synthesis fails."""
        return replace(self.template, texture=None)
