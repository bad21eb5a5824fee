"""Surface descriptor types produced by material providers."""

from __future__ import annotations

from dataclasses import dataclass, field, replace
from enum import Enum
from typing import Any

from ..checks import check_color, check_non_negative, check_unit
from ..color import RGB, rgb_to_hex
from ..textures.base import TextureResource


class ShadingModel(Enum):
    """Shader family the host should use for a surface."""

    PBR = "pbr"
    TOON = "toon"
    BASIC = "basic"  # Unlit


@dataclass(frozen=True)
class Transparency:
    """Alpha blending parameters. Absence means fully opaque."""

    opacity: float

    def __post_init__(self) -> None:
        object.__setattr__(self, "opacity", check_unit("opacity", self.opacity))


@dataclass(frozen=True)
class Emissive:
    """Self-illumination parameters. Absence means non-emitting."""

    color: RGB
    intensity: float = 1.0

    def __post_init__(self) -> None:
        object.__setattr__(self, "color", check_color("emissive color", self.color))
        object.__setattr__(
            self, "intensity", check_non_negative("emissive intensity", self.intensity)
        )


@dataclass(frozen=True)
class SurfaceDescriptor:
    """Renderer-independent appearance parameters of a material.

    All ranges are validated on construction, so a descriptor that exists
    is always valid and callers need not re-check it.

    Attributes:
        base_color: Albedo as (R, G, B) tuple, 0-255. When a texture is
            present base_color tints it, so it is usually the recipe's
            fill colour.
        roughness: Surface roughness (0=smooth/shiny, 1=rough/matte)
        metalness: Metalness (0=dielectric/non-metal, 1=metal)
        transparency: Alpha blending parameters, or None if opaque
        emissive: Emission parameters, or None if non-emitting
        texture: Procedurally generated albedo texture, if any
        environment_intensity: Environment map reflection multiplier
        shading_model: Shader family to render with
    """

    base_color: RGB
    roughness: float = 0.5
    metalness: float = 0.0
    transparency: Transparency | None = None
    emissive: Emissive | None = None
    texture: TextureResource | None = field(default=None, compare=False, repr=False)
    environment_intensity: float | None = None
    shading_model: ShadingModel = ShadingModel.PBR

    def __post_init__(self) -> None:
        object.__setattr__(self, "base_color", check_color("base_color", self.base_color))
        object.__setattr__(self, "roughness", check_unit("roughness", self.roughness))
        object.__setattr__(self, "metalness", check_unit("metalness", self.metalness))
        if self.environment_intensity is not None:
            object.__setattr__(
                self,
                "environment_intensity",
                check_non_negative("environment_intensity", self.environment_intensity),
            )

    @property
    def opacity(self) -> float:
        return self.transparency.opacity if self.transparency is not None else 1.0

    @property
    def is_transparent(self) -> bool:
        return self.transparency is not None

    @property
    def is_emissive(self) -> bool:
        return self.emissive is not None and self.emissive.intensity > 0.0

    def with_texture(self, texture: TextureResource | None) -> SurfaceDescriptor:
        """Return a copy of this descriptor carrying the given texture."""
        return replace(self, texture=texture)

    def as_dict(self) -> dict[str, Any]:
        """Return a plain-data representation for host-side serialization.

        Pixel data is not included; textures are described by their
        recipe and sampling parameters.
        """
        data: dict[str, Any] = {
            "base_color": rgb_to_hex(self.base_color),
            "roughness": self.roughness,
            "metalness": self.metalness,
            "shading_model": self.shading_model.value,
        }
        if self.transparency is not None:
            data["opacity"] = self.transparency.opacity
        if self.emissive is not None:
            data["emissive"] = rgb_to_hex(self.emissive.color)
            data["emissive_intensity"] = self.emissive.intensity
        if self.environment_intensity is not None:
            data["environment_intensity"] = self.environment_intensity
        if self.texture is not None:
            data["texture"] = {
                "width": self.texture.width,
                "height": self.texture.height,
                "wrap_s": self.texture.wrap_s.value,
                "wrap_t": self.texture.wrap_t.value,
                "recipe": (
                    {"kind": self.texture.recipe.kind, "seed": self.texture.recipe.seed}
                    if self.texture.recipe is not None
                    else None
                ),
            }
        return data
