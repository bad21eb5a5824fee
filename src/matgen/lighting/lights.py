"""Light descriptors and shadow configuration."""

from __future__ import annotations

import math
from dataclasses import dataclass, field
from enum import IntEnum

from ..checks import check_color, check_non_negative, check_positive, check_unit, check_vec3
from ..color import RGB, normalized
from ..errors import ValidationError

Vec3 = tuple[float, float, float]

WHITE: RGB = (255, 255, 255)
ORIGIN: Vec3 = (0.0, 0.0, 0.0)


class LightType(IntEnum):
    """Light type enum matching shader values."""

    AMBIENT = 0
    DIRECTIONAL = 1
    POINT = 2
    SPOT = 3
    RECT_AREA = 4
    HEMISPHERE = 5


@dataclass(frozen=True)
class ShadowFrustum:
    """Orthographic bounds of a shadow camera, in world units."""

    left: float
    right: float
    top: float
    bottom: float

    def __post_init__(self) -> None:
        if not self.left < self.right:
            raise ValidationError(f"Shadow frustum left ({self.left}) must be < right ({self.right})")
        if not self.bottom < self.top:
            raise ValidationError(f"Shadow frustum bottom ({self.bottom}) must be < top ({self.top})")

    @classmethod
    def symmetric(cls, extent: float) -> ShadowFrustum:
        """Create a square frustum spanning [-extent, extent] on both axes."""
        check_positive("frustum extent", extent)
        return cls(left=-extent, right=extent, top=extent, bottom=-extent)

    @property
    def width(self) -> float:
        return self.right - self.left

    @property
    def height(self) -> float:
        return self.top - self.bottom


@dataclass(frozen=True)
class ShadowConfig:
    """Shadow map parameters for a shadow-casting light.

    Attributes:
        enabled: Whether the host should render shadows at all
        map_size: Shadow map resolution (power of two)
        near: Shadow camera near plane
        far: Shadow camera far plane
        frustum: Shadow camera bounds
    """

    enabled: bool = True
    map_size: int = 1024
    near: float = 0.5
    far: float = 20.0
    frustum: ShadowFrustum = field(default_factory=lambda: ShadowFrustum.symmetric(5.0))

    def __post_init__(self) -> None:
        if (
            isinstance(self.map_size, bool)
            or not isinstance(self.map_size, int)
            or self.map_size <= 0
            or self.map_size & (self.map_size - 1)
        ):
            raise ValidationError(f"Shadow map size must be a power of two, got {self.map_size}")
        check_positive("shadow near plane", self.near)
        if not self.far > self.near:
            raise ValidationError(f"Shadow far plane ({self.far}) must exceed near ({self.near})")

    @classmethod
    def for_extent(
        cls,
        extent: float,
        map_size: int,
        far: float,
        near: float = 0.5,
    ) -> ShadowConfig:
        """Create an enabled config with a symmetric frustum."""
        return cls(
            enabled=True,
            map_size=map_size,
            near=near,
            far=far,
            frustum=ShadowFrustum.symmetric(extent),
        )


@dataclass(frozen=True, kw_only=True)
class Light:
    """Base light class."""

    intensity: float = 1.0

    def __post_init__(self) -> None:
        object.__setattr__(
            self, "intensity", check_non_negative("light intensity", self.intensity)
        )

    @property
    def light_type(self) -> LightType:
        raise NotImplementedError

    @property
    def casts_shadow(self) -> bool:
        return False

    @property
    def uniform_color(self) -> RGB:
        """Colour sent to shaders."""
        return self.color  # type: ignore[attr-defined]

    @property
    def position_or_direction(self) -> Vec3:
        """Return position for shader uniform."""
        return getattr(self, "position", ORIGIN)


@dataclass(frozen=True, kw_only=True)
class AmbientLight(Light):
    """Uniform light applied to every surface."""

    color: RGB = WHITE

    def __post_init__(self) -> None:
        super().__post_init__()
        object.__setattr__(self, "color", check_color("light color", self.color))

    @property
    def light_type(self) -> LightType:
        return LightType.AMBIENT


@dataclass(frozen=True, kw_only=True)
class DirectionalLight(Light):
    """Sun-like directional light shining from position towards target."""

    color: RGB = WHITE
    position: Vec3 = (0.0, 1.0, 0.0)
    target: Vec3 = ORIGIN
    shadow: ShadowConfig | None = None

    def __post_init__(self) -> None:
        super().__post_init__()
        object.__setattr__(self, "color", check_color("light color", self.color))
        object.__setattr__(self, "position", check_vec3("position", self.position))
        object.__setattr__(self, "target", check_vec3("target", self.target))
        if self.position == self.target:
            raise ValidationError("Directional light position and target must differ")

    @property
    def light_type(self) -> LightType:
        return LightType.DIRECTIONAL

    @property
    def casts_shadow(self) -> bool:
        return self.shadow is not None and self.shadow.enabled

    @property
    def position_or_direction(self) -> Vec3:
        """Return direction for shader uniform."""
        return self.direction

    @property
    def direction(self) -> Vec3:
        """Unit vector pointing FROM the light source (like sun rays)."""
        d = [t - p for p, t in zip(self.position, self.target)]
        length = sum(c * c for c in d) ** 0.5
        return (d[0] / length, d[1] / length, d[2] / length)


@dataclass(frozen=True, kw_only=True)
class RectAreaLight(Light):
    """Rectangular emitter, e.g. a fluorescent ceiling panel or window."""

    color: RGB = WHITE
    width: float = 1.0
    height: float = 1.0
    position: Vec3 = (0.0, 1.0, 0.0)
    look_at: Vec3 = ORIGIN

    def __post_init__(self) -> None:
        super().__post_init__()
        object.__setattr__(self, "color", check_color("light color", self.color))
        object.__setattr__(self, "width", check_positive("area light width", self.width))
        object.__setattr__(self, "height", check_positive("area light height", self.height))
        object.__setattr__(self, "position", check_vec3("position", self.position))
        object.__setattr__(self, "look_at", check_vec3("look_at", self.look_at))

    @property
    def light_type(self) -> LightType:
        return LightType.RECT_AREA


@dataclass(frozen=True, kw_only=True)
class HemisphereLight(Light):
    """Sky/ground gradient light positioned above the scene."""

    sky_color: RGB = WHITE
    ground_color: RGB = WHITE
    position: Vec3 = (0.0, 1.0, 0.0)

    def __post_init__(self) -> None:
        super().__post_init__()
        object.__setattr__(self, "sky_color", check_color("sky color", self.sky_color))
        object.__setattr__(self, "ground_color", check_color("ground color", self.ground_color))
        object.__setattr__(self, "position", check_vec3("position", self.position))

    @property
    def light_type(self) -> LightType:
        return LightType.HEMISPHERE

    @property
    def uniform_color(self) -> RGB:
        return self.sky_color


@dataclass(frozen=True, kw_only=True)
class PointLight(Light):
    """Omni-directional point light.

    A distance of 0 means unlimited range; decay is the physical
    falloff exponent. Point shadows use a cube camera, so only the
    cast_shadow flag is carried; the host picks the camera.
    """

    color: RGB = WHITE
    distance: float = 0.0
    decay: float = 2.0
    position: Vec3 = ORIGIN
    cast_shadow: bool = False

    def __post_init__(self) -> None:
        super().__post_init__()
        object.__setattr__(self, "color", check_color("light color", self.color))
        object.__setattr__(self, "distance", check_non_negative("light distance", self.distance))
        object.__setattr__(self, "decay", check_non_negative("light decay", self.decay))
        object.__setattr__(self, "position", check_vec3("position", self.position))

    @property
    def light_type(self) -> LightType:
        return LightType.POINT

    @property
    def casts_shadow(self) -> bool:
        return self.cast_shadow


@dataclass(frozen=True, kw_only=True)
class SpotLight(Light):
    """Cone-shaped light, e.g. a desk lamp.

    Like PointLight, shadows are a flag only; the shadow camera follows
    the cone.
    """

    color: RGB = WHITE
    distance: float = 0.0
    angle: float = 0.5
    penumbra: float = 0.0
    decay: float = 2.0
    position: Vec3 = (0.0, 1.0, 0.0)
    target: Vec3 = ORIGIN
    cast_shadow: bool = False

    def __post_init__(self) -> None:
        super().__post_init__()
        object.__setattr__(self, "color", check_color("light color", self.color))
        object.__setattr__(self, "distance", check_non_negative("light distance", self.distance))
        object.__setattr__(self, "angle", check_positive("spot angle", self.angle))
        if self.angle > math.pi / 2:
            raise ValidationError(f"Spot angle must be at most pi/2, got {self.angle}")
        object.__setattr__(self, "penumbra", check_unit("spot penumbra", self.penumbra))
        object.__setattr__(self, "decay", check_non_negative("light decay", self.decay))
        object.__setattr__(self, "position", check_vec3("position", self.position))
        object.__setattr__(self, "target", check_vec3("target", self.target))

    @property
    def light_type(self) -> LightType:
        return LightType.SPOT

    @property
    def casts_shadow(self) -> bool:
        return self.cast_shadow


@dataclass(frozen=True)
class FogSettings:
    """Linear distance fog."""

    color: RGB
    near: float
    far: float

    def __post_init__(self) -> None:
        object.__setattr__(self, "color", check_color("fog color", self.color))
        check_non_negative("fog near", self.near)
        if not self.far > self.near:
            raise ValidationError(f"Fog far ({self.far}) must exceed near ({self.near})")


@dataclass(frozen=True)
class LightingSetup:
    """Lighting configuration for a scene.

    Lights are kept in the order the provider added them. Lighting is
    additive, so the order only matters for iteration and debugging.
    """

    lights: tuple[Light, ...]
    shadow_settings: ShadowConfig
    fog: FogSettings | None = None

    def __post_init__(self) -> None:
        object.__setattr__(self, "lights", tuple(self.lights))

    def lights_of_kind(self, light_type: LightType) -> list[Light]:
        """Return the lights of one type, in insertion order."""
        return [light for light in self.lights if light.light_type == light_type]

    def shadow_casters(self) -> list[Light]:
        return [light for light in self.lights if light.casts_shadow]

    def get_shader_data(self, max_lights: int = 8) -> dict:
        """Get lighting data formatted for shader uniforms.

        Colours are normalized to 0-1. Directional lights send their
        direction, every other light its position.
        """
        light_count = min(len(self.lights), max_lights)

        types = [0] * max_lights
        positions = [ORIGIN] * max_lights
        colors = [(0.0, 0.0, 0.0)] * max_lights
        intensities = [0.0] * max_lights

        for i, light in enumerate(self.lights[:max_lights]):
            types[i] = int(light.light_type)
            positions[i] = light.position_or_direction
            colors[i] = normalized(light.uniform_color)
            intensities[i] = light.intensity

        return {
            "uLightCount": light_count,
            "uLightTypes": types,
            "uLightPositions": positions,
            "uLightColors": colors,
            "uLightIntensities": intensities,
            "uShadowMapSize": self.shadow_settings.map_size if self.shadow_settings.enabled else 0,
        }
