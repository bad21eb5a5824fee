"""Lighting scene providers for common environment archetypes.

Each provider composes a handful of lights and one scene-level shadow
configuration. Where the primary caster is directional the config is
that light's own; point and spot casters only carry a cast_shadow flag
and the scene config supplies the map resolution. Enclosed scenes use
1024px maps with tight frusta; large bright outdoor scenes use 2048px
maps with wide frusta.
"""

from __future__ import annotations

import math
from abc import ABC, abstractmethod
from typing import Any, Callable

from ..checks import check_vec3
from .lights import (
    AmbientLight,
    DirectionalLight,
    FogSettings,
    HemisphereLight,
    LightingSetup,
    PointLight,
    RectAreaLight,
    ShadowConfig,
    SpotLight,
    Vec3,
)

# Maps a scene-relative offset to a world position
Placer = Callable[[float, float, float], Vec3]


def scene_origin(target_scene: Any) -> Vec3:
    """Read the optional ``origin`` placement hint from a host scene."""
    origin = getattr(target_scene, "origin", None)
    if origin is None:
        return (0.0, 0.0, 0.0)
    return check_vec3("scene origin", origin)


class LightingSceneProvider(ABC):
    """Capability contract for lighting archetypes.

    Providers may read placement hints from the target scene but never
    mutate it; attaching the returned lights is the host's job.
    """

    @abstractmethod
    def create(self, target_scene: Any) -> LightingSetup:
        """Create a new lighting setup for the given scene."""


class _PlacedScene(LightingSceneProvider):
    """Helper base that positions lights relative to the scene origin."""

    def create(self, target_scene: Any) -> LightingSetup:
        ox, oy, oz = scene_origin(target_scene)

        def at(x: float, y: float, z: float) -> Vec3:
            return (ox + x, oy + y, oz + z)

        return self._compose(at)

    @abstractmethod
    def _compose(self, at: Placer) -> LightingSetup:
        pass


class IndoorOffice(_PlacedScene):
    """Bright fluorescent office lighting with window light."""

    def _compose(self, at: Placer) -> LightingSetup:
        # Window light is the only shadow caster
        window_shadow = ShadowConfig.for_extent(5.0, map_size=1024, far=20.0)

        lights = (
            AmbientLight(color=0xF4F4F4, intensity=0.4),
            # Fluorescent ceiling panels
            RectAreaLight(
                color=0xFFFFFF, intensity=3.0, width=4.0, height=2.0,
                position=at(-2, 4, 0), look_at=at(0, 0, 0),
            ),
            RectAreaLight(
                color=0xFFFFFF, intensity=3.0, width=4.0, height=2.0,
                position=at(2, 4, 0), look_at=at(0, 0, 0),
            ),
            DirectionalLight(
                color=0xE8F4FD, intensity=1.2,
                position=at(5, 3, 2), target=at(0, 0, 0),
                shadow=window_shadow,
            ),
        )
        return LightingSetup(lights=lights, shadow_settings=window_shadow)


class IndoorCozy(_PlacedScene):
    """Warm, intimate lighting with fireplace and lamps."""

    def _compose(self, at: Placer) -> LightingSetup:
        fireplace_shadow = ShadowConfig.for_extent(5.0, map_size=1024, far=8.0)

        lights = (
            AmbientLight(color=0xFFB347, intensity=0.2),
            PointLight(
                color=0xFF6B35, intensity=2.0, distance=8.0, decay=2.0,
                position=at(0, 1, 3), cast_shadow=True,
            ),
            # Table lamp
            SpotLight(
                color=0xFFEAA7, intensity=1.5, distance=6.0,
                angle=math.pi / 6, penumbra=0.3,
                position=at(-2, 3, -1), target=at(-2, 0, -1),
                cast_shadow=True,
            ),
            # Reading light
            SpotLight(
                color=0xFFE4B5, intensity=1.8, distance=4.0,
                angle=math.pi / 8, penumbra=0.2,
                position=at(2, 2.5, 0), target=at(1, 0, 0),
            ),
        )
        return LightingSetup(lights=lights, shadow_settings=fireplace_shadow)


class OutdoorSunny(_PlacedScene):
    """Bright sunny day with strong directional sunlight."""

    def _compose(self, at: Placer) -> LightingSetup:
        sun_shadow = ShadowConfig.for_extent(25.0, map_size=2048, far=50.0)

        lights = (
            AmbientLight(color=0x87CEEB, intensity=0.6),
            DirectionalLight(
                color=0xFFFFFF, intensity=2.0,
                position=at(10, 15, 5), target=at(0, 0, 0),
                shadow=sun_shadow,
            ),
            # Sky hemisphere for natural colour variation
            HemisphereLight(
                sky_color=0x87CEEB, ground_color=0x6B8E23, intensity=0.8,
                position=at(0, 20, 0),
            ),
        )
        return LightingSetup(lights=lights, shadow_settings=sun_shadow)


class OutdoorCloudy(_PlacedScene):
    """Overcast day with diffused soft lighting."""

    def _compose(self, at: Placer) -> LightingSetup:
        sun_shadow = ShadowConfig.for_extent(15.0, map_size=1024, far=30.0)

        lights = (
            AmbientLight(color=0xBDC3C7, intensity=0.8),
            DirectionalLight(
                color=0xECF0F1, intensity=1.0,
                position=at(5, 12, 3), target=at(0, 0, 0),
                shadow=sun_shadow,
            ),
            HemisphereLight(
                sky_color=0x95A5A6, ground_color=0x7F8C8D, intensity=0.4,
                position=at(0, 10, 0),
            ),
        )
        return LightingSetup(
            lights=lights,
            shadow_settings=sun_shadow,
            fog=FogSettings(color=0xDDDDDD, near=15.0, far=50.0),
        )


class Dawn(_PlacedScene):
    """Warm sunrise lighting with low angle sun."""

    def _compose(self, at: Placer) -> LightingSetup:
        sun_shadow = ShadowConfig.for_extent(20.0, map_size=2048, far=40.0)

        lights = (
            AmbientLight(color=0xFFEAA7, intensity=0.3),
            DirectionalLight(
                color=0xFFA726, intensity=1.5,
                position=at(8, 3, 2), target=at(0, 0, 0),
                shadow=sun_shadow,
            ),
            HemisphereLight(
                sky_color=0xFF7675, ground_color=0x6C5CE7, intensity=0.6,
                position=at(0, 10, 0),
            ),
            # Rim light
            DirectionalLight(
                color=0xFF6B6B, intensity=0.4,
                position=at(-5, 2, -3), target=at(0, 0, 0),
            ),
        )
        return LightingSetup(
            lights=lights,
            shadow_settings=sun_shadow,
            fog=FogSettings(color=0xFFEAA7, near=8.0, far=35.0),
        )


class Dusk(_PlacedScene):
    """Golden hour sunset with warm orange tones."""

    def _compose(self, at: Placer) -> LightingSetup:
        sun_shadow = ShadowConfig.for_extent(20.0, map_size=2048, far=40.0)

        lights = (
            AmbientLight(color=0x6C5CE7, intensity=0.25),
            # Low sun, opposite side from dawn
            DirectionalLight(
                color=0xFF6348, intensity=1.2,
                position=at(-8, 2, 1), target=at(0, 0, 0),
                shadow=sun_shadow,
            ),
            HemisphereLight(
                sky_color=0x74B9FF, ground_color=0x2D3436, intensity=0.7,
                position=at(0, 10, 0),
            ),
            # Early street light
            PointLight(
                color=0xFFDD59, intensity=1.0, distance=12.0, decay=1.5,
                position=at(2, 3, 1),
            ),
        )
        return LightingSetup(
            lights=lights,
            shadow_settings=sun_shadow,
            fog=FogSettings(color=0x6C5CE7, near=10.0, far=40.0),
        )


class NightTime(_PlacedScene):
    """Dark night atmosphere with moonlight and street lamps."""

    def _compose(self, at: Placer) -> LightingSetup:
        moon_shadow = ShadowConfig.for_extent(15.0, map_size=1024, far=30.0)

        lights = (
            AmbientLight(color=0x1A1A2E, intensity=0.15),
            DirectionalLight(
                color=0x6A7B8A, intensity=0.8,
                position=at(-5, 10, 3), target=at(0, 0, 0),
                shadow=moon_shadow,
            ),
            PointLight(
                color=0xFFAA55, intensity=2.0, distance=15.0, decay=2.0,
                position=at(-3, 4, 2), cast_shadow=True,
            ),
            PointLight(
                color=0xFFAA55, intensity=2.0, distance=15.0, decay=2.0,
                position=at(3, 4, -2), cast_shadow=True,
            ),
        )
        return LightingSetup(
            lights=lights,
            shadow_settings=moon_shadow,
            fog=FogSettings(color=0x1A1A2E, near=5.0, far=25.0),
        )


# (identifier, provider class, category, description)
LIGHTING_SCENES: tuple[tuple[str, type[LightingSceneProvider], str, str], ...] = (
    ("IndoorOffice", IndoorOffice, "indoor", IndoorOffice.__doc__),
    ("IndoorCozy", IndoorCozy, "indoor", IndoorCozy.__doc__),
    ("OutdoorSunny", OutdoorSunny, "outdoor", OutdoorSunny.__doc__),
    ("OutdoorCloudy", OutdoorCloudy, "outdoor", OutdoorCloudy.__doc__),
    ("Dawn", Dawn, "time", Dawn.__doc__),
    ("Dusk", Dusk, "time", Dusk.__doc__),
    ("NightTime", NightTime, "time", NightTime.__doc__),
)
