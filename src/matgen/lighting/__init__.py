"""Lighting descriptors and scene lighting providers."""

from .lights import (
    AmbientLight,
    DirectionalLight,
    FogSettings,
    HemisphereLight,
    Light,
    LightingSetup,
    LightType,
    PointLight,
    RectAreaLight,
    ShadowConfig,
    ShadowFrustum,
    SpotLight,
)
from .scenes import (
    LIGHTING_SCENES,
    Dawn,
    Dusk,
    IndoorCozy,
    IndoorOffice,
    LightingSceneProvider,
    NightTime,
    OutdoorCloudy,
    OutdoorSunny,
)

__all__ = [
    "AmbientLight",
    "DirectionalLight",
    "FogSettings",
    "HemisphereLight",
    "Light",
    "LightingSetup",
    "LightType",
    "PointLight",
    "RectAreaLight",
    "ShadowConfig",
    "ShadowFrustum",
    "SpotLight",
    "LIGHTING_SCENES",
    "LightingSceneProvider",
    "IndoorOffice",
    "IndoorCozy",
    "OutdoorSunny",
    "OutdoorCloudy",
    "Dawn",
    "Dusk",
    "NightTime",
]
