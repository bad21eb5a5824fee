"""Procedural materials, textures and lighting scenes for 3D hosts."""

from .config import MatgenConfig, load_config
from .errors import (
    ConfigError,
    DuplicateIdentifier,
    MatgenError,
    NotFound,
    RegistryFrozen,
    ResourceUnavailable,
    ValidationError,
)
from .lighting import LightingSceneProvider, LightingSetup
from .materials import MaterialProvider, SurfaceDescriptor
from .registry import (
    Registry,
    RegistryEntry,
    build_lighting_registry,
    build_material_registry,
    default_lighting_registry,
    default_material_registry,
)
from .textures import TextureResource, WrapMode, generate_texture

__version__ = "0.1.0"

__all__ = [
    "ConfigError",
    "DuplicateIdentifier",
    "LightingSceneProvider",
    "LightingSetup",
    "MaterialProvider",
    "MatgenConfig",
    "MatgenError",
    "NotFound",
    "Registry",
    "RegistryEntry",
    "RegistryFrozen",
    "ResourceUnavailable",
    "SurfaceDescriptor",
    "TextureResource",
    "ValidationError",
    "WrapMode",
    "build_lighting_registry",
    "build_material_registry",
    "default_lighting_registry",
    "default_material_registry",
    "generate_texture",
    "load_config",
]
