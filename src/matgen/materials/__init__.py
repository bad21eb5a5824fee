"""Material providers and the surface descriptors they produce."""

from .loader import MaterialDefinition, MaterialLoader
from .provider import FlatMaterial, MaterialProvider, TexturedMaterial, ToonMaterial
from .surface import Emissive, ShadingModel, SurfaceDescriptor, Transparency

__all__ = [
    "Emissive",
    "FlatMaterial",
    "MaterialDefinition",
    "MaterialLoader",
    "MaterialProvider",
    "ShadingModel",
    "SurfaceDescriptor",
    "TexturedMaterial",
    "ToonMaterial",
    "Transparency",
]
