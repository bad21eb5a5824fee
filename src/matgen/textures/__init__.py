"""Procedural texture generation module."""

from .base import (
    TEXTURE_SIZE,
    ProceduralRecipe,
    TextureGenerator,
    TextureResource,
    WrapMode,
)
from .ground import GrassTextureGenerator, SandTextureGenerator
from .liquid import IceTextureGenerator, LavaTextureGenerator
from .masonry import BrickTextureGenerator, ConcreteTextureGenerator
from .wood import WoodTextureGenerator

# Registry of texture generator types
TEXTURE_GENERATORS: dict[str, type[TextureGenerator]] = {
    gen.kind: gen
    for gen in (
        BrickTextureGenerator,
        ConcreteTextureGenerator,
        GrassTextureGenerator,
        SandTextureGenerator,
        WoodTextureGenerator,
        IceTextureGenerator,
        LavaTextureGenerator,
    )
}


def generate_texture(kind: str, seed: int = 0, size: int = TEXTURE_SIZE) -> TextureResource:
    """Synthesize a square tileable texture from a named recipe.

    Args:
        kind: Recipe name (see TEXTURE_GENERATORS)
        seed: Random seed; equal seeds give pixel-identical output
        size: Edge length in pixels

    Returns:
        A new TextureResource

    Raises:
        KeyError: If the recipe kind is unknown
        ResourceUnavailable: If the drawing surface cannot be allocated
    """
    try:
        generator_class = TEXTURE_GENERATORS[kind]
    except KeyError:
        raise KeyError(f"Unknown texture recipe: {kind}") from None
    return generator_class(width=size, height=size, seed=seed).generate()


__all__ = [
    "TEXTURE_SIZE",
    "TEXTURE_GENERATORS",
    "ProceduralRecipe",
    "TextureGenerator",
    "TextureResource",
    "WrapMode",
    "generate_texture",
    "BrickTextureGenerator",
    "ConcreteTextureGenerator",
    "GrassTextureGenerator",
    "SandTextureGenerator",
    "WoodTextureGenerator",
    "IceTextureGenerator",
    "LavaTextureGenerator",
]
