"""Tests for material providers and the built-in material table."""

import logging

import numpy as np
import pytest

from matgen import default_material_registry
from matgen.errors import ValidationError
from matgen.materials import (
    Emissive,
    FlatMaterial,
    ShadingModel,
    SurfaceDescriptor,
    TexturedMaterial,
    ToonMaterial,
    Transparency,
)
from matgen.textures import WrapMode

MATERIALS = list(default_material_registry().list())
TEXTURED = [
    identifier
    for identifier in MATERIALS
    if isinstance(default_material_registry().get(identifier), TexturedMaterial)
]


def create(identifier: str) -> SurfaceDescriptor:
    return default_material_registry().get(identifier).create()


@pytest.mark.parametrize("identifier", MATERIALS)
def test_material_creates_valid_descriptor(identifier):
    """Every registered material yields in-range surface parameters."""
    surface = create(identifier)

    assert isinstance(surface, SurfaceDescriptor)
    assert 0.0 <= surface.roughness <= 1.0
    assert 0.0 <= surface.metalness <= 1.0
    assert 0.0 <= surface.opacity <= 1.0
    assert all(0 <= c <= 255 for c in surface.base_color)
    if surface.emissive is not None:
        assert surface.emissive.intensity >= 0.0


@pytest.mark.parametrize("identifier", MATERIALS)
def test_material_create_is_idempotent(identifier):
    first = create(identifier)
    second = create(identifier)

    assert first == second
    assert first is not second


@pytest.mark.parametrize("identifier", TEXTURED)
def test_textured_material_carries_tileable_texture(identifier):
    surface = create(identifier)

    assert surface.texture is not None
    assert (surface.texture.width, surface.texture.height) == (256, 256)
    assert surface.texture.wrap_s is WrapMode.REPEAT
    assert surface.texture.wrap_t is WrapMode.REPEAT


@pytest.mark.parametrize("identifier", TEXTURED)
def test_textured_materials_do_not_share_pixels(identifier):
    first = create(identifier)
    second = create(identifier)

    assert np.array_equal(first.texture.pixels, second.texture.pixels)
    first.texture.pixels[:] = 0
    assert not np.array_equal(first.texture.pixels, second.texture.pixels)


def test_textured_materials_present():
    assert {"Brick", "Grass", "Ice"} <= set(TEXTURED)


def test_diamond():
    surface = create("Diamond")

    assert surface.metalness == 0.0
    assert surface.roughness == 0.0
    assert surface.is_transparent
    assert surface.opacity == 0.2


def test_steel():
    surface = create("Steel")

    assert surface.metalness == 0.9
    assert surface.roughness == 0.3
    assert surface.transparency is None
    assert not surface.is_transparent


def test_brick():
    surface = create("Brick")

    assert surface.base_color == (0xB2, 0x22, 0x22)
    assert surface.texture is not None
    assert tuple(surface.texture.pixels[10, 10]) == (0xB2, 0x22, 0x22, 255)


def test_lava_is_emissive():
    surface = create("Lava")

    assert surface.is_emissive
    assert surface.texture is not None


def test_lava_tint_differs_from_texture_fill():
    surface = create("Lava")

    assert surface.base_color == (0xFF, 0xAA, 0x00)
    assert surface.texture.recipe.kind == "lava"
    fill = np.array([0xFF, 0x66, 0x00, 255], dtype=np.uint8)
    assert np.all(surface.texture.pixels == fill, axis=-1).any()


@pytest.mark.parametrize(
    "identifier,shading_model",
    [
        ("CartoonCel", ShadingModel.TOON),
        ("ToonMetal", ShadingModel.TOON),
        ("FlatColor", ShadingModel.BASIC),
        ("Steel", ShadingModel.PBR),
    ],
)
def test_shading_models(identifier, shading_model):
    assert create(identifier).shading_model is shading_model


def test_texture_failure_falls_back_to_flat_colour(monkeypatch, caplog):
    def fail(*args, **kwargs):
        raise MemoryError("no surface")

    monkeypatch.setattr("matgen.textures.base.Image.new", fail)

    with caplog.at_level(logging.WARNING, logger="matgen.materials.provider"):
        surface = create("Brick")

    assert surface.texture is None
    assert surface.base_color == (0xB2, 0x22, 0x22)
    assert surface.roughness == 0.8
    assert "brick" in caplog.text


def test_fallback_keeps_transparency_and_emission(monkeypatch):
    def fail(*args, **kwargs):
        raise OSError("no surface")

    monkeypatch.setattr("matgen.textures.base.Image.new", fail)

    ice = create("Ice")
    lava = create("Lava")

    assert ice.texture is None and ice.opacity == 0.8
    assert lava.texture is None and lava.is_emissive


def test_flat_material_returns_fresh_descriptor():
    template = SurfaceDescriptor(base_color=0x336699, roughness=0.4)
    provider = FlatMaterial(template)

    surface = provider.create()

    assert surface == template
    assert surface is not template


def test_toon_material_rejects_pbr():
    with pytest.raises(ValidationError):
        ToonMaterial(0xFF0000, shading_model=ShadingModel.PBR)


def test_toon_material_rejects_bad_colour():
    with pytest.raises(ValidationError):
        ToonMaterial("#zzzzzz")


def test_textured_material_rejects_unknown_recipe():
    with pytest.raises(ValidationError, match="marble"):
        TexturedMaterial(SurfaceDescriptor(base_color=0xFFFFFF), "marble")


def test_textured_material_uses_seed():
    template = SurfaceDescriptor(base_color=0x4A7C59)
    first = TexturedMaterial(template, "grass", seed=1).create()
    second = TexturedMaterial(template, "grass", seed=2).create()

    assert first.texture.recipe.seed == 1
    assert not np.array_equal(first.texture.pixels, second.texture.pixels)


@pytest.mark.parametrize(
    "kwargs",
    [
        {"roughness": 1.5},
        {"roughness": -0.1},
        {"metalness": 2.0},
        {"roughness": True},
        {"environment_intensity": -1.0},
    ],
)
def test_surface_descriptor_rejects_out_of_range(kwargs):
    with pytest.raises(ValidationError):
        SurfaceDescriptor(base_color=0xFFFFFF, **kwargs)


@pytest.mark.parametrize("opacity", [-0.1, 1.01])
def test_transparency_rejects_out_of_range(opacity):
    with pytest.raises(ValidationError):
        Transparency(opacity)


def test_emissive_rejects_negative_intensity():
    with pytest.raises(ValidationError):
        Emissive(0xFF0000, intensity=-1.0)


def test_surface_descriptor_accepts_hex_strings():
    surface = SurfaceDescriptor(base_color="#b22222")

    assert surface.base_color == (0xB2, 0x22, 0x22)


def test_as_dict():
    data = create("Brick").as_dict()

    assert data["base_color"] == "#b22222"
    assert data["shading_model"] == "pbr"
    assert data["texture"]["wrap_s"] == "repeat"
    assert data["texture"]["recipe"] == {"kind": "brick", "seed": 0}
    assert "opacity" not in data
