"""Tests for procedural texture synthesis."""

from dataclasses import dataclass
from typing import ClassVar

import numpy as np
import pytest
from PIL import Image

from matgen.color import RGB
from matgen.errors import ResourceUnavailable
from matgen.textures import (
    TEXTURE_GENERATORS,
    BrickTextureGenerator,
    TextureGenerator,
    WrapMode,
    generate_texture,
)

RECIPES = sorted(TEXTURE_GENERATORS)

FIREBRICK = (0xB2, 0x22, 0x22, 255)
MORTAR = (0x65, 0x43, 0x21, 255)


@pytest.mark.parametrize("kind", RECIPES)
def test_texture_is_256_square_rgba(kind):
    """Each recipe produces a 256x256 RGBA buffer."""
    texture = generate_texture(kind)

    assert texture.width == 256
    assert texture.height == 256
    assert texture.pixels.shape == (256, 256, 4)
    assert texture.pixels.dtype == np.uint8


@pytest.mark.parametrize("kind", RECIPES)
def test_texture_repeats_on_both_axes(kind):
    texture = generate_texture(kind)

    assert texture.wrap_s is WrapMode.REPEAT
    assert texture.wrap_t is WrapMode.REPEAT
    assert texture.is_tileable


@pytest.mark.parametrize("kind", RECIPES)
def test_same_seed_gives_identical_pixels(kind):
    first = generate_texture(kind, seed=42)
    second = generate_texture(kind, seed=42)

    assert np.array_equal(first.pixels, second.pixels)
    assert first.recipe == second.recipe
    assert first.pixels is not second.pixels


@pytest.mark.parametrize("kind", ["grass", "ice", "sand", "concrete", "lava"])
def test_different_seeds_differ(kind):
    first = generate_texture(kind, seed=1)
    second = generate_texture(kind, seed=2)

    assert not np.array_equal(first.pixels, second.pixels)


@pytest.mark.parametrize("kind", RECIPES)
def test_recipe_records_kind_and_seed(kind):
    texture = generate_texture(kind, seed=7)

    assert texture.recipe.kind == kind
    assert texture.recipe.seed == 7


def test_unknown_recipe_raises():
    with pytest.raises(KeyError, match="marble"):
        generate_texture("marble")


def test_brick_fill_colour_inside_brick():
    pixels = generate_texture("brick").pixels

    assert tuple(pixels[10, 10]) == FIREBRICK


def test_brick_mortar_is_two_pixels_wide():
    """The bed joint on the course edge at y=32 covers rows 31 and 32."""
    pixels = generate_texture("brick").pixels

    assert tuple(pixels[30, 10]) == FIREBRICK
    assert tuple(pixels[31, 10]) == MORTAR
    assert tuple(pixels[32, 10]) == MORTAR
    assert tuple(pixels[33, 10]) == FIREBRICK


def test_brick_mortar_wraps_across_seam():
    """The joint on the texture border is split between both edges."""
    pixels = generate_texture("brick").pixels

    assert tuple(pixels[0, 10]) == MORTAR
    assert tuple(pixels[255, 10]) == MORTAR


def test_brick_courses_are_offset():
    """Odd courses shift their head joints by half a brick."""
    pixels = generate_texture("brick").pixels

    # Head joint at x=64 in the first course, brick face in the second
    assert tuple(pixels[10, 64]) == MORTAR
    assert tuple(pixels[42, 64]) == FIREBRICK
    assert tuple(pixels[42, 96]) == MORTAR


def test_grass_keeps_base_colour_visible():
    pixels = generate_texture("grass").pixels
    base = np.array([0x4A, 0x7C, 0x59, 255], dtype=np.uint8)

    assert np.all(pixels == base, axis=-1).any()


def test_generator_respects_custom_size():
    texture = BrickTextureGenerator(width=128, height=64).generate()

    assert texture.pixels.shape == (64, 128, 4)


def test_generate_array_matches_generate():
    generator = BrickTextureGenerator(seed=3)

    assert np.array_equal(generator.generate_array(), generator.generate().pixels)


def test_to_image_round_trips_pixels():
    texture = generate_texture("ice", seed=5)
    image = texture.to_image()

    assert image.mode == "RGBA"
    assert image.size == (256, 256)
    assert np.array_equal(np.array(image), texture.pixels)


def test_save_writes_png(tmp_path):
    texture = generate_texture("wood")
    output_path = tmp_path / "wood.png"

    texture.save(str(output_path))

    loaded = Image.open(output_path)
    assert loaded.size == (256, 256)


def test_copy_does_not_share_pixels():
    texture = generate_texture("sand")
    duplicate = texture.copy()

    duplicate.pixels[0, 0] = (1, 2, 3, 4)

    assert tuple(texture.pixels[0, 0]) != (1, 2, 3, 4)


def test_surface_failure_raises_resource_unavailable(monkeypatch):
    def fail(*args, **kwargs):
        raise MemoryError("no surface")

    monkeypatch.setattr("matgen.textures.base.Image.new", fail)

    with pytest.raises(ResourceUnavailable, match="brick"):
        generate_texture("brick")


@dataclass
class SeamStrokes(TextureGenerator):
    """Draws one line and one square that both cross the texture border."""

    base_color: RGB = (0, 0, 0)

    kind: ClassVar[str] = "seam"

    def _paint(self, draw, rng):
        self._line(draw, ((250, 100), (262, 100)), (255, 255, 255, 255))
        self._rect(draw, 254, 254, 4, 4, (255, 0, 0, 255))


def test_line_crossing_right_edge_reappears_on_left():
    pixels = SeamStrokes().generate().pixels

    assert tuple(pixels[100, 252]) == (255, 255, 255, 255)
    assert tuple(pixels[100, 3]) == (255, 255, 255, 255)
    assert tuple(pixels[100, 128]) == (0, 0, 0, 255)


def test_rect_crossing_corner_reappears_in_all_corners():
    pixels = SeamStrokes().generate().pixels
    red = (255, 0, 0, 255)

    for y, x in [(255, 255), (255, 0), (0, 255), (0, 0), (1, 1)]:
        assert tuple(pixels[y, x]) == red
    assert tuple(pixels[2, 2]) == (0, 0, 0, 255)
