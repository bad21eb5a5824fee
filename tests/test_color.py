"""Tests for colour conversion helpers."""

import numpy as np
import pytest

from matgen.color import hex_to_rgb, normalized, rgb_to_hex, to_rgb
from matgen.errors import ValidationError
from matgen.materials import SurfaceDescriptor


@pytest.mark.parametrize("value", [0xB22222, "#b22222", "0xB22222", "b22222"])
def test_hex_forms(value):
    assert hex_to_rgb(value) == (0xB2, 0x22, 0x22)


def test_short_hex():
    assert hex_to_rgb("#fa0") == (0xFF, 0xAA, 0x00)


def test_rgb_to_hex():
    assert rgb_to_hex((0x87, 0xCE, 0xEB)) == "#87ceeb"


def test_sequence_channels():
    assert to_rgb([1, 2, 3]) == (1, 2, 3)
    assert to_rgb(np.array([10, 20, 30], dtype=np.uint8)) == (10, 20, 30)


def test_float_channels_rejected():
    """0-1 floats must not be truncated to black."""
    with pytest.raises(TypeError):
        to_rgb((0.5, 0.5, 0.5))


@pytest.mark.parametrize("value", [True, False, (True, 0, 0)])
def test_bools_rejected(value):
    with pytest.raises(TypeError):
        to_rgb(value)


@pytest.mark.parametrize("value", [(0, 0), (0, 0, 256), -1, 0x1000000, "#12345"])
def test_out_of_range_rejected(value):
    with pytest.raises(ValueError):
        to_rgb(value)


@pytest.mark.parametrize("value", [(0.5, 0.5, 0.5), True, 0.5])
def test_descriptor_reports_bad_colours_as_validation_errors(value):
    with pytest.raises(ValidationError):
        SurfaceDescriptor(base_color=value)


def test_normalized():
    assert normalized((255, 0, 51)) == pytest.approx((1.0, 0.0, 0.2))
