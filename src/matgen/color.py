"""Colour conversion helpers.

Colours are carried as (R, G, B) tuples with channels in 0-255, the same
convention the texture generators use for their base colours. Authored
values may be given as integers (0xb22222), hex strings ("#b22222") or
sequences of three channels.
"""

from __future__ import annotations

from numbers import Integral
from typing import Sequence, Union

RGB = tuple[int, int, int]
ColorLike = Union[int, str, Sequence[int]]


def hex_to_rgb(value: int | str) -> RGB:
    """Convert a hex colour (0xRRGGBB or '#RRGGBB') to an RGB tuple."""
    if isinstance(value, str):
        text = value.strip().lstrip("#")
        if text.lower().startswith("0x"):
            text = text[2:]
        if len(text) == 3:
            text = "".join(ch * 2 for ch in text)
        if len(text) != 6:
            raise ValueError(f"Invalid hex colour: {value!r}")
        value = int(text, 16)

    if not 0 <= value <= 0xFFFFFF:
        raise ValueError(f"Hex colour out of range: {value:#x}")

    return ((value >> 16) & 0xFF, (value >> 8) & 0xFF, value & 0xFF)


def rgb_to_hex(color: RGB) -> str:
    """Format an RGB tuple as '#rrggbb'."""
    r, g, b = color
    return f"#{r:02x}{g:02x}{b:02x}"


def to_rgb(value: ColorLike) -> RGB:
    """Coerce any supported colour representation to an RGB tuple.

    Sequence channels must be integers; 0-1 floats are rejected rather
    than truncated.
    """
    if isinstance(value, bool):
        raise TypeError(f"Expected a colour, got {value!r}")
    if isinstance(value, (int, str)):
        return hex_to_rgb(value)

    channels = tuple(value)
    if len(channels) != 3:
        raise ValueError(f"Expected 3 colour channels, got {len(channels)}")
    for c in channels:
        if isinstance(c, bool) or not isinstance(c, Integral):
            raise TypeError(f"Colour channels must be integers in 0-255, got {c!r}")
        if not 0 <= c <= 255:
            raise ValueError(f"Colour channel out of range: {c}")
    return tuple(int(c) for c in channels)  # type: ignore[return-value]


def normalized(color: RGB) -> tuple[float, float, float]:
    """Return the colour with channels scaled to 0-1 (shader convention)."""
    return (color[0] / 255.0, color[1] / 255.0, color[2] / 255.0)
