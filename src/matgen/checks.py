"""Range checks for authored values."""

from typing import Any

from .color import RGB, to_rgb
from .errors import ValidationError


def _check_number(name: str, value: Any) -> None:
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        raise ValidationError(f"{name} must be a number, got {value!r}")


def check_unit(name: str, value: float) -> float:
    """Validate that value lies in [0, 1]."""
    _check_number(name, value)
    if not 0.0 <= value <= 1.0:
        raise ValidationError(f"{name} must be in [0, 1], got {value}")
    return float(value)


def check_non_negative(name: str, value: float) -> float:
    """Validate that value is >= 0."""
    _check_number(name, value)
    if not value >= 0.0:
        raise ValidationError(f"{name} must be >= 0, got {value}")
    return float(value)


def check_positive(name: str, value: float) -> float:
    """Validate that value is > 0."""
    _check_number(name, value)
    if not value > 0.0:
        raise ValidationError(f"{name} must be > 0, got {value}")
    return float(value)


def check_color(name: str, value: Any) -> RGB:
    try:
        return to_rgb(value)
    except (TypeError, ValueError) as exc:
        raise ValidationError(f"{name}: {exc}") from exc


def check_vec3(name: str, value: Any) -> tuple[float, float, float]:
    try:
        x, y, z = (float(c) for c in value)
    except (TypeError, ValueError) as exc:
        raise ValidationError(f"{name} must be an (x, y, z) triple, got {value!r}") from exc
    return (x, y, z)
