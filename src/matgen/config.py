"""Library configuration loaded from YAML."""

from __future__ import annotations

from dataclasses import dataclass, field, fields
from pathlib import Path
from typing import Any

import yaml

from .errors import ConfigError


@dataclass(frozen=True)
class MatgenConfig:
    """Settings used when building registries.

    YAML format:
    ```yaml
    texture_seed: 7
    include_builtin_materials: true
    material_paths:
      - assets/materials/extra.yaml
    ```

    Attributes:
        texture_seed: Seed given to every textured material
        include_builtin_materials: Register the packaged material table
        material_paths: Extra material tables registered after the
            built-ins, in order
    """

    texture_seed: int = 0
    include_builtin_materials: bool = True
    material_paths: tuple[Path, ...] = field(default_factory=tuple)

    @classmethod
    def from_dict(cls, data: dict[str, Any], base_dir: Path | None = None) -> MatgenConfig:
        """Build a config from parsed YAML.

        Relative material paths are resolved against base_dir.
        """
        known = {f.name for f in fields(cls)}
        unknown = set(data) - known
        if unknown:
            raise ConfigError(f"Unknown configuration keys: {sorted(unknown)}")

        seed = data.get("texture_seed", 0)
        if isinstance(seed, bool) or not isinstance(seed, int) or seed < 0:
            raise ConfigError(f"texture_seed must be a non-negative integer, got {seed!r}")

        include_builtin = data.get("include_builtin_materials", True)
        if not isinstance(include_builtin, bool):
            raise ConfigError(
                f"include_builtin_materials must be a boolean, got {include_builtin!r}"
            )

        raw_paths = data.get("material_paths", [])
        if not isinstance(raw_paths, list) or not all(isinstance(p, str) for p in raw_paths):
            raise ConfigError("material_paths must be a list of file paths")

        paths = []
        for raw in raw_paths:
            path = Path(raw)
            if base_dir is not None and not path.is_absolute():
                path = base_dir / path
            paths.append(path)

        return cls(
            texture_seed=seed,
            include_builtin_materials=include_builtin,
            material_paths=tuple(paths),
        )


def load_config(path: str | Path) -> MatgenConfig:
    """Load configuration from a YAML file.

    Raises:
        FileNotFoundError: If the file does not exist
        ConfigError: If the YAML is invalid or has bad values
    """
    path = Path(path)
    with open(path, encoding="utf-8") as f:
        try:
            data = yaml.safe_load(f)
        except yaml.YAMLError as exc:
            raise ConfigError(f"{path}: invalid YAML: {exc}") from exc

    if data is None:
        data = {}
    if not isinstance(data, dict):
        raise ConfigError(f"{path}: expected a mapping at the top level")

    return MatgenConfig.from_dict(data, base_dir=path.parent)
