"""Load material tables from YAML files."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from importlib import resources
from pathlib import Path
from typing import Any

import yaml

from ..errors import ConfigError, ValidationError
from .provider import FlatMaterial, MaterialProvider, TexturedMaterial, ToonMaterial
from .surface import Emissive, ShadingModel, SurfaceDescriptor, Transparency

logger = logging.getLogger(__name__)

BUILTIN_TABLE = "materials.yaml"

_KNOWN_KEYS = {
    "id", "category", "description", "type", "color", "roughness", "metalness",
    "opacity", "emissive", "emissive_intensity", "env_intensity", "texture",
}


@dataclass(frozen=True)
class MaterialDefinition:
    """A provider plus the metadata it is registered with."""

    identifier: str
    provider: MaterialProvider
    category: str = "uncategorized"
    description: str = ""


class MaterialLoader:
    """Loads material definitions from YAML tables.

    YAML format:
    ```yaml
    materials:
      - id: Brick
        category: building
        description: Red clay brick
        type: textured
        texture: brick
        color: "#b22222"
        roughness: 0.8
        metalness: 0.0
    ```
    """

    def __init__(self, search_paths: list[Path] | None = None, texture_seed: int = 0) -> None:
        """Initialize loader.

        Args:
            search_paths: Directories searched by load() for {name}.yaml
            texture_seed: Seed given to every textured material
        """
        self.search_paths = list(search_paths) if search_paths is not None else []
        self.texture_seed = texture_seed

    def load_builtin(self) -> list[MaterialDefinition]:
        """Load the material table shipped with the package."""
        source = resources.files("matgen.materials").joinpath("data").joinpath(BUILTIN_TABLE)
        data = yaml.safe_load(source.read_text(encoding="utf-8"))
        return self._parse_table(data, source=BUILTIN_TABLE)

    def load(self, name: str) -> list[MaterialDefinition]:
        """Load a material table by name.

        Searches for {name}.yaml in search paths.

        Raises:
            FileNotFoundError: If the table is not found
            ConfigError: If the YAML format is invalid
        """
        for search_path in self.search_paths:
            yaml_path = search_path / f"{name}.yaml"
            if yaml_path.exists():
                return self.load_file(yaml_path)
        raise FileNotFoundError(
            f"Material table '{name}' not found in search paths: {self.search_paths}"
        )

    def load_file(self, path: Path) -> list[MaterialDefinition]:
        """Load a material table from an explicit file path."""
        with open(path, encoding="utf-8") as f:
            try:
                data = yaml.safe_load(f)
            except yaml.YAMLError as exc:
                raise ConfigError(f"{path}: invalid YAML: {exc}") from exc
        return self._parse_table(data, source=str(path))

    def _parse_table(self, data: Any, source: str) -> list[MaterialDefinition]:
        if not isinstance(data, dict) or not isinstance(data.get("materials"), list):
            raise ConfigError(f"{source}: expected a mapping with a 'materials' list")

        definitions = [self._parse_material(entry, source) for entry in data["materials"]]
        logger.debug("Loaded %d materials from %s", len(definitions), source)
        return definitions

    def _parse_material(self, data: Any, source: str) -> MaterialDefinition:
        """Parse one material entry."""
        if not isinstance(data, dict) or "id" not in data:
            raise ConfigError(f"{source}: material entry must be a mapping with an 'id'")

        identifier = str(data["id"])
        unknown = set(data) - _KNOWN_KEYS
        if unknown:
            raise ConfigError(f"{source}: material '{identifier}' has unknown keys {sorted(unknown)}")
        if "color" not in data:
            raise ConfigError(f"{source}: material '{identifier}' is missing 'color'")

        try:
            provider = self._build_provider(data)
        except ValidationError as exc:
            raise ValidationError(f"{source}: material '{identifier}': {exc}") from exc

        return MaterialDefinition(
            identifier=identifier,
            provider=provider,
            category=str(data.get("category", "uncategorized")),
            description=str(data.get("description", "")),
        )

    def _build_provider(self, data: dict[str, Any]) -> MaterialProvider:
        material_type = data.get("type", "flat")

        if material_type in ("toon", "basic"):
            return ToonMaterial(data["color"], shading_model=ShadingModel(material_type))

        template = SurfaceDescriptor(
            base_color=data["color"],
            roughness=data.get("roughness", 0.5),
            metalness=data.get("metalness", 0.0),
            transparency=Transparency(data["opacity"]) if "opacity" in data else None,
            emissive=(
                Emissive(data["emissive"], data.get("emissive_intensity", 1.0))
                if "emissive" in data
                else None
            ),
            environment_intensity=data.get("env_intensity"),
        )

        if material_type == "flat":
            return FlatMaterial(template)
        if material_type == "textured":
            if "texture" not in data:
                raise ConfigError("textured material requires a 'texture' recipe")
            return TexturedMaterial(template, str(data["texture"]), seed=self.texture_seed)

        raise ConfigError(f"unknown material type '{material_type}'")
