"""Identifier-to-provider registries for materials and lighting scenes."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from functools import lru_cache
from typing import Generic, Iterator, TypeVar

from .config import MatgenConfig
from .errors import DuplicateIdentifier, NotFound, RegistryFrozen
from .lighting.scenes import LIGHTING_SCENES, LightingSceneProvider
from .materials.loader import MaterialLoader
from .materials.provider import MaterialProvider

logger = logging.getLogger(__name__)

P = TypeVar("P")


@dataclass(frozen=True)
class RegistryEntry(Generic[P]):
    """A registered provider and its metadata."""

    identifier: str
    provider: P
    category: str = "uncategorized"
    description: str = ""


class IdentifierView(Generic[P]):
    """Lazy, restartable view over registered identifiers.

    Each iteration walks the registry afresh in registration order.
    """

    def __init__(self, registry: Registry[P], category: str | None = None) -> None:
        self._registry = registry
        self._category = category

    def __iter__(self) -> Iterator[str]:
        for entry in self._registry.entries():
            if self._category is None or entry.category == self._category:
                yield entry.identifier

    def __repr__(self) -> str:
        return f"IdentifierView({self._registry.kind!r}, category={self._category!r})"


class Registry(Generic[P]):
    """Maps case-sensitive string identifiers to provider instances.

    Registries are populated once at start-up and then frozen; after
    that they are read-only and can be shared freely.
    """

    def __init__(self, kind: str, provider_type: type | None = None) -> None:
        """Create an empty registry.

        Args:
            kind: Human-readable provider kind used in error messages
            provider_type: If given, registered providers must be instances
        """
        self.kind = kind
        self.provider_type = provider_type
        self._entries: dict[str, RegistryEntry[P]] = {}
        self._frozen = False

    def register(
        self,
        identifier: str,
        provider: P,
        category: str = "uncategorized",
        description: str = "",
    ) -> None:
        """Register a provider under an identifier.

        Raises:
            DuplicateIdentifier: If the identifier is already registered
            RegistryFrozen: If the registry has been frozen
            TypeError: If the provider does not implement the capability
        """
        if self._frozen:
            raise RegistryFrozen(f"Cannot register '{identifier}': {self.kind} registry is frozen")
        if not isinstance(identifier, str) or not identifier:
            raise TypeError(f"{self.kind} identifier must be a non-empty string, got {identifier!r}")
        if self.provider_type is not None and not isinstance(provider, self.provider_type):
            raise TypeError(
                f"{self.kind} '{identifier}' must be a {self.provider_type.__name__}, "
                f"got {type(provider).__name__}"
            )
        if identifier in self._entries:
            raise DuplicateIdentifier(self.kind, identifier)

        self._entries[identifier] = RegistryEntry(identifier, provider, category, description)

    def freeze(self) -> Registry[P]:
        """Make the registry read-only. Returns self for chaining."""
        self._frozen = True
        return self

    @property
    def frozen(self) -> bool:
        return self._frozen

    def get(self, identifier: str) -> P:
        """Look up a provider.

        Raises:
            NotFound: If no provider is registered under identifier
        """
        return self.entry(identifier).provider

    def entry(self, identifier: str) -> RegistryEntry[P]:
        try:
            return self._entries[identifier]
        except KeyError:
            raise NotFound(self.kind, identifier) from None

    def entries(self) -> Iterator[RegistryEntry[P]]:
        yield from self._entries.values()

    def list(self, category: str | None = None) -> IdentifierView[P]:
        """Return the registered identifiers, optionally for one category."""
        return IdentifierView(self, category)

    def categories(self) -> list[str]:
        """Return the distinct categories in first-registration order."""
        return list(dict.fromkeys(entry.category for entry in self._entries.values()))

    def __contains__(self, identifier: object) -> bool:
        return identifier in self._entries

    def __len__(self) -> int:
        return len(self._entries)

    def __iter__(self) -> Iterator[str]:
        return iter(self.list())


def build_material_registry(config: MatgenConfig | None = None) -> Registry[MaterialProvider]:
    """Build and freeze a material registry from the configured tables.

    Raises:
        DuplicateIdentifier: If two tables define the same identifier
        ValidationError: If a table contains out-of-range values
        ConfigError: If a table is malformed
    """
    config = config if config is not None else MatgenConfig()
    loader = MaterialLoader(texture_seed=config.texture_seed)
    registry: Registry[MaterialProvider] = Registry("material", MaterialProvider)

    definitions = loader.load_builtin() if config.include_builtin_materials else []
    for path in config.material_paths:
        definitions.extend(loader.load_file(path))

    for definition in definitions:
        registry.register(
            definition.identifier,
            definition.provider,
            category=definition.category,
            description=definition.description,
        )

    logger.debug("Registered %d materials", len(registry))
    return registry.freeze()


def build_lighting_registry() -> Registry[LightingSceneProvider]:
    """Build and freeze the registry of built-in lighting scenes."""
    registry: Registry[LightingSceneProvider] = Registry("lighting scene", LightingSceneProvider)
    for identifier, scene_class, category, description in LIGHTING_SCENES:
        registry.register(identifier, scene_class(), category=category, description=description)

    logger.debug("Registered %d lighting scenes", len(registry))
    return registry.freeze()


@lru_cache(maxsize=None)
def default_material_registry() -> Registry[MaterialProvider]:
    """Return the process-wide registry of built-in materials."""
    return build_material_registry()


@lru_cache(maxsize=None)
def default_lighting_registry() -> Registry[LightingSceneProvider]:
    """Return the process-wide registry of built-in lighting scenes."""
    return build_lighting_registry()
