"""Exception types raised by matgen."""


class MatgenError(Exception):
    """Base class for all matgen errors."""


class NotFound(MatgenError, KeyError):
    """Raised when a registry lookup uses an unknown identifier."""

    def __init__(self, kind: str, identifier: str) -> None:
        super().__init__(f"No {kind} registered as '{identifier}'")
        self.kind = kind
        self.identifier = identifier

    def __str__(self) -> str:
        # KeyError quotes its argument; keep the plain message
        return self.args[0]


class DuplicateIdentifier(MatgenError):
    """Raised when an identifier is registered twice."""

    def __init__(self, kind: str, identifier: str) -> None:
        super().__init__(f"{kind.capitalize()} '{identifier}' is already registered")
        self.kind = kind
        self.identifier = identifier


class RegistryFrozen(MatgenError):
    """Raised when registering into a registry after initialization."""


class ResourceUnavailable(MatgenError):
    """Raised when a drawing surface cannot be acquired for texture synthesis."""


class ValidationError(MatgenError, ValueError):
    """Raised when an authored value falls outside its valid range."""


class ConfigError(MatgenError):
    """Raised for malformed configuration files or material tables."""
