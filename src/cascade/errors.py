"""Error types raised while resolving and sequencing variants."""

from __future__ import annotations


class CascadeError(Exception):
    """Base class for every error raised by the engine."""


class DuplicateVariantError(CascadeError):
    """Raised when a resolved variant list names the same variant twice."""

    def __init__(self, plugin_id: str, variant: str) -> None:
        self.plugin_id = plugin_id
        self.variant = variant
        super().__init__(
            f"Variant '{variant}' appears more than once in the variants of '{plugin_id}'."
        )


class CyclicVariantReferenceError(CascadeError):
    """Raised when ``variants()`` references form a cycle between plugins."""

    def __init__(self, cycle: tuple[str, ...]) -> None:
        self.cycle = cycle
        super().__init__("Cyclic variant reference: " + " -> ".join(cycle))


class UnknownPluginError(CascadeError):
    """Raised when ``variants()`` names a plugin nobody configured."""

    def __init__(self, plugin_id: str) -> None:
        self.plugin_id = plugin_id
        super().__init__(f"Unknown plugin '{plugin_id}'.")


class UnknownVariantNameError(CascadeError):
    """Raised when a resolved list names a variant with no selector rule."""

    def __init__(self, plugin_id: str, variant: str) -> None:
        self.plugin_id = plugin_id
        self.variant = variant
        super().__init__(
            f"The variants of '{plugin_id}' mention '{variant}', "
            f"but '{variant}' is not a known variant."
        )


class ConfigError(CascadeError):
    """Raised when a configuration value has the wrong shape."""

    def __init__(self, message: str, key: str | None = None) -> None:
        self.key = key
        if key:
            message = f"{key}: {message}"
        super().__init__(message)


class ParseError(CascadeError):
    """Raised when expression source cannot be parsed."""

    def __init__(
        self, message: str, line: int | None = None, column: int | None = None
    ):
        self.line = line
        self.column = column
        super().__init__(message)


class ExpressionError(ParseError):
    """Raised when an expression parses but calls a helper incorrectly."""
