"""Diagnostic model: structured findings about a variant configuration."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum


class Severity(Enum):
    """Severity level for a diagnostic message."""

    ERROR = "ERROR"
    WARNING = "WARNING"
    INFO = "INFO"


@dataclass(frozen=True)
class Diagnostic:
    """A single validation finding about a variant configuration.

    Attributes:
        rule: Identifier for the validation rule that produced this diagnostic.
        severity: How serious the issue is.
        message: Human-readable description of the problem.
        plugin_id: The plugin involved, if applicable.
        variant: The variant name involved, if applicable.
        fix: Suggested remediation, if available.
    """

    rule: str
    severity: Severity
    message: str
    plugin_id: str | None = None
    variant: str | None = None
    fix: str | None = None

    @property
    def is_error(self) -> bool:
        return self.severity is Severity.ERROR

    @property
    def is_warning(self) -> bool:
        return self.severity is Severity.WARNING

    @property
    def key(self) -> str | None:
        """The config key the finding points at, e.g. ``variants.opacity``."""
        if self.plugin_id is None:
            return None
        return f"variants.{self.plugin_id}"

    def __str__(self) -> str:
        parts = [p for p in (self.key, self.variant and f"variant={self.variant}") if p]
        location = f" [{' '.join(parts)}]" if parts else ""
        return f"{self.severity.value}{location}: {self.message}"
