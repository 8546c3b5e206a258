"""Config validator: runs all validation rules and reports diagnostics."""

from __future__ import annotations

from typing import Callable

from cascade.config.settings import EngineConfig
from cascade.defaults.table import DEFAULT_TABLE, DefaultTable
from cascade.errors import CascadeError
from cascade.model.diagnostic import Diagnostic
from cascade.validation.rules import RESOLUTION_RULES, STATIC_RULES, ValidationContext


class ValidationError(CascadeError):
    """Raised when validation produces ERROR-severity diagnostics."""

    def __init__(self, diagnostics: list[Diagnostic]) -> None:
        self.diagnostics = diagnostics
        messages = [str(d) for d in diagnostics if d.is_error]
        super().__init__(
            f"Validation failed with {len(messages)} error(s): " + "; ".join(messages)
        )


RuleFunc = Callable[[ValidationContext], list[Diagnostic]]


def validate(
    config: EngineConfig,
    table: DefaultTable = DEFAULT_TABLE,
    extra_rules: list[RuleFunc] | None = None,
) -> list[Diagnostic]:
    """Run all validation rules against *config*.

    Returns the full list of diagnostics (errors, warnings, info).  The
    resolution rules only run when the static rules found no errors.
    """
    ctx = ValidationContext(config=config, table=table)
    rules: list[RuleFunc] = list(STATIC_RULES)
    if extra_rules:
        rules.extend(extra_rules)
    diagnostics: list[Diagnostic] = []
    for rule in rules:
        diagnostics.extend(rule(ctx))
    if not any(d.is_error for d in diagnostics):
        for rule in RESOLUTION_RULES:
            diagnostics.extend(rule(ctx))
    return diagnostics


def validate_or_raise(
    config: EngineConfig,
    table: DefaultTable = DEFAULT_TABLE,
    extra_rules: list[RuleFunc] | None = None,
) -> list[Diagnostic]:
    """Run validation; raises :class:`ValidationError` if any ERROR diagnostics exist.

    Returns the non-error diagnostics (warnings/info) when no errors are found.
    """
    diagnostics = validate(config, table, extra_rules=extra_rules)
    errors = [d for d in diagnostics if d.is_error]
    if errors:
        raise ValidationError(errors)
    return diagnostics
