"""Validation rules for variant configurations.

Each rule is a function taking a ValidationContext and returning a list of
Diagnostic objects describing any issues found.  Static rules only inspect
the configuration; resolution rules run the resolver and are skipped by the
validator when a static rule already reported an error.
"""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass

from cascade.config.settings import EngineConfig
from cascade.defaults.table import DEFAULT_TABLE, DefaultTable
from cascade.errors import CascadeError, ConfigError, DuplicateVariantError
from cascade.expression import Expression
from cascade.model.diagnostic import Diagnostic, Severity
from cascade.model.variant import VariantList, find_duplicate
from cascade.resolver.resolver import (
    PluginOverride,
    UnknownPluginPolicy,
    resolve,
    split_config,
)
from cascade.sequencer.sequencer import UnknownVariantPolicy
from cascade.sequencer.variants import VariantRegistry


@dataclass(frozen=True)
class ValidationContext:
    """The configuration under validation and what it is checked against."""

    config: EngineConfig
    table: DefaultTable = DEFAULT_TABLE

    @property
    def registry(self) -> VariantRegistry:
        return self.config.registry


def _split(ctx: ValidationContext) -> tuple[VariantList | None, Mapping[str, PluginOverride]] | None:
    try:
        return split_config(ctx.config.variants)
    except ConfigError:
        return None


def _literal_lists(ctx: ValidationContext) -> list[tuple[str | None, VariantList]]:
    """Every literal list in the config; ``None`` plugin means the global list."""
    split = _split(ctx)
    if split is None:
        return []
    global_list, overrides = split
    if global_list is not None:
        return [(None, global_list)]
    return [
        (plugin_id, tuple(entry))
        for plugin_id, entry in overrides.items()
        if isinstance(entry, (list, tuple))
    ]


def _expressions(ctx: ValidationContext) -> dict[str, Expression]:
    split = _split(ctx)
    if split is None:
        return {}
    return {p: e for p, e in split[1].items() if isinstance(e, Expression)}


# ---------------------------------------------------------------------------
# Static rules
# ---------------------------------------------------------------------------


def check_config_shape(ctx: ValidationContext) -> list[Diagnostic]:
    """The variants setting must be a list or a mapping of plugins."""
    try:
        split_config(ctx.config.variants)
    except ConfigError as e:
        return [
            Diagnostic(
                rule="check_config_shape",
                severity=Severity.ERROR,
                message=str(e),
                fix="Use a list of variant names or an object keyed by plugin.",
            )
        ]
    return []


def check_duplicate_variants(ctx: ValidationContext) -> list[Diagnostic]:
    """Literal variant lists must not repeat a name."""
    diagnostics: list[Diagnostic] = []
    for plugin_id, variants in _literal_lists(ctx):
        duplicate = find_duplicate(variants)
        if duplicate is None:
            continue
        where = f"the variants of '{plugin_id}'" if plugin_id else "the global variant list"
        diagnostics.append(
            Diagnostic(
                rule="check_duplicate_variants",
                severity=Severity.ERROR,
                message=f"Variant '{duplicate}' appears more than once in {where}.",
                plugin_id=plugin_id,
                variant=duplicate,
                fix=f"Remove the repeated '{duplicate}'.",
            )
        )
    return diagnostics


def check_unknown_plugins(ctx: ValidationContext) -> list[Diagnostic]:
    """Configured plugins should exist in the default table. WARNING."""
    split = _split(ctx)
    if split is None:
        return []
    return [
        Diagnostic(
            rule="check_unknown_plugins",
            severity=Severity.WARNING,
            message=f"Plugin '{plugin_id}' is not a built-in plugin.",
            plugin_id=plugin_id,
            fix="Check the plugin name for typos.",
        )
        for plugin_id in split[1]
        if plugin_id not in ctx.table
    ]


def check_expression_references(ctx: ValidationContext) -> list[Diagnostic]:
    """``variants()`` should only name plugins that exist."""
    split = _split(ctx)
    if split is None:
        return []
    severity = (
        Severity.ERROR
        if ctx.config.unknown_plugin is UnknownPluginPolicy.ERROR
        else Severity.WARNING
    )
    diagnostics: list[Diagnostic] = []
    for plugin_id, expression in _expressions(ctx).items():
        for target in expression.references():
            if target in ctx.table or target in split[1]:
                continue
            diagnostics.append(
                Diagnostic(
                    rule="check_expression_references",
                    severity=severity,
                    message=f"'{plugin_id}' reads the variants of unknown plugin '{target}'.",
                    plugin_id=plugin_id,
                    fix=f"Configure '{target}' or remove the variants() call.",
                )
            )
    return diagnostics


def check_reference_cycles(ctx: ValidationContext) -> list[Diagnostic]:
    """Expressions must not read each other's variants in a cycle."""
    graph = {p: e.references() for p, e in _expressions(ctx).items()}
    reported: set[frozenset[str]] = set()
    diagnostics: list[Diagnostic] = []

    def visit(plugin_id: str, path: list[str]) -> None:
        if plugin_id in path:
            cycle = path[path.index(plugin_id):] + [plugin_id]
            members = frozenset(cycle)
            if members not in reported:
                reported.add(members)
                diagnostics.append(
                    Diagnostic(
                        rule="check_reference_cycles",
                        severity=Severity.ERROR,
                        message="Cyclic variant reference: " + " -> ".join(cycle),
                        plugin_id=cycle[0],
                        fix="Break the cycle by listing one plugin's variants explicitly.",
                    )
                )
            return
        for target in graph.get(plugin_id, ()):
            visit(target, path + [plugin_id])

    for plugin_id in graph:
        visit(plugin_id, [])
    return diagnostics


def check_unknown_variants(ctx: ValidationContext) -> list[Diagnostic]:
    """Literal lists should only name variants with a selector rule."""
    severity = (
        Severity.ERROR
        if ctx.config.unknown_variant is UnknownVariantPolicy.ERROR
        else Severity.WARNING
    )
    diagnostics: list[Diagnostic] = []
    for plugin_id, variants in _literal_lists(ctx):
        for name in variants:
            if ctx.registry.is_known(name):
                continue
            diagnostics.append(
                Diagnostic(
                    rule="check_unknown_variants",
                    severity=severity,
                    message=f"Variant '{name}' has no selector rule.",
                    plugin_id=plugin_id,
                    variant=name,
                    fix="Define it under customVariants or remove it.",
                )
            )
    return diagnostics


def check_empty_global_list(ctx: ValidationContext) -> list[Diagnostic]:
    """An empty global list disables every variant. INFO."""
    split = _split(ctx)
    if split is None or split[0] is None or split[0]:
        return []
    return [
        Diagnostic(
            rule="check_empty_global_list",
            severity=Severity.INFO,
            message="The global variant list is empty; only unprefixed rules will be generated.",
        )
    ]


# ---------------------------------------------------------------------------
# Resolution rules
# ---------------------------------------------------------------------------


def check_resolution(ctx: ValidationContext) -> list[Diagnostic]:
    """The configuration must resolve, and resolved lists must use known variants."""
    try:
        resolved = resolve(
            ctx.config.variants, ctx.table, unknown_plugin=ctx.config.unknown_plugin
        )
    except CascadeError as e:
        return [
            Diagnostic(
                rule="check_resolution",
                severity=Severity.ERROR,
                message=str(e),
                plugin_id=getattr(e, "plugin_id", None),
                variant=e.variant if isinstance(e, DuplicateVariantError) else None,
            )
        ]

    literal = {plugin_id for plugin_id, _ in _literal_lists(ctx)}
    severity = (
        Severity.ERROR
        if ctx.config.unknown_variant is UnknownVariantPolicy.ERROR
        else Severity.WARNING
    )
    diagnostics: list[Diagnostic] = []
    for plugin_id, variants in resolved.items():
        if plugin_id in literal or None in literal:
            continue  # reported by check_unknown_variants
        for name in variants:
            if not ctx.registry.is_known(name):
                diagnostics.append(
                    Diagnostic(
                        rule="check_resolution",
                        severity=severity,
                        message=f"Variant '{name}' has no selector rule.",
                        plugin_id=plugin_id,
                        variant=name,
                    )
                )
    return diagnostics


# ---------------------------------------------------------------------------
# Rule registry
# ---------------------------------------------------------------------------

STATIC_RULES = [
    check_config_shape,
    check_duplicate_variants,
    check_unknown_plugins,
    check_expression_references,
    check_reference_cycles,
    check_unknown_variants,
    check_empty_global_list,
]

RESOLUTION_RULES = [
    check_resolution,
]
