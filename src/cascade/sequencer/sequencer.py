"""Rule emission sequencer: expands raw rules across variants and breakpoints.

For each plugin the output is one base group followed, when the plugin's
order contains ``responsive``, by one group per breakpoint in ascending
width order.  Every group repeats the same construction:

* the unprefixed rules sit where ``default`` appears in the order, or
  first when ``default`` is absent;
* every other variant contributes one rule per raw rule, at its position
  in the order.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable, Iterator, Mapping, Sequence
from enum import Enum

from cascade.errors import UnknownVariantNameError
from cascade.model.breakpoint import DEFAULT_SCREENS, Breakpoint, sort_breakpoints
from cascade.model.rule import GeneratedRule, RawRule
from cascade.model.variant import DEFAULT, RESPONSIVE, VariantList, cast_variants, ensure_unique
from cascade.sequencer.variants import DEFAULT_REGISTRY, VariantRegistry, prefix_classes

logger = logging.getLogger(__name__)


class UnknownVariantPolicy(Enum):
    """What to do with a variant name that has no selector rule."""

    ERROR = "error"
    SKIP = "skip"


def core_variants(
    plugin_id: str,
    order: Sequence[str],
    registry: VariantRegistry = DEFAULT_REGISTRY,
    unknown_variant: UnknownVariantPolicy = UnknownVariantPolicy.ERROR,
) -> VariantList:
    """Return *order* without ``responsive`` and with unknown names handled.

    Raises:
        UnknownVariantNameError: a name has no definition and the policy is
            ``ERROR``.
    """
    core: list[str] = []
    for name in order:
        if name == RESPONSIVE:
            continue
        if not registry.is_known(name):
            if unknown_variant is UnknownVariantPolicy.ERROR:
                raise UnknownVariantNameError(plugin_id, name)
            logger.warning("Skipping unknown variant '%s' for %s", name, plugin_id)
            continue
        core.append(name)
    return tuple(core)


def build_group(
    plugin_id: str,
    rules: Sequence[RawRule],
    core: Sequence[str],
    registry: VariantRegistry = DEFAULT_REGISTRY,
    separator: str = ":",
    breakpoint: Breakpoint | None = None,
) -> Iterator[GeneratedRule]:
    """Yield one group of rules for *plugin_id* in *core* order.

    When *breakpoint* is given every class is additionally prefixed with the
    breakpoint name and the rules carry the breakpoint as their wrapper.
    """
    steps = tuple(core) if DEFAULT in core else (DEFAULT,) + tuple(core)
    outer = breakpoint.name + separator if breakpoint is not None else ""
    lead = (breakpoint.name,) if breakpoint is not None else ()
    for variant in steps:
        definition = None if variant == DEFAULT else registry[variant]
        for rule in rules:
            if definition is None:
                selector = prefix_classes(rule.selector, outer) if outer else rule.selector
                path = lead
            else:
                selector = definition.apply(rule.selector, separator, outer)
                path = lead + (variant,)
            yield GeneratedRule(
                selector=selector,
                declarations=rule.declarations,
                plugin_id=plugin_id,
                variant_path=path,
                breakpoint=breakpoint,
            )


def sequence(
    resolved_order: Mapping[str, Sequence[str]],
    raw_rules_by_plugin: Mapping[str, Iterable[RawRule]],
    breakpoints: Iterable[Breakpoint] = DEFAULT_SCREENS,
    *,
    registry: VariantRegistry = DEFAULT_REGISTRY,
    separator: str = ":",
    unknown_variant: UnknownVariantPolicy = UnknownVariantPolicy.ERROR,
    plugin_order: Iterable[str] | None = None,
) -> Iterator[GeneratedRule]:
    """Lazily emit the generated rules of every plugin, plugin by plugin.

    Plugins are processed in *plugin_order* (default: the iteration order of
    *raw_rules_by_plugin*); a plugin missing from *resolved_order* is treated
    as having no variants.  A plugin's order is checked before any of its
    rules are emitted, so a bad order yields nothing for that plugin.

    Raises:
        DuplicateVariantError: a plugin's order names a variant twice.
        UnknownVariantNameError: see :class:`UnknownVariantPolicy`.
    """
    screens = sort_breakpoints(breakpoints)
    plugins = tuple(raw_rules_by_plugin) if plugin_order is None else tuple(plugin_order)

    for plugin_id in plugins:
        order = ensure_unique(plugin_id, cast_variants(resolved_order.get(plugin_id, ())))
        core = core_variants(plugin_id, order, registry, unknown_variant)
        rules = tuple(raw_rules_by_plugin.get(plugin_id, ()))
        if not rules:
            continue

        logger.debug("Emitting %s base group: %d rule(s)", plugin_id, len(rules))
        yield from build_group(plugin_id, rules, core, registry, separator)

        if RESPONSIVE not in order:
            continue
        for breakpoint in screens:
            logger.debug("Emitting %s group for breakpoint %s", plugin_id, breakpoint.name)
            yield from build_group(plugin_id, rules, core, registry, separator, breakpoint)
