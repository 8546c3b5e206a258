"""One generation pass: resolve variant orders, then sequence the rules."""

from __future__ import annotations

import logging
from collections.abc import Iterable, Iterator, Mapping

from cascade.config.settings import EngineConfig
from cascade.defaults.table import DEFAULT_TABLE, DefaultTable
from cascade.model.rule import GeneratedRule, RawRule
from cascade.resolver.resolver import ResolvedOrder, resolve
from cascade.sequencer.sequencer import sequence

logger = logging.getLogger(__name__)


def plugin_order(
    default_table: DefaultTable, raw_rules_by_plugin: Mapping[str, object]
) -> tuple[str, ...]:
    """Table declaration order, then plugins only present in the raw rules."""
    ordered = [p for p in default_table.plugins() if p in raw_rules_by_plugin]
    ordered.extend(p for p in raw_rules_by_plugin if p not in default_table)
    return tuple(ordered)


def resolve_config(
    config: EngineConfig,
    default_table: DefaultTable = DEFAULT_TABLE,
    extra_plugins: Iterable[str] = (),
) -> ResolvedOrder:
    return resolve(
        config.variants,
        default_table,
        unknown_plugin=config.unknown_plugin,
        extra_plugins=extra_plugins,
    )


def generate(
    config: EngineConfig,
    raw_rules_by_plugin: Mapping[str, Iterable[RawRule]],
    default_table: DefaultTable = DEFAULT_TABLE,
    *,
    order: Iterable[str] | None = None,
) -> Iterator[GeneratedRule]:
    """Resolve *config* and return the lazy rule stream for *raw_rules_by_plugin*.

    Resolution runs immediately, so configuration errors surface before the
    first rule is requested.  Plugins that only appear in
    *raw_rules_by_plugin* are resolved too, so a global variant list reaches
    them.
    """
    plugins = plugin_order(default_table, raw_rules_by_plugin) if order is None else tuple(order)
    resolved = resolve_config(config, default_table, plugins)
    logger.debug("Sequencing %d plugin(s) across %d breakpoint(s)", len(plugins), len(config.screens))
    return sequence(
        resolved,
        raw_rules_by_plugin,
        config.screens,
        registry=config.registry,
        separator=config.separator,
        unknown_variant=config.unknown_variant,
        plugin_order=plugins,
    )
