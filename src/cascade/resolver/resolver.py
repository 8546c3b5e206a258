"""Variant order resolver: combines the default table with user overrides."""

from __future__ import annotations

import logging
from collections.abc import Callable, Iterable, Iterator, Mapping, Sequence
from dataclasses import dataclass, field
from enum import Enum
from functools import partial
from types import MappingProxyType
from typing import Union

from cascade.defaults.table import DEFAULT_TABLE, DefaultTable
from cascade.errors import ConfigError, CyclicVariantReferenceError, UnknownPluginError
from cascade.model.variant import VariantList, cast_variants, ensure_unique
from cascade.resolver.algebra import VariantAlgebra

logger = logging.getLogger(__name__)

ResolverFunction = Callable[[VariantAlgebra], Iterable[str]]
PluginOverride = Union[Sequence[str], ResolverFunction]
UserVariantConfig = Union[Sequence[str], Mapping[str, PluginOverride]]


class UnknownPluginPolicy(Enum):
    """What ``variants()`` returns for a plugin nobody configured."""

    EMPTY = "empty"
    ERROR = "error"


@dataclass(frozen=True, eq=False)
class ResolvedOrder(Mapping[str, VariantList]):
    """Final variant list per plugin, with the references that shaped it.

    Attributes:
        orders: Plugin id to resolved variant list, in plugin order.
        dependencies: Plugin id to the plugins its resolver read through
            ``variants()``.
        resolution_order: The topological order plugins were resolved in.
    """

    orders: Mapping[str, VariantList]
    dependencies: Mapping[str, tuple[str, ...]] = field(
        default_factory=lambda: MappingProxyType({})
    )
    resolution_order: tuple[str, ...] = ()

    def __getitem__(self, plugin_id: str) -> VariantList:
        return self.orders[plugin_id]

    def __iter__(self) -> Iterator[str]:
        return iter(self.orders)

    def __len__(self) -> int:
        return len(self.orders)

    def __repr__(self) -> str:
        return f"ResolvedOrder({dict(self.orders)!r})"


def split_config(
    user_config: UserVariantConfig | None,
) -> tuple[VariantList | None, Mapping[str, PluginOverride]]:
    """Split a user config into its global list or its per-plugin overrides.

    Exactly one of the two is meaningful: a sequence is the global form, a
    mapping is the per-plugin form.
    """
    if user_config is None:
        return None, {}
    if isinstance(user_config, str):
        raise ConfigError(
            "expected a list of variant names or a mapping of plugins, got a string",
            key="variants",
        )
    if isinstance(user_config, Mapping):
        for plugin_id, entry in user_config.items():
            if callable(entry) or isinstance(entry, (str, list, tuple)):
                continue
            raise ConfigError(
                f"expected a list of variant names or a function, got {type(entry).__name__}",
                key=f"variants.{plugin_id}",
            )
        return None, user_config
    if isinstance(user_config, Sequence):
        return cast_variants(user_config), {}
    raise ConfigError(
        f"expected a list or a mapping, got {type(user_config).__name__}",
        key="variants",
    )


class _Resolution:
    """State for one resolution pass.

    Plugins are resolved depth first: a ``variants()`` call resolves the
    referenced plugin before returning, so every plugin is finished after
    the plugins it depends on.  ``_stack`` holds the plugins currently being
    resolved; re-entering one of them is a cycle.
    """

    def __init__(
        self,
        user_config: UserVariantConfig | None,
        table: DefaultTable,
        unknown_plugin: UnknownPluginPolicy,
        extra_plugins: Iterable[str] = (),
    ) -> None:
        self.global_list, self.overrides = split_config(user_config)
        self.extra_plugins = tuple(extra_plugins)
        self.table = table
        self.unknown_plugin = unknown_plugin
        self.results: dict[str, VariantList] = {}
        self.dependencies: dict[str, list[str]] = {}
        self.order: list[str] = []
        self._stack: list[str] = []

    def plugins(self) -> list[str]:
        plugins = list(self.table.plugins())
        plugins.extend(p for p in self.overrides if p not in self.table)
        plugins.extend(
            p for p in dict.fromkeys(self.extra_plugins)
            if p not in self.table and p not in self.overrides
        )
        return plugins

    def resolve(self, plugin_id: str) -> VariantList:
        if plugin_id in self.results:
            return self.results[plugin_id]
        if plugin_id in self._stack:
            start = self._stack.index(plugin_id)
            raise CyclicVariantReferenceError(tuple(self._stack[start:]) + (plugin_id,))

        self._stack.append(plugin_id)
        try:
            variants = self._compute(plugin_id)
        finally:
            self._stack.pop()

        variants = ensure_unique(plugin_id, variants)
        self.results[plugin_id] = variants
        self.order.append(plugin_id)
        logger.debug("Resolved %s: %s", plugin_id, ", ".join(variants) or "(none)")
        return variants

    def _compute(self, plugin_id: str) -> VariantList:
        defaults = self.table.lookup(plugin_id)
        if self.global_list is not None:
            return self.global_list

        if plugin_id not in self.overrides:
            return defaults

        entry = self.overrides[plugin_id]
        if not callable(entry):
            return cast_variants(entry)

        algebra = VariantAlgebra(base=defaults, lookup=partial(self._reference, plugin_id))
        result = entry(algebra)
        if result is None:
            raise ConfigError("resolver function returned None", key=f"variants.{plugin_id}")
        return cast_variants(result)

    def _reference(self, requester: str, plugin_id: str) -> VariantList:
        edges = self.dependencies.setdefault(requester, [])
        if plugin_id not in edges:
            edges.append(plugin_id)

        known = (
            plugin_id in self.table
            or plugin_id in self.overrides
            or plugin_id in self.extra_plugins
        )
        if not known:
            if self.unknown_plugin is UnknownPluginPolicy.ERROR:
                raise UnknownPluginError(plugin_id)
            logger.debug("%s references unknown plugin %s", requester, plugin_id)
            return ()
        return self.resolve(plugin_id)


def resolve(
    user_config: UserVariantConfig | None,
    default_table: DefaultTable = DEFAULT_TABLE,
    *,
    unknown_plugin: UnknownPluginPolicy = UnknownPluginPolicy.EMPTY,
    extra_plugins: Iterable[str] = (),
) -> ResolvedOrder:
    """Compute the final variant list for every plugin.

    Plugins come from *default_table* in declaration order, followed by
    plugins only named in *user_config*, then *extra_plugins* (for example
    plugins that only supply raw rules).  Extra plugins receive the global
    list in global form and an empty list otherwise.

    Raises:
        DuplicateVariantError: a final list names a variant twice.
        CyclicVariantReferenceError: ``variants()`` calls form a cycle.
        UnknownPluginError: ``variants()`` names an unknown plugin and
            *unknown_plugin* is ``ERROR``.
        ConfigError: *user_config* has the wrong shape.
    """
    state = _Resolution(user_config, default_table, unknown_plugin, extra_plugins)
    plugins = state.plugins()
    for plugin_id in plugins:
        state.resolve(plugin_id)

    return ResolvedOrder(
        orders=MappingProxyType({p: state.results[p] for p in plugins}),
        dependencies=MappingProxyType(
            {p: tuple(deps) for p, deps in state.dependencies.items()}
        ),
        resolution_order=tuple(state.order),
    )
