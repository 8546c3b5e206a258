"""Variant list algebra: pure insert/remove helpers over variant lists.

Each helper takes the list to operate on explicitly, or falls back to the
plugin's base list when bound through :class:`VariantAlgebra`.  Results are
new tuples; inputs are never modified.  Helpers compose by passing one
result as the ``base`` of the next::

    algebra.without(["focus"], algebra.before(["active"], "hover"))
"""

from __future__ import annotations

from collections.abc import Callable, Iterable
from dataclasses import dataclass

from cascade.model.variant import VariantList, cast_variants

Names = str | Iterable[str]


def insert_before(names: Names, anchor: str | None, base: Iterable[str]) -> VariantList:
    """Splice *names* immediately before the first *anchor* in *base*.

    Without an anchor the names are prepended.  An anchor missing from
    *base* appends the names instead.
    """
    to_insert = cast_variants(names)
    existing = cast_variants(base)
    if anchor is None:
        return to_insert + existing
    if anchor not in existing:
        return existing + to_insert
    index = existing.index(anchor)
    return existing[:index] + to_insert + existing[index:]


def insert_after(names: Names, anchor: str | None, base: Iterable[str]) -> VariantList:
    """Splice *names* immediately after the first *anchor* in *base*.

    Without an anchor the names are appended.  An anchor missing from
    *base* prepends the names instead.
    """
    to_insert = cast_variants(names)
    existing = cast_variants(base)
    if anchor is None:
        return existing + to_insert
    if anchor not in existing:
        return to_insert + existing
    index = existing.index(anchor) + 1
    return existing[:index] + to_insert + existing[index:]


def remove(names: Names, base: Iterable[str]) -> VariantList:
    """Drop every name in *names* from *base*; absent names are ignored."""
    to_remove = set(cast_variants(names))
    return tuple(v for v in cast_variants(base) if v not in to_remove)


def _no_references(plugin_id: str) -> VariantList:
    return ()


@dataclass(frozen=True)
class VariantAlgebra:
    """The helper bundle handed to a resolver function.

    Attributes:
        base: The plugin's default variant list, used when a helper is
            called without an explicit ``base``.
        lookup: Returns the final variant list of another plugin.
    """

    base: VariantList = ()
    lookup: Callable[[str], VariantList] = _no_references

    def before(
        self, names: Names, anchor: str | None = None, base: Iterable[str] | None = None
    ) -> VariantList:
        return insert_before(names, anchor, self.base if base is None else base)

    def after(
        self, names: Names, anchor: str | None = None, base: Iterable[str] | None = None
    ) -> VariantList:
        return insert_after(names, anchor, self.base if base is None else base)

    def without(self, names: Names, base: Iterable[str] | None = None) -> VariantList:
        return remove(names, self.base if base is None else base)

    def variants(self, plugin_id: str) -> VariantList:
        """Return the resolved variant list of *plugin_id* (read-only)."""
        return tuple(self.lookup(plugin_id))
