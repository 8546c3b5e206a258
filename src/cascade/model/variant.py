"""Variant names and the list helpers shared by every stage."""

from __future__ import annotations

from collections.abc import Iterable, Sequence

from cascade.errors import DuplicateVariantError

# Marks where the unprefixed form of a utility is emitted.
DEFAULT = "default"

# Reproduces the whole non-responsive sequence once per breakpoint.
RESPONSIVE = "responsive"

VariantList = tuple[str, ...]


def cast_variants(names: str | Iterable[str] | None) -> VariantList:
    """Return *names* as a tuple, wrapping a bare string as a single name."""
    if names is None:
        return ()
    if isinstance(names, str):
        return (names,)
    return tuple(str(name) for name in names)


def find_duplicate(variants: Sequence[str]) -> str | None:
    """Return the first name that appears twice in *variants*, if any."""
    seen: set[str] = set()
    for name in variants:
        if name in seen:
            return name
        seen.add(name)
    return None


def ensure_unique(plugin_id: str, variants: Sequence[str]) -> VariantList:
    """Return *variants* as a tuple or raise :class:`DuplicateVariantError`."""
    duplicate = find_duplicate(variants)
    if duplicate is not None:
        raise DuplicateVariantError(plugin_id, duplicate)
    return tuple(variants)
