"""Variant definitions: how each variant name rewrites a selector."""

from __future__ import annotations

import re
from collections.abc import Iterable, Iterator, Mapping
from dataclasses import dataclass
from types import MappingProxyType

from cascade.model.variant import DEFAULT, RESPONSIVE

# A class selector; the name may contain escaped characters such as "\/".
_CLASS_RE = re.compile(r"\.((?:\\.|[\w-])+)")

_SAFE_CHARS = re.compile(r"[A-Za-z0-9_-]")

RESERVED_NAMES = frozenset({DEFAULT, RESPONSIVE})


def escape_class_name(name: str) -> str:
    """Escape *name* so it can be used after ``.`` in a selector."""
    escaped: list[str] = []
    for i, char in enumerate(name):
        if i == 0 and char.isdigit():
            escaped.append(f"\\{ord(char):x} ")
        elif _SAFE_CHARS.match(char) or ord(char) > 127:
            escaped.append(char)
        else:
            escaped.append("\\" + char)
    return "".join(escaped)


def prefix_classes(selector: str, prefix: str, pseudo: str = "") -> str:
    """Prefix every class in *selector* with *prefix*, adding *pseudo* after it.

    ``prefix_classes(".bg-red", "hover:", ":hover")`` gives
    ``.hover\\:bg-red:hover``.
    """
    escaped_prefix = escape_class_name(prefix)

    def _replace(match: re.Match[str]) -> str:
        return "." + escaped_prefix + match.group(1) + pseudo

    return _CLASS_RE.sub(_replace, selector)


def split_selector_list(selector: str) -> list[str]:
    """Split a selector list on top-level commas."""
    parts: list[str] = []
    depth = 0
    current: list[str] = []
    for char in selector:
        if char in "([":
            depth += 1
        elif char in ")]":
            depth -= 1
        if char == "," and depth == 0:
            parts.append("".join(current).strip())
            current = []
            continue
        current.append(char)
    parts.append("".join(current).strip())
    return [p for p in parts if p]


@dataclass(frozen=True)
class VariantDefinition:
    """Selector construction rule for one variant name.

    Attributes:
        name: The variant name, also the class prefix (``hover`` in
            ``hover:bg-red``).
        pseudo: Pseudo-class appended after each prefixed class.
        parent: Selector the rule is nested under, e.g. ``.group:hover``.
    """

    name: str
    pseudo: str = ""
    parent: str = ""

    def __post_init__(self) -> None:
        if not self.name:
            raise ValueError("VariantDefinition name must be a non-empty string")
        if self.name in RESERVED_NAMES:
            raise ValueError(f"'{self.name}' is reserved and cannot be redefined")

    def apply(self, selector: str, separator: str = ":", outer_prefix: str = "") -> str:
        """Return *selector* rewritten for this variant.

        *outer_prefix* goes in front of the variant prefix, e.g. ``md:`` for
        rules inside a breakpoint group.
        """
        prefix = outer_prefix + self.name + separator
        parts = [prefix_classes(part, prefix, self.pseudo) for part in split_selector_list(selector)]
        if self.parent:
            parts = [f"{self.parent} {part}" for part in parts]
        return ", ".join(parts)


def _pseudo(name: str, pseudo_class: str | None = None) -> VariantDefinition:
    return VariantDefinition(name=name, pseudo=f":{pseudo_class or name}")


BUILTIN_VARIANTS: tuple[VariantDefinition, ...] = (
    _pseudo("hover"),
    _pseudo("focus"),
    _pseudo("active"),
    _pseudo("visited"),
    _pseudo("disabled"),
    _pseudo("checked"),
    _pseudo("focus-within"),
    _pseudo("focus-visible"),
    _pseudo("first", "first-child"),
    _pseudo("last", "last-child"),
    _pseudo("odd", "nth-child(odd)"),
    _pseudo("even", "nth-child(even)"),
    VariantDefinition(name="group-hover", parent=".group:hover"),
    VariantDefinition(name="group-focus", parent=".group:focus"),
)


class VariantRegistry:
    """Immutable lookup of variant definitions by name."""

    __slots__ = ("_definitions",)

    def __init__(self, definitions: Iterable[VariantDefinition] = ()) -> None:
        table = {d.name: d for d in definitions}
        object.__setattr__(self, "_definitions", MappingProxyType(table))

    def __setattr__(self, name: str, value: object) -> None:
        raise AttributeError("VariantRegistry is immutable")

    def get(self, name: str) -> VariantDefinition | None:
        return self._definitions.get(name)

    def __getitem__(self, name: str) -> VariantDefinition:
        return self._definitions[name]

    def __contains__(self, name: object) -> bool:
        return name in self._definitions

    def __iter__(self) -> Iterator[str]:
        return iter(self._definitions)

    def __len__(self) -> int:
        return len(self._definitions)

    def is_known(self, name: str) -> bool:
        """True for registered variants and for ``default``/``responsive``."""
        return name in RESERVED_NAMES or name in self._definitions

    def with_definitions(self, extra: Iterable[VariantDefinition]) -> "VariantRegistry":
        """Return a new registry with *extra* added (replacing same names)."""
        merged = dict(self._definitions)
        merged.update((d.name, d) for d in extra)
        return VariantRegistry(merged.values())

    def as_mapping(self) -> Mapping[str, VariantDefinition]:
        return self._definitions


DEFAULT_REGISTRY = VariantRegistry(BUILTIN_VARIANTS)
