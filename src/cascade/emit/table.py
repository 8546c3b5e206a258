"""Class reference table: selector to declaration text, for documentation."""

from __future__ import annotations

from collections.abc import Callable, Iterable, Mapping
from dataclasses import dataclass
from typing import Any

from cascade.model.rule import GeneratedRule

PropertyFilter = Callable[[str, Any, Mapping[str, Any]], bool]
ValueTransform = Callable[[Any], Any]


@dataclass(frozen=True)
class ClassRow:
    """One row of the class reference table."""

    selector: str
    properties: str


def _cast_list(value: Any) -> list[Any]:
    return list(value) if isinstance(value, (list, tuple)) else [value]


def stringify_properties(
    properties: Mapping[str, Any],
    *,
    filter: PropertyFilter | None = None,
    transform_value: ValueTransform | None = None,
    indent: int = 0,
) -> str:
    """Render *properties* as declaration lines.

    Nested mappings become ``key { ... }`` blocks one level deeper, list
    values repeat the property once per value, and pairs rejected by
    *filter* are left out.
    """
    lines: list[str] = []
    pad = "  " * indent
    for prop, value in properties.items():
        if isinstance(value, Mapping):
            lines.append(f"{pad}{prop} {{")
            lines.append(
                stringify_properties(
                    value, filter=filter, transform_value=transform_value, indent=indent + 1
                )
            )
            lines.append(f"{pad}}}")
            continue
        for item in _cast_list(value):
            if filter is not None and not filter(prop, item, properties):
                continue
            shown = transform_value(item) if transform_value else item
            lines.append(f"{pad}{prop}: {shown};")
    return "\n".join(lines)


def rules_to_classes(rules: Iterable[GeneratedRule]) -> dict[str, dict[str, Any]]:
    """Map each generated selector to its properties.

    Breakpoint-wrapped rules nest their properties under the media query.
    A selector emitted twice keeps its last properties.
    """
    classes: dict[str, dict[str, Any]] = {}
    for rule in rules:
        properties: dict[str, Any] = rule.properties()
        if rule.breakpoint is not None:
            properties = {f"@media {rule.breakpoint.condition}": properties}
        classes[rule.selector] = properties
    return classes


def class_table(
    classes: Mapping[str, Mapping[str, Any]],
    *,
    transform_selector: Callable[[str], str] | None = None,
    transform_properties: Callable[[str, Mapping[str, Any]], Mapping[str, Any]] | None = None,
    filter_properties: PropertyFilter | None = None,
    transform_value: ValueTransform | None = None,
) -> list[ClassRow]:
    """Build table rows from a ``{selector: properties}`` mapping."""
    rows: list[ClassRow] = []
    for selector, properties in classes.items():
        if transform_properties is not None:
            properties = transform_properties(selector, properties)
        rows.append(
            ClassRow(
                selector=transform_selector(selector) if transform_selector else selector,
                properties=stringify_properties(
                    properties, filter=filter_properties, transform_value=transform_value
                ),
            )
        )
    return rows


def format_class_table(rows: Iterable[ClassRow]) -> str:
    """Lay *rows* out as two aligned text columns."""
    rows = list(rows)
    if not rows:
        return ""
    width = max(len("Class"), *(len(r.selector) for r in rows))
    lines = [f"{'Class'.ljust(width)}  Properties", f"{'-' * width}  {'-' * 10}"]
    for row in rows:
        prop_lines = row.properties.split("\n") if row.properties else [""]
        lines.append(f"{row.selector.ljust(width)}  {prop_lines[0]}".rstrip())
        lines.extend(f"{' ' * width}  {line}".rstrip() for line in prop_lines[1:])
    return "\n".join(lines)
