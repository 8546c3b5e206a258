"""Rule models: raw plugin output and the generated, variant-expanded rules."""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass

from cascade.model.breakpoint import Breakpoint

Declaration = tuple[str, str]


@dataclass(frozen=True)
class RawRule:
    """A selector fragment and its declarations, before variant expansion."""

    selector: str
    declarations: tuple[Declaration, ...]

    def __post_init__(self) -> None:
        if not self.selector:
            raise ValueError("RawRule selector must be a non-empty string")

    @classmethod
    def of(cls, selector: str, properties: Mapping[str, object]) -> "RawRule":
        """Build a rule from a ``{property: value}`` mapping.

        List values expand into repeated declarations of the same property.
        """
        declarations: list[Declaration] = []
        for prop, value in properties.items():
            values = value if isinstance(value, (list, tuple)) else [value]
            declarations.extend((prop, str(v)) for v in values)
        return cls(selector=selector, declarations=tuple(declarations))


def raw_rules(classes: Mapping[str, Mapping[str, object]]) -> tuple[RawRule, ...]:
    """Build raw rules from a ``{selector: {property: value}}`` mapping."""
    return tuple(RawRule.of(selector, props) for selector, props in classes.items())


@dataclass(frozen=True)
class GeneratedRule:
    """A fully-qualified rule emitted by the sequencer.

    Attributes:
        selector: Final selector, class names prefixed and pseudo-classes applied.
        declarations: The raw rule's declarations, unchanged.
        plugin_id: Plugin that supplied the raw rule.
        variant_path: Variants that produced this form. Empty for the
            unprefixed rule; breakpoint-wrapped rules start with the
            breakpoint name.
        breakpoint: Wrapping breakpoint, or None outside responsive groups.
    """

    selector: str
    declarations: tuple[Declaration, ...]
    plugin_id: str
    variant_path: tuple[str, ...] = ()
    breakpoint: Breakpoint | None = None

    @property
    def condition(self) -> str | None:
        return self.breakpoint.condition if self.breakpoint else None

    @property
    def is_unprefixed(self) -> bool:
        return not self.variant_path

    def properties(self) -> dict[str, str | list[str]]:
        """Return the declarations as a mapping, repeated properties as lists."""
        props: dict[str, str | list[str]] = {}
        for prop, value in self.declarations:
            if prop in props:
                existing = props[prop]
                if isinstance(existing, list):
                    existing.append(value)
                else:
                    props[prop] = [existing, value]
            else:
                props[prop] = value
        return props
