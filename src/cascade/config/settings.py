"""Engine configuration and its JSON loader."""

from __future__ import annotations

import json
from collections.abc import Mapping
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any

from cascade.errors import ConfigError, ParseError
from cascade.expression import parse_expression
from cascade.model.breakpoint import DEFAULT_SCREENS, Breakpoint, breakpoints_from_mapping
from cascade.model.rule import RawRule
from cascade.resolver.resolver import PluginOverride, UnknownPluginPolicy, UserVariantConfig
from cascade.sequencer.sequencer import UnknownVariantPolicy
from cascade.sequencer.variants import DEFAULT_REGISTRY, VariantDefinition, VariantRegistry


@dataclass(frozen=True)
class EngineConfig:
    """Everything one generation pass needs besides the plugins' raw rules."""

    variants: UserVariantConfig | None = None
    screens: tuple[Breakpoint, ...] = DEFAULT_SCREENS
    separator: str = ":"
    unknown_variant: UnknownVariantPolicy = UnknownVariantPolicy.ERROR
    unknown_plugin: UnknownPluginPolicy = UnknownPluginPolicy.EMPTY
    custom_variants: tuple[VariantDefinition, ...] = field(default_factory=tuple)

    def __post_init__(self) -> None:
        if not self.separator:
            raise ConfigError("must be a non-empty string", key="separator")

    @property
    def registry(self) -> VariantRegistry:
        """Built-in variant definitions plus this config's custom ones."""
        if not self.custom_variants:
            return DEFAULT_REGISTRY
        return DEFAULT_REGISTRY.with_definitions(self.custom_variants)

    # --- loading ---------------------------------------------------------------

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> EngineConfig:
        """Build a config from decoded JSON.

        String entries under ``variants`` are parsed as resolver expressions.
        """
        if not isinstance(data, Mapping):
            raise ConfigError("top-level value must be an object")

        kwargs: dict[str, Any] = {}
        if "variants" in data:
            kwargs["variants"] = _load_variants(data["variants"])
        if "screens" in data:
            screens = data["screens"]
            if not isinstance(screens, Mapping):
                raise ConfigError("expected an object of name to width", key="screens")
            kwargs["screens"] = breakpoints_from_mapping(screens)
        if "separator" in data:
            kwargs["separator"] = str(data["separator"])
        if "unknownVariant" in data:
            kwargs["unknown_variant"] = _enum(UnknownVariantPolicy, data["unknownVariant"], "unknownVariant")
        if "unknownPlugin" in data:
            kwargs["unknown_plugin"] = _enum(UnknownPluginPolicy, data["unknownPlugin"], "unknownPlugin")
        if "customVariants" in data:
            kwargs["custom_variants"] = _load_custom_variants(data["customVariants"])
        return cls(**kwargs)

    @classmethod
    def load(cls, path: Path) -> EngineConfig:
        """Read a JSON config file at *path*."""
        return cls.from_dict(_read_json(path))


def _read_json(path: Path) -> Any:
    try:
        return json.loads(Path(path).read_text(encoding="utf-8"))
    except json.JSONDecodeError as e:
        raise ConfigError(f"invalid JSON at line {e.lineno}: {e.msg}", key=str(path)) from e


def _enum(enum_type: type, raw: object, key: str) -> Any:
    try:
        return enum_type(str(raw).lower())
    except ValueError:
        choices = ", ".join(m.value for m in enum_type)
        raise ConfigError(f"expected one of {choices}, got {raw!r}", key=key) from None


def _load_variants(raw: object) -> UserVariantConfig:
    if isinstance(raw, list):
        return _names(raw, "variants")
    if not isinstance(raw, Mapping):
        raise ConfigError("expected a list or an object", key="variants")

    overrides: dict[str, PluginOverride] = {}
    for plugin_id, entry in raw.items():
        key = f"variants.{plugin_id}"
        if isinstance(entry, list):
            overrides[plugin_id] = _names(entry, key)
        elif isinstance(entry, str):
            try:
                overrides[plugin_id] = parse_expression(entry)
            except ParseError as e:
                raise ConfigError(str(e), key=key) from e
        else:
            raise ConfigError("expected a list or an expression string", key=key)
    return overrides


def _names(raw: list[object], key: str) -> tuple[str, ...]:
    if not all(isinstance(name, str) for name in raw):
        raise ConfigError("variant names must be strings", key=key)
    return tuple(raw)  # type: ignore[arg-type]


def _load_custom_variants(raw: object) -> tuple[VariantDefinition, ...]:
    if not isinstance(raw, Mapping):
        raise ConfigError("expected an object of variant definitions", key="customVariants")
    definitions: list[VariantDefinition] = []
    for name, definition in raw.items():
        key = f"customVariants.{name}"
        if not isinstance(definition, Mapping):
            raise ConfigError("expected an object with 'pseudo' and/or 'parent'", key=key)
        try:
            definitions.append(
                VariantDefinition(
                    name=name,
                    pseudo=str(definition.get("pseudo", "")),
                    parent=str(definition.get("parent", "")),
                )
            )
        except ValueError as e:
            raise ConfigError(str(e), key=key) from e
    return tuple(definitions)


def load_config(path: str | Path) -> EngineConfig:
    return EngineConfig.load(Path(path))


def load_rules(path: str | Path) -> dict[str, tuple[RawRule, ...]]:
    """Read raw rules from ``{plugin: {selector: {property: value}}}`` JSON.

    Plugin order in the file is kept.
    """
    data = _read_json(Path(path))
    if not isinstance(data, Mapping):
        raise ConfigError("top-level value must be an object", key=str(path))

    rules: dict[str, tuple[RawRule, ...]] = {}
    for plugin_id, classes in data.items():
        if not isinstance(classes, Mapping):
            raise ConfigError("expected an object of selectors", key=plugin_id)
        plugin_rules: list[RawRule] = []
        for selector, properties in classes.items():
            key = f"{plugin_id}.{selector}"
            if not isinstance(properties, Mapping):
                raise ConfigError("expected an object of declarations", key=key)
            if any(isinstance(v, Mapping) for v in properties.values()):
                raise ConfigError("nested declaration blocks are not supported", key=key)
            plugin_rules.append(RawRule.of(selector, properties))
        rules[plugin_id] = tuple(plugin_rules)
    return rules
