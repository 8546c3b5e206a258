"""Tests for the variant order resolver."""

import pytest

from cascade.defaults import DEFAULT_TABLE, DefaultTable
from cascade.errors import (
    ConfigError,
    CyclicVariantReferenceError,
    DuplicateVariantError,
    UnknownPluginError,
)
from cascade.resolver import ResolvedOrder, UnknownPluginPolicy, resolve, split_config


@pytest.fixture()
def table() -> DefaultTable:
    return DefaultTable(
        {
            "backgroundColor": ["responsive", "hover", "focus"],
            "textColor": ["responsive", "hover"],
            "opacity": ["responsive"],
        }
    )


# ---------------------------------------------------------------------------
# Identity and literal overrides
# ---------------------------------------------------------------------------


class TestIdentity:
    def test_no_config_returns_defaults(self, table):
        resolved = resolve(None, table)
        for plugin_id in table:
            assert resolved[plugin_id] == table.lookup(plugin_id)

    def test_absent_plugins_keep_defaults(self, table):
        resolved = resolve({"opacity": ["hover"]}, table)
        assert resolved["backgroundColor"] == ("responsive", "hover", "focus")
        assert resolved["textColor"] == ("responsive", "hover")

    def test_builtin_table_is_default(self):
        resolved = resolve({})
        assert resolved["backgroundColor"] == DEFAULT_TABLE.lookup("backgroundColor")
        assert len(resolved) == len(DEFAULT_TABLE)


class TestLiteralOverrides:
    def test_list_replaces_default(self, table):
        resolved = resolve({"backgroundColor": ["focus", "hover"]}, table)
        assert resolved["backgroundColor"] == ("focus", "hover")

    def test_global_list_applies_everywhere(self, table):
        resolved = resolve(["hover", "default"], table)
        assert dict(resolved) == {
            "backgroundColor": ("hover", "default"),
            "textColor": ("hover", "default"),
            "opacity": ("hover", "default"),
        }

    def test_config_only_plugins_follow_table_plugins(self, table):
        resolved = resolve({"custom": ["hover"], "opacity": ["focus"]}, table)
        assert list(resolved) == ["backgroundColor", "textColor", "opacity", "custom"]
        assert resolved["custom"] == ("hover",)

    def test_extra_plugins_get_global_list(self, table):
        resolved = resolve(["hover"], table, extra_plugins=["custom", "opacity"])
        assert list(resolved) == ["backgroundColor", "textColor", "opacity", "custom"]
        assert resolved["custom"] == ("hover",)

    def test_extra_plugins_default_to_empty(self, table):
        resolved = resolve({"opacity": ["focus"]}, table, extra_plugins=["custom"])
        assert resolved["custom"] == ()

    def test_resolved_order_is_a_mapping(self, table):
        resolved = resolve(None, table)
        assert isinstance(resolved, ResolvedOrder)
        assert resolved == {
            "backgroundColor": ("responsive", "hover", "focus"),
            "textColor": ("responsive", "hover"),
            "opacity": ("responsive",),
        }


# ---------------------------------------------------------------------------
# Resolver functions
# ---------------------------------------------------------------------------


class TestResolverFunctions:
    def test_after_appends(self, table):
        resolved = resolve({"backgroundColor": lambda v: v.after(["active"])}, table)
        assert resolved["backgroundColor"] == ("responsive", "hover", "focus", "active")

    def test_composed_helpers(self, table):
        resolved = resolve(
            {
                "backgroundColor": lambda v: v.without(
                    ["focus"],
                    v.before(["active"], "hover", v.after(["focus-within"], "responsive")),
                )
            },
            table,
        )
        assert resolved["backgroundColor"] == ("responsive", "focus-within", "active", "hover")

    def test_function_may_return_list(self, table):
        resolved = resolve({"opacity": lambda v: ["hover", *v.base]}, table)
        assert resolved["opacity"] == ("hover", "responsive")

    def test_function_returning_none_rejected(self, table):
        with pytest.raises(ConfigError, match="variants.opacity"):
            resolve({"opacity": lambda v: None}, table)


# ---------------------------------------------------------------------------
# Cross-plugin references
# ---------------------------------------------------------------------------


class TestVariantsReferences:
    def test_reads_defaults_of_other_plugin(self, table):
        resolved = resolve({"opacity": lambda v: v.variants("backgroundColor")}, table)
        assert resolved["opacity"] == ("responsive", "hover", "focus")

    def test_reads_resolved_list_of_other_plugin(self, table):
        resolved = resolve(
            {
                "opacity": lambda v: v.after(["visited"], None, v.variants("textColor")),
                "textColor": lambda v: v.after(["active"]),
            },
            table,
        )
        assert resolved["textColor"] == ("responsive", "hover", "active")
        assert resolved["opacity"] == ("responsive", "hover", "active", "visited")

    def test_dependencies_recorded(self, table):
        resolved = resolve({"opacity": lambda v: v.variants("textColor")}, table)
        assert resolved.dependencies == {"opacity": ("textColor",)}

    def test_dependency_resolved_first(self, table):
        resolved = resolve({"backgroundColor": lambda v: v.variants("opacity")}, table)
        order = resolved.resolution_order
        assert order.index("opacity") < order.index("backgroundColor")

    def test_mutual_reference_is_cycle(self, table):
        config = {
            "textColor": lambda v: v.variants("opacity"),
            "opacity": lambda v: v.variants("textColor"),
        }
        with pytest.raises(CyclicVariantReferenceError) as exc_info:
            resolve(config, table)
        assert exc_info.value.cycle == ("textColor", "opacity", "textColor")

    def test_self_reference_is_cycle(self, table):
        with pytest.raises(CyclicVariantReferenceError) as exc_info:
            resolve({"opacity": lambda v: v.variants("opacity")}, table)
        assert exc_info.value.cycle == ("opacity", "opacity")

    def test_transitive_cycle(self, table):
        config = {
            "backgroundColor": lambda v: v.variants("textColor"),
            "textColor": lambda v: v.variants("opacity"),
            "opacity": lambda v: v.variants("backgroundColor"),
        }
        with pytest.raises(CyclicVariantReferenceError) as exc_info:
            resolve(config, table)
        assert exc_info.value.cycle[0] == exc_info.value.cycle[-1]
        assert len(exc_info.value.cycle) == 4

    def test_unknown_plugin_is_empty_by_default(self, table):
        resolved = resolve({"opacity": lambda v: v.after(["hover"], None, v.variants("nope"))}, table)
        assert resolved["opacity"] == ("hover",)

    def test_unknown_plugin_error_policy(self, table):
        with pytest.raises(UnknownPluginError) as exc_info:
            resolve(
                {"opacity": lambda v: v.variants("nope")},
                table,
                unknown_plugin=UnknownPluginPolicy.ERROR,
            )
        assert exc_info.value.plugin_id == "nope"

    def test_extra_plugin_is_not_unknown(self, table):
        resolved = resolve(
            {"opacity": lambda v: v.variants("custom")},
            table,
            unknown_plugin=UnknownPluginPolicy.ERROR,
            extra_plugins=["custom"],
        )
        assert resolved["opacity"] == ()

    def test_returned_list_is_read_only(self, table):
        def grab(v):
            borrowed = v.variants("backgroundColor")
            assert isinstance(borrowed, tuple)
            return borrowed

        resolved = resolve({"opacity": grab}, table)
        assert resolved["backgroundColor"] == ("responsive", "hover", "focus")


# ---------------------------------------------------------------------------
# Failure modes
# ---------------------------------------------------------------------------


class TestDuplicates:
    def test_literal_duplicate(self, table):
        with pytest.raises(DuplicateVariantError) as exc_info:
            resolve({"opacity": ["x", "x"]}, table)
        assert exc_info.value.plugin_id == "opacity"
        assert exc_info.value.variant == "x"

    def test_function_duplicate(self, table):
        with pytest.raises(DuplicateVariantError):
            resolve({"backgroundColor": lambda v: v.after(["hover"])}, table)

    def test_global_duplicate(self, table):
        with pytest.raises(DuplicateVariantError):
            resolve(["hover", "hover"], table)


class TestConfigShape:
    def test_string_config_rejected(self, table):
        with pytest.raises(ConfigError):
            resolve("hover", table)  # type: ignore[arg-type]

    def test_bad_entry_rejected(self, table):
        with pytest.raises(ConfigError, match="variants.opacity"):
            resolve({"opacity": 3}, table)  # type: ignore[dict-item]

    def test_split_global(self):
        assert split_config(["hover"]) == (("hover",), {})

    def test_split_mapping(self):
        config = {"opacity": ["hover"]}
        assert split_config(config) == (None, config)

    def test_split_none(self):
        assert split_config(None) == (None, {})
