"""Tests for the default variant table."""

import pytest

from cascade.defaults import DEFAULT_TABLE, DEFAULT_VARIANTS, DefaultTable
from cascade.errors import DuplicateVariantError


class TestLookup:
    def test_known_plugin(self):
        assert DEFAULT_TABLE.lookup("backgroundColor") == ("responsive", "hover", "focus")

    def test_unknown_plugin_is_empty(self):
        assert DEFAULT_TABLE.lookup("doesNotExist") == ()

    def test_contains(self):
        assert "opacity" in DEFAULT_TABLE
        assert "doesNotExist" not in DEFAULT_TABLE

    def test_every_default_has_responsive(self):
        for plugin_id in DEFAULT_TABLE:
            assert "responsive" in DEFAULT_TABLE.lookup(plugin_id)


class TestDeclarationOrder:
    def test_plugins_follow_declaration_order(self):
        assert DEFAULT_TABLE.plugins() == tuple(DEFAULT_VARIANTS)

    def test_len(self):
        assert len(DEFAULT_TABLE) == len(DEFAULT_VARIANTS)


class TestImmutability:
    def test_cannot_set_attributes(self):
        with pytest.raises(AttributeError):
            DEFAULT_TABLE.extra = 1  # type: ignore[attr-defined]

    def test_mapping_is_read_only(self):
        with pytest.raises(TypeError):
            DEFAULT_TABLE.as_mapping()["opacity"] = ()  # type: ignore[index]

    def test_source_lists_are_copied(self):
        source = {"p": ["hover"]}
        table = DefaultTable(source)
        source["p"].append("focus")
        assert table.lookup("p") == ("hover",)


class TestConstruction:
    def test_empty_table(self):
        assert len(DefaultTable()) == 0

    def test_duplicate_default_rejected(self):
        with pytest.raises(DuplicateVariantError):
            DefaultTable({"p": ["hover", "hover"]})
