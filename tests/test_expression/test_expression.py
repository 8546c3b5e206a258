"""Tests for resolver expression parsing and evaluation."""

import pytest

from cascade.errors import ExpressionError, ParseError
from cascade.expression import Call, parse_expression
from cascade.resolver import VariantAlgebra

BASE = ("responsive", "hover", "focus")


def evaluate(source, base=BASE, lookup=None):
    algebra = VariantAlgebra(base=base, lookup=lookup or (lambda plugin_id: ()))
    return parse_expression(source)(algebra)


# ---------------------------------------------------------------------------
# Parsing
# ---------------------------------------------------------------------------


class TestParsing:
    def test_literal_list(self):
        expr = parse_expression('["hover", "focus"]')
        assert expr.root == ("hover", "focus")

    def test_empty_list(self):
        assert parse_expression("[]").root == ()

    def test_single_call(self):
        expr = parse_expression('after(["active"])')
        assert isinstance(expr.root, Call)
        assert expr.root.name == "after"
        assert expr.root.args == (("active",),)

    def test_null_anchor(self):
        expr = parse_expression('after(["active"], null, ["hover"])')
        assert expr.root.args == (("active",), None, ("hover",))

    def test_single_quotes(self):
        assert parse_expression("['hover']").root == ("hover",)

    def test_escaped_quote(self):
        assert parse_expression(r'["a\\\"b"]').root == ('a\\"b',)

    def test_escape_of_other_quote(self):
        assert parse_expression(r'["it\'s"]').root == ("it's",)

    def test_escaped_backslash(self):
        assert parse_expression(r'["a\\b"]').root == ("a\\b",)

    def test_whitespace_ignored(self):
        expr = parse_expression('  before( [ "a" ] ,\n "hover" )  ')
        assert expr.root.args == (("a",), "hover")

    def test_position_recorded(self):
        expr = parse_expression('after(["active"])')
        assert expr.root.line == 1
        assert expr.root.column == 1

    def test_str_is_source(self):
        source = 'after(["active"])'
        assert str(parse_expression(source)) == source


class TestParseErrors:
    def test_syntax_error_has_position(self):
        with pytest.raises(ParseError) as exc_info:
            parse_expression('after(["active"]')
        assert exc_info.value.line is not None

    def test_bare_string_rejected(self):
        with pytest.raises(ParseError):
            parse_expression('"hover"')

    def test_unknown_helper(self):
        with pytest.raises(ExpressionError, match="Unknown helper 'around'"):
            parse_expression('around(["active"])')

    def test_no_arguments(self):
        with pytest.raises(ExpressionError, match="'after' takes"):
            parse_expression("after()")

    def test_too_many_arguments(self):
        with pytest.raises(ExpressionError):
            parse_expression('without(["a"], ["b"], ["c"])')

    def test_wrong_argument_kind(self):
        with pytest.raises(ExpressionError, match="Argument 2 of 'before'"):
            parse_expression('before(["a"], ["b"])')

    def test_variants_needs_plugin_name(self):
        with pytest.raises(ExpressionError):
            parse_expression('variants(["textColor"])')

    def test_expression_error_is_parse_error(self):
        assert issubclass(ExpressionError, ParseError)


# ---------------------------------------------------------------------------
# Evaluation
# ---------------------------------------------------------------------------


class TestEvaluation:
    def test_after(self):
        assert evaluate('after(["active"])') == ("responsive", "hover", "focus", "active")

    def test_before_anchor(self):
        assert evaluate('before(["active"], "focus")') == ("responsive", "hover", "active", "focus")

    def test_literal_ignores_base(self):
        assert evaluate('["hover"]') == ("hover",)

    def test_nested(self):
        source = (
            'without(["focus"], before(["active"], "hover", '
            'after(["focus-within"], "responsive")))'
        )
        assert evaluate(source) == ("responsive", "focus-within", "active", "hover")

    def test_variants_lookup(self):
        lookup = {"textColor": ("responsive", "hover")}.get
        result = evaluate('after(["visited"], null, variants("textColor"))', lookup=lookup)
        assert result == ("responsive", "hover", "visited")

    def test_bare_string_names(self):
        assert evaluate('without("hover")') == ("responsive", "focus")

    def test_references(self):
        expr = parse_expression('without(["focus"], variants("textColor"))')
        assert expr.references() == ("textColor",)

    def test_references_deduplicated(self):
        expr = parse_expression('before(variants("a"), null, variants("a"))')
        assert expr.references() == ("a",)

    def test_no_references(self):
        assert parse_expression('["hover"]').references() == ()
