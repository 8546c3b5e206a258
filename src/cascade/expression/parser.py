"""Lark parser for resolver expressions written as text in config files.

An expression is a nested helper call evaluated against a plugin's
:class:`~cascade.resolver.algebra.VariantAlgebra`::

    after(["active"])
    without(["focus"], before(["active"], "hover", variants("textColor")))
"""

from __future__ import annotations

import re
from dataclasses import dataclass
from functools import lru_cache
from pathlib import Path
from typing import Union

from lark import Lark, Token, Transformer
from lark.exceptions import LarkError, VisitError

from cascade.errors import ExpressionError, ParseError
from cascade.model.variant import VariantList
from cascade.resolver.algebra import VariantAlgebra

GRAMMAR_PATH = Path(__file__).parent / "grammar.lark"

_ESCAPE_RE = re.compile(r"\\(.)", re.DOTALL)


@dataclass(frozen=True)
class Call:
    """A helper call: ``name(args...)``."""

    name: str
    args: tuple["Node", ...]
    line: int | None = None
    column: int | None = None


Node = Union[Call, VariantList, str, None]

# Helper name -> accepted argument kinds, one tuple per position.
# "names" is a list, a bare string or a nested call; "anchor" is a string
# or null; "base" is a list, a nested call or null.
_SIGNATURES: dict[str, tuple[str, ...]] = {
    "before": ("names", "anchor", "base"),
    "after": ("names", "anchor", "base"),
    "without": ("names", "base"),
    "variants": ("plugin",),
}

_REQUIRED = {"before": 1, "after": 1, "without": 1, "variants": 1}


def _accepts(kind: str, value: Node) -> bool:
    if kind == "names":
        return isinstance(value, (tuple, str, Call))
    if kind == "anchor":
        return value is None or isinstance(value, str)
    if kind == "base":
        return value is None or isinstance(value, (tuple, Call))
    return isinstance(value, str)


def _check_call(call: Call) -> None:
    signature = _SIGNATURES.get(call.name)
    if signature is None:
        known = ", ".join(sorted(_SIGNATURES))
        raise ExpressionError(
            f"Unknown helper '{call.name}' (expected one of: {known})",
            line=call.line,
            column=call.column,
        )
    if not _REQUIRED[call.name] <= len(call.args) <= len(signature):
        raise ExpressionError(
            f"'{call.name}' takes {_REQUIRED[call.name]} to {len(signature)} "
            f"argument(s), got {len(call.args)}",
            line=call.line,
            column=call.column,
        )
    for position, (kind, value) in enumerate(zip(signature, call.args), start=1):
        if not _accepts(kind, value):
            raise ExpressionError(
                f"Argument {position} of '{call.name}' must be a {kind}",
                line=call.line,
                column=call.column,
            )


class ExpressionTransformer(Transformer):  # type: ignore[type-arg]
    """Transform a Lark parse tree into :class:`Call` nodes and tuples."""

    def string(self, items: list[Token]) -> str:
        return _ESCAPE_RE.sub(r"\1", str(items[0])[1:-1])

    def null(self, items: list[Token]) -> None:
        return None

    def list(self, items: list[str]) -> VariantList:
        return tuple(items)

    def call(self, items: list[object]) -> Call:
        name = items[0]
        call = Call(
            name=str(name),
            args=tuple(items[1:]),  # type: ignore[arg-type]
            line=getattr(name, "line", None),
            column=getattr(name, "column", None),
        )
        _check_call(call)
        return call


@lru_cache(maxsize=1)
def _parser() -> Lark:
    return Lark(GRAMMAR_PATH.read_text(), parser="lalr", start="start")


def _evaluate(node: Node, algebra: VariantAlgebra) -> Node:
    if isinstance(node, Call):
        args = [_evaluate(arg, algebra) for arg in node.args]
        return getattr(algebra, node.name)(*args)
    return node


def _collect_references(node: Node, found: list[str]) -> None:
    if not isinstance(node, Call):
        return
    if node.name == "variants":
        plugin_id = str(node.args[0])
        if plugin_id not in found:
            found.append(plugin_id)
        return
    for arg in node.args:
        _collect_references(arg, found)


@dataclass(frozen=True)
class Expression:
    """A parsed resolver expression, callable as a resolver function."""

    source: str
    root: Node

    def __call__(self, algebra: VariantAlgebra) -> VariantList:
        result = _evaluate(self.root, algebra)
        if isinstance(result, str):
            return (result,)
        return tuple(result or ())

    def references(self) -> tuple[str, ...]:
        """Plugin ids this expression reads through ``variants()``."""
        found: list[str] = []
        _collect_references(self.root, found)
        return tuple(found)

    def __str__(self) -> str:
        return self.source


def parse_expression(source: str) -> Expression:
    """Parse *source* into an :class:`Expression`.

    Raises:
        ExpressionError: the expression calls a helper incorrectly.
        ParseError: the source is not a valid expression.
    """
    try:
        tree = _parser().parse(source)
        root = ExpressionTransformer().transform(tree)
    except VisitError as e:
        if isinstance(e.orig_exc, ParseError):
            raise e.orig_exc from None
        raise ParseError(str(e.orig_exc)) from e
    except LarkError as e:
        line = getattr(e, "line", None)
        column = getattr(e, "column", None)
        raise ParseError(str(e), line=line, column=column) from e
    if isinstance(root, str) or root is None:
        raise ExpressionError("An expression must be a list or a helper call")
    return Expression(source=source, root=root)
