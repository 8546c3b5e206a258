"""CSS text emitter for generated rule streams."""

from __future__ import annotations

from collections.abc import Iterable
from itertools import groupby

from cascade.model.rule import GeneratedRule


def render_rule(rule: GeneratedRule, indent: str = "", step: str = "  ") -> str:
    lines = [f"{indent}{rule.selector} {{"]
    lines.extend(f"{indent}{step}{prop}: {value};" for prop, value in rule.declarations)
    lines.append(f"{indent}}}")
    return "\n".join(lines)


def render_css(rules: Iterable[GeneratedRule], indent: str = "  ") -> str:
    """Render *rules* as CSS text, keeping their order exactly.

    Consecutive rules wrapped in the same breakpoint share one ``@media``
    block.
    """
    blocks: list[str] = []
    for breakpoint, group in groupby(rules, key=lambda r: r.breakpoint):
        if breakpoint is None:
            blocks.extend(render_rule(rule, step=indent) for rule in group)
            continue
        inner = "\n".join(render_rule(rule, indent=indent, step=indent) for rule in group)
        blocks.append(f"@media {breakpoint.condition} {{\n{inner}\n}}")
    return "\n".join(blocks) + ("\n" if blocks else "")
