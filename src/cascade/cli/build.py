"""CLI command: cascade build -- generate CSS for a set of raw rules."""

from __future__ import annotations

from pathlib import Path

import click

from cascade.cli._common import fail, read_config
from cascade.config import load_rules
from cascade.emit import render_css
from cascade.engine import generate
from cascade.errors import CascadeError


@click.command()
@click.argument("config", type=click.Path(exists=True, dir_okay=False))
@click.argument("rules", type=click.Path(exists=True, dir_okay=False))
@click.option(
    "--output", "-o", type=click.Path(dir_okay=False), default=None,
    help="Write CSS to this file instead of stdout.",
)
def build(config: str, rules: str, output: str | None) -> None:
    """Resolve CONFIG and emit CSS for the raw rules in RULES."""
    engine_config = read_config(config)
    try:
        raw_rules = load_rules(Path(rules))
        css = render_css(generate(engine_config, raw_rules))
    except CascadeError as exc:
        fail(exc)

    if output is None:
        click.echo(css, nl=False)
        return
    Path(output).write_text(css, encoding="utf-8")
    click.echo(f"Wrote {output}")
