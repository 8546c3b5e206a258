"""CLI command: cascade inspect -- show the class reference table."""

from __future__ import annotations

from pathlib import Path

import click

from cascade.cli._common import fail, read_config
from cascade.config import load_rules
from cascade.emit import class_table, format_class_table, rules_to_classes
from cascade.engine import generate
from cascade.errors import CascadeError


@click.command()
@click.argument("config", type=click.Path(exists=True, dir_okay=False))
@click.argument("rules", type=click.Path(exists=True, dir_okay=False))
@click.option("--plugin", "-p", "plugins", multiple=True, help="Only show these plugins.")
def inspect(config: str, rules: str, plugins: tuple[str, ...]) -> None:
    """Show every generated class of RULES with its declarations."""
    engine_config = read_config(config)
    try:
        raw_rules = load_rules(Path(rules))
        if plugins:
            raw_rules = {p: r for p, r in raw_rules.items() if p in plugins}
        generated = list(generate(engine_config, raw_rules))
    except CascadeError as exc:
        fail(exc)

    click.echo(f"Plugins: {len(raw_rules)}")
    click.echo(f"Rules:   {len(generated)}")
    click.echo()
    click.echo(format_class_table(class_table(rules_to_classes(generated))))
