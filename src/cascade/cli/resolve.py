"""CLI command: cascade resolve -- print the resolved variant order."""

from __future__ import annotations

import sys

import click

from cascade.cli._common import fail, read_config
from cascade.engine import resolve_config
from cascade.errors import CascadeError


@click.command()
@click.argument("config", type=click.Path(exists=True, dir_okay=False))
@click.option("--plugin", "-p", "plugins", multiple=True, help="Only show these plugins.")
def resolve(config: str, plugins: tuple[str, ...]) -> None:
    """Resolve a config file and print each plugin's variant order."""
    engine_config = read_config(config)
    try:
        resolved = resolve_config(engine_config)
    except CascadeError as exc:
        fail(exc)

    selected = plugins or tuple(resolved)
    width = max((len(p) for p in selected), default=0)
    for plugin_id in selected:
        if plugin_id not in resolved:
            click.echo(f"Error: unknown plugin '{plugin_id}'", err=True)
            sys.exit(1)
        variants = ", ".join(resolved[plugin_id]) or "(none)"
        line = f"{plugin_id.ljust(width)}  {variants}"
        deps = resolved.dependencies.get(plugin_id)
        if deps:
            line += f"  [uses {', '.join(deps)}]"
        click.echo(line)
