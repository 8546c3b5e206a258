"""CLI command: cascade validate -- check a variant config."""

from __future__ import annotations

import sys

import click

from cascade.cli._common import read_config
from cascade.model.diagnostic import Severity
from cascade.validation import validate as run_validate


@click.command()
@click.argument("config", type=click.Path(exists=True, dir_okay=False))
def validate(config: str) -> None:
    """Validate a variant config file.

    Prints diagnostics (errors, warnings, info) and exits with code 0 if
    no errors are found, or code 1 if there are errors.
    """
    engine_config = read_config(config)
    diagnostics = run_validate(engine_config)

    if not diagnostics:
        click.echo(f"OK: {click.format_filename(config, shorten=True)} is valid (0 diagnostics)")
        sys.exit(0)

    errors = [d for d in diagnostics if d.severity is Severity.ERROR]
    warnings = [d for d in diagnostics if d.severity is Severity.WARNING]
    infos = [d for d in diagnostics if d.severity is Severity.INFO]

    for diag in diagnostics:
        click.echo(str(diag))

    click.echo()
    click.echo(
        f"Summary: {len(errors)} error(s), {len(warnings)} warning(s), {len(infos)} info"
    )

    if errors:
        sys.exit(1)
    sys.exit(0)
