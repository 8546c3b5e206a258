"""Cascade CLI entry point: Click group with subcommands."""

import logging

import click

from cascade import __version__


@click.group()
@click.version_option(version=__version__, prog_name="cascade")
@click.option("-v", "--verbose", is_flag=True, help="Log resolution and emission details.")
def cli(verbose: bool) -> None:
    """Cascade - variant order resolution and rule emission for utility CSS."""
    if verbose:
        logging.basicConfig(level=logging.DEBUG, format="%(levelname)s %(name)s: %(message)s")


# Import and register subcommands
from cascade.cli.resolve import resolve  # noqa: E402
from cascade.cli.validate import validate  # noqa: E402
from cascade.cli.build import build  # noqa: E402
from cascade.cli.inspect import inspect  # noqa: E402

cli.add_command(resolve)
cli.add_command(validate)
cli.add_command(build)
cli.add_command(inspect)
