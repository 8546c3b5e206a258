"""Shared helpers for CLI commands."""

from __future__ import annotations

import sys
from pathlib import Path
from typing import NoReturn

import click

from cascade.config import EngineConfig, load_config
from cascade.errors import CascadeError


def fail(exc: CascadeError) -> NoReturn:
    """Report *exc* on stderr and exit with status 1."""
    click.echo(f"Error: {exc}", err=True)
    sys.exit(1)


def read_config(path: str) -> EngineConfig:
    try:
        return load_config(Path(path))
    except CascadeError as exc:
        fail(exc)
