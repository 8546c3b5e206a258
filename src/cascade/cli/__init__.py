from cascade.cli.main import cli

__all__ = ["cli"]
