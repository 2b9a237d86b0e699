"""Command-line interface for polyscan."""

from polyscan.cli.main import cli, main

__all__ = ["cli", "main"]
