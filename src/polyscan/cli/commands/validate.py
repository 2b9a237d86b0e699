"""Installation validation command."""

from __future__ import annotations

import sys

import click

from polyscan import __version__
from polyscan.cli.exit_codes import EXIT_ERROR


@click.command()
@click.option("--full", is_flag=True, help="Also run a scan self-test on a built-in sequence")
def validate(full: bool) -> None:
    """Validate polyscan installation and dependencies."""
    from polyscan.utils.validators import validate_installation

    click.echo("Validating polyscan installation...")
    issues = validate_installation(full_check=full)

    if not issues:
        click.echo("✓ All checks passed!")
        click.echo(f"  polyscan version: {__version__}")
    else:
        click.echo("✗ Issues found:")
        for issue in issues:
            click.echo(f"  - {issue}")
        sys.exit(EXIT_ERROR)
