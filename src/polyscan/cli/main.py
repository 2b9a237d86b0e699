"""Click application entrypoint for polyscan."""

from __future__ import annotations

import signal
import sys
from pathlib import Path
from types import FrameType
from typing import Optional

import click

from polyscan import __version__
from polyscan.cli.exit_codes import (
    EXIT_SUCCESS,
    EXIT_ERROR,
    EXIT_SIGINT,
    EXIT_SIGTERM,
)
from polyscan.exceptions import PolyScanError
from polyscan.utils.logging import get_logger, level_from_verbosity, setup_logging

from .commands.config import init_config
from .commands.validate import validate
from .common_options import log_file_option, scan_options, verbose_option
from .pipeline import ScanOptions, execute_scan


class _Terminated(KeyboardInterrupt):
    """Raised from the SIGTERM handler."""


def _handle_signal(signum: int, frame: Optional[FrameType]) -> None:
    """Handle interrupt signals for graceful shutdown."""
    if signum == signal.SIGTERM:
        raise _Terminated("SIGTERM received")
    raise KeyboardInterrupt("SIGINT received")


def _print_version(ctx: click.Context, _param: click.Parameter, value: bool) -> None:
    if value and not ctx.resilient_parsing:
        click.echo(f"polyscan {__version__}")
        ctx.exit()


@click.group(
    context_settings=dict(help_option_names=["-h", "--help"]),
    invoke_without_command=True,
)
# Version option (use -V to avoid conflict with -v/--verbose)
@click.option(
    "-V",
    "--version",
    is_flag=True,
    is_eager=True,
    expose_value=False,
    callback=_print_version,
    help="Show the version and exit.",
)
@scan_options
@verbose_option
@log_file_option
@click.option("--dry-run", is_flag=True, help="Show resolved parameters without scanning")
@click.pass_context
def cli(
    ctx: click.Context,
    input_file: Optional[Path],
    window_size: Optional[int],
    percentage: Optional[float],
    nucleotide: Optional[str],
    output: Optional[Path],
    summary_file: Optional[Path],
    config: Optional[Path],
    verbose: int,
    log_file: Optional[Path],
    dry_run: bool,
) -> None:
    """polyscan: find windows in DNA sequences that have >= threshold% of a nucleotide.

    Matches on the nucleotide are written with strand "+", matches on its
    complement with strand "-"; both use the chosen nucleotide as the BED
    name. Output is 6-column BED.

    Run directly as: polyscan -f <seqs.fa[.gz]> [-w 10] [-p 80] [-n A]
    """
    # If a subcommand was invoked, do not run the scan here
    if ctx.invoked_subcommand:
        return

    setup_logging(level=level_from_verbosity(verbose), log_file=log_file)
    logger = get_logger("cli")

    try:
        opts = ScanOptions(
            input_file=input_file,
            window_size=window_size,
            percentage=percentage,
            nucleotide=nucleotide,
            output=output,
            summary_file=summary_file,
            config_path=config,
            dry_run=dry_run,
            log_file=log_file,
            noise=verbose,
        )
        execute_scan(opts, logger, ctx)

    except _Terminated:
        logger.info("Scan terminated")
        sys.exit(EXIT_SIGTERM)
    except KeyboardInterrupt:
        logger.info("Scan interrupted by user")
        sys.exit(EXIT_SIGINT)
    except PolyScanError as exc:
        logger.error(f"Scan error: {exc}")
        sys.exit(EXIT_ERROR)
    except Exception as exc:
        logger.exception(f"Unexpected error: {exc}")
        sys.exit(EXIT_ERROR)


cli.add_command(init_config)
cli.add_command(validate)


def main(argv: list[str] | None = None) -> int:
    """Main entry point with signal handling."""
    signal.signal(signal.SIGINT, _handle_signal)
    signal.signal(signal.SIGTERM, _handle_signal)

    try:
        cli(argv, standalone_mode=True)
        return EXIT_SUCCESS
    except _Terminated:
        return EXIT_SIGTERM
    except KeyboardInterrupt:
        return EXIT_SIGINT
    except SystemExit as exc:
        # Preserve explicit exit codes from cli()
        if exc.code is None:
            return EXIT_SUCCESS
        return exc.code if isinstance(exc.code, int) else EXIT_ERROR
    except Exception as exc:
        click.echo(f"Error: {exc}", err=True)
        return EXIT_ERROR


if __name__ == "__main__":
    sys.exit(main())
