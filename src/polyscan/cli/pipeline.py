"""Shared scan execution helpers for the CLI."""

from __future__ import annotations

import logging
import sys
from dataclasses import dataclass
from pathlib import Path
from typing import Optional

import click

from polyscan.cli.exit_codes import EXIT_ERROR
from polyscan.config import Config, load_config
from polyscan.exceptions import ConfigurationError
from polyscan.utils.logging import level_from_name, level_from_verbosity, setup_logging


@dataclass
class ScanOptions:
    """Container for scan options collected from the command line."""

    input_file: Optional[Path]
    window_size: Optional[int]  # None means use config or default
    percentage: Optional[float]
    nucleotide: Optional[str]
    output: Optional[Path]
    summary_file: Optional[Path]
    config_path: Optional[Path]
    dry_run: bool = False
    log_file: Optional[Path] = None
    # -v count from CLI (0 means config decides the log level)
    noise: int = 0


def resolve_config(opts: ScanOptions) -> Config:
    """Merge defaults, config file and CLI options into one Config.

    Priority: defaults < config file < CLI arguments.
    """
    cfg = load_config(opts.config_path) if opts.config_path else Config()

    if opts.input_file is not None:
        cfg.input_file = opts.input_file
    if opts.output is not None:
        cfg.output_file = opts.output
    if opts.summary_file is not None:
        cfg.summary_file = opts.summary_file
    if opts.window_size is not None:
        cfg.scan.window_size = opts.window_size
    if opts.percentage is not None:
        cfg.scan.percentage = opts.percentage
    if opts.nucleotide is not None:
        cfg.scan.nucleotide = opts.nucleotide
    if opts.log_file is not None:
        cfg.runtime.log_file = opts.log_file
    return cfg


def execute_scan(
    opts: ScanOptions,
    logger: logging.Logger,
    ctx: Optional[click.Context] = None,
) -> None:
    """
    Resolve configuration, validate it and run the scan.

    Configuration errors are reported as ``Error: <message>`` on stderr and
    exit with EXIT_ERROR before any sequence data is read.

    Args:
        opts: Scan options from the command line
        logger: Logger instance for output
        ctx: Optional Click context for displaying help on error
    """
    try:
        cfg = resolve_config(opts)
    except ConfigurationError as exc:
        click.echo(f"Error: {exc}", err=True)
        sys.exit(EXIT_ERROR)

    # CLI -v takes precedence over runtime.log_level; --log-file already
    # overrode runtime.log_file in resolve_config
    if opts.noise > 0:
        level = level_from_verbosity(opts.noise)
    else:
        level = level_from_name(cfg.runtime.log_level)
    setup_logging(level=level, log_file=cfg.runtime.log_file)

    if not cfg.input_file:
        click.echo("Error: --fasta is required to run a scan", err=True)
        click.echo("It can be provided as a CLI argument or in a config file (-c)", err=True)
        if ctx is None:
            ctx = click.get_current_context(silent=True)
        if ctx is not None:
            click.echo(ctx.get_help(), err=True)
        sys.exit(EXIT_ERROR)

    try:
        cfg.validate()
    except ConfigurationError as exc:
        click.echo(f"Error: {exc}", err=True)
        sys.exit(EXIT_ERROR)

    # Import pipeline here to keep CLI startup light
    from polyscan.core.pipeline import Pipeline

    pipeline = Pipeline(cfg)

    if opts.dry_run:
        logger.info("Dry run mode - showing what would be executed:")
        click.echo(f"Would scan: {cfg.input_file}", err=True)
        click.echo(f"Parameters: {pipeline.params.describe()}", err=True)
        output = cfg.output_file if cfg.output_file is not None else "stdout"
        click.echo(f"BED output: {output}", err=True)
        if cfg.summary_file:
            click.echo(f"Summary: {cfg.summary_file}", err=True)
        return

    pipeline.run()
