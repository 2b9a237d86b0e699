"""Shared Click options for polyscan CLI commands."""

from __future__ import annotations

from pathlib import Path
from typing import Callable, TypeVar

import click

from polyscan.constants import DEFAULT_NUCLEOTIDE, DEFAULT_PERCENTAGE, DEFAULT_WINDOW_SIZE

F = TypeVar("F", bound=Callable[..., None])


def fasta_option(func: F) -> F:
    """Input FASTA file option."""
    return click.option(
        "-f",
        "--fasta",
        "input_file",
        type=click.Path(path_type=Path),
        required=False,
        help="Input FASTA file (plain, gzip, bzip2 or xz)",
    )(func)


def window_size_option(func: F) -> F:
    """Sliding window length option."""
    return click.option(
        "-w",
        "--window-size",
        type=int,
        default=None,
        help=f"Length of the sliding window [default: {DEFAULT_WINDOW_SIZE}]",
    )(func)


def percentage_option(func: F) -> F:
    """Percentage threshold option."""
    return click.option(
        "-p",
        "--percentage",
        type=float,
        default=None,
        help=(
            "Percentage of target nucleotide required in the window, 50.0-100.0 "
            f"[default: {DEFAULT_PERCENTAGE}]"
        ),
    )(func)


def nucleotide_option(func: F) -> F:
    """Target nucleotide option."""
    return click.option(
        "-n",
        "--nucleotide",
        default=None,
        help=(
            "Nucleotide base to search for (A, C, G, T or N); its complement is "
            f"reported on the '-' strand [default: {DEFAULT_NUCLEOTIDE}]"
        ),
    )(func)


def output_option(func: F) -> F:
    """BED output option."""
    return click.option(
        "-o",
        "--output",
        type=click.Path(path_type=Path),
        default=None,
        help="Output BED file [default: stdout]",
    )(func)


def summary_option(func: F) -> F:
    """Per-record summary table option."""
    return click.option(
        "--summary",
        "summary_file",
        type=click.Path(path_type=Path),
        default=None,
        help="Write a per-record summary table (TSV)",
    )(func)


def config_option(func: F) -> F:
    """Configuration file option."""
    return click.option(
        "-c",
        "--config",
        type=click.Path(exists=True, path_type=Path),
        help="Configuration file (YAML)",
    )(func)


def verbose_option(func: F) -> F:
    """Verbosity option (unified: use -v/--verbose everywhere)."""
    return click.option(
        "-v",
        "--verbose",
        count=True,
        help="Increase log verbosity (-v for INFO, -vv for DEBUG)",
    )(func)


def log_file_option(func: F) -> F:
    """Log file option."""
    return click.option(
        "--log-file",
        type=click.Path(path_type=Path),
        help="Path for log file output",
    )(func)


def scan_options(func: F) -> F:
    """Apply all scan options to a command.

    Usage:
        @click.command()
        @scan_options
        def my_command(input_file, window_size, percentage, ...):
            pass
    """
    # Apply options in reverse order (Click applies them bottom-up)
    decorators = [
        fasta_option,
        window_size_option,
        percentage_option,
        nucleotide_option,
        output_option,
        summary_option,
        config_option,
    ]
    for decorator in reversed(decorators):
        func = decorator(func)
    return func
