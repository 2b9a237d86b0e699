"""
Scan parameter resolution.

Converts the user-facing inputs (window size, percentage, nucleotide) into
the fixed values the window scanner works with. Runs once per invocation.
"""

from __future__ import annotations

import math
from dataclasses import dataclass

from polyscan.core.symbols import Symbol
from polyscan.exceptions import ConfigurationError


@dataclass(frozen=True)
class ScanParameters:
    """Immutable scanner parameters resolved once per run."""

    window_size: int
    percentage: float
    threshold_count: int
    target_symbol: Symbol
    complement_symbol: Symbol

    def describe(self) -> str:
        return (
            f"window={self.window_size}, percentage={self.percentage:g}, "
            f"threshold={self.threshold_count}, "
            f"nucleotide={self.target_symbol.char}/{self.complement_symbol.char}"
        )


def compute_threshold(percentage: float, window_size: int) -> int:
    """Return the minimum passing count: ceil(percentage / 100 * window_size).

    Fractional requirements round up, so 79.01% of 100 bases needs 80.
    """
    return int(math.ceil(percentage / 100.0 * window_size))


def resolve_parameters(window_size: int, percentage: float, nucleotide: str) -> ScanParameters:
    """Resolve scanner parameters from validated run inputs.

    Args:
        window_size: Sliding window length; 0 is accepted and scans to nothing
        percentage: Required share of the nucleotide, in percent
        nucleotide: One of A/C/G/T/N, case-insensitive

    Returns:
        ScanParameters with the threshold count and symbol pair filled in

    Raises:
        ConfigurationError: If the window size is negative or the nucleotide
            is not a single recognized character
    """
    if window_size < 0:
        raise ConfigurationError(f"Window size must be non-negative, got {window_size}")

    try:
        target = Symbol.from_char(nucleotide)
    except ValueError as exc:
        raise ConfigurationError(
            "nucleotide must be a single character (A, C, G, T, or N)"
        ) from exc

    return ScanParameters(
        window_size=int(window_size),
        percentage=float(percentage),
        threshold_count=compute_threshold(percentage, window_size),
        target_symbol=target,
        complement_symbol=target.complement,
    )
