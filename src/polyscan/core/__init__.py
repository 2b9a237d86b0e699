"""Core scanning logic."""

from polyscan.core.models import IntervalMatch
from polyscan.core.params import ScanParameters, compute_threshold, resolve_parameters
from polyscan.core.scanner import FrequencyTable, WindowScanner, scan_sequence
from polyscan.core.symbols import Symbol

__all__ = [
    "IntervalMatch",
    "ScanParameters",
    "compute_threshold",
    "resolve_parameters",
    "FrequencyTable",
    "WindowScanner",
    "scan_sequence",
    "Symbol",
]
