"""polyscan: sliding-window nucleotide composition scanner with BED output."""

from polyscan.__version__ import __version__, __author__, __email__, __license__
from polyscan.core import (
    FrequencyTable,
    IntervalMatch,
    ScanParameters,
    Symbol,
    WindowScanner,
    resolve_parameters,
    scan_sequence,
)
from polyscan.exceptions import PolyScanError, ConfigurationError, FileFormatError

__all__ = [
    "__version__",
    "__author__",
    "__email__",
    "__license__",
    "FrequencyTable",
    "IntervalMatch",
    "ScanParameters",
    "Symbol",
    "WindowScanner",
    "resolve_parameters",
    "scan_sequence",
    "PolyScanError",
    "ConfigurationError",
    "FileFormatError",
]
