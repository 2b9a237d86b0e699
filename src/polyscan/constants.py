"""Unified constants for polyscan.

Defaults mirror the command-line defaults; the BED layout is a fixed
output contract shared with downstream consumers.
"""

# ================== Scan Defaults ==================

DEFAULT_WINDOW_SIZE: int = 10

DEFAULT_PERCENTAGE: float = 80.0

DEFAULT_NUCLEOTIDE: str = "A"


# ================== Parameter Ranges ==================

# Inclusive bounds accepted for --percentage
MIN_PERCENTAGE: float = 50.0
MAX_PERCENTAGE: float = 100.0

VALID_NUCLEOTIDES: str = "ACGTN"


# ================== Output Constants ==================

PLUS_STRAND: str = "+"
MINUS_STRAND: str = "-"

# chrom, start, end, name, score, strand
BED_COLUMNS: tuple = ("chrom", "start", "end", "name", "score", "strand")

# Columns of the optional per-record summary table
SUMMARY_COLUMNS: tuple = (
    "record_id",
    "length",
    "windows",
    "plus_matches",
    "minus_matches",
    "skipped",
)
