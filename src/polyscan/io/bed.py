"""
6-column BED output.

Columns: chrom, start, end (0-based half-open), name (target nucleotide),
score (percentage rounded up to an integer) and strand. The layout is a
fixed contract shared with downstream consumers.
"""

from __future__ import annotations

import math
import sys
from contextlib import contextmanager
from pathlib import Path
from typing import IO, Iterable, Iterator, Optional, Union

from polyscan.core.models import IntervalMatch


def bed_score(percentage: float) -> int:
    """Integer BED score for a window percentage (ceiling)."""
    return int(math.ceil(percentage))


def format_bed_line(match: IntervalMatch) -> str:
    """Serialize one match as a tab-delimited BED6 line."""
    fields = (
        match.record_id,
        str(match.start),
        str(match.end),
        match.symbol.char,
        str(bed_score(match.percentage)),
        match.strand,
    )
    return "\t".join(fields) + "\n"


class BedWriter:
    """Write interval matches to a text handle, one BED line each."""

    def __init__(self, handle: IO[str]):
        self.handle = handle
        self.records_written = 0

    def write(self, match: IntervalMatch) -> None:
        self.handle.write(format_bed_line(match))
        self.records_written += 1

    def write_all(self, matches: Iterable[IntervalMatch]) -> int:
        """Write every match in order and return how many were written."""
        count = 0
        for match in matches:
            self.write(match)
            count += 1
        return count


@contextmanager
def open_bed_output(path: Optional[Union[str, Path]] = None) -> Iterator[BedWriter]:
    """Yield a BedWriter on ``path``, or on stdout when path is None or "-"."""
    if path is None or str(path) == "-":
        writer = BedWriter(sys.stdout)
        try:
            yield writer
        finally:
            sys.stdout.flush()
        return

    path = Path(path)
    if path.parent and not path.parent.exists():
        path.parent.mkdir(parents=True, exist_ok=True)
    with open(path, "w", encoding="utf-8", errors="surrogateescape", newline="\n") as handle:
        yield BedWriter(handle)
