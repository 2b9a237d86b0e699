"""Value types produced by the window scanner."""

from __future__ import annotations

from dataclasses import dataclass

from polyscan.constants import PLUS_STRAND
from polyscan.core.symbols import Symbol


@dataclass(frozen=True)
class IntervalMatch:
    """One passing window on one strand.

    ``symbol`` is always the user-chosen nucleotide, also for ``-`` strand
    matches that passed on the complement's count. The strand, not the
    label, records which count passed; downstream BED consumers rely on
    this layout.
    """

    record_id: str
    start: int
    end: int
    symbol: Symbol
    percentage: float
    strand: str

    @property
    def is_plus(self) -> bool:
        return self.strand == PLUS_STRAND
