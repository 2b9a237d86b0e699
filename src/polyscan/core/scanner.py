"""
Sliding-window nucleotide scanner.

For each record the scanner primes a five-slot frequency table over the
first window, then slides one base at a time: evict the base leaving the
window, insert the base entering it, and evaluate. Every window is checked
twice, once against the target nucleotide's count ("+") and once against
its complement's count ("-"). Both checks are independent, so a window can
produce zero, one or two matches. For N, which is its own complement, a
passing window yields a "+" and a "-" match with the same percentage.
"""

from __future__ import annotations

from typing import Iterator, List, Tuple, Union

from polyscan.constants import MINUS_STRAND, PLUS_STRAND
from polyscan.core.models import IntervalMatch
from polyscan.core.params import ScanParameters
from polyscan.core.symbols import BYTE_TO_SLOT, SYMBOL_COUNT, Symbol

SequenceLike = Union[bytes, bytearray, memoryview, str]


def as_sequence_bytes(sequence: SequenceLike) -> bytes:
    """Return ``sequence`` as raw bytes; non-ASCII text becomes unrecognized."""
    if isinstance(sequence, str):
        return sequence.encode("ascii", errors="replace")
    return bytes(sequence)


class FrequencyTable:
    """Counts of A, C, G, T and N over the current window.

    Unrecognized bytes are not counted, so ``sum(counts) + unrecognized``
    equals the window size.
    """

    __slots__ = ("counts",)

    def __init__(self, counts=None):
        self.counts: List[int] = list(counts) if counts is not None else [0] * SYMBOL_COUNT

    @classmethod
    def from_window(cls, window: SequenceLike) -> "FrequencyTable":
        """Build a table by classifying every byte of ``window`` from scratch."""
        table = cls()
        for byte in as_sequence_bytes(window):
            table.insert(byte)
        return table

    def insert(self, byte: int) -> None:
        slot = BYTE_TO_SLOT[byte]
        if slot >= 0:
            self.counts[slot] += 1

    def evict(self, byte: int) -> None:
        slot = BYTE_TO_SLOT[byte]
        if slot >= 0 and self.counts[slot] > 0:
            self.counts[slot] -= 1

    def __getitem__(self, symbol: Symbol) -> int:
        return self.counts[symbol]

    def total(self) -> int:
        """Number of recognized bases in the window."""
        return sum(self.counts)

    def as_tuple(self) -> Tuple[int, ...]:
        return tuple(self.counts)

    def copy(self) -> "FrequencyTable":
        return FrequencyTable(self.counts)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, FrequencyTable):
            return NotImplemented
        return self.counts == other.counts

    def __repr__(self) -> str:
        pairs = ", ".join(f"{sym.char}={self.counts[sym]}" for sym in Symbol)
        return f"FrequencyTable({pairs})"


class WindowScanner:
    """Scan sequences with fixed, pre-resolved parameters.

    The scanner holds no per-record state; each ``scan`` call builds its own
    frequency table, so records are independent of one another.
    """

    def __init__(self, params: ScanParameters):
        self.params = params

    def window_count(self, length: int) -> int:
        """Number of window positions in a sequence of ``length`` bases."""
        w = self.params.window_size
        if w <= 0 or length < w:
            return 0
        return length - w + 1

    def iter_tables(self, sequence: SequenceLike) -> Iterator[Tuple[int, FrequencyTable]]:
        """Yield ``(start, table)`` for every window, sliding incrementally.

        The yielded table is a snapshot; mutating it does not affect the scan.
        """
        for start, table in self._slide(as_sequence_bytes(sequence)):
            yield start, table.copy()

    def _slide(self, seq: bytes) -> Iterator[Tuple[int, FrequencyTable]]:
        w = self.params.window_size
        if w <= 0 or len(seq) < w:
            return

        table = FrequencyTable.from_window(seq[:w])
        yield 0, table

        for start in range(1, len(seq) - w + 1):
            table.evict(seq[start - 1])
            table.insert(seq[start + w - 1])
            yield start, table

    def scan(self, record_id: str, sequence: SequenceLike) -> Iterator[IntervalMatch]:
        """Yield every passing window of one record in start order.

        For a given start, the "+" match comes before the "-" match.
        """
        params = self.params
        w = params.window_size
        threshold = params.threshold_count
        target = params.target_symbol
        complement = params.complement_symbol

        for start, table in self._slide(as_sequence_bytes(sequence)):
            end = start + w
            user_count = table.counts[target]
            comp_count = table.counts[complement]

            if user_count >= threshold:
                yield IntervalMatch(
                    record_id=record_id,
                    start=start,
                    end=end,
                    symbol=target,
                    percentage=user_count / w * 100.0,
                    strand=PLUS_STRAND,
                )
            if comp_count >= threshold:
                # Labelled with the target symbol on purpose; see IntervalMatch.
                yield IntervalMatch(
                    record_id=record_id,
                    start=start,
                    end=end,
                    symbol=target,
                    percentage=comp_count / w * 100.0,
                    strand=MINUS_STRAND,
                )


def scan_sequence(
    record_id: str, sequence: SequenceLike, params: ScanParameters
) -> List[IntervalMatch]:
    """Scan one sequence and return all of its matches as a list."""
    return list(WindowScanner(params).scan(record_id, sequence))
