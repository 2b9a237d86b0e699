"""
Scan orchestration: FASTA records in, BED lines out.

Parameters are resolved once. Each record is scanned on its own, strictly
in file order, and every match goes to the BED writer in emission order.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Dict, Iterable, List, Tuple

from polyscan.config import Config
from polyscan.core.params import ScanParameters, resolve_parameters
from polyscan.core.scanner import WindowScanner
from polyscan.io.bed import BedWriter, open_bed_output
from polyscan.io.fasta import iter_fasta_records
from polyscan.io.summary import write_summary
from polyscan.utils.logging import LogTemplates, get_logger
from polyscan.utils.progress import iter_progress


@dataclass
class ScanStats:
    """Counters collected over one run."""

    records: int = 0
    records_skipped: int = 0
    windows: int = 0
    plus_matches: int = 0
    minus_matches: int = 0
    rows: List[Dict[str, Any]] = field(default_factory=list)

    @property
    def total_matches(self) -> int:
        return self.plus_matches + self.minus_matches


class Pipeline:
    """Run the window scanner over every record of a FASTA file."""

    def __init__(self, config: Config):
        self.config = config
        self.logger = get_logger("pipeline")
        self.params: ScanParameters = resolve_parameters(
            config.scan.window_size,
            config.scan.percentage,
            config.scan.nucleotide,
        )
        self.scanner = WindowScanner(self.params)

    def scan_record(self, record_id: str, sequence: bytes, writer: BedWriter, stats: ScanStats) -> None:
        """Scan one record, write its matches and update ``stats``."""
        length = len(sequence)
        windows = self.scanner.window_count(length)
        plus = minus = 0

        for match in self.scanner.scan(record_id, sequence):
            writer.write(match)
            if match.is_plus:
                plus += 1
            else:
                minus += 1

        skipped = windows == 0
        stats.records += 1
        stats.windows += windows
        stats.plus_matches += plus
        stats.minus_matches += minus
        if skipped:
            stats.records_skipped += 1
            self.logger.debug(
                LogTemplates.RECORD_SKIPPED.format(
                    record_id=record_id, length=length, window=self.params.window_size
                )
            )
        else:
            self.logger.debug(
                LogTemplates.RECORD_SCANNED.format(
                    record_id=record_id, length=length, windows=windows, plus=plus, minus=minus
                )
            )
        stats.rows.append(
            {
                "record_id": record_id,
                "length": length,
                "windows": windows,
                "plus_matches": plus,
                "minus_matches": minus,
                "skipped": skipped,
            }
        )

    def scan_records(self, records: Iterable[Tuple[str, bytes]], writer: BedWriter) -> ScanStats:
        """Scan already-decoded records in order."""
        stats = ScanStats()
        records = iter_progress(
            records, desc="Scanning", enabled=self.config.runtime.enable_progress
        )
        for record_id, sequence in records:
            self.scan_record(record_id, sequence, writer, stats)
        return stats

    def run(self) -> ScanStats:
        """Scan the configured input file and write BED (and summary) output."""
        input_file = Path(self.config.input_file)
        self.logger.info(
            LogTemplates.RUN_START.format(path=input_file, params=self.params.describe())
        )

        with open_bed_output(self.config.output_file) as writer:
            stats = self.scan_records(iter_fasta_records(input_file), writer)

        if self.config.output_file is not None and str(self.config.output_file) != "-":
            self.logger.info(LogTemplates.FILE_CREATED.format(path=self.config.output_file))

        if self.config.summary_file:
            write_summary(stats.rows, self.config.summary_file)
            self.logger.info(LogTemplates.FILE_CREATED.format(path=self.config.summary_file))

        self.logger.info(
            LogTemplates.RUN_SUMMARY.format(
                records=stats.records,
                skipped=stats.records_skipped,
                windows=stats.windows,
                matches=stats.total_matches,
            )
        )
        return stats


def run_scan(config: Config) -> ScanStats:
    """Validate ``config`` and run a scan with it."""
    config.validate()
    return Pipeline(config).run()
