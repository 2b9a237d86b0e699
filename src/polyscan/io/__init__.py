"""Input and output adapters: FASTA source, BED sink, summary table."""

from polyscan.io.bed import BedWriter, format_bed_line, open_bed_output
from polyscan.io.fasta import detect_compression, iter_fasta_records, open_fasta
from polyscan.io.summary import write_summary

__all__ = [
    "BedWriter",
    "format_bed_line",
    "open_bed_output",
    "detect_compression",
    "iter_fasta_records",
    "open_fasta",
    "write_summary",
]
