"""
FASTA sequence source.

Detects gzip, bzip2 and xz input from the leading magic bytes and hands a
decompressed text stream to Biopython's FASTA parser. Records are yielded
as ``(record_id, sequence_bytes)`` pairs in file order.
"""

from __future__ import annotations

import bz2
import gzip
import lzma
from pathlib import Path
from typing import IO, Iterator, Tuple, Union

from Bio.SeqIO.FastaIO import SimpleFastaParser

from polyscan.exceptions import FileFormatError
from polyscan.utils.logging import get_logger

logger = get_logger("io.fasta")

PathLike = Union[str, Path]

GZIP_MAGIC = b"\x1f\x8b"
BZIP2_MAGIC = b"BZh"
XZ_MAGIC = b"\xfd7zXZ\x00"
ZSTD_MAGIC = b"\x28\xb5\x2f\xfd"

# Undecodable bytes survive a decode/encode round trip unchanged
TEXT_ENCODING = "utf-8"
TEXT_ERRORS = "surrogateescape"

_OPENERS = {
    "gzip": gzip.open,
    "bzip2": bz2.open,
    "xz": lzma.open,
}


def detect_compression(path: PathLike) -> str:
    """Return "gzip", "bzip2", "xz", "zstd" or "none" based on magic bytes."""
    with open(path, "rb") as handle:
        head = handle.read(6)

    if head.startswith(GZIP_MAGIC):
        return "gzip"
    if head.startswith(BZIP2_MAGIC):
        return "bzip2"
    if head.startswith(XZ_MAGIC):
        return "xz"
    if head.startswith(ZSTD_MAGIC):
        return "zstd"
    return "none"


def open_fasta(path: PathLike) -> IO[str]:
    """Open a possibly compressed FASTA file as a text stream.

    Raises:
        FileFormatError: If the file is missing or uses an unsupported codec
    """
    path = Path(path)
    if not path.exists():
        raise FileFormatError(f"FASTA file not found: {path}", path=path)

    compression = detect_compression(path)
    logger.debug(f"Opening {path} (compression: {compression})")

    if compression == "zstd":
        raise FileFormatError(
            f"Zstandard-compressed input is not supported: {path}", path=path
        )
    if compression == "none":
        return open(path, "r", encoding=TEXT_ENCODING, errors=TEXT_ERRORS)
    return _OPENERS[compression](path, "rt", encoding=TEXT_ENCODING, errors=TEXT_ERRORS)


def iter_fasta_records(path: PathLike) -> Iterator[Tuple[str, bytes]]:
    """Yield ``(record_id, sequence)`` pairs from a FASTA file in file order.

    The record id is the first whitespace-delimited token of the header.
    Sequence bytes are returned as they appear in the file, so non-ASCII
    bytes count as unrecognized bases. Whitespace inside sequence lines is
    dropped by the parser and does not occupy a window position.

    Raises:
        FileFormatError: If the file cannot be opened or decoded
    """
    path = Path(path)
    with open_fasta(path) as handle:
        try:
            for title, sequence in SimpleFastaParser(handle):
                record_id = title.split(None, 1)[0] if title else ""
                yield record_id, sequence.encode(TEXT_ENCODING, errors=TEXT_ERRORS)
        except (OSError, EOFError, ValueError, lzma.LZMAError) as exc:
            raise FileFormatError(f"Failed to read FASTA {path}: {exc}", path=path) from exc
