"""Tests for the per-record summary table."""

from pathlib import Path
import sys

import pandas as pd

ROOT = Path(__file__).resolve().parents[2]
SRC = ROOT / "src"
if str(SRC) not in sys.path:
    sys.path.insert(0, str(SRC))

from polyscan.constants import SUMMARY_COLUMNS
from polyscan.io.summary import build_summary_frame, write_summary

ROWS = [
    {"record_id": "chr1", "length": 20, "windows": 11, "plus_matches": 3,
     "minus_matches": 1, "skipped": False},
    {"record_id": "tiny", "length": 4, "windows": 0, "plus_matches": 0,
     "minus_matches": 0, "skipped": True},
]


def test_column_order():
    df = build_summary_frame(ROWS)
    assert list(df.columns) == list(SUMMARY_COLUMNS)
    assert df["skipped"].tolist() == [False, True]


def test_empty_rows():
    df = build_summary_frame([])
    assert df.empty
    assert list(df.columns) == list(SUMMARY_COLUMNS)


def test_write_summary_tsv(tmp_path):
    out = tmp_path / "summary.tsv"
    write_summary(ROWS, out)
    df = pd.read_csv(out, sep="\t")
    assert df["record_id"].tolist() == ["chr1", "tiny"]
    assert df["windows"].tolist() == [11, 0]
    assert out.read_text().splitlines()[0] == "\t".join(SUMMARY_COLUMNS)
