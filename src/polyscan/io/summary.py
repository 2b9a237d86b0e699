"""Per-record summary table written with pandas."""

from __future__ import annotations

from pathlib import Path
from typing import Iterable, Mapping, Union

import pandas as pd

from polyscan.constants import SUMMARY_COLUMNS


def build_summary_frame(rows: Iterable[Mapping]) -> pd.DataFrame:
    """Return the summary rows as a DataFrame with the fixed column order."""
    df = pd.DataFrame(list(rows), columns=list(SUMMARY_COLUMNS))
    if df.empty:
        return df
    for col in ("length", "windows", "plus_matches", "minus_matches"):
        df[col] = df[col].astype(int)
    df["skipped"] = df["skipped"].astype(bool)
    return df


def write_summary(rows: Iterable[Mapping], path: Union[str, Path]) -> pd.DataFrame:
    """Write the per-record summary as a tab-separated table."""
    path = Path(path)
    path.parent.mkdir(parents=True, exist_ok=True)
    df = build_summary_frame(rows)
    df.to_csv(path, sep="\t", index=False, errors="surrogateescape")
    return df
