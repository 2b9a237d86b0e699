"""Progress helpers (tqdm integration)."""

from __future__ import annotations

import sys
from typing import Iterable, Iterator, Optional, TypeVar

from tqdm import tqdm

T = TypeVar("T")


def iter_progress(
    iterable: Iterable[T],
    total: Optional[int] = None,
    desc: Optional[str] = None,
    enabled: bool = True,
    unit: str = "rec",
) -> Iterator[T]:
    """Wrap iterable with a stderr tqdm bar when enabled, else return as-is."""
    if not enabled:
        return iter(iterable)
    formatted_desc = f"· {desc:<12} " if desc else ""
    return iter(
        tqdm(
            iterable,
            total=total,
            desc=formatted_desc,
            unit=unit,
            file=sys.stderr,
            ncols=80,
        )
    )
