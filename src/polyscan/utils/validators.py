"""Validation utilities for polyscan."""

from __future__ import annotations

import importlib
from typing import List

# Import name -> distribution name
REQUIRED_MODULES = {
    "Bio": "biopython",
    "click": "click",
    "pandas": "pandas",
    "tqdm": "tqdm",
    "yaml": "PyYAML",
}


def validate_installation(full_check: bool = False) -> List[str]:
    """
    Validate polyscan installation and dependencies.

    Args:
        full_check: If True, also scan a small built-in sequence and check
            the result against its known answer

    Returns:
        List of validation issues (empty if all good)
    """
    issues = []

    for module, dist in REQUIRED_MODULES.items():
        try:
            importlib.import_module(module)
        except ImportError:
            issues.append(f"Missing Python module: {module} (install '{dist}')")

    if full_check and not issues:
        issues.extend(_self_test())

    return issues


def _self_test() -> List[str]:
    from polyscan.core.params import resolve_parameters
    from polyscan.core.scanner import scan_sequence

    params = resolve_parameters(10, 80.0, "A")
    matches = scan_sequence("selftest", b"AAAAAAAAAAT", params)
    got = [(m.start, m.end, m.strand, round(m.percentage, 6)) for m in matches]
    expected = [(0, 10, "+", 100.0), (1, 11, "+", 90.0)]
    if got != expected:
        return [f"Scanner self-test failed: expected {expected}, got {got}"]
    return []
