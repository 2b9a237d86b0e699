"""Pytest configuration for polyscan tests."""

import logging
import sys
from pathlib import Path

import pytest

# Add src directory to Python path
ROOT = Path(__file__).resolve().parents[1]
SRC = ROOT / "src"
if str(SRC) not in sys.path:
    sys.path.insert(0, str(SRC))


@pytest.fixture(autouse=True)
def reset_logging_after_test():
    """Reset polyscan logger state after each test.

    setup_logging() sets propagate=False, which breaks caplog in later tests.
    """
    yield
    app_logger = logging.getLogger("polyscan")
    for handler in list(app_logger.handlers):
        app_logger.removeHandler(handler)
        handler.close()
    app_logger.setLevel(logging.NOTSET)
    app_logger.propagate = True


@pytest.fixture
def write_fasta(tmp_path):
    """Return a helper that writes ``[(id, seq), ...]`` as a FASTA file."""

    def _write(records, name="input.fa"):
        path = tmp_path / name
        with open(path, "w", encoding="ascii") as handle:
            for record_id, seq in records:
                handle.write(f">{record_id}\n")
                for i in range(0, len(seq), 60):
                    handle.write(seq[i:i + 60] + "\n")
        return path

    return _write
