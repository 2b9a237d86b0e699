"""Tests for CLI exit codes."""

from pathlib import Path
import sys

ROOT = Path(__file__).resolve().parents[2]
SRC = ROOT / "src"
if str(SRC) not in sys.path:
    sys.path.insert(0, str(SRC))

from polyscan.cli.exit_codes import EXIT_ERROR, EXIT_SIGINT, EXIT_SIGTERM, EXIT_SUCCESS, EXIT_USAGE


def test_exit_code_values():
    assert EXIT_SUCCESS == 0
    assert EXIT_ERROR == 1
    assert EXIT_USAGE == 2
    assert EXIT_SIGINT == 128 + 2
    assert EXIT_SIGTERM == 128 + 15
