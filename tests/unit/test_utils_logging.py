"""Tests for logging utilities."""

from pathlib import Path
import logging
import sys

import pytest

ROOT = Path(__file__).resolve().parents[2]
SRC = ROOT / "src"
if str(SRC) not in sys.path:
    sys.path.insert(0, str(SRC))

from polyscan.utils.logging import (
    get_logger,
    level_from_name,
    level_from_verbosity,
    setup_logging,
)


def test_get_logger_namespace():
    assert get_logger("scanner").name == "polyscan.scanner"


@pytest.mark.parametrize("verbose,level", [(0, logging.WARNING), (1, logging.INFO),
                                           (2, logging.DEBUG), (5, logging.DEBUG)])
def test_level_from_verbosity(verbose, level):
    assert level_from_verbosity(verbose) == level


def test_level_from_name():
    assert level_from_name("info") == logging.INFO
    assert level_from_name("DEBUG") == logging.DEBUG
    assert level_from_name(None) == logging.WARNING
    assert level_from_name("chatty") == logging.WARNING


def test_setup_logging_replaces_handlers():
    """Test repeated setup does not stack handlers."""
    setup_logging(level=logging.INFO)
    setup_logging(level=logging.DEBUG)
    app_logger = logging.getLogger("polyscan")
    assert len(app_logger.handlers) == 1
    assert app_logger.level == logging.DEBUG
    assert app_logger.propagate is False


def test_setup_logging_console_on_stderr():
    setup_logging(level=logging.INFO)
    handler = logging.getLogger("polyscan").handlers[0]
    assert handler.stream is sys.stderr


def test_setup_logging_file(tmp_path):
    """Test the file handler records DEBUG messages."""
    log_file = tmp_path / "logs" / "run.log"
    setup_logging(level=logging.WARNING, log_file=log_file)
    get_logger("test").debug("detailed message")
    for handler in logging.getLogger("polyscan").handlers:
        handler.flush()
    assert "detailed message" in log_file.read_text()
