"""
Logging setup: package handlers, file output, repeated setup and module loggers.
"""

import logging
import sys
from pathlib import Path

ROOT = Path(__file__).resolve().parent.parent
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

import pytest

from phonetic import logging_config
from phonetic.logging_config import get_logger, is_initialized, setup_logging


@pytest.fixture
def package_logger(monkeypatch):
    logger = logging.getLogger("phonetic")
    before = list(logger.handlers)
    monkeypatch.setattr(logging_config, "_logging_initialized", False)
    yield logger
    for handler in list(logger.handlers):
        if handler not in before:
            handler.close()
            logger.removeHandler(handler)


def _stream_handlers(logger):
    return [h for h in logger.handlers if type(h) is logging.StreamHandler]


def test_setup_logging_writes_debug_to_file(tmp_path, package_logger):
    log_file = tmp_path / "logs" / "phonetic.log"
    logger = setup_logging("WARNING", str(log_file))
    assert logger is package_logger
    assert is_initialized()

    get_logger("phonetic.soundex").debug("encoded %s", "Robert")
    contents = log_file.read_text(encoding="utf-8")
    assert "Logging initialized" in contents
    assert "phonetic.soundex" in contents
    assert "encoded Robert" in contents


def test_console_handler_uses_requested_level(package_logger):
    setup_logging("ERROR")
    [handler] = _stream_handlers(package_logger)
    assert handler.level == logging.ERROR


def test_second_setup_keeps_single_handler(package_logger):
    setup_logging("INFO")
    setup_logging("INFO")
    assert len(_stream_handlers(package_logger)) == 1


def test_forced_setup_replaces_handlers(tmp_path, package_logger):
    setup_logging("INFO", str(tmp_path / "first.log"))
    setup_logging("ERROR", force=True)
    [handler] = _stream_handlers(package_logger)
    assert handler.level == logging.ERROR
    assert not any(isinstance(h, logging.FileHandler) for h in package_logger.handlers)


def test_get_logger_returns_named_logger():
    assert get_logger("phonetic.beider_morse.engine").name == "phonetic.beider_morse.engine"
