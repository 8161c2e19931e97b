"""Tests for ssi.core.logging module."""

from __future__ import annotations

import json
import logging
import sys

import pytest

from ssi.core.config import clear_config_cache
from ssi.core.logging import (
    JSONFormatter,
    StandardFormatter,
    configure_logging,
)


@pytest.fixture
def restore_root_logger():
    """Put the root logger back the way pytest configured it."""
    root = logging.getLogger()
    handlers = root.handlers[:]
    level = root.level
    yield root
    for handler in root.handlers[:]:
        root.removeHandler(handler)
        if handler not in handlers:
            handler.close()
    for handler in handlers:
        root.addHandler(handler)
    root.setLevel(level)


def _record(level: int = logging.INFO, msg: str = "hello %s", args: tuple = ("world",)) -> logging.LogRecord:
    return logging.LogRecord(
        name="ssi.test",
        level=level,
        pathname="/tmp/test.py",
        lineno=42,
        msg=msg,
        args=args,
        exc_info=None,
    )


# ============================================================================
# JSONFormatter Tests
# ============================================================================


class TestJSONFormatter:
    def test_basic_fields(self):
        data = json.loads(JSONFormatter().format(_record()))
        assert data["level"] == "INFO"
        assert data["logger"] == "ssi.test"
        assert data["message"] == "hello world"
        assert "timestamp" in data
        assert "source" not in data

    def test_warning_includes_source(self):
        data = json.loads(JSONFormatter().format(_record(logging.WARNING)))
        assert data["source"]["line"] == 42
        assert data["source"]["file"] == "/tmp/test.py"

    def test_exception_info(self):
        try:
            raise ValueError("boom")
        except ValueError:
            record = _record(logging.ERROR)
            record.exc_info = sys.exc_info()
        data = json.loads(JSONFormatter().format(record))
        assert "ValueError: boom" in data["exception"]


# ============================================================================
# StandardFormatter Tests
# ============================================================================


class TestStandardFormatter:
    def test_plain_format(self):
        text = StandardFormatter(use_colors=False).format(_record())
        assert " - ssi.test - INFO - hello world" in text

    def test_colors_do_not_leak_into_record(self):
        formatter = StandardFormatter(use_colors=False)
        formatter.use_colors = True
        record = _record()
        text = formatter.format(record)
        assert "\033[32mINFO\033[0m" in text
        assert record.levelname == "INFO"


# ============================================================================
# configure_logging Tests
# ============================================================================


class TestConfigureLogging:
    def test_explicit_level_and_format(self, restore_root_logger):
        configure_logging(level="DEBUG", json_format=True)
        root = restore_root_logger
        assert root.level == logging.DEBUG
        assert len(root.handlers) == 1
        assert isinstance(root.handlers[0].formatter, JSONFormatter)

    def test_level_from_env(self, monkeypatch, restore_root_logger):
        monkeypatch.setenv("SSI_LOG_LEVEL", "warning")
        configure_logging(json_format=False)
        assert restore_root_logger.level == logging.WARNING
        assert isinstance(restore_root_logger.handlers[0].formatter, StandardFormatter)

    def test_format_from_env(self, monkeypatch, restore_root_logger):
        monkeypatch.setenv("SSI_LOG_FORMAT", "text")
        configure_logging()
        assert isinstance(restore_root_logger.handlers[0].formatter, StandardFormatter)

        monkeypatch.setenv("SSI_LOG_FORMAT", "json")
        clear_config_cache()
        configure_logging()
        assert isinstance(restore_root_logger.handlers[0].formatter, JSONFormatter)

    def test_unknown_level_falls_back_to_info(self, restore_root_logger):
        configure_logging(level="chatty", json_format=False)
        assert restore_root_logger.level == logging.INFO

    def test_log_file_is_json(self, tmp_path, restore_root_logger):
        log_file = tmp_path / "ssi.log"
        configure_logging(level="INFO", json_format=False, log_file=str(log_file))
        logging.getLogger("ssi.test").info("written %d", 1)
        for handler in restore_root_logger.handlers:
            handler.flush()

        line = log_file.read_text().strip().splitlines()[-1]
        assert json.loads(line)["message"] == "written 1"

    def test_replaces_existing_handlers(self, restore_root_logger):
        configure_logging(level="INFO", json_format=True)
        configure_logging(level="INFO", json_format=True)
        assert len(restore_root_logger.handlers) == 1
