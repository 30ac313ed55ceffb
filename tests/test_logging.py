"""Tests for structlog configuration (config/logging.py)."""

from __future__ import annotations

import json
import logging

import pytest
import structlog

from humanrepr.config.logging import LOGGER_NAME, configure_logging


class TestConfigureLogging:
    def test_verbose_enables_debug(self) -> None:
        configure_logging(verbose=True)
        assert logging.getLogger(LOGGER_NAME).level == logging.DEBUG
        assert logging.getLogger().level == logging.WARNING

    def test_non_verbose_sets_warning(self) -> None:
        configure_logging(verbose=False)
        assert logging.getLogger(LOGGER_NAME).level == logging.WARNING

    def test_replaces_root_handlers(self) -> None:
        configure_logging()
        configure_logging()
        assert len(logging.getLogger().handlers) == 1

    def test_json_mode_output(self, capsys: pytest.CaptureFixture[str]) -> None:
        configure_logging(verbose=True, log_json=True)
        structlog.get_logger("humanrepr.test").warning("json test", answer=42)
        parsed = json.loads(capsys.readouterr().err.strip())
        assert parsed["event"] == "json test"
        assert parsed["answer"] == 42
        assert parsed["level"] == "warning"
        assert parsed["logger"] == "humanrepr.test"
        assert "timestamp" in parsed

    def test_stdlib_records_are_rendered(self, capsys: pytest.CaptureFixture[str]) -> None:
        configure_logging(verbose=True, log_json=True)
        logging.getLogger("humanrepr.cli").debug("value %s", 7)
        parsed = json.loads(capsys.readouterr().err.strip())
        assert parsed["event"] == "value 7"
        assert parsed["level"] == "debug"

    def test_debug_suppressed_when_quiet(self, capsys: pytest.CaptureFixture[str]) -> None:
        configure_logging(verbose=False, log_json=True)
        logging.getLogger("humanrepr.cli").debug("hidden")
        assert capsys.readouterr().err == ""

    def test_json_record_fields(self, capsys: pytest.CaptureFixture[str]) -> None:
        configure_logging(verbose=True, log_json=True)
        logging.getLogger("humanrepr.cli").warning("plain")
        parsed = json.loads(capsys.readouterr().err.strip())
        assert set(parsed) == {"event", "level", "logger", "timestamp"}
