"""Tests for core/logging.py."""

from __future__ import annotations

import json

import structlog

from mailbreeze.core.logging import configure_logging, get_logger


class TestConfigureLogging:
    """Tests for configure_logging."""

    def test_json_output_to_stderr(self, capsys):
        configure_logging("info", json=True)

        get_logger("test").info("Retrying request", attempt=1, delay_s=2.0)

        captured = capsys.readouterr()
        assert captured.out == ""
        record = json.loads(captured.err.strip())
        assert record["event"] == "Retrying request"
        assert record["level"] == "info"
        assert record["attempt"] == 1
        assert record["delay_s"] == 2.0
        assert "timestamp" in record

    def test_level_filters_lower_records(self, capsys):
        configure_logging("warning", json=True)

        log = get_logger("test")
        log.debug("hidden")
        log.info("hidden too")
        log.warning("shown")

        lines = capsys.readouterr().err.strip().splitlines()
        assert [json.loads(line)["event"] for line in lines] == ["shown"]

    def test_unknown_level_defaults_to_warning(self, capsys):
        configure_logging("chatty", json=True)

        get_logger("test").info("hidden")

        assert capsys.readouterr().err == ""

    def test_get_logger_configures_on_first_use(self):
        assert not structlog.is_configured()

        get_logger("test")

        assert structlog.is_configured()
