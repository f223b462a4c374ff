"""Tests for structlog configuration."""

import json
import logging

import structlog

from testgate.core.logging import HANDLER_NAME, configure_logging


def _testgate_handlers() -> list[logging.Handler]:
    return [h for h in logging.getLogger().handlers if h.get_name() == HANDLER_NAME]


class TestConfigureLogging:
    def test_repeat_calls_keep_one_handler(self):
        configure_logging("INFO")
        configure_logging("DEBUG")
        assert len(_testgate_handlers()) == 1
        assert logging.getLogger().level == logging.DEBUG

    def test_stdlib_records_go_to_stderr(self, capsys):
        configure_logging("DEBUG")
        logging.getLogger("testgate.detector.fs").debug("Skipping %s", "x")
        captured = capsys.readouterr()
        assert "Skipping x" in captured.err
        assert captured.out == ""

    def test_level_filters_records(self, capsys):
        configure_logging("WARNING")
        logging.getLogger("testgate.detector.fs").info("quiet")
        structlog.get_logger().info("also_quiet")
        assert capsys.readouterr().err == ""

    def test_json_renderer(self, capsys):
        configure_logging("INFO", json_logs=True)
        structlog.get_logger().info("verdict", verdict="PASS")
        line = capsys.readouterr().err.strip().splitlines()[-1]
        payload = json.loads(line)
        assert payload["event"] == "verdict"
        assert payload["verdict"] == "PASS"
        assert payload["level"] == "info"
