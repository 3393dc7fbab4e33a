"""Tests for logging setup."""

import json
import logging

import structlog

from web_inspector.log import configure_logging


def test_json_lines_on_stderr(capsys):
    configure_logging("debug", json_output=True)

    structlog.get_logger("web_inspector.tests").info("analysis.start", rules=6)

    captured = capsys.readouterr()
    assert captured.out == ""
    record = json.loads(captured.err.strip().splitlines()[-1])
    assert record["event"] == "analysis.start"
    assert record["rules"] == 6
    assert record["level"] == "info"
    assert record["logger"] == "web_inspector.tests"


def test_level_and_single_handler():
    configure_logging("warning")
    configure_logging("warning")

    root = logging.getLogger()
    assert root.level == logging.WARNING
    assert len(root.handlers) == 1
