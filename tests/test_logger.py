"""Tests for logging configuration."""

import json

from feedmap.utils.logger import configure_logging, get_logger


def test_json_logging(capsys, reset_logging):
    configure_logging("DEBUG", json_format=True)

    get_logger("feedmap.test").info("element_read", element="source")

    record = json.loads(capsys.readouterr().err.strip())
    assert record["event"] == "element_read"
    assert record["element"] == "source"
    assert record["logger"] == "feedmap.test"
    assert record["level"] == "info"


def test_level_filtering(capsys, reset_logging):
    configure_logging("WARNING", json_format=True)

    get_logger().info("hidden")
    get_logger().warning("shown")

    output = capsys.readouterr().err
    assert "hidden" not in output
    assert "shown" in output


def test_configure_from_settings(monkeypatch, capsys, reset_logging):
    from feedmap.config.settings import settings
    from feedmap.utils.logger import configure_from_settings

    monkeypatch.setattr(settings, "log_level", "ERROR")
    monkeypatch.setattr(settings, "log_json", True)
    configure_from_settings()

    get_logger().warning("below_threshold")
    get_logger().error("element_read_failed", element="source")

    lines = capsys.readouterr().err.strip().splitlines()
    assert len(lines) == 1
    assert json.loads(lines[0])["event"] == "element_read_failed"
