"""
Test that eval_logging can be imported without circular import and logger works.
"""

from __future__ import annotations

import importlib
import json

import pytest


@pytest.fixture
def default_logging():
    """Put the json / INFO configuration back after a test reconfigures logging."""
    from tinyml_eval.eval_logging import configure_structlog

    yield
    configure_structlog("INFO", "json")


def _json_events(text: str) -> list[dict]:
    return [json.loads(line) for line in text.splitlines() if line.startswith("{")]


def test_logging_import():
    """Import get_logger from eval_logging and use the logger."""
    from tinyml_eval.eval_logging import get_logger

    logger = get_logger("test")
    assert logger is not None
    assert hasattr(logger, "info")
    assert hasattr(logger, "debug")
    assert hasattr(logger, "warning")
    assert hasattr(logger, "error")
    logger.info("test_message", key="value")


def test_module_level_logger_emits_json(capsys, default_logging):
    """Modules that call get_logger(__name__) at import log with event_type and their module name."""
    from tinyml_eval.eval_logging import configure_structlog

    driver = importlib.import_module("tinyml_eval.evaluation.driver")
    configure_structlog("INFO", "json")
    driver.logger.info("evaluation_started", samples=3)

    events = _json_events(capsys.readouterr().err)
    assert len(events) == 1
    assert events[0]["event_type"] == "evaluation_started"
    assert events[0]["logger"] == "tinyml_eval.evaluation.driver"
    assert events[0]["level"] == "info"
    assert events[0]["samples"] == 3
    assert "timestamp" in events[0]


def test_bind_run_logger(capsys, default_logging):
    """bind_run returns a usable logger with run_id bound."""
    from tinyml_eval.eval_logging import configure_structlog
    from tinyml_eval.eval_logging.logger import bind_run

    configure_structlog("INFO", "json")
    log = bind_run("abc123")
    log.info("test_bound_message", sample=1)
    events = _json_events(capsys.readouterr().err)
    assert events[-1]["run_id"] == "abc123"
    assert events[-1]["logger"] == "tinyml_eval.run"


def test_reconfigure_applies_to_existing_loggers(capsys, default_logging):
    """A logger created before configure_structlog() follows the new level."""
    from tinyml_eval.eval_logging import configure_structlog, get_logger

    logger = get_logger("test_reconfigure")
    configure_structlog("ERROR", "json")
    logger.info("hidden_event")
    logger.error("shown_event")
    events = _json_events(capsys.readouterr().err)
    assert [e["event_type"] for e in events] == ["shown_event"]

    configure_structlog("DEBUG", "console")
    logger.debug("debug_visible", n=1)
    assert "debug_visible" in capsys.readouterr().err
