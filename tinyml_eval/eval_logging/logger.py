"""
Structured logging: timestamp, event_type, level, logger name.

structlog with ISO timestamps and consistent keys. Events go to stderr so
stdout stays free for the diagnostic table. Configured once at import from
LOG_LEVEL / LOG_FORMAT; the CLI calls configure_structlog() again after the
.env file is loaded, and module loggers pick that up.

Uses only Python stdlib logging and structlog; no other tinyml_eval imports to
avoid circular imports.
"""

from __future__ import annotations

import logging
import os
import sys
from datetime import datetime, timezone
from typing import Any

import structlog

LOG_FORMATS = ("json", "console")


def _add_timestamp(
    logger: Any,
    method_name: str,
    event_dict: dict[str, Any],
) -> dict[str, Any]:
    """Ensure timestamp is always present (ISO 8601)."""
    event_dict.setdefault("timestamp", datetime.now(timezone.utc).isoformat())
    return event_dict


def _add_logger_key(
    logger: Any,
    method_name: str,
    event_dict: dict[str, Any],
) -> dict[str, Any]:
    """Module name from get_logger() is emitted as 'logger'."""
    if "logger_name" in event_dict:
        event_dict.setdefault("logger", event_dict.pop("logger_name"))
    return event_dict


def _rename_event(
    logger: Any,
    method_name: str,
    event_dict: dict[str, Any],
) -> dict[str, Any]:
    """structlog's 'event' becomes event_type in JSON output."""
    if "event" in event_dict and "event_type" not in event_dict:
        event_dict["event_type"] = event_dict.pop("event")
    return event_dict


def _stderr_logger(*args: Any) -> structlog.PrintLogger:
    """PrintLogger on the sys.stderr of the moment."""
    return structlog.PrintLogger(sys.stderr)


def _level_value(level: str) -> int:
    value = logging.getLevelName(level.upper())
    return value if isinstance(value, int) else logging.INFO


def configure_structlog(level: str | None = None, fmt: str | None = None) -> None:
    """(Re)configure structlog. Unknown levels fall back to INFO, unknown formats to json."""
    level = level or os.getenv("LOG_LEVEL", "INFO")
    fmt = (fmt or os.getenv("LOG_FORMAT", "json")).strip().lower()
    processors: list[Any] = [
        structlog.contextvars.merge_contextvars,
        structlog.processors.add_log_level,
        structlog.processors.format_exc_info,
        _add_timestamp,
        _add_logger_key,
    ]
    if fmt == "console":
        processors.append(structlog.dev.ConsoleRenderer(colors=sys.stderr.isatty()))
    else:
        processors.append(_rename_event)
        processors.append(structlog.processors.JSONRenderer(sort_keys=True))
    structlog.configure(
        processors=processors,
        wrapper_class=structlog.make_filtering_bound_logger(_level_value(level)),
        context_class=dict,
        logger_factory=_stderr_logger,
        cache_logger_on_first_use=False,
    )


if not structlog.is_configured():
    configure_structlog()


def get_logger(name: str) -> Any:
    """
    Return a lazy structured logger for the given module name; it picks up
    any later configure_structlog() call.

        logger = get_logger(__name__)
        logger.info("evaluation_finished", correct=170, total=178)

    Output (JSON): {"correct": 170, "event_type": "evaluation_finished", "level": "info", "logger": "tinyml_eval.evaluation.driver", "timestamp": "...", "total": 178}
    """
    return structlog.get_logger(name, logger_name=name)


def bind_run(run_id: str) -> structlog.BoundLogger:
    """Logger with run_id bound, so every event of one harness run can be grouped."""
    return get_logger("tinyml_eval.run").bind(run_id=run_id)
