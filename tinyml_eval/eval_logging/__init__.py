"""
Structured logging for TinyML Eval.

Use get_logger() in all modules; bind_run() for events of one harness run.
"""

from tinyml_eval.eval_logging.logger import LOG_FORMATS, bind_run, configure_structlog, get_logger

__all__ = ["LOG_FORMATS", "bind_run", "configure_structlog", "get_logger"]
