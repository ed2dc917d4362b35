"""
Structured logging configuration for the reversible engine.

Provides JSON or text logs with a trace_id (the state label) so step logs
from several states driven together can be told apart.

Environment Variables:
    REVSIM_LOG_LEVEL: Log level (DEBUG, INFO, WARNING, ERROR) - default: WARNING
    REVSIM_LOG_FORMAT: Log format (json, text) - default: text

Usage:
    from reversible.logging_config import setup_logging, get_logger

    setup_logging()
    logger = get_logger(__name__, trace_id="walk")
    logger.debug("step", extra={"time_index": 3})
"""

import logging
import sys
from typing import Optional

from pythonjsonlogger.json import JsonFormatter

LEVELS = {
    "DEBUG": logging.DEBUG,
    "INFO": logging.INFO,
    "WARNING": logging.WARNING,
    "ERROR": logging.ERROR,
    "CRITICAL": logging.CRITICAL,
}


class TraceIDFilter(logging.Filter):
    """
    Logging filter that adds trace_id to all log records.

    Records logged without get_logger() still format cleanly.
    """

    def filter(self, record: logging.LogRecord) -> bool:
        if not hasattr(record, "trace_id"):
            record.trace_id = "N/A"  # type: ignore
        return True


def setup_logging(level: Optional[str] = None, log_format: Optional[str] = None) -> None:
    """
    Configure root logger.

    Explicit arguments win; otherwise values come from load_config()
    (REVSIM_LOG_LEVEL / REVSIM_LOG_FORMAT).
    """
    if level is None or log_format is None:
        from .config import load_config

        config = load_config()
        level = level or config.log_level
        log_format = log_format or config.log_format

    lvl = LEVELS.get(level.upper(), logging.WARNING)

    root_logger = logging.getLogger()
    root_logger.setLevel(lvl)

    for handler in root_logger.handlers[:]:
        root_logger.removeHandler(handler)

    handler = logging.StreamHandler(sys.stderr)
    handler.setLevel(lvl)
    handler.addFilter(TraceIDFilter())

    if log_format.lower() == "json":
        formatter: logging.Formatter = JsonFormatter(
            "%(asctime)s %(name)s %(levelname)s %(message)s %(trace_id)s",
            rename_fields={
                "asctime": "timestamp",
                "name": "logger",
                "levelname": "level",
            },
        )
    else:
        formatter = logging.Formatter(
            "%(asctime)s - %(name)s - %(levelname)s - %(message)s [trace_id=%(trace_id)s]",
            datefmt="%Y-%m-%d %H:%M:%S",
        )

    handler.setFormatter(formatter)
    root_logger.addHandler(handler)


def get_logger(name: str, trace_id: Optional[str] = None) -> logging.LoggerAdapter:
    """
    Get a logger with optional trace_id for correlation.

    Args:
        name: Logger name (typically __name__)
        trace_id: Trace ID, typically the state label

    Returns:
        LoggerAdapter with trace_id in extra fields
    """
    logger = logging.getLogger(name)
    return logging.LoggerAdapter(logger, {"trace_id": trace_id or "N/A"})
