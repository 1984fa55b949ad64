"""Core logging setup and configuration.

This module wires structured JSON logging with context propagation and
OpenTelemetry correlation while keeping configuration declarative via
``logging.config.dictConfig``.
"""

from __future__ import annotations

import json
import logging
import logging.config
from datetime import datetime, timezone
from typing import Any, Dict, Optional, Set

from opentelemetry import trace

from fluentsql.logging.filters import set_logging_context


def _build_reserved_keys() -> Set[str]:
    """Collect standard ``LogRecord`` attributes to avoid duplicating them."""
    probe = logging.LogRecord(
        name="fluentsql.probe",
        level=logging.INFO,
        pathname=__file__,
        lineno=0,
        msg="",
        args=(),
        exc_info=None,
    )
    reserved = set(probe.__dict__.keys())
    reserved.update({"asctime", "message"})
    return reserved


_RESERVED_LOG_RECORD_KEYS = _build_reserved_keys()


def get_logger(name: str) -> logging.Logger:
    return logging.getLogger(name)


class CustomJsonFormatter(logging.Formatter):
    """JSON formatter that enriches log entries with context and trace data."""

    def format(self, record: logging.LogRecord) -> str:
        log_record: Dict[str, Any] = {}

        for key, value in record.__dict__.items():
            if key not in _RESERVED_LOG_RECORD_KEYS:
                log_record[key] = value

        log_record["timestamp"] = datetime.fromtimestamp(record.created, tz=timezone.utc).isoformat()
        log_record["level"] = record.levelname
        log_record["logger"] = record.name
        log_record["message"] = record.getMessage()

        span_context = trace.get_current_span().get_span_context()
        if span_context.is_valid:
            log_record["trace_id"] = format(span_context.trace_id, "032x")
            log_record["span_id"] = format(span_context.span_id, "016x")

        if record.exc_info:
            log_record["exception"] = self.formatException(record.exc_info)

        return json.dumps(log_record, default=str)


def setup_logging(level: Optional[str] = None) -> None:
    """Configure structured logging for the ``fluentsql`` logger.

    Reads ``get_settings()`` once: the level falls back to
    ``settings.logging.level`` (``FLUENTSQL_LOG_LEVEL``) and
    ``settings.app_env`` becomes the ``environment`` field of every record.
    Replaces any static context set earlier with ``set_logging_context``.

    Args:
        level: Log level (DEBUG, INFO, WARNING, ERROR, CRITICAL). Overrides
            the configured level when given.
    """
    from fluentsql.settings import get_settings

    settings = get_settings()
    level = (level or settings.logging.level).upper()
    set_logging_context(environment=settings.app_env)

    config_dict: Dict[str, Any] = {
        "version": 1,
        "disable_existing_loggers": False,
        "formatters": {
            "fluentsql_json": {
                "()": "fluentsql.logging.logger.CustomJsonFormatter",
            }
        },
        "filters": {
            "fluentsql_context": {
                "()": "fluentsql.logging.filters.ContextFilter",
            }
        },
        "handlers": {
            "console": {
                "class": "logging.StreamHandler",
                "level": level,
                "formatter": "fluentsql_json",
                "filters": ["fluentsql_context"],
                "stream": "ext://sys.stdout",
            }
        },
        "loggers": {
            "fluentsql": {
                "level": level,
                "handlers": ["console"],
                "propagate": False,
            }
        },
    }

    logging.config.dictConfig(config_dict)
