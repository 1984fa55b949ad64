"""Logging filters for context injection.

This module provides filters that inject context variables into log records,
enabling correlation of builder logs with the caller's requests.
"""

from __future__ import annotations

import logging
from contextvars import ContextVar
from typing import Any, Dict, Optional

from fluentsql.__version__ import __version__

request_id_var: ContextVar[Optional[str]] = ContextVar("request_id", default=None)
user_id_var: ContextVar[Optional[str]] = ContextVar("user_id", default=None)

_static_context: Dict[str, Any] = {}


class ContextFilter(logging.Filter):
    """Logging filter that adds context variables to log records.

    Request-scoped values come from context variables; process-wide values
    come from ``set_logging_context``.
    """

    def filter(self, record: logging.LogRecord) -> bool:
        """Add context variables to the log record.

        Args:
            record: Log record to enhance

        Returns:
            Always True (doesn't filter out any records)
        """
        setattr(record, "request_id", request_id_var.get())
        setattr(record, "user_id", user_id_var.get())
        setattr(record, "sdk_name", "fluentsql")
        setattr(record, "sdk_version", __version__)

        for key, value in _static_context.items():
            if not hasattr(record, key):
                setattr(record, key, value)

        return True


def set_logging_context(
    environment: Optional[str] = None,
    extra: Optional[Dict[str, Any]] = None,
) -> None:
    """Replace the static context attached to every log record.

    Args:
        environment: Deployment environment name, omitted when None
        extra: Additional key/value pairs to attach
    """
    _static_context.clear()
    if environment is not None:
        _static_context["environment"] = environment
    if extra:
        _static_context.update(extra)


def set_request_context(
    request_id: Optional[str] = None,
    user_id: Optional[str] = None,
) -> None:
    """Set request context variables."""
    if request_id is not None:
        request_id_var.set(request_id)
    if user_id is not None:
        user_id_var.set(user_id)


def clear_request_context() -> None:
    """Clear all request context variables."""
    request_id_var.set(None)
    user_id_var.set(None)
