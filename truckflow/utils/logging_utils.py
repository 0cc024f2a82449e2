"""Structured logging utilities with context support."""

import logging
import threading
from typing import Any, Dict, Optional

# Thread-local storage for log context
_thread_local = threading.local()


def get_log_context() -> Dict[str, Any]:
    """
    Get a copy of the fields currently attached to log records.

    Returns:
        Context fields (empty when no LogContext is active)
    """
    return dict(getattr(_thread_local, "context", {}))


class LogContext:
    """
    Context manager for adding structured fields to log records.

    Fields are stored in thread-local storage and added to every record that
    passes through a handler configured by configure_logging().

    Example:
        with LogContext(record_index=12):
            logger.debug("Converting load")
            # Log will include the record_index field
    """

    def __init__(self, **kwargs):
        """
        Initialize log context with custom fields.

        Args:
            **kwargs: Key-value pairs to add to log records
        """
        self.fields = kwargs
        self.previous_context: Optional[Dict[str, Any]] = None

    def __enter__(self):
        """Enter context and add fields to thread-local storage."""
        if not hasattr(_thread_local, "context"):
            _thread_local.context = {}

        self.previous_context = _thread_local.context.copy()
        _thread_local.context.update(self.fields)

        return self

    def __exit__(self, exc_type, exc_val, exc_tb):
        """Exit context and restore the previous fields."""
        if self.previous_context is not None:
            _thread_local.context = self.previous_context
        else:
            _thread_local.context = {}


class _ContextFilter(logging.Filter):
    """Logging filter that adds context fields to log records."""

    def filter(self, record: logging.LogRecord) -> bool:
        """
        Add context fields to log record.

        Args:
            record: Log record to modify

        Returns:
            True (always allow record through)
        """
        for key, value in get_log_context().items():
            setattr(record, key, value)
        return True
