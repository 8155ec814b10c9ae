"""
Copyright (c) 2025 Eric C. Mumford (@heymumford)
This file is part of SKILLFIX, licensed under the MIT License.
See LICENSE file for details.
"""

"""Logging infrastructure with contextual tracking.

This module provides structured logging with context data, correlation IDs,
JSON and Rich output, and a timing context manager for operations.
"""

import json
import logging
import os
import sys
import threading
import time
import uuid
from collections.abc import Iterator
from contextlib import contextmanager
from datetime import datetime
from typing import Any

from rich.console import Console
from rich.logging import RichHandler

# Thread-local storage for context data
_context_local = threading.local()


class CorrelationIdManager:
    """
    Manages correlation IDs across threads using thread-local storage.

    Each thread sees its own correlation ID, so logs emitted while building
    or measuring one fixture can be grouped together.

    """

    def get_correlation_id(self) -> str:
        """
        Get the current correlation ID or generate a new one.
        """
        if not getattr(_context_local, "correlation_id", None):
            _context_local.correlation_id = f"skillfix-{uuid.uuid4()}"
        return _context_local.correlation_id

    def set_correlation_id(self, correlation_id: str) -> None:
        """
        Set the current correlation ID.
        """
        _context_local.correlation_id = correlation_id

    def clear_correlation_id(self) -> None:
        """
        Clear the current correlation ID.
        """
        if hasattr(_context_local, "correlation_id"):
            delattr(_context_local, "correlation_id")


# Global correlation ID manager instance
correlation_manager = CorrelationIdManager()


class StructuredLogger(logging.Logger):
    """
    Logger that supports structured logging with context data.

    Any logging call accepts a ``context`` keyword whose dict is attached to
    the record as ``context_data``.
    """

    def _log(
        self,
        level: int,
        msg: Any,
        args: tuple,
        exc_info: bool | tuple | None = None,
        extra: dict[str, Any] | None = None,
        stack_info: bool = False,
        stacklevel: int = 1,
        context: dict[str, Any] | None = None,
    ) -> None:
        """
        Log a message with the specified level and optional context.

        Args:
        ----
            level: The log level (DEBUG, INFO, etc.)
            msg: The message to log
            args: Arguments for string formatting
            exc_info: Exception info for traceback
            extra: Extra attributes to add to the LogRecord
            stack_info: Whether to include stack info
            stacklevel: Stack frame offset used to locate the caller
            context: Context key-value pairs to attach to the record

        """
        extra = dict(extra) if extra else {}

        if context:
            # context_data avoids clashing with LogRecord attributes
            extra["context_data"] = context

        extra["correlation_id"] = correlation_manager.get_correlation_id()

        super()._log(level, msg, args, exc_info, extra, stack_info, stacklevel + 1)


class JSONFormatter(logging.Formatter):
    """
    Formatter that outputs log records as JSON.
    """

    def format(self, record: logging.LogRecord) -> str:
        """
        Format the log record as a JSON string.

        Args:
        ----
            record: The LogRecord to format

        Returns:
        -------
            A JSON string representation of the log record

        """
        log_data: dict[str, Any] = {
            "timestamp": datetime.now().isoformat(),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
            "module": record.module,
            "function": record.funcName,
            "line": record.lineno,
        }

        if hasattr(record, "correlation_id"):
            log_data["correlation_id"] = record.correlation_id

        if getattr(record, "context_data", None):
            log_data["context"] = record.context_data

        if record.exc_info:
            log_data["exception"] = {
                "type": record.exc_info[0].__name__,
                "message": str(record.exc_info[1]),
                "traceback": self.formatException(record.exc_info),
            }

        return json.dumps(log_data, default=str)


class RichContextFormatter(logging.Formatter):
    """
    Formatter for Rich console output with context data.
    """

    def format(self, record: logging.LogRecord) -> str:
        """
        Format the log record for Rich console output.

        Args:
        ----
            record: The LogRecord to format

        Returns:
        -------
            A formatted string with context data and correlation ID

        """
        message = super().format(record)

        context_data = getattr(record, "context_data", None)
        if context_data:
            context_str = " ".join(f"[{k}={v}]" for k, v in context_data.items())
            message = f"{message} {context_str}"

        if hasattr(record, "correlation_id"):
            message = f"{message} [correlation_id={record.correlation_id}]"

        return message


@contextmanager
def log_operation(
    logger: logging.Logger,
    operation_name: str,
    level: int = logging.INFO,
    context: dict[str, Any] | None = None,
) -> Iterator[dict[str, Any]]:
    """
    Context manager for logging operations with timing and context tracking.

    Args:
    ----
        logger: The logger instance to use
        operation_name: Name of the operation being performed
        level: Log level to use
        context: Additional context data to include in the logs

    Yields:
    ------
        dict: The operation context, including its generated ``operation_id``

    Raises:
    ------
        Exception: Re-raises any exception that occurs within the context

    """
    start_time = time.perf_counter()
    context = {**(context or {}), "operation_id": str(uuid.uuid4())[:8]}

    logger.log(level, f"Starting {operation_name}", extra={"context_data": context})

    try:
        yield context
    except Exception as e:
        duration = time.perf_counter() - start_time
        error_context = {
            **context,
            "error_type": type(e).__name__,
            "error": str(e),
            "duration": f"{duration:.2f}s",
        }
        logger.log(
            logging.ERROR,
            f"Failed {operation_name} after {duration:.2f}s",
            extra={"context_data": error_context},
            exc_info=True,
        )
        raise

    duration = time.perf_counter() - start_time
    logger.log(
        level,
        f"Completed {operation_name} in {duration:.2f}s",
        extra={"context_data": context},
    )


@contextmanager
def correlation_id(correlation_id: str | None = None) -> Iterator[str]:
    """
    Context manager for setting a correlation ID for the current context.

    Args:
    ----
        correlation_id: ID to use, or None to generate a new one

    Yields:
    ------
        str: The current correlation ID (either provided or generated)

    """
    previous_id = getattr(_context_local, "correlation_id", None)

    correlation_manager.set_correlation_id(correlation_id or f"skillfix-{uuid.uuid4()}")

    try:
        yield correlation_manager.get_correlation_id()
    finally:
        if previous_id:
            correlation_manager.set_correlation_id(previous_id)
        else:
            correlation_manager.clear_correlation_id()


def _build_formatter(
    json_format: bool, include_timestamp: bool, date_format: str | None = None,
) -> logging.Formatter:
    if json_format:
        return JSONFormatter()
    format_str = (
        "%(asctime)s [%(levelname)s] %(name)s: %(message)s"
        if include_timestamp
        else "[%(levelname)s] %(name)s: %(message)s"
    )
    return logging.Formatter(format_str, datefmt=date_format)


def configure_logging(
    level: int | str = logging.INFO,
    log_file: str | None = None,
    json_format: bool = False,
    include_timestamp: bool = True,
    use_rich: bool = True,
    debug: bool = False,
    format_string: str = "%(message)s",
    date_format: str | None = None,
) -> None:
    """
    Configure application logging.

    Args:
    ----
        level: Log level (DEBUG, INFO, WARNING, ERROR, CRITICAL or integer)
        log_file: Optional path to log file
        json_format: Whether to use JSON format for logs
        include_timestamp: Whether to include timestamps in logs
        use_rich: Whether to use Rich for console output
        debug: Whether to force debug mode
        format_string: Message format for the Rich console handler
        date_format: strftime format for log timestamps

    """
    if isinstance(level, str):
        level = getattr(logging, level.upper())

    if debug:
        level = logging.DEBUG

    handlers: list[logging.Handler] = []

    if use_rich and not json_format:
        rich_handler = RichHandler(
            console=Console(stderr=True),
            rich_tracebacks=True,
            markup=False,
            show_time=include_timestamp,
            log_time_format=date_format or "[%x %X]",
        )
        rich_handler.setFormatter(RichContextFormatter(format_string))
        handlers.append(rich_handler)
    else:
        console_handler = logging.StreamHandler(sys.stderr)
        console_handler.setFormatter(_build_formatter(json_format, include_timestamp, date_format))
        handlers.append(console_handler)

    if log_file:
        os.makedirs(os.path.dirname(os.path.abspath(log_file)), exist_ok=True)
        file_handler = logging.FileHandler(log_file)
        file_handler.setFormatter(_build_formatter(json_format, include_timestamp, date_format))
        handlers.append(file_handler)

    # Configure skillfix logger; the root logger is left to the host application
    logger = logging.getLogger("skillfix")
    logger.setLevel(level)
    logger.propagate = False

    for handler in list(logger.handlers):
        logger.removeHandler(handler)
        handler.close()
    for handler in handlers:
        logger.addHandler(handler)

    logger.debug(f"Logging configured with level {logging.getLevelName(level)}")


def get_logger(name: str) -> StructuredLogger:
    """
    Get a structured logger.

    Args:
    ----
        name: Name of the logger, typically __name__

    Returns:
    -------
        A structured logger instance

    """
    previous_class = logging.getLoggerClass()
    logging.setLoggerClass(StructuredLogger)
    try:
        return logging.getLogger(name)
    finally:
        logging.setLoggerClass(previous_class)
