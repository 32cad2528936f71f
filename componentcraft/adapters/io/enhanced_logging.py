"""
Enhanced logging system with Rich integration and structured messages.

This module provides:
- A single RichHandler on the root logger bound to the CLI console
- Operation-scoped loggers with start/complete/failure messages
- Classic and minimal log modes with message sanitization
"""

import logging
import os
import re
import threading
import time
from contextlib import contextmanager
from enum import Enum
from typing import Any

from rich.console import Console
from rich.logging import RichHandler

from .rich_cli import COMPONENTCRAFT_THEME


class LogMode(str, Enum):
    """Logging output modes."""

    CLASSIC = "classic"
    MINIMAL = "minimal"


class StructuredLogger:
    """Logger wrapper with operation context tracking."""

    def __init__(self, name: str, console: Console | None = None) -> None:
        self.name = name
        self.console = console or Console(theme=COMPONENTCRAFT_THEME)
        self.logger = logging.getLogger(name)
        self._setup_rich_handler()

        self._context_stack: list[dict[str, Any]] = []
        self._max_context_depth = 10

    def _setup_rich_handler(self) -> None:
        """Rely on the root RichHandler, installing it once if missing."""
        root_logger = logging.getLogger()
        has_root_rich_handler = any(
            isinstance(h, RichHandler) for h in root_logger.handlers
        )

        if not has_root_rich_handler and not LoggerManager._setup_complete:
            LoggerManager.setup_global_logging(self.console)

        self.logger.handlers = []
        self.logger.propagate = True

    @contextmanager
    def operation_context(self, operation: str, **context: Any):
        """Context manager for operation-specific logging with proper stack management."""
        if not operation or not isinstance(operation, str):
            raise ValueError("Operation name must be a non-empty string")

        if len(self._context_stack) >= self._max_context_depth:
            raise RuntimeError(
                f"Context stack depth limit ({self._max_context_depth}) exceeded"
            )

        start_time = time.time()
        full_context = {
            "operation": operation,
            "operation_id": f"{operation}_{int(start_time)}",
            "start_time": start_time,
            **context,
        }
        self._context_stack.append(full_context)

        self.debug(
            f"starting {operation}",
            extra={"operation_start": True, "operation_context": full_context},
        )

        failed = False
        try:
            yield self
        except Exception as e:
            failed = True
            duration = time.time() - start_time
            self.debug(
                f"{operation} failed after {duration:.2f}s: {e}",
                extra={
                    "operation_failed": True,
                    "duration": duration,
                    "operation_context": full_context,
                },
            )
            raise
        finally:
            if self._context_stack:
                self._context_stack.pop()

            if not failed:
                duration = time.time() - start_time
                self.debug(
                    f"{operation} completed in {duration:.2f}s",
                    extra={
                        "operation_complete": True,
                        "duration": duration,
                        "operation_context": full_context,
                    },
                )

    def _log(self, level: int, message: str, **kwargs: Any) -> None:
        self.logger.log(level, LoggerManager._prepare_message(message), **kwargs)

    def info(self, message: str, **kwargs: Any) -> None:
        self._log(logging.INFO, message, **kwargs)

    def debug(self, message: str, **kwargs: Any) -> None:
        self._log(logging.DEBUG, message, **kwargs)

    def warning(self, message: str, **kwargs: Any) -> None:
        self._log(logging.WARNING, message, **kwargs)

    def error(self, message: str, **kwargs: Any) -> None:
        self._log(logging.ERROR, message, **kwargs)


class LoggerManager:
    """Manager for creating and configuring structured loggers."""

    _loggers: dict[str, StructuredLogger] = {}
    _console: Console | None = None
    _handler: RichHandler | None = None
    log_mode: LogMode = LogMode.CLASSIC
    _explicit_level: int | None = None
    _setup_complete: bool = False
    _setup_lock: threading.Lock = threading.Lock()

    @classmethod
    def setup_global_logging(
        cls, console: Console | None = None, level: int = logging.WARNING
    ) -> None:
        """
        Install one RichHandler on the root logger.

        Calling again with a different console rebinds the handler, so each
        CLI invocation logs to its own console.
        """
        with cls._setup_lock:
            console = console or cls._console or Console(theme=COMPONENTCRAFT_THEME)
            root_logger = logging.getLogger()

            if cls._setup_complete and cls._console is console:
                root_logger.setLevel(level)
                cls._explicit_level = level
                return

            for handler in list(root_logger.handlers):
                if isinstance(handler, RichHandler):
                    root_logger.removeHandler(handler)

            cls._console = console
            cls._handler = RichHandler(
                console=console,
                show_time=False,
                show_path=False,
                markup=False,
                rich_tracebacks=True,
            )
            cls._handler.setFormatter(logging.Formatter(fmt="%(message)s"))

            root_logger.addHandler(cls._handler)
            root_logger.setLevel(level)
            cls._explicit_level = level
            cls._setup_complete = True

    @classmethod
    def set_log_mode(
        cls,
        mode: LogMode,
        verbose: bool = False,
        quiet: bool = False,
        default_level: int = logging.WARNING,
    ) -> int:
        """Configure log mode and root level; returns the level applied."""
        cls.log_mode = mode
        # quiet > verbose > configured default
        if quiet or os.getenv("COMPONENTCRAFT_QUIET", "").lower() in {
            "1",
            "true",
            "yes",
        }:
            level = logging.WARNING
        elif verbose:
            level = logging.DEBUG
        else:
            level = default_level

        logging.getLogger().setLevel(level)
        cls._explicit_level = level
        return level

    @staticmethod
    def _strip_rich_tags(message: str) -> str:
        """Remove Rich markup tags like [primary]...[/] from a message."""
        return re.sub(r"\[/?[a-z_ ]*\]", "", message)

    @classmethod
    def _prepare_message(cls, message: Any) -> str:
        """Sanitize a message for the current log mode."""
        if message is None:
            return ""
        message = str(message)
        if cls.log_mode == LogMode.MINIMAL:
            return re.sub(r"\s+", " ", cls._strip_rich_tags(message)).strip()
        return message

    @classmethod
    def get_logger(cls, name: str) -> StructuredLogger:
        """Get or create a structured logger."""
        structured_logger = cls._loggers.get(name)
        if structured_logger is None:
            structured_logger = cls._loggers.setdefault(
                name, StructuredLogger(name, cls._console)
            )

        structured_logger.logger.handlers = []
        structured_logger.logger.propagate = True
        return structured_logger

    @classmethod
    def get_operation_logger(cls, operation: str) -> StructuredLogger:
        """Get logger for specific operation."""
        return cls.get_logger(f"componentcraft.{operation}")

    @classmethod
    def reset(cls) -> None:
        """Detach the root handler and forget cached loggers."""
        with cls._setup_lock:
            if cls._handler is not None:
                logging.getLogger().removeHandler(cls._handler)
            cls._handler = None
            cls._console = None
            cls._loggers.clear()
            cls._setup_complete = False
            cls._explicit_level = None
            cls.log_mode = LogMode.CLASSIC


def setup_enhanced_logging(
    console: Console | None = None, level: int = logging.WARNING
) -> StructuredLogger:
    """Set up enhanced logging system."""
    LoggerManager.setup_global_logging(console, level)
    return LoggerManager.get_logger("componentcraft.main")


def get_logger(name: str) -> StructuredLogger:
    """Get a structured logger by name."""
    return LoggerManager.get_logger(name)


def get_operation_logger(operation: str) -> StructuredLogger:
    """Get logger for specific operations."""
    return LoggerManager.get_operation_logger(operation)
