"""
IO adapters for file and console operations.

This module provides the writer adapters used by the generator, the Rich
UI adapter and the logging setup shared by the CLI.
"""

from .enhanced_logging import (
    LoggerManager,
    LogMode,
    StructuredLogger,
    get_logger,
    get_operation_logger,
    setup_enhanced_logging,
)
from .rich_cli import (
    COMPONENTCRAFT_THEME,
    MINIMAL_THEME,
    RichCliComponents,
    get_theme,
)
from .ui_rich import RichUIAdapter, UIError, UIStyle
from .writer_fs import FileSystemWriterAdapter
from .writer_memory import InMemoryWriterAdapter

__all__ = [
    "FileSystemWriterAdapter",
    "InMemoryWriterAdapter",
    "RichUIAdapter",
    "UIError",
    "UIStyle",
    "RichCliComponents",
    "COMPONENTCRAFT_THEME",
    "MINIMAL_THEME",
    "get_theme",
    "LoggerManager",
    "LogMode",
    "StructuredLogger",
    "get_logger",
    "get_operation_logger",
    "setup_enhanced_logging",
]
