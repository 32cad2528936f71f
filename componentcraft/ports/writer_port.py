"""
Writer port interface.

Abstracts the file store the generator writes into, so the orchestration
can run against the real filesystem or an in-memory store.
"""

from abc import abstractmethod
from pathlib import Path
from typing import Any, Protocol


class WriterPort(Protocol):
    """Port interface for file store operations."""

    @abstractmethod
    def exists(self, file_path: Path) -> bool:
        """
        Check whether a file is present at ``file_path``.

        Args:
            file_path: Path to check

        Returns:
            True if a file exists at the path
        """
        ...

    @abstractmethod
    def write(self, file_path: Path, content: str) -> dict[str, Any]:
        """
        Write ``content`` to ``file_path``, replacing any existing file.

        Args:
            file_path: Destination path
            content: Text to write

        Returns:
            Dictionary with at least ``file_path``, ``bytes_written`` and
            ``file_existed`` keys

        Raises:
            OSError: If the file cannot be written
        """
        ...
