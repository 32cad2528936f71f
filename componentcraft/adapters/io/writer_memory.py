"""
In-memory writer adapter.

Keeps written files in a dictionary keyed by path. Used to exercise the
generator without touching the real filesystem.
"""

import logging
from pathlib import Path
from typing import Any


class InMemoryWriterAdapter:
    """Writer adapter that stores file contents in memory."""

    def __init__(
        self, files: dict[Path, str] | None = None, encoding: str = "utf-8"
    ) -> None:
        self.files: dict[Path, str] = {
            Path(path): content for path, content in (files or {}).items()
        }
        self.encoding = encoding
        self.write_log: list[Path] = []
        self.logger = logging.getLogger(__name__)

    def exists(self, file_path: str | Path) -> bool:
        return Path(file_path) in self.files

    def write(self, file_path: str | Path, content: str) -> dict[str, Any]:
        file_path = Path(file_path)
        file_existed = file_path in self.files
        self.files[file_path] = content
        self.write_log.append(file_path)
        self.logger.debug(f"Stored {file_path} in memory")
        return {
            "success": True,
            "file_path": str(file_path),
            "bytes_written": len(content.encode(self.encoding)),
            "file_existed": file_existed,
        }

    def read(self, file_path: str | Path) -> str:
        """Return the stored content for ``file_path``."""
        return self.files[Path(file_path)]
