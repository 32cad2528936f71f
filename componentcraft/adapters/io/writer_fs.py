"""
Writer adapter that writes generated files to the local filesystem.

Files are replaced wholesale; nothing is merged or formatted. Write
failures are logged and re-raised unchanged.
"""

import logging
from pathlib import Path
from typing import Any


class FileSystemWriterAdapter:
    """
    Writer adapter backed by the local filesystem.

    Relative paths are resolved against ``root_dir`` when one is given,
    otherwise against the process working directory.
    """

    def __init__(
        self,
        root_dir: Path | None = None,
        encoding: str = "utf-8",
    ) -> None:
        """
        Initialize the filesystem writer adapter.

        Args:
            root_dir: Optional directory used to resolve relative paths
            encoding: Text encoding for written files
        """
        self.root_dir = root_dir
        self.encoding = encoding
        self.logger = logging.getLogger(__name__)

    def _resolve(self, file_path: str | Path) -> Path:
        file_path = Path(file_path)
        if self.root_dir is not None and not file_path.is_absolute():
            return self.root_dir / file_path
        return file_path

    def exists(self, file_path: str | Path) -> bool:
        return self._resolve(file_path).exists()

    def write(self, file_path: str | Path, content: str) -> dict[str, Any]:
        """
        Write content to a file, replacing any existing one.

        Args:
            file_path: Path where the file should be written
            content: Content to write to the file

        Returns:
            Dictionary containing write operation results

        Raises:
            OSError: If the file cannot be written
        """
        resolved_path = self._resolve(file_path)
        file_existed = resolved_path.exists()

        try:
            resolved_path.write_text(content, encoding=self.encoding)
        except OSError as e:
            self.logger.error(f"File write failed for {resolved_path}: {e}")
            raise

        bytes_written = len(content.encode(self.encoding))
        self.logger.debug(
            f"Wrote {bytes_written} bytes to {resolved_path}"
            + (" (replaced existing file)" if file_existed else "")
        )
        return {
            "success": True,
            "file_path": str(resolved_path),
            "bytes_written": bytes_written,
            "file_existed": file_existed,
        }
