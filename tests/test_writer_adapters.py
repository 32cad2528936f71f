"""
Tests for writer adapter implementations.

This module tests the filesystem and in-memory writer adapters used by
the generator.
"""

from pathlib import Path

import pytest

from componentcraft.adapters.io.writer_fs import FileSystemWriterAdapter
from componentcraft.adapters.io.writer_memory import InMemoryWriterAdapter
from componentcraft.ports.writer_port import WriterPort


class TestFileSystemWriterAdapter:
    """Test the filesystem writer adapter."""

    def test_write_new_file(self, tmp_path: Path):
        """Test writing to a new file."""
        adapter = FileSystemWriterAdapter()
        target = tmp_path / "Button.tsx"

        result = adapter.write(target, "export default Button;\n")

        assert result["success"] is True
        assert result["file_existed"] is False
        assert result["bytes_written"] == len("export default Button;\n")
        assert target.read_text(encoding="utf-8") == "export default Button;\n"

    def test_write_replaces_existing_file(self, tmp_path: Path):
        """Existing content is replaced, not appended to."""
        target = tmp_path / "Button.test.tsx"
        target.write_text("old content", encoding="utf-8")

        result = FileSystemWriterAdapter().write(target, "new content")

        assert result["file_existed"] is True
        assert target.read_text(encoding="utf-8") == "new content"

    def test_exists(self, tmp_path: Path):
        adapter = FileSystemWriterAdapter()
        target = tmp_path / "Card.tsx"
        assert adapter.exists(target) is False
        target.write_text("x", encoding="utf-8")
        assert adapter.exists(target) is True

    def test_relative_paths_resolve_against_root(self, tmp_path: Path):
        adapter = FileSystemWriterAdapter(root_dir=tmp_path)

        result = adapter.write("Card.tsx", "card")

        assert (tmp_path / "Card.tsx").read_text(encoding="utf-8") == "card"
        assert result["file_path"] == str(tmp_path / "Card.tsx")
        assert adapter.exists("Card.tsx") is True

    def test_bytes_written_uses_encoding(self, tmp_path: Path):
        result = FileSystemWriterAdapter().write(tmp_path / "Label.tsx", "é")
        assert result["bytes_written"] == 2

    def test_write_into_missing_directory_propagates(self, tmp_path: Path):
        """Write failures are not wrapped or swallowed."""
        adapter = FileSystemWriterAdapter()
        with pytest.raises(OSError):
            adapter.write(tmp_path / "missing" / "Button.tsx", "content")

    def test_satisfies_writer_port(self):
        adapter: WriterPort = FileSystemWriterAdapter()
        assert callable(adapter.exists)
        assert callable(adapter.write)


class TestInMemoryWriterAdapter:
    """Test the in-memory writer adapter."""

    def test_write_and_read(self):
        adapter = InMemoryWriterAdapter()
        path = Path("/virtual/Button.tsx")

        result = adapter.write(path, "content")

        assert result["file_existed"] is False
        assert adapter.exists(path)
        assert adapter.read(path) == "content"
        assert adapter.write_log == [path]

    def test_seeded_files_exist(self):
        adapter = InMemoryWriterAdapter({"/virtual/Card.tsx": "seed"})
        assert adapter.exists(Path("/virtual/Card.tsx"))
        assert adapter.read("/virtual/Card.tsx") == "seed"

    def test_overwrite_reports_existing(self):
        adapter = InMemoryWriterAdapter({"/virtual/Card.tsx": "seed"})
        result = adapter.write("/virtual/Card.tsx", "new")
        assert result["file_existed"] is True
        assert adapter.read("/virtual/Card.tsx") == "new"
