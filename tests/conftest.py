"""Global fixtures and utilities for the componentcraft test suite."""

import logging
from pathlib import Path

import pytest

from componentcraft.adapters.io.enhanced_logging import LoggerManager
from componentcraft.adapters.io.writer_memory import InMemoryWriterAdapter
from componentcraft.domain.models import GenerationResult, OutputKind


class RecordingUI:
    """UIPort stand-in that records what would have been displayed."""

    def __init__(self) -> None:
        self.written: list[tuple[OutputKind, Path]] = []
        self.errors: list[str] = []
        self.summaries: list[GenerationResult] = []

    def display_error(self, error_message, error_type="general", **kwargs):
        self.errors.append(error_message)

    def display_file_written(self, kind, file_path):
        self.written.append((kind, file_path))

    def display_generation_summary(self, result):
        self.summaries.append(result)


@pytest.fixture(autouse=True)
def reset_logging():
    """Detach the root RichHandler installed by loggers and CLI runs."""
    root_level = logging.getLogger().level
    yield
    LoggerManager.reset()
    logging.getLogger().setLevel(root_level)


@pytest.fixture(autouse=True)
def clean_env(monkeypatch):
    """Keep developer environment settings out of the tests."""
    for var in ("COMPONENTCRAFT_UI", "COMPONENTCRAFT_QUIET", "CI"):
        monkeypatch.delenv(var, raising=False)


@pytest.fixture
def root_dir() -> Path:
    """A fixed virtual root for in-memory generation."""
    return Path("/project/src/components")


@pytest.fixture
def memory_writer() -> InMemoryWriterAdapter:
    return InMemoryWriterAdapter()


@pytest.fixture
def recording_ui() -> RecordingUI:
    return RecordingUI()


@pytest.fixture
def project_dir(tmp_path: Path, monkeypatch) -> Path:
    """Run the test from inside an empty temporary directory."""
    monkeypatch.chdir(tmp_path)
    return tmp_path
