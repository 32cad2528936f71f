"""Port interface for user-facing console output."""

from abc import abstractmethod
from pathlib import Path
from typing import Any, Protocol

from ..domain.models import GenerationResult, OutputKind


class UIPort(Protocol):
    """Port interface for ui operations."""

    @abstractmethod
    def display_error(
        self, error_message: str, error_type: str = "general", **kwargs: Any
    ) -> None:
        """Display an error, with optional ``details`` and ``suggestions``."""
        ...

    @abstractmethod
    def display_file_written(self, kind: OutputKind, file_path: Path) -> None:
        """Confirm that a generated file was written."""
        ...

    @abstractmethod
    def display_generation_summary(self, result: GenerationResult) -> None:
        """Display the final success banner, file list and next steps."""
        ...
