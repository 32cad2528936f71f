"""
Rich UI adapter implementing the UIPort interface.

This module provides a UIPort implementation using Rich components for
console output. The classic style renders panels; the minimal style
prints plain single lines suited to CI logs and pipes.
"""

from enum import Enum
from pathlib import Path
from typing import Any

from rich.console import Console
from rich.markup import escape

from ...domain.models import GenerationResult, OutputKind
from ...ports.ui_port import UIPort
from .rich_cli import COMPONENTCRAFT_THEME, RichCliComponents

FILE_LABELS = {
    OutputKind.COMPONENT: "component",
    OutputKind.TEST: "test file",
    OutputKind.STORY: "Storybook stories",
}

NEXT_STEPS = [
    "Import the component where you need it",
    "Run the tests: npm test",
    "Browse it in Storybook: npm run storybook",
]


class UIStyle(str, Enum):
    """UI style options for controlling visual complexity and theming."""

    MINIMAL = "minimal"
    CLASSIC = "classic"


class UIError(Exception):
    """Exception raised when UI operations fail."""

    pass


class RichUIAdapter(UIPort):
    """
    Rich UI adapter implementing the UIPort interface.

    All user-supplied text (component names, paths) is escaped before it
    reaches Rich markup, so names containing brackets print verbatim.
    """

    def __init__(
        self,
        console: Console | None = None,
        ui_style: UIStyle = UIStyle.CLASSIC,
        error_console: Console | None = None,
    ) -> None:
        """
        Initialize the Rich UI adapter.

        Args:
            console: Optional Rich Console instance (will create one if not provided)
            ui_style: Visual style for output
            error_console: Console for errors and usage (defaults to ``console``)
        """
        self._console = console or Console(theme=COMPONENTCRAFT_THEME)
        self._error_console = error_console or self._console
        self.ui_style = ui_style
        self.rich_cli = RichCliComponents(self._console)
        self.error_cli = RichCliComponents(self._error_console)

    @property
    def console(self) -> Console:
        return self._console

    @property
    def error_console(self) -> Console:
        return self._error_console

    @property
    def minimal(self) -> bool:
        return self.ui_style == UIStyle.MINIMAL

    def display_error(
        self, error_message: str, error_type: str = "general", **kwargs: Any
    ) -> None:
        """
        Display error information to the user.

        Args:
            error_message: Error message to display
            error_type: Type of error
            **kwargs: ``title``, ``details`` (list of lines) and ``suggestions``
        """
        try:
            title = kwargs.get("title") or (
                error_type if error_type and error_type != "general" else "Error"
            )
            details = kwargs.get("details") or []
            suggestions = kwargs.get("suggestions") or []

            if self.minimal:
                self.error_console.print(f"[error]error:[/] {escape(error_message)}")
                for detail in details:
                    self.error_console.print(
                        f"  {escape(str(detail))}", soft_wrap=True
                    )
                for suggestion in suggestions:
                    self.error_console.print(f"  [muted]hint:[/] {escape(suggestion)}")
            else:
                self.error_cli.display_error(
                    error_message, title, details, suggestions
                )
        except Exception as e:
            raise UIError(f"Failed to display error: {str(e)}") from e

    def display_usage(self, usage: str) -> None:
        """Print a usage line."""
        self.error_console.print(escape(usage), soft_wrap=True)

    def display_file_written(self, kind: OutputKind, file_path: Path) -> None:
        label = FILE_LABELS.get(kind, str(kind))
        self.console.print(
            f"[success]✓[/] Generated {label}: {escape(str(file_path))}",
            soft_wrap=True,
        )

    def display_generation_summary(self, result: GenerationResult) -> None:
        """
        Display the success banner, generated paths and next steps.

        Args:
            result: Result of the generation run

        Raises:
            UIError: If the summary cannot be rendered
        """
        try:
            banner = f"{result.name} component generated"
            self.console.print()
            if self.minimal:
                self.console.print(f"[success]✓ {escape(banner)}[/]")
            else:
                self.rich_cli.display_success(banner, "Done")
            self.console.print()
            self.rich_cli.print_file_list("Generated files:", result.paths)
            self.console.print()
            self.rich_cli.print_steps("Next steps:", NEXT_STEPS)
        except Exception as e:
            raise UIError(f"Failed to display generation summary: {str(e)}") from e
