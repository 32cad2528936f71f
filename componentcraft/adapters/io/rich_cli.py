"""
Rich CLI components and themes for componentcraft.

Provides the named console theme and small panel/list helpers shared by
the UI adapter and the CLI.
"""

from collections.abc import Iterable
from pathlib import Path

from rich.console import Console
from rich.markup import escape
from rich.panel import Panel
from rich.theme import Theme

COMPONENTCRAFT_THEME = Theme(
    {
        "primary": "bold cyan",
        "accent": "magenta",
        "muted": "dim",
        "success": "bold green",
        "warning": "yellow",
        "error": "bold red",
        "info": "blue",
        "border": "bright_black",
    }
)

# Restricted palette for CI logs and non-TTY output
MINIMAL_THEME = Theme(
    {
        "primary": "bold",
        "accent": "none",
        "muted": "dim",
        "success": "green",
        "warning": "yellow",
        "error": "red",
        "info": "none",
        "border": "dim",
    }
)


def get_theme(ui_style: str = "classic") -> Theme:
    """Return the theme for a UI style name."""
    style = getattr(ui_style, "value", ui_style)
    return MINIMAL_THEME if style == "minimal" else COMPONENTCRAFT_THEME


class RichCliComponents:
    """Panel and list helpers rendered on a shared console."""

    def __init__(self, console: Console | None = None) -> None:
        self.console = console or Console(theme=COMPONENTCRAFT_THEME)

    def display_error(
        self,
        message: str,
        title: str = "Error",
        details: Iterable[str] | None = None,
        suggestions: Iterable[str] | None = None,
    ) -> None:
        content = [f"[error]{escape(message)}[/]"]
        for detail in details or []:
            content.append(f"[muted]{escape(str(detail))}[/]")
        suggestions = list(suggestions or [])
        if suggestions:
            content.append("")
            content.append("[warning]suggestions:[/]")
            content.extend(f"  {escape(s)}" for s in suggestions)
        self.console.print(
            Panel(
                "\n".join(content),
                title=f"[error]{escape(title)}[/]",
                border_style="error",
                padding=(1, 1),
            )
        )

    def display_success(self, message: str, title: str = "Success") -> None:
        self.console.print(
            Panel(
                f"[success]{escape(message)}[/]",
                title=f"[success]{escape(title)}[/]",
                border_style="success",
            )
        )

    def print_file_list(self, title: str, paths: Iterable[Path | str]) -> None:
        self.console.print(f"[primary]{escape(title)}[/]")
        for path in paths:
            self.console.print(f"  - {escape(str(path))}", soft_wrap=True)

    def print_steps(self, title: str, steps: Iterable[str]) -> None:
        self.console.print(f"[primary]{escape(title)}[/]")
        for index, step in enumerate(steps, start=1):
            self.console.print(f"  {index}. {escape(step)}", soft_wrap=True)
