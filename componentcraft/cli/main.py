"""Main CLI entry point for componentcraft."""

import logging
import os
import sys
from pathlib import Path

import click
from rich.console import Console

from .. import __version__
from ..adapters.io.enhanced_logging import (
    LoggerManager,
    LogMode,
    get_operation_logger,
    setup_enhanced_logging,
)
from ..adapters.io.rich_cli import get_theme
from ..adapters.io.ui_rich import RichUIAdapter, UIStyle
from ..adapters.io.writer_fs import FileSystemWriterAdapter
from ..application.generate_component_usecase import GenerateComponentUseCase
from ..config.loader import ConfigLoader, ConfigurationError
from ..config.models import ComponentCraftConfig
from ..domain.models import ComponentExistsError, MissingArgumentError


def detect_ui_style(ui_flag: str | None, default_style: str = "auto") -> UIStyle:
    """Detect appropriate UI style based on flag, environment, config and TTY status."""
    # Priority 1: Explicit --ui flag
    if ui_flag:
        if ui_flag.lower() == "minimal":
            return UIStyle.MINIMAL
        elif ui_flag.lower() == "classic":
            return UIStyle.CLASSIC

    # Priority 2: Environment variable
    env_ui = os.getenv("COMPONENTCRAFT_UI")
    if env_ui:
        if env_ui.lower() == "minimal":
            return UIStyle.MINIMAL
        elif env_ui.lower() == "classic":
            return UIStyle.CLASSIC

    # Priority 3: Configured default
    if default_style in ("minimal", "classic"):
        return UIStyle(default_style)

    # Priority 4: Auto-detect based on environment
    if os.getenv("CI") == "true" or not sys.stdout.isatty():
        return UIStyle.MINIMAL

    return UIStyle.CLASSIC


def _configure_output(
    ui_style: UIStyle, verbose: bool, quiet: bool, level_name: str = "WARNING"
) -> RichUIAdapter:
    """Create the console, bind logging to it and return the UI adapter."""
    theme = get_theme(ui_style.value)
    console = Console(theme=theme)
    setup_enhanced_logging(console)
    LoggerManager.set_log_mode(
        LogMode.MINIMAL if ui_style == UIStyle.MINIMAL else LogMode.CLASSIC,
        verbose=verbose,
        quiet=quiet,
        default_level=logging.getLevelName(level_name),
    )
    return RichUIAdapter(
        console, ui_style=ui_style, error_console=Console(theme=theme, stderr=True)
    )


@click.command(
    context_settings={
        "help_option_names": ["-h", "--help"],
        "ignore_unknown_options": True,
    }
)
@click.argument(
    "component_args", nargs=-1, type=click.UNPROCESSED, metavar="COMPONENT_NAME"
)
@click.option(
    "--config",
    "-c",
    "config_path",
    type=click.Path(exists=True, dir_okay=False, path_type=Path),
    help="Path to configuration file",
)
@click.option("--verbose", "-v", is_flag=True, help="Enable verbose output")
@click.option(
    "--quiet",
    "-q",
    is_flag=True,
    help="Reduce output: set log level to WARNING",
)
@click.option(
    "--ui",
    type=click.Choice(["minimal", "classic"], case_sensitive=False),
    help="UI style: 'minimal' for CI/non-TTY, 'classic' for interactive (auto-detected by default)",
)
@click.version_option(__version__, prog_name="componentcraft")
@click.pass_context
def app(
    ctx: click.Context,
    component_args: tuple[str, ...],
    config_path: Path | None,
    verbose: bool,
    quiet: bool,
    ui: str | None,
) -> None:
    """Generate COMPONENT_NAME.tsx with its test and Storybook files.

    The first positional token is the component name, taken verbatim even
    when it starts with a dash. Any further tokens are ignored.
    """
    component_name = component_args[0] if component_args else None
    root_dir = Path.cwd()

    ui_style = detect_ui_style(ui)
    ui_adapter = _configure_output(ui_style, verbose, quiet)

    try:
        config: ComponentCraftConfig = ConfigLoader(
            config_path, search_dir=root_dir
        ).load_config()
    except ConfigurationError as e:
        ui_adapter.display_error(
            f"Configuration error: {e}",
            title="Configuration Failed",
            suggestions=[
                "Check that the configuration file exists and is readable",
                "Verify the configuration file format (TOML or YAML)",
            ],
        )
        sys.exit(1)

    configured_style = detect_ui_style(ui, config.ui.default_style)
    if configured_style != ui_style or config.logging.level != "WARNING":
        ui_adapter = _configure_output(
            configured_style, verbose, quiet, config.logging.level
        )

    logger = get_operation_logger("generate")
    if verbose and not quiet:
        logger.debug(f"Debug mode enabled, writing into {root_dir}")
    if len(component_args) > 1:
        logger.debug(f"Ignoring extra arguments: {component_args[1:]}")

    use_case = GenerateComponentUseCase(
        FileSystemWriterAdapter(encoding=config.generation.encoding),
        ui_port=ui_adapter,
        config=config.generation,
    )

    try:
        with logger.operation_context("generate_component", component=component_name):
            result = use_case.generate(component_name, root_dir)
    except MissingArgumentError as e:
        ui_adapter.display_error(str(e), title="Missing Component Name")
        ui_adapter.display_usage(f"Usage: {ctx.command_path} ComponentName")
        sys.exit(1)
    except ComponentExistsError as e:
        ui_adapter.display_error(
            str(e), title="Component Exists", details=[str(e.path)]
        )
        sys.exit(1)

    ui_adapter.display_generation_summary(result)


def main() -> None:
    """Console script entry point."""
    app()
