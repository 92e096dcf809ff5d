"""Main CLI entry point for testopener."""

import asyncio
import logging
import os
import sys
from pathlib import Path
from typing import Any

import click
from rich.console import Console

from ..adapters.io.enhanced_logging import LoggerManager, setup_enhanced_logging
from ..adapters.io.rich_cli import RichCliComponents, UIStyle, get_theme
from ..adapters.io.ui_rich import RichUIAdapter
from ..config.loader import ConfigLoader, ConfigurationError
from ..config.models import TestOpenerConfig
from ..domain.conventions import CONVENTION_RULES
from .dependency_injection import DependencyError, create_dependency_container
from .key_commands import add_key_commands

logger = logging.getLogger(__name__)


def detect_ui_style(ui_flag: str | None) -> UIStyle | None:
    """
    Pick the UI style from the flag or the terminal.

    Returns None when neither decides, leaving the choice to configuration
    (``ui.style``, also settable as ``TESTOPENER_UI__STYLE``).
    """
    # Priority 1: Explicit --ui flag
    if ui_flag:
        return UIStyle(ui_flag.lower())

    # Priority 2: CI or non-interactive output
    if os.getenv("CI") == "true" or not sys.stdout.isatty():
        return UIStyle.MINIMAL

    return None


class ClickContext:
    """Context object for Click commands."""

    def __init__(self) -> None:
        self.config_file: Path | None = None
        self.console: Console | None = None
        self.rich_cli: RichCliComponents | None = None
        self.ui_style: UIStyle | None = None
        self.verbose: bool = False
        self.quiet: bool = False


@click.group()
@click.option(
    "--config",
    "-c",
    type=click.Path(exists=True, path_type=Path),
    help="Path to configuration file",
)
@click.option("--verbose", "-v", is_flag=True, help="Enable verbose output")
@click.option(
    "--quiet",
    "-q",
    is_flag=True,
    help="Reduce output: set log level to WARNING and hide INFO",
)
@click.option(
    "--ui",
    type=click.Choice(["minimal", "classic"], case_sensitive=False),
    help="UI style: 'minimal' for CI/non-TTY, 'classic' for interactive (auto-detected by default)",
)
@click.version_option(package_name="testopener")
@click.pass_context
def app(
    ctx: click.Context,
    config: Path | None,
    verbose: bool,
    quiet: bool,
    ui: str | None,
) -> None:
    """testopener - open the test file for a source file, or generate one."""
    ctx.ensure_object(ClickContext)
    ctx.obj.config_file = config
    ctx.obj.verbose = verbose
    ctx.obj.quiet = quiet
    ctx.obj.ui_style = detect_ui_style(ui)

    style = ctx.obj.ui_style or UIStyle.CLASSIC
    ctx.obj.console = Console(theme=get_theme(style))
    ctx.obj.rich_cli = RichCliComponents(ctx.obj.console, style=style)

    main_logger = setup_enhanced_logging(ctx.obj.console)
    LoggerManager.set_verbosity(verbose=verbose, quiet=quiet)
    main_logger.info("testopener started")
    if verbose and not quiet:
        main_logger.debug("Debug mode enabled - verbose logging active")


def bootstrap(
    ctx: click.Context,
    root: Path | None = None,
    allow_generation: bool = True,
    assume_yes: bool = False,
) -> dict[str, Any]:
    """
    Load configuration and build the service container for a command.

    Exits with status 1 on configuration or wiring errors.
    """
    obj: ClickContext = ctx.obj
    cli_overrides: dict[str, Any] = {}
    if obj.ui_style is not None:
        cli_overrides["ui"] = {"style": obj.ui_style.value}

    try:
        loader = ConfigLoader(obj.config_file, search_dir=root)
        config: TestOpenerConfig = loader.load_config(cli_overrides=cli_overrides)

        LoggerManager.set_verbosity(
            verbose=obj.verbose,
            quiet=obj.quiet,
            suppress_modules=config.logging.suppress_modules,
        )

        ui = RichUIAdapter(
            obj.console, ui_style=UIStyle(config.ui.style), assume_yes=assume_yes
        )
        obj.rich_cli = ui.rich_cli
        return create_dependency_container(
            config, ui, root=root, allow_generation=allow_generation
        )

    except ConfigurationError as e:
        obj.rich_cli.display_error(f"Configuration error: {e}", "Configuration Failed")
        logger.error(f"Configuration initialization failed: {e}")
        sys.exit(1)
    except DependencyError as e:
        obj.rich_cli.display_error(f"Dependency injection error: {e}", "Initialization Failed")
        logger.error(f"Dependency injection failed: {e}", exc_info=obj.verbose)
        sys.exit(1)


# ============================================================================
# MAIN COMMANDS
# ============================================================================


@app.command(name="open")
@click.argument("file", type=click.Path(dir_okay=False, path_type=Path))
@click.option(
    "--root",
    "-r",
    type=click.Path(exists=True, file_okay=False, path_type=Path),
    default=".",
    help="Workspace directory searched for test files (default: current directory)",
)
@click.option(
    "--no-generate",
    is_flag=True,
    help="Do not offer to generate a test file when none is found",
)
@click.option(
    "--yes",
    "-y",
    "assume_yes",
    is_flag=True,
    help="Generate without asking for confirmation",
)
@click.pass_context
def open_test(
    ctx: click.Context,
    file: Path,
    root: Path,
    no_generate: bool,
    assume_yes: bool,
) -> None:
    """Open the test file for FILE, or offer to generate one."""
    container = bootstrap(
        ctx, root=root, allow_generation=not no_generate, assume_yes=assume_yes
    )
    usecase = container["open_usecase"]

    try:
        result = asyncio.run(usecase.run(file))
    except KeyboardInterrupt:
        ctx.obj.rich_cli.display_warning("Interrupted", "Cancelled")
        sys.exit(130)
    except Exception as e:
        ctx.obj.rich_cli.display_error(f"Unexpected error: {e}", "Open Failed")
        logger.error(f"Unexpected error while opening test file: {e}", exc_info=ctx.obj.verbose)
        sys.exit(1)

    logger.debug(f"Finished with outcome {result.outcome.value}")
    if result.outcome.is_error:
        sys.exit(1)


@app.command()
@click.pass_context
def conventions(ctx: click.Context) -> None:
    """Show the test file naming conventions."""
    rich_cli: RichCliComponents = ctx.obj.rich_cli
    rows = []
    for rule in CONVENTION_RULES:
        extensions = sorted(rule.extension_group)
        rows.append(
            (rule.name, " ".join(extensions), rule.apply("Foo", extensions[0]))
        )
    rich_cli.print_table(rich_cli.create_conventions_table(rows))


add_key_commands(app, bootstrap)


if __name__ == "__main__":
    app()
