"""
ldock CLI - Main application entry point.

This module sets up the Typer CLI application with all subcommands.
"""

import logging
import sys
from pathlib import Path

import typer
from rich.console import Console

from loading_dock import __version__
from loading_dock.cli import staging
from loading_dock.cli.argv import preprocess_argv
from loading_dock.cli.errors import ExitCode, print_usage_error
from loading_dock.core.config.env import load_layered_env

# Create the main Typer app
app = typer.Typer(
    name="ldock",
    help="Keep a list of staged files",
    no_args_is_help=False,
    invoke_without_command=True,
    add_completion=False,
    context_settings={"help_option_names": ["--help", "-h"]},
)

console = Console()


def configure_logging(debug: bool = False) -> None:
    """
    Configure logging for ldock commands.

    Args:
        debug: If True, enable DEBUG level logging
    """
    level = logging.DEBUG if debug else logging.WARNING
    logging.basicConfig(
        level=level,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        stream=sys.stderr,
    )


@app.callback(invoke_without_command=True)
def main(
    ctx: typer.Context,
    config: Path | None = typer.Option(
        None,
        "--config",
        envvar="LDOCK_CONFIG",
        help="Config file to use instead of ~/.ld",
    ),
    debug: bool = typer.Option(
        False,
        "--debug",
        help="Enable debug output with detailed logging",
    ),
) -> None:
    """
    Loading Dock - a tiny staging area for file paths.

    Staged paths are kept in a JSON file (~/.ld unless --config is given).

    Examples:
        ldock load notes.txt         # Stage a file
        ldock ls                     # List staged files
        ldock ls --config=/tmp/ld    # Use another config file
    """
    configure_logging(debug)

    # Store global options in context for subcommands
    ctx.obj = {"debug": debug, "config": config}

    if ctx.invoked_subcommand is None:
        print_usage_error()
        raise typer.Exit(ExitCode.USER_ERROR)


app.command(name="load")(staging.load)
app.command(name="ls")(staging.ls)


@app.command()
def version() -> None:
    """Show ldock version and exit."""
    console.print(f"ldock version {__version__}")
    raise typer.Exit(0)


def cli_main() -> None:
    """
    Main CLI entry point.

    Dotenv files are loaded before Typer parses arguments so that
    ``LDOCK_CONFIG`` set in a .env file is seen by the --config option.
    The argv preprocessor lets global options follow the subcommand
    (e.g. ``ldock load a.txt --config=/tmp/ld``).
    """
    load_layered_env()
    sys.argv[1:] = preprocess_argv(sys.argv[1:])
    app()


__all__ = ["app", "cli_main", "configure_logging"]
