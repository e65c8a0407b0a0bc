"""
ldock CLI - Staging commands.

``load`` stages a file and persists the config; ``ls`` prints what is
staged without writing anything.
"""

from __future__ import annotations

import logging
from pathlib import Path

import typer
from rich.console import Console
from rich.markup import escape

from loading_dock.cli.errors import (
    ExitCode,
    print_config_error,
    print_file_not_stageable_error,
    print_home_dir_error,
)
from loading_dock.core.config import (
    ConfigError,
    ConfigPathError,
    DockConfig,
    load_config,
    resolve_config_path,
    save_config,
)
from loading_dock.core.stage import FileNotStageableError, stage_file

logger = logging.getLogger(__name__)

console = Console()


def _get_config_override(ctx: typer.Context) -> Path | None:
    """Return the --config value stored by the app callback, if any."""
    obj = ctx.obj or {}
    return obj.get("config")


def _resolve_path(override: Path | None) -> Path:
    try:
        return resolve_config_path(override)
    except ConfigPathError as e:
        print_home_dir_error(str(e))
        raise typer.Exit(ExitCode.USER_ERROR)


def _load(path: Path) -> DockConfig:
    try:
        return load_config(path)
    except ConfigError as e:
        print_config_error(str(e))
        raise typer.Exit(ExitCode.GENERAL_ERROR)


def load(
    ctx: typer.Context,
    filename: str = typer.Argument(
        ...,
        help="File to stage",
        show_default=False,
    ),
) -> None:
    """
    Stage a file.

    The file must exist and be readable. Staging a file that is already
    staged does nothing. The path is stored exactly as typed.

    Examples:
        ldock load notes.txt
        ldock load ./src/app.py --config=/tmp/ld
    """
    override = _get_config_override(ctx)
    path = _resolve_path(override)
    logger.debug("Using config %s", path)

    cfg = _load(path)

    try:
        added = stage_file(cfg, filename)
    except FileNotStageableError as e:
        print_file_not_stageable_error(e.path, e.reason)
        raise typer.Exit(ExitCode.GENERAL_ERROR)

    # Save the config back to where it was loaded from
    try:
        save_config(path, cfg)
    except ConfigError as e:
        print_config_error(str(e))
        raise typer.Exit(ExitCode.GENERAL_ERROR)

    if added:
        console.print(f"[green]Staged[/green] {escape(filename)}")
    else:
        console.print(f"[dim]Already staged:[/dim] {escape(filename)}")


def ls(ctx: typer.Context) -> None:
    """
    List staged files, one per line, in the order they were staged.

    Never modifies the config file.
    """
    override = _get_config_override(ctx)
    path = _resolve_path(override)
    logger.debug("Using config %s", path)

    cfg = _load(path)

    for filename in cfg.staged:
        typer.echo(filename)
