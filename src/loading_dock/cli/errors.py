"""
Standardized error handling and exit codes for the ldock CLI.

This module provides consistent error messaging with actionable guidance
and standardized exit codes across all CLI commands.
"""

from enum import IntEnum

from rich.console import Console
from rich.markup import escape

console = Console(stderr=True)


class ExitCode(IntEnum):
    """Standard exit codes for ldock operations."""

    SUCCESS = 0
    """Operation completed successfully."""

    GENERAL_ERROR = 1
    """Staging, reading or persisting failed."""

    USER_ERROR = 2
    """Usage or environment error (actionable by user)."""


def print_error(
    problem: str,
    *,
    reason: str | None = None,
    solution: str | None = None,
) -> None:
    """
    Print a standardized error message with actionable guidance.

    Args:
        problem: Brief description of what went wrong
        reason: Optional explanation of why it happened
        solution: Optional command or action to fix it

    Example:
        >>> print_error(
        ...     "Cannot stage 'notes.txt'",
        ...     reason="No such file or directory",
        ...     solution="ldock ls  # to see what is staged",
        ... )
    """
    console.print(f"[red]Error:[/red] {escape(problem)}")

    if reason:
        console.print(f"[dim]{escape(reason)}[/dim]")

    if solution:
        console.print(f"[cyan]→ Try:[/cyan] {escape(solution)}")


def print_usage_error() -> None:
    """Print error when no subcommand was given."""
    print_error(
        "No command given",
        reason="usage: ldock [--config=PATH] {load FILENAME | ls}",
        solution="ldock --help",
    )


def print_home_dir_error(detail: str) -> None:
    """Print error when the default config location can't be resolved."""
    print_error(
        "Could not determine the default config location",
        reason=detail,
        solution="ldock --config=PATH ...  # or set LDOCK_CONFIG",
    )


def print_file_not_stageable_error(path: str, reason: str) -> None:
    """Print error when a file can't be staged."""
    print_error(
        f"Cannot stage {path!r}",
        reason=reason,
        solution="check the path exists and is a readable file",
    )


def print_config_error(detail: str) -> None:
    """Print error when the config file can't be read or written."""
    print_error(
        "Config file error",
        reason=detail,
        solution="check permissions, or point --config somewhere writable",
    )


__all__ = [
    "ExitCode",
    "console",
    "print_error",
    "print_usage_error",
    "print_home_dir_error",
    "print_file_not_stageable_error",
    "print_config_error",
]
