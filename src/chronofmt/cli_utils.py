"""Shared helpers for the chronofmt CLI.

Holds the rich console, exit codes, logging setup and the colored
message helpers used by every command.
"""

import logging

from rich.console import Console
from rich.logging import RichHandler

EXIT_SUCCESS = 0
EXIT_ERROR = 1
EXIT_CONFIG_ERROR = 2

console = Console()
err_console = Console(stderr=True)


def _setup_logging(verbose: bool, quiet: bool) -> None:
    """Configure root logging for a CLI run.

    Args:
        verbose: Show DEBUG messages, including degraded option values.
        quiet: Show only errors.

    """
    if quiet:
        level = logging.ERROR
    elif verbose:
        level = logging.DEBUG
    else:
        level = logging.WARNING

    logging.basicConfig(
        level=level,
        format="%(message)s",
        datefmt="[%X]",
        handlers=[RichHandler(console=err_console, show_path=False)],
        force=True,
    )


def _error(message: str) -> None:
    err_console.print(f"[red]Error:[/red] {message}")


def _warning(message: str) -> None:
    err_console.print(f"[yellow]Warning:[/yellow] {message}")
