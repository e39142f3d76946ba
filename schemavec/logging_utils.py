"""
logging_utils.py

Small logging helpers used by the schemavec CLI.

The embedding core never logs; it is pure computation. The CLI reports
progress with these helpers so verbose and debug output stay consistent
and go through Typer.
"""

import typer


def log_verbose(message: str, verbose: bool) -> None:
    """
    Print a high-level progress message when verbose mode is enabled.

    Parameters
    ----------
    message : str
        Short, plain-English description of what is happening
        (e.g., "Loading column records...", "Combining vectors...").
    verbose : bool
        When False, this function does nothing.
    """
    if verbose:
        typer.echo(message)


def log_debug(message: str, debug: bool) -> None:
    """Print a dimmed diagnostic line to stderr when debug mode is enabled."""
    if debug:
        typer.secho(f"[debug] {message}", fg=typer.colors.BRIGHT_BLACK, err=True)


def log_error(message: str) -> None:
    typer.secho(message, fg=typer.colors.RED, err=True)
