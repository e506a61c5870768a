"""Rich console formatting utilities.

Provides consistent formatting for CLI output using Rich.
"""

import sys

from rich.console import Console
from rich.markup import escape

from rmexcept.core.theme import get_theme


def _detect_color_system() -> str | None:
    """Detect the best color system for the current terminal.

    Returns "truecolor" for interactive terminals to enable full hex color support,
    None otherwise to let Rich auto-detect.
    """
    if sys.stdout.isatty():
        return "truecolor"
    return None


# Shared console instances (theme loaded once at import)
console = Console(theme=get_theme(), color_system=_detect_color_system())
err_console = Console(theme=get_theme(), stderr=True, color_system=_detect_color_system())


def printable(text: str) -> str:
    """Make text safe to write to any console.

    Undecodable bytes in file names reach Python as lone surrogates, which
    no stream can encode. They are shown as backslash escapes instead.
    """
    return text.encode("utf-8", "surrogateescape").decode("utf-8", "backslashreplace")


def print_info(message: str) -> None:
    """Print an info message."""
    console.print(f"[info]{escape(printable(message))}[/]")


def print_warning(message: str) -> None:
    """Print a warning message."""
    err_console.print(f"[warning]Warning:[/] {escape(printable(message))}", soft_wrap=True)


def print_error(message: str) -> None:
    """Print an error message."""
    err_console.print(f"[error]Error:[/] {escape(printable(message))}", soft_wrap=True)


def print_success(message: str) -> None:
    """Print a success message."""
    console.print(f"[success]{escape(printable(message))}[/]")


def print_entry(message: str) -> None:
    """Print a per-entry progress line without wrapping long paths."""
    console.print(escape(printable(message)), soft_wrap=True, highlight=False)
