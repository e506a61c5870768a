"""CLI package for rmexcept.

This package contains the Typer application.
"""

from rmexcept.cli.main import app

__all__ = ["app"]
