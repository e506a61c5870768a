"""Utility modules for rmexcept.

This module exports commonly used utility functions.
"""

from rmexcept.utils.formatting import (
    console,
    err_console,
    print_entry,
    print_error,
    print_info,
    print_success,
    print_warning,
    printable,
)

__all__ = [
    "console",
    "err_console",
    "print_entry",
    "print_error",
    "print_info",
    "print_success",
    "print_warning",
    "printable",
]
