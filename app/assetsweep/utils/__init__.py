"""Utility modules for assetsweep.

This module exports commonly used utility functions.
"""

from assetsweep.utils.formatting import (
    configure_logging,
    console,
    err_console,
    print_error,
    print_info,
    print_success,
    print_warning,
)
from assetsweep.utils.sizes import human_file_size

__all__ = [
    "configure_logging",
    "console",
    "err_console",
    "human_file_size",
    "print_error",
    "print_info",
    "print_success",
    "print_warning",
]
