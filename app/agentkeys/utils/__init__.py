"""Utility modules for agentkeys.

This module exports commonly used utility functions.
"""

from agentkeys.utils.formatting import (
    console,
    create_records_table,
    err_console,
    format_record_row,
    print_error,
    print_info,
    print_success,
    print_warning,
)

__all__ = [
    "console",
    "create_records_table",
    "err_console",
    "format_record_row",
    "print_error",
    "print_info",
    "print_success",
    "print_warning",
]
