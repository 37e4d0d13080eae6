"""CLI utility modules."""

from oxdict.cli.utils.console import console, error_console, print_error
from oxdict.cli.utils.progress import create_lookup_spinner, lookup_description

__all__ = [
    "console",
    "error_console",
    "print_error",
    "create_lookup_spinner",
    "lookup_description",
]
