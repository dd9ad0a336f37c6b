"""Pico installer utilities."""

from pico_installer.utils.console import (
    console,
    print_error,
    print_success,
    print_warning,
)
from pico_installer.utils.files import ensure_dir, find_project_root

__all__ = [
    "console",
    "ensure_dir",
    "find_project_root",
    "print_error",
    "print_success",
    "print_warning",
]
