"""Rich console utilities for consistent terminal output.

This module provides a shared Rich Console instance and helper functions
for displaying formatted terminal output with consistent styling.
"""

import logging
import sys

from rich.console import Console
from rich.markup import escape

logger = logging.getLogger(__name__)

# Legacy Windows encodings that require special handling
LEGACY_WINDOWS_ENCODINGS = frozenset({"cp1252", "cp437", "ascii"})


def create_console() -> Console:
    """Create a Rich Console with appropriate settings for the current terminal.

    On Windows terminals with legacy encodings (cp1252, cp437, ascii), enables
    legacy_windows mode to avoid unicode encoding errors.

    Returns:
        Console: A configured Rich Console instance.
    """
    if sys.platform == "win32":
        encoding = getattr(sys.stdout, "encoding", None) or "utf-8"
        encoding = encoding.lower().replace("-", "")

        if encoding in LEGACY_WINDOWS_ENCODINGS:
            logger.debug(
                "Detected legacy Windows encoding '%s', enabling legacy_windows mode",
                encoding,
            )
            return Console(legacy_windows=True)

    return Console()


console = create_console()


def print_success(message: str) -> None:
    """Print a success message with a green checkmark.

    The message is escaped, it usually contains file paths.
    """
    console.print(f"[bold green]✓[/bold green] {escape(message)}")


def print_error(message: str) -> None:
    """Print an error message with a red X.

    The message is escaped, error messages often quote patterns in brackets.
    """
    console.print(f"[bold red]✗[/bold red] {escape(message)}")


def print_warning(message: str) -> None:
    """Print a warning message with a yellow warning sign."""
    console.print(f"[bold yellow]⚠[/bold yellow] {escape(message)}")
