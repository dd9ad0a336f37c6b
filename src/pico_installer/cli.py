"""Pico installer CLI entry point.

This module provides the main entry point for the pico-installer CLI,
which resolves Pico plugin and theme install names outside of Composer.
"""

import logging

import typer

from pico_installer import __version__
from pico_installer.commands import dump, install_path, resolve

logger = logging.getLogger(__name__)

app = typer.Typer(
    name="pico-installer",
    help="Pico plugin and theme installer",
    no_args_is_help=True,
)


def version_callback(value: bool) -> None:
    """Handle the version flag callback.

    Args:
        value: Whether the version flag was provided.

    Raises:
        typer.Exit: Always raised after printing version when value is True.
    """
    if value:
        typer.echo(f"pico-installer {__version__}")
        raise typer.Exit()


@app.callback()
def main(
    version: bool | None = typer.Option(
        None,
        "--version",
        "-V",
        callback=version_callback,
        is_eager=True,
        help="Show version and exit.",
    ),
    verbose: bool = typer.Option(
        False,
        "--verbose",
        "-v",
        help="Show debug output.",
    ),
) -> None:
    """Pico plugin and theme installer."""
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(levelname)s: %(message)s",
    )


app.command(name="dump", help="Recreate or delete the Pico plugins file")(dump)
app.command(name="install-path", help="Print the install path of a plugin or theme")(install_path)
app.command(name="resolve", help="Show resolved names of plugins and themes")(resolve)


if __name__ == "__main__":
    app()
