"""pico-installer install-path command - show where a package is installed."""

import logging
from pathlib import Path

import typer

from pico_installer.commands.project import load_project
from pico_installer.services import Installer, UnsupportedPackageTypeError
from pico_installer.utils import print_error

logger = logging.getLogger(__name__)


def install_path(
    package_name: str = typer.Argument(..., help="Name of an installed package (vendor/name)."),
    project_dir: Path | None = typer.Option(
        None,
        "--project-dir",
        "-d",
        help="Composer project directory (default: nearest directory with composer.json).",
    ),
) -> None:
    """Print the install path of a Pico plugin or theme.

    The plugin or theme base directory is created if it doesn't exist yet.
    """
    project = load_project(project_dir)

    package = project.find_package(package_name)
    if package is None:
        print_error(f"Package '{package_name}' is not installed")
        raise typer.Exit(1)

    installer = Installer.activate(project.root_config, project.vendor_dir)

    try:
        path = installer.get_install_path(package)
    except UnsupportedPackageTypeError as e:
        print_error(str(e))
        raise typer.Exit(1) from None

    typer.echo(str(path))
