"""pico-installer dump command - (re)generate the pico-plugin.php manifest.

This module implements the 'pico-installer dump' command which runs the
installer's post-autoload-dump handling outside of Composer.
"""

import logging
from pathlib import Path

import typer

from pico_installer.commands.project import load_project
from pico_installer.models import MANIFEST_FILENAME, InvalidManifestError
from pico_installer.services import Installer, ManifestAction
from pico_installer.utils import console, print_error, print_success

logger = logging.getLogger(__name__)


def dump(
    project_dir: Path | None = typer.Option(
        None,
        "--project-dir",
        "-d",
        help="Composer project directory (default: nearest directory with composer.json).",
    ),
    use_manifest: bool | None = typer.Option(
        None,
        "--enable/--disable",
        help="Force the plugins file on or off instead of deciding from composer.json.",
    ),
) -> None:
    """Recreate or delete the Pico plugins file.

    Writes vendor/pico-plugin.php, mapping every installed Pico plugin to
    its installer name and plugin class names. The file is only kept when
    the root package is a project requiring picocms/composer-installer;
    otherwise an existing file is deleted.
    """
    project = load_project(project_dir)
    installer = Installer.activate(
        project.root_config,
        project.vendor_dir,
        use_manifest=use_manifest,
    )

    try:
        action = installer.post_autoload_dump(project.packages)
    except InvalidManifestError as e:
        print_error(str(e))
        raise typer.Exit(1) from None

    manifest_path = project.vendor_dir / MANIFEST_FILENAME

    if action == ManifestAction.CREATED:
        print_success(f"Created Pico plugins file {manifest_path}")
    elif action == ManifestAction.UPDATED:
        print_success(f"Updated Pico plugins file {manifest_path}")
    elif action == ManifestAction.DELETED:
        print_success(f"Deleted Pico plugins file {manifest_path}")
    else:
        console.print("Pico plugins file not used, nothing to do.")
