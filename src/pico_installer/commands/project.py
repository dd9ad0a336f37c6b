"""Loading of the Composer project the commands operate on."""

import logging
from pathlib import Path

import typer
from pydantic import BaseModel, ConfigDict

from pico_installer.models import Package, RootConfig, load_installed_packages, load_root_config
from pico_installer.utils import find_project_root, print_error

logger = logging.getLogger(__name__)


class Project(BaseModel):
    """A Composer project with its installed packages.

    Attributes:
        root_dir: Directory containing composer.json.
        root_config: The parsed root configuration.
        vendor_dir: Absolute path of Composer's vendor dir.
        packages: Installed packages, in repository order.
    """

    model_config = ConfigDict(arbitrary_types_allowed=True)

    root_dir: Path
    root_config: RootConfig
    vendor_dir: Path
    packages: list[Package]

    def find_package(self, name: str) -> Package | None:
        """Return the installed package with the given name, if any."""
        name = name.lower()
        for package in self.packages:
            if package.name == name:
                return package
        return None


def load_project(project_dir: Path | None) -> Project:
    """Load composer.json and the installed repository of a project.

    Args:
        project_dir: The project directory; searched upwards from the
            current working directory if None.

    Returns:
        The loaded project.

    Raises:
        typer.Exit: If composer.json is missing or invalid, or the installed
            repository can't be read.
    """
    root_dir = project_dir.resolve() if project_dir is not None else find_project_root()
    composer_json = root_dir / "composer.json"

    try:
        root_config = load_root_config(composer_json)
    except FileNotFoundError:
        print_error(f"composer.json not found in {root_dir}")
        raise typer.Exit(1) from None
    except ValueError as e:
        print_error(f"Invalid composer.json: {e}")
        raise typer.Exit(1) from None

    vendor_dir = Path(root_config.vendor_dir)
    if not vendor_dir.is_absolute():
        vendor_dir = root_dir / vendor_dir

    try:
        packages = load_installed_packages(vendor_dir)
    except ValueError as e:
        print_error(f"Invalid installed.json: {e}")
        raise typer.Exit(1) from None
    logger.debug(f"Loaded {len(packages)} installed package(s) from {vendor_dir}")

    return Project(
        root_dir=root_dir,
        root_config=root_config,
        vendor_dir=vendor_dir,
        packages=packages,
    )
