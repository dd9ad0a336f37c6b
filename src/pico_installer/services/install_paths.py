"""Install path resolution for Pico plugins and themes.

Plugins are installed to the `plugins/` dir and themes to the `themes/` dir
next to Composer's vendor dir by default. The root project can overwrite
these target dirs using the "pico-plugin-dir" and "pico-theme-dir" extra.
"""

import logging
from pathlib import Path

from pydantic import BaseModel, ConfigDict, Field

from pico_installer.models.package import (
    PACKAGE_TYPE_PLUGIN,
    PACKAGE_TYPE_THEME,
    Package,
    RootConfig,
)
from pico_installer.services.name_resolver import get_install_name
from pico_installer.utils.files import ensure_dir

logger = logging.getLogger(__name__)


class UnsupportedPackageTypeError(ValueError):
    """Raised when asked for the install dir of an unsupported package type.

    Attributes:
        package_type: The unsupported package type.
    """

    def __init__(self, package_type: str) -> None:
        """Initialize UnsupportedPackageTypeError.

        Args:
            package_type: The unsupported package type.
        """
        self.package_type = package_type
        super().__init__(f"The package type '{package_type}' is not supported")


class InstallTypes(BaseModel):
    """Package types handled by the installer and their default install dirs.

    Attributes:
        install_dirs: Package type to default directory name.
    """

    install_dirs: dict[str, str] = Field(
        default_factory=lambda: {
            PACKAGE_TYPE_PLUGIN: "plugins",
            PACKAGE_TYPE_THEME: "themes",
        },
        description="Package type to default install directory",
    )

    def supports(self, package_type: str) -> bool:
        """Check whether packages of the given type are handled."""
        return package_type in self.install_dirs

    def default_dir(self, package_type: str) -> str:
        """Return the default install dir of a package type.

        Raises:
            UnsupportedPackageTypeError: If the package type isn't handled.
        """
        install_dir = self.install_dirs.get(package_type)
        if not install_dir:
            raise UnsupportedPackageTypeError(package_type)
        return install_dir


class InstallPathResolver(BaseModel):
    """Service resolving the install paths of plugin and theme packages.

    Attributes:
        root_config: The root project's configuration.
        vendor_dir: Composer's vendor dir; relative install dirs are
            resolved against its parent.
        install_types: Handled package types and their default dirs.
    """

    model_config = ConfigDict(arbitrary_types_allowed=True)

    root_config: RootConfig
    vendor_dir: Path
    install_types: InstallTypes = Field(default_factory=InstallTypes)

    def get_install_path(self, package: Package) -> Path:
        """Return the install path of a package.

        Creates the package type's install dir if it doesn't exist yet.

        Args:
            package: The package to install.

        Returns:
            Absolute path the package is installed to.

        Raises:
            UnsupportedPackageTypeError: If the package type isn't handled.
        """
        install_dir = self.initialize_install_dir(package.type)
        return install_dir / get_install_name(package, self.root_config)

    def initialize_install_dir(self, package_type: str) -> Path:
        """Return the install dir of a package type, creating it if necessary.

        Args:
            package_type: The package type (e.g. "pico-plugin").

        Returns:
            The canonical absolute path of the install dir.

        Raises:
            UnsupportedPackageTypeError: If no install dir is configured and
                the package type isn't handled.
        """
        install_dir = ""

        configured_dir = self.root_config.extra.get(f"{package_type}-dir")
        if configured_dir:
            install_dir = str(configured_dir).rstrip("/\\")

        if not install_dir:
            install_dir = self.install_types.default_dir(package_type)

        path = Path(install_dir)
        if not path.is_absolute():
            path = self.vendor_dir.parent / path

        ensure_dir(path)
        logger.debug(f"Using install dir {path} for {package_type} packages")

        return path.resolve()
