"""Registration of the Pico installer with a package manager."""

from pathlib import Path
from typing import Protocol

from pico_installer.models.package import RootConfig
from pico_installer.services.installer import Installer


class InstallationManager(Protocol):
    """The package manager's registry of installers."""

    def add_installer(self, installer: Installer) -> None: ...

    def remove_installer(self, installer: Installer) -> None: ...


class PicoPlugin:
    """Package manager plugin registering the Pico installer."""

    def __init__(self) -> None:
        self.installer: Installer | None = None

    def activate(self, root_config: RootConfig, vendor_dir: Path, manager: InstallationManager) -> Installer:
        """Create the installer and register it with the manager."""
        self.installer = Installer.activate(root_config, vendor_dir)
        manager.add_installer(self.installer)
        return self.installer

    def deactivate(self, manager: InstallationManager) -> None:
        """Unregister the installer, if it was registered."""
        if self.installer is not None:
            manager.remove_installer(self.installer)
            self.installer = None

    def uninstall(self, manager: InstallationManager) -> None:
        """Nothing to clean up on uninstall."""
