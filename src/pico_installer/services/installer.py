"""Pico plugin and theme installer.

The installer decides where Pico plugins and themes are installed to and
maintains the pico-plugin.php manifest whenever Composer dumps its
autoloader.

The manifest is only used when the root package is a project which
explicitly requires this installer, and the manifest hook is registered
in its "post-autoload-dump" scripts. The installer registers the hook
itself during activation. If the root package lists the hook explicitly,
the manifest is used unconditionally, no matter the project's type and
requirements.
"""

import logging
from collections.abc import Iterable
from pathlib import Path

from pydantic import BaseModel, ConfigDict, Field

from pico_installer.models.package import PACKAGE_NAME, Package, RootConfig
from pico_installer.services.install_paths import InstallPathResolver, InstallTypes
from pico_installer.services.manifest_writer import ManifestAction, ManifestWriter

logger = logging.getLogger(__name__)

MANIFEST_HOOK = "post-autoload-dump"

# identical to the callback used by the Composer plugin, so existing
# composer.json files registering the hook keep working
MANIFEST_HOOK_CALLBACK = "picocms\\ComposerInstaller\\Installer::postAutoloadDump"


def has_manifest_hook(root_config: RootConfig) -> bool:
    """Check whether the manifest hook is registered in the root scripts."""
    return MANIFEST_HOOK_CALLBACK in root_config.scripts.get(MANIFEST_HOOK, [])


def register_manifest_hook(root_config: RootConfig) -> bool:
    """Register the manifest hook in the root package's scripts.

    Args:
        root_config: The root project's configuration; its scripts are
            updated in place.

    Returns:
        True if the hook was already registered explicitly, False if it
        was registered by this call.
    """
    if has_manifest_hook(root_config):
        return True

    root_config.scripts.setdefault(MANIFEST_HOOK, []).append(MANIFEST_HOOK_CALLBACK)
    logger.debug(f"Registered {MANIFEST_HOOK} script {MANIFEST_HOOK_CALLBACK}")
    return False


def check_manifest_usage(root_config: RootConfig) -> bool:
    """Check whether the root project uses the pico-plugin.php manifest.

    Args:
        root_config: The root project's configuration.

    Returns:
        True if the root package is a project requiring this installer
        with the manifest hook registered.
    """
    if root_config.type != "project":
        return False

    if PACKAGE_NAME not in root_config.requires:
        return False

    return has_manifest_hook(root_config)


class Installer(BaseModel):
    """Installer for Pico plugins and themes.

    Create instances using Installer.activate(), which registers the
    manifest hook and decides whether the manifest is used. That decision
    is made once and never changes for the lifetime of the installer.

    Attributes:
        root_config: The root project's configuration.
        vendor_dir: Composer's vendor dir.
        use_manifest: Whether the pico-plugin.php manifest is maintained.
        install_types: Handled package types and their default install dirs.
    """

    model_config = ConfigDict(arbitrary_types_allowed=True, frozen=True)

    root_config: RootConfig
    vendor_dir: Path
    use_manifest: bool
    install_types: InstallTypes = Field(default_factory=InstallTypes)

    @classmethod
    def activate(
        cls,
        root_config: RootConfig,
        vendor_dir: Path,
        install_types: InstallTypes | None = None,
        use_manifest: bool | None = None,
    ) -> "Installer":
        """Set up the installer for a Composer run.

        Args:
            root_config: The root project's configuration.
            vendor_dir: Composer's vendor dir.
            install_types: Handled package types, defaults to Pico plugins
                and themes.
            use_manifest: Forces the manifest on or off; decided from the
                root configuration if None.

        Returns:
            The activated installer.
        """
        explicitly_registered = register_manifest_hook(root_config)

        if use_manifest is None:
            # an explicitly registered hook always enables the manifest
            use_manifest = explicitly_registered or check_manifest_usage(root_config)

        logger.debug(f"Pico plugins file {'enabled' if use_manifest else 'disabled'}")

        return cls(
            root_config=root_config,
            vendor_dir=vendor_dir,
            use_manifest=use_manifest,
            install_types=install_types or InstallTypes(),
        )

    def supports(self, package_type: str) -> bool:
        """Check whether the installer handles packages of the given type."""
        return self.install_types.supports(package_type)

    def get_install_path(self, package: Package) -> Path:
        """Return the install path of a plugin or theme package.

        Raises:
            UnsupportedPackageTypeError: If the package type isn't handled.
        """
        resolver = InstallPathResolver(
            root_config=self.root_config,
            vendor_dir=self.vendor_dir,
            install_types=self.install_types,
        )
        return resolver.get_install_path(package)

    def post_autoload_dump(self, packages: Iterable[Package]) -> ManifestAction:
        """Recreate or delete the pico-plugin.php manifest.

        Called whenever Composer (re)generates its autoloader.

        Args:
            packages: All packages of Composer's local repository.

        Returns:
            The action taken on the manifest file.

        Raises:
            InvalidManifestError: If any plugin resolves to an invalid name.
        """
        writer = ManifestWriter(
            vendor_dir=self.vendor_dir,
            enabled=self.use_manifest,
            root_config=self.root_config,
        )
        return writer.dump(packages)
