"""Service maintaining the pico-plugin.php manifest in Composer's vendor dir.

The manifest is either rebuilt in full or removed in full each time it is
dumped; its previous contents never matter.
"""

import logging
from collections.abc import Iterable
from enum import Enum
from pathlib import Path

from pydantic import BaseModel, ConfigDict

from pico_installer.models.manifest import (
    MANIFEST_FILENAME,
    Manifest,
    ManifestEntry,
    save_manifest,
)
from pico_installer.models.package import PACKAGE_TYPE_PLUGIN, Package, RootConfig
from pico_installer.services.name_resolver import get_install_name, get_plugin_class_names

logger = logging.getLogger(__name__)


class ManifestAction(Enum):
    """Outcome of dumping the manifest.

    Attributes:
        CREATED: The manifest didn't exist and was written.
        UPDATED: An existing manifest was rewritten.
        DELETED: The manifest is disabled and an existing file was removed.
        SKIPPED: The manifest is disabled and no file existed.
    """

    CREATED = "created"
    UPDATED = "updated"
    DELETED = "deleted"
    SKIPPED = "skipped"


class ManifestWriter(BaseModel):
    """Service writing or deleting the plugin manifest.

    Attributes:
        vendor_dir: Composer's vendor dir the manifest is stored in.
        enabled: Whether the manifest is used by the root project at all.
        root_config: The root project's configuration, used for name
            resolution.
    """

    model_config = ConfigDict(arbitrary_types_allowed=True)

    vendor_dir: Path
    enabled: bool
    root_config: RootConfig | None = None

    @property
    def manifest_path(self) -> Path:
        """Path of the pico-plugin.php file."""
        return self.vendor_dir / MANIFEST_FILENAME

    def build_manifest(self, packages: Iterable[Package]) -> Manifest:
        """Resolve the manifest entries of all plugin packages.

        Args:
            packages: Installed packages, in repository order.

        Returns:
            Manifest with one entry per Pico plugin, in the given order.
        """
        entries: dict[str, ManifestEntry] = {}

        for package in packages:
            if package.type != PACKAGE_TYPE_PLUGIN:
                continue

            entries[package.name] = ManifestEntry(
                installer_name=get_install_name(package, self.root_config),
                class_names=get_plugin_class_names(package, self.root_config),
            )

        return Manifest(entries=entries)

    def dump(self, packages: Iterable[Package]) -> ManifestAction:
        """Rewrite or delete the manifest.

        When enabled, the manifest is always rewritten in full, even if the
        contents didn't change. When disabled, an existing manifest (or a
        dangling symlink in its place) is deleted.

        Args:
            packages: Installed packages, in repository order.

        Returns:
            The action taken.

        Raises:
            InvalidManifestError: If any resolved name is invalid; the
                existing manifest is left untouched.
        """
        path = self.manifest_path
        exists = path.exists() or path.is_symlink()

        if not self.enabled:
            if not exists:
                return ManifestAction.SKIPPED

            logger.info(f"Deleting Pico plugins file {path}")
            path.unlink()
            return ManifestAction.DELETED

        if exists:
            logger.info(f"Updating Pico plugins file {path}")
        else:
            logger.info(f"Creating Pico plugins file {path}")

        manifest = self.build_manifest(packages)
        save_manifest(manifest, path)

        return ManifestAction.UPDATED if exists else ManifestAction.CREATED
