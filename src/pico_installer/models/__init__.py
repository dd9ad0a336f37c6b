"""Pico installer data models."""

from pico_installer.models.manifest import (
    MANIFEST_FILENAME,
    InvalidManifestError,
    Manifest,
    ManifestEntry,
    load_manifest,
    parse_manifest,
    render_manifest,
    save_manifest,
)
from pico_installer.models.package import (
    PACKAGE_NAME,
    PACKAGE_TYPE_PLUGIN,
    PACKAGE_TYPE_THEME,
    Package,
    RootConfig,
    load_installed_packages,
    load_root_config,
)

__all__ = [
    "MANIFEST_FILENAME",
    "PACKAGE_NAME",
    "PACKAGE_TYPE_PLUGIN",
    "PACKAGE_TYPE_THEME",
    "InvalidManifestError",
    "Manifest",
    "ManifestEntry",
    "Package",
    "RootConfig",
    "load_installed_packages",
    "load_manifest",
    "load_root_config",
    "parse_manifest",
    "render_manifest",
    "save_manifest",
]
