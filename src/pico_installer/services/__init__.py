"""Pico installer services."""

from pico_installer.services.extra_mapper import map_root_extra
from pico_installer.services.install_paths import (
    InstallPathResolver,
    InstallTypes,
    UnsupportedPackageTypeError,
)
from pico_installer.services.installer import (
    MANIFEST_HOOK,
    MANIFEST_HOOK_CALLBACK,
    Installer,
    check_manifest_usage,
    register_manifest_hook,
)
from pico_installer.services.manifest_writer import ManifestAction, ManifestWriter
from pico_installer.services.name_guesser import guess_install_name
from pico_installer.services.name_resolver import (
    coerce_class_names,
    get_install_name,
    get_plugin_class_names,
)
from pico_installer.services.plugin import InstallationManager, PicoPlugin

__all__ = [
    "MANIFEST_HOOK",
    "MANIFEST_HOOK_CALLBACK",
    "InstallPathResolver",
    "InstallTypes",
    "InstallationManager",
    "Installer",
    "ManifestAction",
    "ManifestWriter",
    "PicoPlugin",
    "UnsupportedPackageTypeError",
    "check_manifest_usage",
    "coerce_class_names",
    "get_install_name",
    "get_plugin_class_names",
    "guess_install_name",
    "map_root_extra",
    "register_manifest_hook",
]
