"""Install name and plugin class name resolution.

Install names and plugin class names are either specified explicitly in
the root project's or the package's composer.json, or derived from the
package name. The first source providing a value wins:

1. The root project's extra, keyed by package (see map_root_extra):

       {
           "extra": {
               "installer-name": { "<package name>": "<install name>" },
               "pico-plugin": { "<package name>": [ "<class name>", ... ] }
           }
       }

2. The package's own extra:

       {
           "extra": {
               "installer-name": "<install name>",
               "pico-plugin": [ "<class name>", ... ]
           }
       }

3. For install names the guess based on the package name, for class names
   the install name.
"""

import logging
from collections.abc import Mapping, Sequence
from typing import Any

from pico_installer.models.package import Package, RootConfig
from pico_installer.services.extra_mapper import map_root_extra
from pico_installer.services.name_guesser import guess_install_name

logger = logging.getLogger(__name__)

INSTALLER_NAME_KEY = "installer-name"

# a single class name or a list of class names; configured values are
# checked when the manifest is rendered
ClassNames = str | Sequence[Any]


def _root_extra(root_config: RootConfig | None) -> dict[str, Any]:
    return root_config.extra if root_config is not None else {}


def coerce_class_names(value: ClassNames | Mapping[str, Any] | None) -> list[Any]:
    """Normalize a configured class names value to a list.

    Items are passed through unchanged, so a non-string value is still
    rejected when the manifest is written.

    Args:
        value: A single class name, a list of class names, a JSON object
            whose values are class names, or None.

    Returns:
        The class names in order; empty if none are configured.
    """
    if value is None:
        return []
    if isinstance(value, str):
        return [value]
    if isinstance(value, Mapping):
        return list(value.values())
    if isinstance(value, Sequence):
        return list(value)
    return [value]


def get_install_name(package: Package, root_config: RootConfig | None = None) -> str:
    """Return the install name of a package.

    Args:
        package: The package to resolve.
        root_config: The root project's configuration, if any.

    Returns:
        The install name; may be empty if the package name guess is empty.
    """
    install_name = None

    root_mapping = _root_extra(root_config).get(INSTALLER_NAME_KEY)
    if root_mapping and isinstance(root_mapping, Mapping):
        install_name = map_root_extra(root_mapping, package.pretty_name)

    if not install_name or not isinstance(install_name, str):
        package_value = package.extra.get(INSTALLER_NAME_KEY)
        install_name = package_value if isinstance(package_value, str) else None

    if install_name:
        return install_name

    guessed = guess_install_name(package.name)
    logger.debug(f"Guessed install name '{guessed}' for {package.name}")
    return guessed


def get_plugin_class_names(package: Package, root_config: RootConfig | None = None) -> list[Any]:
    """Return the plugin class names of a package.

    Class names are looked up under the package's type, i.e. the
    "pico-plugin" key of the root and package extra.

    Args:
        package: The package to resolve.
        root_config: The root project's configuration, if any.

    Returns:
        Non-empty list of class names. Configured values are returned as
        they are, see coerce_class_names.
    """
    class_names: list[Any] = []

    root_mapping = _root_extra(root_config).get(package.type)
    if root_mapping and isinstance(root_mapping, Mapping):
        class_names = coerce_class_names(map_root_extra(root_mapping, package.pretty_name))

    if not class_names:
        class_names = coerce_class_names(package.extra.get(package.type) or None)

    if not class_names:
        class_names = [get_install_name(package, root_config)]

    return class_names
