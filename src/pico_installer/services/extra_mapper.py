"""Lookup of per-package values in the root project's extra configuration.

Root-level overrides such as "installer-name" or "pico-plugin" are
mappings keyed by package. Besides the exact package name, keys may use
the `vendor:` or `name:` prefixes to match all packages of a vendor or all
packages with a given name, no matter the vendor:

    "installer-name": {
        "acme/my-plugin": "MyPlugin",
        "vendor:acme": "AcmePlugin",
        "name:foo-plugin": "FooPlugin"
    }
"""

from collections.abc import Mapping
from typing import Any

NAME_PREFIX = "name:"
VENDOR_PREFIX = "vendor:"


def map_root_extra(extra: Mapping[str, Any], package_pretty_name: str) -> Any | None:
    """Resolve the value of a root extra mapping for a package.

    An exact key match always wins, even if its value is empty. Otherwise
    entries are scanned in order and the first `name:` or `vendor:` key
    matching the package is used.

    Args:
        extra: The root extra mapping (e.g. the "installer-name" block).
        package_pretty_name: The package's pretty name (vendor/name).

    Returns:
        The matched value, or None if no key matches the package.
    """
    if package_pretty_name in extra:
        return extra[package_pretty_name]

    vendor, separator, name = package_pretty_name.partition("/")
    if not separator:
        vendor, name = "", package_pretty_name

    for key, value in extra.items():
        if key.startswith(NAME_PREFIX):
            if key[len(NAME_PREFIX) :] == name:
                return value
        elif key.startswith(VENDOR_PREFIX):
            if key[len(VENDOR_PREFIX) :] == vendor:
                return value

    return None
