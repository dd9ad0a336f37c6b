"""Install name guessing for packages without an explicit name."""

import re

_SUFFIX_PATTERN = re.compile(r"[.\-_]+(?:plugin|theme)$", re.IGNORECASE)
_SEPARATOR_PATTERN = re.compile(r"[.\-_]+")


def guess_install_name(package_name: str) -> str:
    """Guess the install name of a package from its name.

    Drops the vendor, removes a "-plugin" or "-theme" suffix (with any of
    the separators ".", "-" and "_") and converts the rest to StudlyCase:

        guess_install_name("vendor/foo-bar_baz")   # "FooBarBaz"
        guess_install_name("vendor/my-plugin")     # "My"

    Args:
        package_name: Composer package name, with or without vendor.

    Returns:
        The guessed install name; empty if nothing is left of the name.
    """
    _, separator, name = package_name.partition("/")
    if not separator:
        name = package_name

    name = _SUFFIX_PATTERN.sub("", name)
    segments = [segment for segment in _SEPARATOR_PATTERN.split(name) if segment]

    return "".join(segment[0].upper() + segment[1:] for segment in segments)
