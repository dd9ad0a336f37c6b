"""Pydantic models for the pico-plugin.php manifest.

This module defines the data model of the plugin manifest Pico loads at
runtime, together with its PHP serialization. The manifest maps Composer
package names to the plugin's installer name and class names:

    return array(
        'vendor/my-plugin' => array(
            'installerName' => 'MyPlugin',
            'classNames' => array(
                'MyPlugin',
            ),
        ),
    );

All names are validated while rendering, so an invalid name never makes
it to disk.
"""

import re
from pathlib import Path
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, ValidationError

from pico_installer.models.package import PACKAGE_NAME
from pico_installer.utils.files import ensure_dir
from pico_installer.utils.php import PhpParseError, parse_return_array, quote

MANIFEST_FILENAME = "pico-plugin.php"

# see https://github.com/composer/composer/blob/1.0.0/src/Composer/Command/InitCommand.php#L206-L210
PACKAGE_NAME_PATTERN = re.compile(r"[a-z0-9_.-]+/[a-z0-9_.-]+")
INSTALLER_NAME_PATTERN = re.compile(r"[a-zA-Z0-9_.-]+")
# see https://secure.php.net/manual/en/language.oop5.basic.php
CLASS_NAME_PATTERN = re.compile(r"[a-zA-Z_\x7f-\U0010ffff][a-zA-Z0-9_\x7f-\U0010ffff]*")

_MANIFEST_TEMPLATE = """<?php

// {filename} @generated by {generator}

return array(
{entries}
);
"""


class InvalidManifestError(ValueError):
    """Raised when a manifest contains a name that can't be written safely.

    Attributes:
        value: The offending package, installer or class name.
    """

    def __init__(self, message: str, value: str = "") -> None:
        """Initialize InvalidManifestError.

        Args:
            message: Human readable description of the problem.
            value: The offending value.
        """
        self.value = value
        super().__init__(message)


class ManifestEntry(BaseModel):
    """Resolved names of a single Pico plugin package.

    Attributes:
        installer_name: Directory name the plugin is installed to.
        class_names: Plugin class names Pico should load, in order. Values
            are taken as configured and checked by validate_entry.
    """

    model_config = ConfigDict(populate_by_name=True)

    installer_name: str = Field(..., alias="installerName")
    class_names: list[Any] = Field(default_factory=list, alias="classNames")


class Manifest(BaseModel):
    """The plugin manifest, keyed by Composer package name.

    Entries keep their insertion order, which is the order packages were
    enumerated in the local repository.
    """

    entries: dict[str, ManifestEntry] = Field(default_factory=dict)


def validate_entry(package_name: str, entry: ManifestEntry) -> None:
    """Check all names of a manifest entry.

    Args:
        package_name: Composer package name of the entry.
        entry: The resolved names.

    Raises:
        InvalidManifestError: On the first invalid name.
    """
    if not PACKAGE_NAME_PATTERN.fullmatch(package_name):
        raise InvalidManifestError(
            f"The package name '{package_name}' is invalid, it must be lowercase and have a vendor name, "
            "a forward slash, and a package name, matching: [a-z0-9_.-]+/[a-z0-9_.-]+",
            package_name,
        )

    if not INSTALLER_NAME_PATTERN.fullmatch(entry.installer_name):
        raise InvalidManifestError(
            f"The installer name '{entry.installer_name}' is invalid, "
            "it must be alphanumeric, matching: [a-zA-Z0-9_.-]+",
            entry.installer_name,
        )

    for class_name in entry.class_names:
        if not isinstance(class_name, str):
            raise InvalidManifestError(
                f"The plugin class name {class_name!r} is no valid PHP class name, it must be a string",
                str(class_name),
            )
        if not CLASS_NAME_PATTERN.fullmatch(class_name):
            raise InvalidManifestError(
                f"The plugin class name '{class_name}' is no valid PHP class name",
                class_name,
            )


def render_manifest(manifest: Manifest, filename: str = MANIFEST_FILENAME) -> str:
    """Render a manifest as PHP source code.

    Args:
        manifest: The manifest to render.
        filename: File name recorded in the header comment.

    Returns:
        The complete contents of the manifest file.

    Raises:
        InvalidManifestError: If any package, installer or class name is invalid.
    """
    lines: list[str] = []

    for package_name, entry in manifest.entries.items():
        validate_entry(package_name, entry)

        lines.append(f"    {quote(package_name)} => array(")
        lines.append(f"        'installerName' => {quote(entry.installer_name)},")

        if entry.class_names:
            lines.append("        'classNames' => array(")
            for class_name in entry.class_names:
                lines.append(f"            {quote(class_name)},")
            lines.append("        ),")

        lines.append("    ),")

    return _MANIFEST_TEMPLATE.format(
        filename=filename,
        generator=PACKAGE_NAME,
        entries="\n".join(lines),
    )


def parse_manifest(content: str) -> Manifest:
    """Parse the contents of a generated manifest file.

    Args:
        content: PHP source of a pico-plugin.php file.

    Returns:
        The Manifest described by the file.

    Raises:
        InvalidManifestError: If the content is not a manifest.
    """
    try:
        data = parse_return_array(content)
    except PhpParseError as e:
        raise InvalidManifestError(f"Malformed manifest: {e}") from e

    # an empty PHP array has no keys and parses as an empty list
    if data == []:
        return Manifest()
    if not isinstance(data, dict):
        raise InvalidManifestError("Malformed manifest: expected a mapping of package names")

    entries: dict[str, ManifestEntry] = {}
    for package_name, record in data.items():
        if not isinstance(record, dict) or "installerName" not in record:
            raise InvalidManifestError(f"Malformed manifest entry for '{package_name}'", package_name)
        try:
            entries[package_name] = ManifestEntry.model_validate(record)
        except ValidationError as e:
            raise InvalidManifestError(f"Malformed manifest entry for '{package_name}': {e}", package_name) from e
        validate_entry(package_name, entries[package_name])

    return Manifest(entries=entries)


def load_manifest(path: Path) -> Manifest | None:
    """Load a manifest file from disk.

    Args:
        path: Path to the pico-plugin.php file.

    Returns:
        Manifest if the file exists, None otherwise.

    Raises:
        InvalidManifestError: If the file exists but is not a manifest.
    """
    if not path.exists():
        return None

    return parse_manifest(path.read_text(encoding="utf-8"))


def save_manifest(manifest: Manifest, path: Path) -> None:
    """Write a manifest to disk, replacing any previous file.

    The manifest is rendered (and thus validated) before the file is
    touched, so a failed save leaves the previous file unchanged and
    creates no directories.

    Args:
        manifest: Manifest to save.
        path: Path to write the file to.

    Raises:
        InvalidManifestError: If any name in the manifest is invalid.
    """
    content = render_manifest(manifest, path.name)
    ensure_dir(path.parent)
    path.write_text(content, encoding="utf-8")
