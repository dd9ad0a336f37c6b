"""Pydantic models for Composer package metadata.

This module defines the read-only views of Composer data the installer
works with: installed packages (from vendor/composer/installed.json) and
the root project's configuration (from composer.json).
"""

import json
import logging
from pathlib import Path
from typing import Any

from pydantic import BaseModel, Field, field_validator

logger = logging.getLogger(__name__)

# Package name of this installer, as required by Pico projects
PACKAGE_NAME = "picocms/composer-installer"

PACKAGE_TYPE_PLUGIN = "pico-plugin"
PACKAGE_TYPE_THEME = "pico-theme"

# Composer's default package type
DEFAULT_PACKAGE_TYPE = "library"

INSTALLED_REPOSITORY_FILE = Path("composer") / "installed.json"


class Package(BaseModel):
    """An installed Composer package.

    Attributes:
        name: Normalized (lowercase) package name, e.g. "vendor/my-plugin".
        pretty_name: Package name as declared by its author, case preserved.
        type: Composer package type (e.g. "pico-plugin").
        extra: The package's "extra" configuration block.
    """

    name: str = Field(..., description="Lowercase package name (vendor/project)")
    pretty_name: str = Field(..., description="Package name with original case")
    type: str = Field(default=DEFAULT_PACKAGE_TYPE, description="Composer package type")
    extra: dict[str, Any] = Field(default_factory=dict, description="Author-declared extra data")

    @classmethod
    def from_composer(cls, data: dict[str, Any]) -> "Package":
        """Build a Package from a Composer package record.

        Args:
            data: A single package entry, as found in composer.json or
                installed.json.

        Returns:
            Package with the declared name as pretty name.
        """
        pretty_name = str(data.get("name", ""))
        return cls(
            name=pretty_name.lower(),
            pretty_name=pretty_name,
            type=data.get("type") or DEFAULT_PACKAGE_TYPE,
            extra=data.get("extra") or {},
        )


class RootConfig(BaseModel):
    """Configuration of the root project consuming the installer.

    Attributes:
        type: Package type of the root project; manifest generation
            requires "project".
        requires: Names of the packages the root project requires.
        scripts: Lifecycle hook name to ordered list of callbacks.
        extra: The root project's "extra" block holding resolution overrides.
        vendor_dir: Composer's dependency storage directory.
    """

    type: str = Field(default=DEFAULT_PACKAGE_TYPE, description="Root package type")
    requires: set[str] = Field(default_factory=set, description="Required package names")
    scripts: dict[str, list[str]] = Field(
        default_factory=dict,
        description="Lifecycle hook name to callback identifiers",
    )
    extra: dict[str, Any] = Field(default_factory=dict, description="Project-wide overrides")
    vendor_dir: str = Field(default="vendor", description="Composer vendor directory")

    @field_validator("scripts", mode="before")
    @classmethod
    def _coerce_scripts(cls, value: Any) -> Any:
        # Composer accepts a single callback string in place of a list
        if isinstance(value, dict):
            return {
                hook: [callbacks] if isinstance(callbacks, str) else callbacks
                for hook, callbacks in value.items()
            }
        return value

    @classmethod
    def from_composer(cls, data: dict[str, Any]) -> "RootConfig":
        """Build a RootConfig from parsed composer.json data.

        Args:
            data: The decoded composer.json document.

        Returns:
            RootConfig with Composer defaults for absent keys.
        """
        config = data.get("config") or {}
        return cls.model_validate(
            {
                "type": data.get("type") or DEFAULT_PACKAGE_TYPE,
                "requires": {name.lower() for name in data.get("require") or {}},
                "scripts": data.get("scripts") or {},
                "extra": data.get("extra") or {},
                "vendor_dir": config.get("vendor-dir") or "vendor",
            }
        )


def load_root_config(path: Path) -> RootConfig:
    """Load the root project configuration from a composer.json file.

    Args:
        path: Path to composer.json.

    Returns:
        The parsed RootConfig.

    Raises:
        FileNotFoundError: If the file does not exist.
        ValueError: If the file is not a valid composer.json document.
    """
    content = path.read_text(encoding="utf-8")
    data = json.loads(content)
    if not isinstance(data, dict):
        raise ValueError(f"Invalid composer.json, expected an object: {path}")

    return RootConfig.from_composer(data)


def load_installed_packages(vendor_dir: Path) -> list[Package]:
    """Load the packages of Composer's local (installed) repository.

    Supports both the Composer 2 format (an object with a "packages" list)
    and the Composer 1 format (a bare list). Packages are returned in the
    order Composer recorded them.

    Args:
        vendor_dir: Composer's vendor directory.

    Returns:
        List of installed packages, empty if nothing is installed yet.

    Raises:
        ValueError: If the repository file is not valid JSON or not a list
            of package records.
    """
    repository_file = vendor_dir / INSTALLED_REPOSITORY_FILE
    if not repository_file.exists():
        logger.debug(f"No installed repository found at {repository_file}")
        return []

    data = json.loads(repository_file.read_text(encoding="utf-8"))
    records = data.get("packages", []) if isinstance(data, dict) else data
    if not isinstance(records, list) or not all(isinstance(record, dict) for record in records):
        raise ValueError(f"{repository_file} is not a list of package records")

    return [Package.from_composer(record) for record in records]
