"""Shared pytest fixtures for pico-installer tests."""

import json
import re
from collections.abc import Callable
from pathlib import Path
from typing import Any

import pytest
from typer.testing import CliRunner

from pico_installer.models import Package, RootConfig
from pico_installer.services import MANIFEST_HOOK, MANIFEST_HOOK_CALLBACK


def strip_ansi(text: str) -> str:
    """Strip ANSI escape codes from text."""
    return re.sub(r"\x1b\[[0-9;]*m", "", text)


def make_package(
    pretty_name: str,
    package_type: str = "pico-plugin",
    extra: dict[str, Any] | None = None,
) -> Package:
    """Create an installed package the way Composer would load it.

    Args:
        pretty_name: Declared package name, case preserved.
        package_type: Composer package type.
        extra: The package's extra block.

    Returns:
        The Package.
    """
    return Package.from_composer({"name": pretty_name, "type": package_type, "extra": extra or {}})


@pytest.fixture
def runner() -> CliRunner:
    """Create a CliRunner for testing commands."""
    return CliRunner()


@pytest.fixture
def package_factory() -> Callable[..., Package]:
    """Provide make_package as a fixture."""
    return make_package


@pytest.fixture
def pico_root_config() -> RootConfig:
    """Return the configuration of a Pico project using the plugins file."""
    return RootConfig(
        type="project",
        requires={"picocms/pico", "picocms/composer-installer"},
    )


@pytest.fixture
def composer_project(tmp_path: Path) -> Callable[..., Path]:
    """Provide a factory creating a Composer project directory.

    The factory writes composer.json and vendor/composer/installed.json.

    Args:
        tmp_path: pytest's built-in tmp_path fixture.

    Returns:
        Factory taking the composer.json data and the installed package
        records, returning the project directory.
    """

    def factory(composer: dict[str, Any] | None = None, installed: list[dict[str, Any]] | None = None) -> Path:
        project_dir = tmp_path / "project"
        project_dir.mkdir(exist_ok=True)
        (project_dir / "composer.json").write_text(json.dumps(composer or {}, indent=4))

        if installed is not None:
            repository_dir = project_dir / "vendor" / "composer"
            repository_dir.mkdir(parents=True, exist_ok=True)
            (repository_dir / "installed.json").write_text(json.dumps({"packages": installed}, indent=4))

        return project_dir

    return factory


@pytest.fixture
def pico_composer_json() -> dict[str, Any]:
    """Return composer.json data of a Pico project using the plugins file."""
    return {
        "name": "picocms/pico-composer",
        "type": "project",
        "require": {
            "picocms/pico": "^2.1",
            "picocms/composer-installer": "^2.0",
        },
    }


@pytest.fixture
def explicit_hook_scripts() -> dict[str, list[str]]:
    """Return root scripts explicitly registering the manifest hook."""
    return {MANIFEST_HOOK: [MANIFEST_HOOK_CALLBACK]}
