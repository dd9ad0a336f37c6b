"""pico-installer resolve command - show resolved names of plugins and themes."""

import json
import logging
from enum import Enum
from pathlib import Path
from typing import Any

import typer
import yaml
from rich.table import Table

from pico_installer.commands.project import load_project
from pico_installer.models import PACKAGE_TYPE_PLUGIN
from pico_installer.services import InstallTypes, get_install_name, get_plugin_class_names
from pico_installer.utils import console, print_warning

logger = logging.getLogger(__name__)


class OutputFormat(str, Enum):
    """Output formats of the resolve command."""

    table = "table"
    json = "json"
    yaml = "yaml"


def resolve(
    project_dir: Path | None = typer.Option(
        None,
        "--project-dir",
        "-d",
        help="Composer project directory (default: nearest directory with composer.json).",
    ),
    output_format: OutputFormat = typer.Option(
        OutputFormat.table,
        "--format",
        "-f",
        help="Output format.",
    ),
) -> None:
    """Show the install names and class names of installed plugins and themes.

    Doesn't touch the filesystem.
    """
    project = load_project(project_dir)
    install_types = InstallTypes()

    resolved: dict[str, dict[str, Any]] = {}
    for package in project.packages:
        if not install_types.supports(package.type):
            continue

        entry: dict[str, Any] = {
            "type": package.type,
            "installerName": get_install_name(package, project.root_config),
        }
        if package.type == PACKAGE_TYPE_PLUGIN:
            entry["classNames"] = get_plugin_class_names(package, project.root_config)
        resolved[package.name] = entry

    if output_format == OutputFormat.json:
        typer.echo(json.dumps(resolved, indent=2))
        return

    if output_format == OutputFormat.yaml:
        typer.echo(yaml.safe_dump(resolved, sort_keys=False), nl=False)
        return

    if not resolved:
        print_warning("No Pico plugins or themes installed.")
        return

    table = Table(title="Pico plugins and themes")
    table.add_column("Package")
    table.add_column("Type")
    table.add_column("Installer name")
    table.add_column("Class names")

    for package_name, entry in resolved.items():
        table.add_row(
            package_name,
            entry["type"],
            entry["installerName"],
            ", ".join(str(class_name) for class_name in entry.get("classNames", [])),
        )

    console.print(table)
