"""Pico installer CLI commands."""

from pico_installer.commands.dump import dump
from pico_installer.commands.install_path import install_path
from pico_installer.commands.resolve import resolve

__all__ = ["dump", "install_path", "resolve"]
