"""Pico plugin and theme installer.

Resolves install names, install paths and plugin class names for Pico
plugins and themes, and generates the pico-plugin.php manifest Pico loads
at runtime.
"""

__version__ = "2.0.0"
