"""File operation utilities for the Pico installer."""

from pathlib import Path


def ensure_dir(path: Path | str) -> Path:
    """Create directory and all parent directories if they don't exist.

    Args:
        path: Path to the directory to create.

    Returns:
        The Path object for the created directory.
    """
    dir_path = Path(path)
    dir_path.mkdir(parents=True, exist_ok=True)
    return dir_path


def find_project_root(start: Path | None = None) -> Path:
    """Find the Composer project root directory.

    Walks up the directory tree from start (default: the current working
    directory) looking for a composer.json file.

    Args:
        start: Directory to start searching from.

    Returns:
        Path to the first directory containing composer.json, or the start
        directory if none is found.
    """
    origin = (start or Path.cwd()).resolve()
    current = origin

    while current != current.parent:
        if (current / "composer.json").is_file():
            return current
        current = current.parent

    # Fallback to the start directory if no composer.json was found
    return origin
