"""Common file I/O operations."""

import sys
from pathlib import Path


class FileReadError(Exception):
    """A file could not be read."""


def file_exists(path: Path) -> bool:
    """Return True if path exists (and is not a directory)."""
    return path.exists() and not path.is_dir()


def read_file(path: Path) -> str:
    """Read a text file.

    Args:
        path: File to read

    Returns:
        File content

    Raises:
        FileReadError: If the file is missing, a directory, or unreadable
    """
    try:
        return path.read_text()
    except (OSError, UnicodeDecodeError) as e:
        raise FileReadError(f"Cannot read {path}: {e}") from e


def read_source(source: str) -> str:
    """Read content from a file path, or from stdin when source is '-'."""
    if source == "-":
        return sys.stdin.read()
    return read_file(Path(source))
