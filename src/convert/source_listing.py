"""Source directory enumeration and reads.

This module lists hex source files and loads their raw bytes.
"""

from __future__ import annotations

from pathlib import Path

from core.errors import SourceListingError, SourceReadError
from core.types import SourceEntry


def list_source_files(source_dir: Path) -> list[Path]:
    """List regular files directly under the source directory.

    Args:
        source_dir: Directory holding hex files.

    Returns:
        File paths sorted by name. Subdirectories are skipped.

    Raises:
        SourceListingError: If the directory is missing or unreadable.
    """
    try:
        children = list(source_dir.iterdir())
    except OSError as error:
        raise SourceListingError(
            f"Failed to read source folder {source_dir}: {error.strerror or error}. "
            "Provide an existing, readable directory."
        ) from error
    return sorted((child for child in children if not child.is_dir()), key=lambda path: path.name)


def read_source_entry(file_path: Path) -> SourceEntry:
    """Read one source file as raw bytes.

    Raises:
        SourceReadError: If the file cannot be read.
    """
    try:
        content = file_path.read_bytes()
    except OSError as error:
        raise SourceReadError(
            f"Failed to read source file {file_path}: {error.strerror or error}."
        ) from error
    return SourceEntry(name=file_path.name, path=file_path, content=content)
