"""Local directory sink.

This module writes each decoded payload to one file in a destination
directory, named after the source file with a text extension.
"""

from __future__ import annotations

import os
from pathlib import Path

from core.constants import DEFAULT_OUTPUT_EXTENSION
from core.errors import DestinationSetupError, LocalSinkError
from core.types import LocalTarget


class LocalFileSink:
    """Filesystem-backed sink with skip-if-exists idempotency."""

    def __init__(self, output_dir: Path, output_extension: str = DEFAULT_OUTPUT_EXTENSION) -> None:
        self._output_dir = output_dir
        self._output_extension = output_extension

    @classmethod
    def create(
        cls,
        output_dir: Path,
        output_extension: str = DEFAULT_OUTPUT_EXTENSION,
    ) -> "LocalFileSink":
        """Create the destination directory and return a sink for it.

        Args:
            output_dir: Destination directory, created with parents.
            output_extension: Extension for destination files.

        Returns:
            Sink rooted at ``output_dir``.

        Raises:
            DestinationSetupError: If the directory cannot be created.
        """
        try:
            output_dir.mkdir(parents=True, exist_ok=True)
        except OSError as error:
            raise DestinationSetupError(
                f"Error creating destination folder {output_dir}: {error.strerror or error}. "
                "Choose a writable destination path."
            ) from error
        return cls(output_dir, output_extension)

    def target_for(self, entry_name: str) -> LocalTarget:
        """Map a source file name onto its destination file."""
        stem, _ = os.path.splitext(entry_name)
        return LocalTarget(path=self._output_dir / f"{stem}{self._output_extension}")

    def find_existing(self, entry_name: str) -> LocalTarget | None:
        """Return the destination when it already exists.

        Raises:
            LocalSinkError: If the destination cannot be checked.
        """
        target = self.target_for(entry_name)
        try:
            target.path.stat()
        except FileNotFoundError:
            return None
        except OSError as error:
            raise LocalSinkError(
                f"Failed to check {target.path}: {error.strerror or error}. "
                "Check destination folder permissions."
            ) from error
        return target

    def write(self, entry_name: str, payload: bytes) -> LocalTarget:
        """Write payload bytes verbatim to the destination file.

        Raises:
            LocalSinkError: If the file cannot be written.
        """
        target = self.target_for(entry_name)
        try:
            target.path.parent.mkdir(parents=True, exist_ok=True)
            target.path.write_bytes(payload)
        except OSError as error:
            raise LocalSinkError(
                f"Failed to write {target.path}: {error.strerror or error}. "
                "Check destination folder permissions and free space."
            ) from error
        return target
