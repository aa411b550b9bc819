"""hexconv exception hierarchy.

This module defines traceable domain errors with clear boundaries.
Each stage of a batch raises a specific error type for debuggability.
"""

from __future__ import annotations


class HexConvError(Exception):
    """Base exception for all hexconv failures."""


class HexConvConfigError(HexConvError):
    """Raised for invalid runtime configuration."""


class HexConvDependencyError(HexConvError):
    """Raised when an optional runtime dependency is missing."""


class CredentialSetupError(HexConvError):
    """Raised when spreadsheet credentials cannot be loaded."""


class SourceListingError(HexConvError):
    """Raised when the source directory cannot be listed."""


class SourceReadError(HexConvError):
    """Raised when one source entry cannot be read."""


class MalformedHexError(HexConvError):
    """Raised when text is not valid paired hex digits.

    Attributes:
        position: Index of the offending character in the stripped text,
            or the stripped length for odd-length input.
    """

    def __init__(self, message: str, position: int | None = None) -> None:
        super().__init__(message)
        self.position = position


class DestinationSetupError(HexConvError):
    """Raised when the local destination directory cannot be created."""


class SinkError(HexConvError):
    """Base exception for output sink write failures."""


class LocalSinkError(SinkError):
    """Raised when a decoded payload cannot be written to disk."""


class RemoteSinkError(SinkError):
    """Raised for spreadsheet API and transport failures."""


class InsufficientAuthError(SinkError):
    """Raised when a spreadsheet must be created with read-only credentials."""
