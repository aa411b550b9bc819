"""Output sink contract shared by local and remote destinations."""

from __future__ import annotations

from typing import Protocol

from core.types import SinkTarget


class OutputSink(Protocol):
    """Destination that accepts decoded payloads from the batch runner."""

    def find_existing(self, entry_name: str) -> SinkTarget | None:
        """Return the destination when this entry was already converted."""
        ...

    def write(self, entry_name: str, payload: bytes) -> SinkTarget:
        """Persist or transmit one decoded payload."""
        ...
