from __future__ import annotations


class TransportError(Exception):
    """A provider call failed: bad HTTP status, network failure or malformed payload."""

    def __init__(self, message: str, *, status_code: int | None = None) -> None:
        super().__init__(message)
        self.status_code = status_code
