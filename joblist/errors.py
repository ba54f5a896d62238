"""Fetch failure taxonomy."""
from __future__ import annotations


class FetchError(Exception):
    kind = "fetch"

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message


class TransportError(FetchError):
    """Endpoint unreachable or answered with a non-success status."""

    kind = "transport"

    def __init__(self, message: str, status_code: int | None = None) -> None:
        super().__init__(message)
        self.status_code = status_code


class MalformedResponse(FetchError):
    """Response body has no safe default for a required field."""

    kind = "malformed"
