"""Error raised when a successful response unexpectedly carries no body."""
from __future__ import annotations


class EmptyResponseBodyError(Exception):
    """A successful response had no body to decode."""

    def __init__(self, message: str = "Empty response body") -> None:
        super().__init__(message)


__all__ = ["EmptyResponseBodyError"]
