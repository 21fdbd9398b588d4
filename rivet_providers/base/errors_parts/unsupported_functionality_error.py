"""
Error raised when a prompt construct has no wire representation.

Conversion raises it synchronously, before any network activity. It is never
retried.
"""
from __future__ import annotations


class UnsupportedFunctionalityError(Exception):
    """A requested functionality is not supported by the target API.

    Attributes:
        functionality: Short description of what was requested, for example
            the offending media type.
    """

    def __init__(self, functionality: str, message: str | None = None) -> None:
        self.functionality = functionality
        super().__init__(message or f"'{functionality}' functionality not supported.")


__all__ = ["UnsupportedFunctionalityError"]
