"""Abort error type.

Defines the public ``AbortError`` raised when an operation observes a
cancellation request. The transport and stream decoding layers pass it through
unchanged: it is never reclassified or wrapped.
"""

from __future__ import annotations


class AbortError(RuntimeError):
    """Raised when an operation is cancelled cooperatively.

    This specialized error distinguishes cooperative cancellation from other
    runtime failures, enabling targeted handling (e.g., suppress log noise or
    avoid retry logic).
    """


def is_abort_error(error: object) -> bool:
    """Return True if ``error`` signals a cancelled operation."""
    return isinstance(error, AbortError)


__all__ = ["AbortError", "is_abort_error"]
