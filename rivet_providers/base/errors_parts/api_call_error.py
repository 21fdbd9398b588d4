"""
Structured API call error.

Raised by the transport layer when a request fails with a non-success status,
when a response handler cannot process a response, or when the server cannot
be reached at all. Carries the request and response context needed for
diagnostics and for retry decisions made by callers above the transport.
"""
from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Dict, Optional

_RETRYABLE_STATUS_CODES = (408, 409, 429)


def _default_retryable(status_code: Optional[int]) -> bool:
    if status_code is None:
        return False
    return status_code in _RETRYABLE_STATUS_CODES or status_code >= 500


@dataclass(eq=False)
class APICallError(Exception):
    """Represents a failed call against the remote API.

    Attributes:
        message: Human-readable error message suitable for logging.
        url: Target URL of the failed request.
        request_body_values: Structured request body (pre-serialization) kept
            for error reporting.
        status_code: HTTP status of the response, ``None`` when no response
            was received (for example on connection failures).
        response_headers: Lower-cased response headers when available.
        response_body: Raw response body text when it was read.
        cause: Underlying exception, if any.
        is_retryable: Hint for retry logic layered above the transport. When
            left as ``None`` it is derived from ``status_code`` (408, 409, 429
            and 5xx are retryable).
        data: Optional parsed vendor error payload.
    """

    message: str
    url: str
    request_body_values: Any = None
    status_code: Optional[int] = None
    response_headers: Optional[Dict[str, str]] = None
    response_body: Optional[str] = None
    cause: Optional[BaseException] = field(default=None, repr=False)
    is_retryable: Optional[bool] = None
    data: Any = None

    def __post_init__(self) -> None:
        if self.is_retryable is None:
            self.is_retryable = _default_retryable(self.status_code)
        if self.cause is not None and self.__cause__ is None:
            self.__cause__ = self.cause

    def __str__(self) -> str:  # pragma: no cover - trivial
        status = self.status_code if self.status_code is not None else "-"
        return f"{status} {self.url}: {self.message}"


def is_api_call_error(error: object) -> bool:
    """Return True if ``error`` is an :class:`APICallError`."""
    return isinstance(error, APICallError)


__all__ = ["APICallError", "is_api_call_error"]
