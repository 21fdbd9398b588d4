"""
Error classification helpers.

Two concerns live here:

- ``handle_fetch_error`` is the last-mile normalizer applied by the transport
  layer to every exception leaving ``post_to_api``. It recognizes
  connectivity failures and turns them into retryable ``APICallError``
  instances, passes abort errors through, and leaves everything else alone.
- ``classify_exception`` maps any exception to a normalized :class:`ErrorCode`
  used as the ``error_code`` field of structured log events.
"""
from __future__ import annotations

from typing import Any, Dict, Optional

import httpx

from ..cancellation_parts.abort_error import AbortError, is_abort_error
from .api_call_error import APICallError
from .empty_response_body_error import EmptyResponseBodyError
from .error_code import ErrorCode
from .parse_errors import JSONParseError, TypeValidationError
from .unsupported_functionality_error import UnsupportedFunctionalityError

FETCH_FAILED_ERROR_MESSAGES = ("fetch failed", "failed to fetch", "connection failed")

# Transport exceptions raised by httpx when the server could not be reached.
_CONNECTIVITY_ERRORS = (httpx.ConnectError, httpx.ConnectTimeout, httpx.NetworkError)


def _connectivity_cause(error: BaseException) -> Optional[BaseException]:
    """Return the underlying cause when ``error`` is a connectivity failure."""
    if isinstance(error, _CONNECTIVITY_ERRORS):
        return error.__cause__ or error
    if isinstance(error, TypeError) and str(error).strip().lower() in FETCH_FAILED_ERROR_MESSAGES:
        return error.__cause__
    return None


def handle_fetch_error(error: BaseException, url: str, request_body_values: Any) -> BaseException:
    """Normalize a transport exception into the structured error taxonomy.

    Parameters:
        error: The exception caught at the transport boundary.
        url: Target URL of the request.
        request_body_values: Structured request body kept for reporting.

    Returns:
        The exception to raise. Abort errors and already-classified errors
        are returned unchanged, which makes the function idempotent.
    """
    if is_abort_error(error):
        return error

    cause = _connectivity_cause(error)
    if cause is not None:
        return APICallError(
            message=f"Cannot connect to API: {cause}",
            cause=cause,
            url=url,
            request_body_values=request_body_values,
            is_retryable=True,
        )

    return error


_HTTP_STATUS_MAP: Dict[int, ErrorCode] = {
    400: ErrorCode.VALIDATION,
    401: ErrorCode.AUTH,
    403: ErrorCode.AUTH,
    404: ErrorCode.NOT_FOUND,
    408: ErrorCode.TIMEOUT,
    409: ErrorCode.CONFLICT,
    422: ErrorCode.VALIDATION,
    429: ErrorCode.RATE_LIMIT,
    500: ErrorCode.SERVER_ERROR,
    502: ErrorCode.TRANSIENT,
    503: ErrorCode.UNAVAILABLE,
    504: ErrorCode.TIMEOUT,
}


def _extract_status(exc: BaseException) -> Optional[int]:
    """Attempt to extract an HTTP status code from an exception.

    Supported attribute shapes (checked in order):
    - ``exc.status_code``
    - ``exc.response.status_code``
    Returns ``None`` if no valid status can be found.
    """
    val = getattr(exc, "status_code", None)
    if isinstance(val, int) and 100 <= val < 600:
        return val
    resp = getattr(exc, "response", None)
    if resp is not None:
        sc = getattr(resp, "status_code", None)
        if isinstance(sc, int) and 100 <= sc < 600:
            return sc
    return None


def classify_exception(exc: BaseException) -> ErrorCode:
    """Classify an exception into a normalized :class:`ErrorCode`.

    Precedence:
        1. Abort errors.
        2. Conversion and decoding errors of this package.
        3. HTTP status mapping (``APICallError`` or foreign exceptions).
        4. Connectivity failures without a status.
        5. Timeouts.
        6. ``UNKNOWN`` fallback.
    """
    if isinstance(exc, AbortError):
        return ErrorCode.CANCELLED
    if isinstance(exc, UnsupportedFunctionalityError):
        return ErrorCode.UNSUPPORTED
    if isinstance(exc, (JSONParseError, TypeValidationError)):
        return ErrorCode.VALIDATION
    if isinstance(exc, EmptyResponseBodyError):
        return ErrorCode.EMPTY_RESPONSE
    status = _extract_status(exc)
    if status is not None:
        if status in _HTTP_STATUS_MAP:
            return _HTTP_STATUS_MAP[status]
        return ErrorCode.SERVER_ERROR if status >= 500 else ErrorCode.UNKNOWN
    if isinstance(exc, APICallError) and exc.is_retryable:
        return ErrorCode.CONNECTION
    if isinstance(exc, _CONNECTIVITY_ERRORS):
        return ErrorCode.CONNECTION
    if isinstance(exc, (TimeoutError, httpx.TimeoutException)):
        return ErrorCode.TIMEOUT
    return ErrorCode.UNKNOWN


__all__ = [
    "FETCH_FAILED_ERROR_MESSAGES",
    "classify_exception",
    "handle_fetch_error",
]
