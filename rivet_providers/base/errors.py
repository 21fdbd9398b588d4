"""Unified error taxonomy public surface.

This module re-exports the one-class-per-file implementations under
``rivet_providers.base.errors_parts`` to maintain a stable import path.
``AbortError`` lives with the cancellation primitives and is re-exported here
so callers can import the whole taxonomy from one place.
"""

from .cancellation_parts.abort_error import AbortError, is_abort_error
from .errors_parts.error_code import ErrorCode
from .errors_parts.api_call_error import APICallError, is_api_call_error
from .errors_parts.empty_response_body_error import EmptyResponseBodyError
from .errors_parts.parse_errors import JSONParseError, TypeValidationError
from .errors_parts.unsupported_functionality_error import UnsupportedFunctionalityError
from .errors_parts.classification import classify_exception, handle_fetch_error

__all__ = [
    "AbortError",
    "APICallError",
    "EmptyResponseBodyError",
    "ErrorCode",
    "JSONParseError",
    "TypeValidationError",
    "UnsupportedFunctionalityError",
    "classify_exception",
    "handle_fetch_error",
    "is_abort_error",
    "is_api_call_error",
]
