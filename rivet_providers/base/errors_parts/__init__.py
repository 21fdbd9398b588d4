"""Errors parts package public surface.

Re-exports individual error taxonomy components for optional direct imports.
Prefer importing from `rivet_providers.base.errors` for the stable surface.
"""

from .error_code import ErrorCode
from .api_call_error import APICallError, is_api_call_error
from .empty_response_body_error import EmptyResponseBodyError
from .parse_errors import JSONParseError, TypeValidationError
from .unsupported_functionality_error import UnsupportedFunctionalityError
from .classification import classify_exception, handle_fetch_error

__all__ = [
    "APICallError",
    "EmptyResponseBodyError",
    "ErrorCode",
    "JSONParseError",
    "TypeValidationError",
    "UnsupportedFunctionalityError",
    "classify_exception",
    "handle_fetch_error",
    "is_api_call_error",
]
