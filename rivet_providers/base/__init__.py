"""
Providers Base Package

Provider-agnostic building blocks shared by vendor adapters:

- Models: the neutral conversation dataclasses
- Errors: the structured error taxonomy and transport error classifier
- Cancellation: cooperative cancellation token and ``AbortError``
- HTTP: the POST transport and its response handlers
- Streaming: SSE byte stream decoding into parse results
- Parsing: ``ParseResult`` values and schema-validated JSON parsing
"""

from .cancellation import AbortError, CancellationToken
from .errors import (
    APICallError,
    EmptyResponseBodyError,
    ErrorCode,
    JSONParseError,
    TypeValidationError,
    UnsupportedFunctionalityError,
    classify_exception,
    handle_fetch_error,
)
from .models import ConversationTurn, Prompt, Role
from .parsing import ParseFailure, ParseResult, ParseSuccess, safe_parse_json
from .timeouts import TimeoutConfig, get_timeout_config

__all__ = [
    # Models
    "ConversationTurn",
    "Prompt",
    "Role",
    # Errors
    "AbortError",
    "APICallError",
    "EmptyResponseBodyError",
    "ErrorCode",
    "JSONParseError",
    "TypeValidationError",
    "UnsupportedFunctionalityError",
    "classify_exception",
    "handle_fetch_error",
    # Cancellation
    "CancellationToken",
    # Parsing
    "ParseFailure",
    "ParseResult",
    "ParseSuccess",
    "safe_parse_json",
    # Timeouts
    "TimeoutConfig",
    "get_timeout_config",
]
