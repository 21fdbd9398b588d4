"""Parse results and JSON parsing helpers (public surface)."""

from .parse_result import ParseFailure, ParseResult, ParseSuccess
from .json_parsing import (
    Validator,
    as_validator,
    is_parsable_json,
    parse_json,
    safe_parse_json,
    validate_types,
)

__all__ = [
    "ParseFailure",
    "ParseResult",
    "ParseSuccess",
    "Validator",
    "as_validator",
    "is_parsable_json",
    "parse_json",
    "safe_parse_json",
    "validate_types",
]
