"""
JSON parsing with pluggable schema validation.

A *schema* is whatever the caller uses to describe the expected payload:

- ``None``: accept any JSON value unchanged;
- a pydantic ``BaseModel`` subclass: validated with ``model_validate``;
- a pydantic ``TypeAdapter``: validated with ``validate_python``;
- any other callable: called with the JSON value, returns the typed value or
  raises.

``parse_json`` raises :class:`JSONParseError` / :class:`TypeValidationError`;
``safe_parse_json`` never raises and returns a :data:`ParseResult` instead.
"""
from __future__ import annotations

import json
from typing import Any, Callable

from pydantic import BaseModel, TypeAdapter

from ..errors_parts.parse_errors import JSONParseError, TypeValidationError
from .parse_result import ParseFailure, ParseResult, ParseSuccess

Validator = Callable[[Any], Any]


def as_validator(schema: Any) -> Validator:
    """Normalize a schema into a single-argument validating callable."""
    if schema is None:
        return lambda value: value
    if isinstance(schema, type) and issubclass(schema, BaseModel):
        return schema.model_validate
    if isinstance(schema, TypeAdapter):
        return schema.validate_python
    if callable(schema):
        return schema
    raise TypeError(f"Unsupported schema type: {type(schema).__name__}")


def validate_types(value: Any, schema: Any = None) -> Any:
    """Validate an already-decoded JSON value against ``schema``.

    Raises:
        TypeValidationError: when the validator rejects the value.
    """
    validator = as_validator(schema)
    try:
        return validator(value)
    except Exception as e:  # validators raise arbitrary error types
        raise TypeValidationError(value, e) from e


def parse_json(text: str, schema: Any = None) -> Any:
    """Parse ``text`` as JSON and validate it.

    Raises:
        JSONParseError: when ``text`` is not valid JSON.
        TypeValidationError: when the value does not match ``schema``.
    """
    try:
        value = json.loads(text)
    except (ValueError, TypeError) as e:
        raise JSONParseError(text, e) from e
    return validate_types(value, schema)


def safe_parse_json(text: str, schema: Any = None) -> ParseResult:
    """Parse and validate ``text`` without raising.

    Returns:
        ``ParseSuccess(value, raw_value)`` or ``ParseFailure(raw_text, error)``.
    """
    try:
        validator = as_validator(schema)
    except TypeError as e:
        return ParseFailure(raw_text=text, error=e)
    try:
        raw_value = json.loads(text)
    except (ValueError, TypeError) as e:
        return ParseFailure(raw_text=text, error=JSONParseError(text, e))
    try:
        value = validator(raw_value)
    except Exception as e:  # validators raise arbitrary error types
        return ParseFailure(raw_text=text, error=TypeValidationError(raw_value, e))
    return ParseSuccess(value=value, raw_value=raw_value)


def is_parsable_json(text: str) -> bool:
    """Return True if ``text`` is syntactically valid JSON."""
    try:
        json.loads(text)
    except (ValueError, TypeError):
        return False
    return True


__all__ = [
    "Validator",
    "as_validator",
    "is_parsable_json",
    "parse_json",
    "safe_parse_json",
    "validate_types",
]
