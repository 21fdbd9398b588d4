"""
Errors describing why a payload could not be decoded.

These are not raised across the stream decoding boundary: they are carried as
the ``error`` of a :class:`~rivet_providers.base.parsing.ParseFailure`. The
non-streaming JSON response handler wraps them into an ``APICallError``.
"""
from __future__ import annotations

from typing import Any


class JSONParseError(ValueError):
    """The text is not syntactically valid JSON."""

    def __init__(self, text: str, cause: BaseException) -> None:
        self.text = text
        self.cause = cause
        super().__init__(f"JSON parsing failed: Text: {text}.\nError message: {cause}")
        self.__cause__ = cause


class TypeValidationError(ValueError):
    """The decoded JSON value does not match the expected schema."""

    def __init__(self, value: Any, cause: BaseException) -> None:
        self.value = value
        self.cause = cause
        super().__init__(f"Type validation failed: Value: {value!r}.\nError message: {cause}")
        self.__cause__ = cause


__all__ = ["JSONParseError", "TypeValidationError"]
