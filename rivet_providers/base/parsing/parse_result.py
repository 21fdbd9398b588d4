"""
Parse result value types.

A :data:`ParseResult` is either a :class:`ParseSuccess` carrying the validated
value or a :class:`ParseFailure` carrying the raw text and the error that
prevented decoding. Both expose a ``success`` flag so callers can branch
without ``isinstance`` checks.
"""
from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Generic, TypeVar, Union

T = TypeVar("T")


@dataclass(frozen=True)
class ParseSuccess(Generic[T]):
    """A payload that decoded and validated.

    Attributes:
        value: The validated, typed value.
        raw_value: The plain JSON value before validation.
    """

    value: T
    raw_value: Any = None

    @property
    def success(self) -> bool:
        return True


@dataclass(frozen=True)
class ParseFailure:
    """A payload that failed JSON parsing or schema validation.

    Attributes:
        raw_text: The payload text exactly as received.
        error: ``JSONParseError`` or ``TypeValidationError`` describing why.
    """

    raw_text: str
    error: Exception

    @property
    def success(self) -> bool:
        return False


ParseResult = Union[ParseSuccess[T], ParseFailure]

__all__ = ["ParseFailure", "ParseResult", "ParseSuccess"]
