"""
Tool result output variants.

A tool result's ``output`` is exactly one of these dataclasses. The ``type``
field is fixed per class and mirrors the discriminator used by the neutral
prompt format.
"""
from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Literal, Union


@dataclass(frozen=True)
class TextOutput:
    """Plain text returned by a tool."""

    value: str
    type: Literal["text"] = field(default="text", init=False)


@dataclass(frozen=True)
class ErrorTextOutput:
    """Error message text returned by a failing tool."""

    value: str
    type: Literal["error-text"] = field(default="error-text", init=False)


@dataclass(frozen=True)
class JsonOutput:
    """Any JSON-serializable value returned by a tool."""

    value: Any
    type: Literal["json"] = field(default="json", init=False)


@dataclass(frozen=True)
class ErrorJsonOutput:
    """JSON-serializable error value returned by a failing tool."""

    value: Any
    type: Literal["error-json"] = field(default="error-json", init=False)


@dataclass(frozen=True)
class ContentOutput:
    """Multi-part content (a JSON-serializable list of part dicts)."""

    value: Any
    type: Literal["content"] = field(default="content", init=False)


ToolResultOutput = Union[TextOutput, ErrorTextOutput, JsonOutput, ErrorJsonOutput, ContentOutput]

__all__ = [
    "ContentOutput",
    "ErrorJsonOutput",
    "ErrorTextOutput",
    "JsonOutput",
    "TextOutput",
    "ToolResultOutput",
]
