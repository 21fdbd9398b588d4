"""
Content part models of the neutral conversation format.

Each turn of a conversation carries an ordered list of parts. The ``type``
field is fixed per class so converters can dispatch on it (or on the class)
and report unknown kinds by name.

``FilePart.data`` is one of:

- ``bytes``: raw file content;
- ``str``: file content already base64-encoded;
- ``httpx.URL``: an external reference that is forwarded as-is.
"""
from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Literal, Optional, Union

import httpx

from .tool_result_output import ToolResultOutput

FileData = Union[bytes, str, httpx.URL]


@dataclass(frozen=True)
class TextPart:
    """Plain text."""

    text: str
    type: Literal["text"] = field(default="text", init=False)


@dataclass(frozen=True)
class FilePart:
    """A file (image, document, ...) identified by its IANA media type.

    Attributes:
        media_type: e.g. ``"image/png"``; ``"image/*"`` means "some image".
        data: Raw bytes, base64 text, or an ``httpx.URL`` reference.
        filename: Optional original file name.
    """

    media_type: str
    data: FileData
    filename: Optional[str] = None
    type: Literal["file"] = field(default="file", init=False)


@dataclass(frozen=True)
class ReasoningPart:
    """Model reasoning text emitted in an earlier assistant turn."""

    text: str
    type: Literal["reasoning"] = field(default="reasoning", init=False)


@dataclass(frozen=True)
class ToolCallPart:
    """A request, issued by the assistant, to invoke a tool.

    Attributes:
        tool_call_id: Identifier linking the call to its later result.
        tool_name: Name of the tool to invoke.
        input: JSON-serializable arguments value.
    """

    tool_call_id: str
    tool_name: str
    input: Any
    type: Literal["tool-call"] = field(default="tool-call", init=False)


@dataclass(frozen=True)
class ToolResultPart:
    """The output of an earlier tool call."""

    tool_call_id: str
    tool_name: str
    output: ToolResultOutput
    type: Literal["tool-result"] = field(default="tool-result", init=False)


ContentPart = Union[TextPart, FilePart, ReasoningPart, ToolCallPart, ToolResultPart]

__all__ = [
    "ContentPart",
    "FileData",
    "FilePart",
    "ReasoningPart",
    "TextPart",
    "ToolCallPart",
    "ToolResultPart",
]
