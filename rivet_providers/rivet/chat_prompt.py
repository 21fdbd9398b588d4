"""Rivet chat wire format.

Pydantic models for the message list sent to the Rivet chat endpoint. Field
names follow the wire format exactly: ``type`` discriminates messages,
``function_calls`` holds assistant tool calls and ``name`` of a ``function``
message is the originating tool-call id.

Serialize with :func:`to_wire`, which drops unset optional fields so an
assistant message without tool calls carries no ``function_calls`` key.
"""

from __future__ import annotations

from typing import Annotated, Any, Dict, List, Literal, Optional, Sequence, Union

from pydantic import BaseModel, ConfigDict, Field

SUPPORTED_IMAGE_MEDIA_TYPES = ("image/jpeg", "image/png", "image/gif")
SUPPORTED_DOCUMENT_MEDIA_TYPES = ("application/pdf", "text/plain")
DEFAULT_IMAGE_MEDIA_TYPE = "image/jpeg"
WILDCARD_IMAGE_MEDIA_TYPE = "image/*"

SupportedImageMediaType = Literal["image/jpeg", "image/png", "image/gif"]
SupportedDocumentMediaType = Literal["application/pdf", "text/plain"]


def is_supported_image_media_type(media_type: str) -> bool:
    """Return True if the API accepts images of ``media_type``."""
    return media_type in SUPPORTED_IMAGE_MEDIA_TYPES


class _WireModel(BaseModel):
    model_config = ConfigDict(populate_by_name=True, ser_json_bytes="base64")


class RivetUrlPart(_WireModel):
    """Image referenced by URL (remote or ``data:`` URI)."""

    type: Literal["url"] = "url"
    media_type: Optional[SupportedImageMediaType] = Field(default=None, alias="mediaType")
    url: str


class RivetDocumentPart(_WireModel):
    """Document attachment. Reserved: no conversion rule produces it yet."""

    type: Literal["document"] = "document"
    title: Optional[str] = None
    context: Optional[str] = None
    media_type: SupportedDocumentMediaType = Field(alias="mediaType")
    data: bytes
    enable_citations: bool = Field(default=False, alias="enableCitations")


RivetChatMessagePart = Union[
    str,
    Annotated[Union[RivetUrlPart, RivetDocumentPart], Field(discriminator="type")],
]
RivetMessageContent = Union[str, List[RivetChatMessagePart]]


class RivetAssistantFunctionCall(_WireModel):
    """A tool call made by the assistant; ``arguments`` is JSON text."""

    id: Optional[str] = None
    name: str
    arguments: str


class RivetSystemMessage(_WireModel):
    type: Literal["system"] = "system"
    message: RivetMessageContent
    is_cache_breakpoint: Optional[bool] = Field(default=None, alias="isCacheBreakpoint")


class RivetUserMessage(_WireModel):
    type: Literal["user"] = "user"
    message: RivetMessageContent


class RivetAssistantMessage(_WireModel):
    type: Literal["assistant"] = "assistant"
    message: str
    function_calls: Optional[List[RivetAssistantFunctionCall]] = None
    is_cache_breakpoint: Optional[bool] = Field(default=None, alias="isCacheBreakpoint")


class RivetToolMessage(_WireModel):
    """Tool result; ``name`` carries the originating tool-call id."""

    type: Literal["function"] = "function"
    name: str
    message: str
    is_cache_breakpoint: Optional[bool] = Field(default=None, alias="isCacheBreakpoint")


RivetMessage = Annotated[
    Union[RivetSystemMessage, RivetUserMessage, RivetAssistantMessage, RivetToolMessage],
    Field(discriminator="type"),
]
RivetPrompt = List[RivetMessage]


class RivetTool(_WireModel):
    """Function tool definition offered to the model."""

    name: str
    namespace: Optional[str] = None
    description: str
    parameters: Dict[str, Any]
    strict: Optional[bool] = None


class RivetToolChoice(_WireModel):
    """How the model may use the offered tools."""

    tool_choice: Optional[Literal["none", "auto", "required", "function"]] = Field(default=None, alias="toolChoice")
    tool_choice_function: Optional[str] = Field(default=None, alias="toolChoiceFunction")


def dump_wire(model: BaseModel) -> Dict[str, Any]:
    """Dump one wire model to a JSON-ready dict with wire field names."""
    return model.model_dump(mode="json", by_alias=True, exclude_none=True)


def to_wire(messages: Sequence[BaseModel]) -> List[Dict[str, Any]]:
    """Dump a message list to JSON-ready dicts, preserving order."""
    return [dump_wire(m) for m in messages]


__all__ = [
    "DEFAULT_IMAGE_MEDIA_TYPE",
    "SUPPORTED_DOCUMENT_MEDIA_TYPES",
    "SUPPORTED_IMAGE_MEDIA_TYPES",
    "WILDCARD_IMAGE_MEDIA_TYPE",
    "RivetAssistantFunctionCall",
    "RivetAssistantMessage",
    "RivetChatMessagePart",
    "RivetDocumentPart",
    "RivetMessage",
    "RivetMessageContent",
    "RivetPrompt",
    "RivetSystemMessage",
    "RivetTool",
    "RivetToolChoice",
    "RivetToolMessage",
    "RivetUrlPart",
    "RivetUserMessage",
    "dump_wire",
    "is_supported_image_media_type",
    "to_wire",
]
