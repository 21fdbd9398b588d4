"""Rivet chat adapter: wire format, prompt conversion and request pipeline."""

from .chat_prompt import (
    SUPPORTED_IMAGE_MEDIA_TYPES,
    RivetAssistantFunctionCall,
    RivetAssistantMessage,
    RivetDocumentPart,
    RivetMessage,
    RivetSystemMessage,
    RivetTool,
    RivetToolChoice,
    RivetToolMessage,
    RivetUrlPart,
    RivetUserMessage,
    is_supported_image_media_type,
    to_wire,
)
from .convert_messages import convert_to_base64, convert_to_rivet_chat_messages
from .chat_stream import build_rivet_request_body, generate_rivet_chat, stream_rivet_chat

__all__ = [
    "SUPPORTED_IMAGE_MEDIA_TYPES",
    "RivetAssistantFunctionCall",
    "RivetAssistantMessage",
    "RivetDocumentPart",
    "RivetMessage",
    "RivetSystemMessage",
    "RivetTool",
    "RivetToolChoice",
    "RivetToolMessage",
    "RivetUrlPart",
    "RivetUserMessage",
    "build_rivet_request_body",
    "convert_to_base64",
    "convert_to_rivet_chat_messages",
    "generate_rivet_chat",
    "is_supported_image_media_type",
    "stream_rivet_chat",
    "to_wire",
]
