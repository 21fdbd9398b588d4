"""
Neutral conversation models public surface.

This module re-exports the one-class-per-file implementations under
``rivet_providers.base.models_parts`` to preserve a stable import path.
"""

from .models_parts.content_part import (
    ContentPart,
    FileData,
    FilePart,
    ReasoningPart,
    TextPart,
    ToolCallPart,
    ToolResultPart,
)
from .models_parts.message import ConversationTurn, Prompt, Role, SystemContent
from .models_parts.tool_result_output import (
    ContentOutput,
    ErrorJsonOutput,
    ErrorTextOutput,
    JsonOutput,
    TextOutput,
    ToolResultOutput,
)

__all__ = [
    "ContentOutput",
    "ContentPart",
    "ConversationTurn",
    "ErrorJsonOutput",
    "ErrorTextOutput",
    "FileData",
    "FilePart",
    "JsonOutput",
    "Prompt",
    "ReasoningPart",
    "Role",
    "SystemContent",
    "TextOutput",
    "TextPart",
    "ToolCallPart",
    "ToolResultOutput",
    "ToolResultPart",
]
