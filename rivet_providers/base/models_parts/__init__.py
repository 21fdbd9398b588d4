"""Models parts package public surface.

Re-exports the neutral conversation dataclasses; `rivet_providers.base.models`
remains the primary stable import path.
"""

from .content_part import (
    ContentPart,
    FileData,
    FilePart,
    ReasoningPart,
    TextPart,
    ToolCallPart,
    ToolResultPart,
)
from .message import ConversationTurn, Prompt, Role, SystemContent
from .tool_result_output import (
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
