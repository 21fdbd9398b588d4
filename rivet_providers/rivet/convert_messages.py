"""Conversion of the neutral conversation format to Rivet wire messages.

Rules per role:

- ``system``: content copied verbatim.
- ``user``: text parts become strings; image files become ``url`` parts
  (external URL forwarded, otherwise a base64 ``data:`` URI). ``image/*`` is
  coerced to ``image/jpeg`` before validation. Any other file kind is
  rejected. A turn made of a single text part is sent as a bare string.
- ``assistant``: text and reasoning are concatenated in order; tool calls
  become ``function_calls`` with JSON-encoded arguments.
- ``tool``: one ``function`` message per tool result, named by the tool-call
  id.

Conversion is all-or-nothing: the first unsupported construct raises and no
partial output is returned.
"""

from __future__ import annotations

import base64
import json
from typing import List, Sequence, Union

import httpx

from ..base.errors import UnsupportedFunctionalityError
from ..base.models import (
    ConversationTurn,
    FileData,
    FilePart,
    ReasoningPart,
    TextPart,
    ToolCallPart,
    ToolResultOutput,
    ToolResultPart,
)
from ..base.models_parts.tool_result_output import (
    ContentOutput,
    ErrorJsonOutput,
    ErrorTextOutput,
    JsonOutput,
    TextOutput,
)
from .chat_prompt import (
    DEFAULT_IMAGE_MEDIA_TYPE,
    WILDCARD_IMAGE_MEDIA_TYPE,
    RivetAssistantFunctionCall,
    RivetAssistantMessage,
    RivetChatMessagePart,
    RivetMessage,
    RivetSystemMessage,
    RivetToolMessage,
    RivetUrlPart,
    RivetUserMessage,
    is_supported_image_media_type,
)


def convert_to_base64(data: Union[bytes, bytearray, str]) -> str:
    """Return base64 text for ``data``; strings are assumed already encoded."""
    if isinstance(data, str):
        return data
    return base64.b64encode(bytes(data)).decode("ascii")


def _file_url(media_type: str, data: FileData) -> str:
    if isinstance(data, httpx.URL):
        return str(data)
    return f"data:{media_type};base64,{convert_to_base64(data)}"


def _convert_image_part(part: FilePart) -> RivetUrlPart:
    media_type = DEFAULT_IMAGE_MEDIA_TYPE if part.media_type == WILDCARD_IMAGE_MEDIA_TYPE else part.media_type
    if not is_supported_image_media_type(media_type):
        raise UnsupportedFunctionalityError(
            functionality=f"Invalid images mediaType: {media_type}",
        )
    return RivetUrlPart(media_type=media_type, url=_file_url(media_type, part.data))


def _convert_user_part(part: object) -> RivetChatMessagePart:
    if isinstance(part, TextPart):
        return part.text
    if isinstance(part, FilePart):
        if part.media_type.startswith("image/"):
            return _convert_image_part(part)
        raise UnsupportedFunctionalityError(
            functionality=f"File part of media type {part.media_type}: only images are supported",
        )
    raise UnsupportedFunctionalityError(
        functionality=f"User content part of type {getattr(part, 'type', type(part).__name__)}",
    )


def _convert_user_turn(turn: ConversationTurn) -> RivetUserMessage:
    if isinstance(turn.content, str):
        return RivetUserMessage(message=turn.content)
    parts = [_convert_user_part(part) for part in turn.content]
    if len(parts) == 1 and isinstance(parts[0], str):
        return RivetUserMessage(message=parts[0])
    return RivetUserMessage(message=parts)


def _convert_assistant_turn(turn: ConversationTurn) -> RivetAssistantMessage:
    text = ""
    function_calls: List[RivetAssistantFunctionCall] = []
    for part in turn.content:
        if isinstance(part, (TextPart, ReasoningPart)):
            text += part.text
        elif isinstance(part, ToolCallPart):
            function_calls.append(
                RivetAssistantFunctionCall(
                    id=part.tool_call_id,
                    name=part.tool_name,
                    arguments=json.dumps(part.input, allow_nan=False),
                )
            )
        else:
            raise ValueError(
                f"Unsupported content type in assistant message: {getattr(part, 'type', type(part).__name__)}"
            )
    return RivetAssistantMessage(message=text, function_calls=function_calls or None)


def tool_output_to_text(output: ToolResultOutput) -> str:
    """Render a tool result output as the ``function`` message text."""
    if isinstance(output, (TextOutput, ErrorTextOutput)):
        return output.value
    if isinstance(output, (JsonOutput, ErrorJsonOutput, ContentOutput)):
        return json.dumps(output.value, allow_nan=False)
    raise ValueError(f"Unsupported tool result output type: {getattr(output, 'type', type(output).__name__)}")


def _convert_tool_turn(turn: ConversationTurn) -> List[RivetToolMessage]:
    messages: List[RivetToolMessage] = []
    for part in turn.content:
        if not isinstance(part, ToolResultPart):
            raise UnsupportedFunctionalityError(
                functionality=f"Tool content part of type {getattr(part, 'type', type(part).__name__)}",
            )
        messages.append(RivetToolMessage(name=part.tool_call_id, message=tool_output_to_text(part.output)))
    return messages


def convert_to_rivet_chat_messages(prompt: Sequence[ConversationTurn]) -> List[RivetMessage]:
    """Convert a neutral conversation into Rivet wire messages.

    Parameters:
        prompt: Ordered conversation turns.

    Returns:
        Wire messages in the same order. Only ``tool`` turns may expand into
        several messages (one per tool result).

    Raises:
        UnsupportedFunctionalityError: a construct the API cannot represent
            (unsupported image type, non-image file, unexpected part kind).
        ValueError: an unknown role, or an assistant part kind outside
            text / reasoning / tool-call, or a tool input or output holding
            NaN or infinity (not representable as JSON).
    """
    messages: List[RivetMessage] = []
    for turn in prompt:
        role = turn.role
        if role == "system":
            messages.append(RivetSystemMessage(message=turn.content))
        elif role == "user":
            messages.append(_convert_user_turn(turn))
        elif role == "assistant":
            messages.append(_convert_assistant_turn(turn))
        elif role == "tool":
            messages.extend(_convert_tool_turn(turn))
        else:
            raise ValueError(f"Unsupported role: {role}")
    return messages


__all__ = ["convert_to_base64", "convert_to_rivet_chat_messages", "tool_output_to_text"]
