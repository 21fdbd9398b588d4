"""
Conversation turn model.

A :class:`ConversationTurn` is one role-tagged entry of a conversation. The
ordered list of turns is the neutral prompt handed to converters.
"""
from __future__ import annotations

from dataclasses import dataclass
from typing import List, Literal, Sequence, Union

from .content_part import ContentPart, TextPart

Role = Literal["system", "user", "assistant", "tool"]

# System turns carry wire-ready content that is forwarded verbatim.
SystemContent = Union[str, List[str]]


@dataclass(frozen=True)
class ConversationTurn:
    """A role-tagged turn of the conversation.

    Attributes:
        role: ``"system"``, ``"user"``, ``"assistant"`` or ``"tool"``.
        content: For ``system``, a string (or list of strings) copied as-is;
            for the other roles, an ordered sequence of content parts.
    """

    role: Role
    content: Union[SystemContent, Sequence[ContentPart]]

    def text_or_joined(self) -> str:
        """Return a flattened text view for logging.

        Text parts are concatenated with newlines; other parts are rendered
        as bracketed type tokens.
        """
        if isinstance(self.content, str):
            return self.content
        pieces: List[str] = []
        for p in self.content:
            if isinstance(p, str):
                pieces.append(p)
            elif isinstance(p, TextPart):
                pieces.append(p.text)
            else:
                pieces.append(f"[{p.type}]")
        return "\n".join(pieces)


Prompt = Sequence[ConversationTurn]

__all__ = ["ConversationTurn", "Prompt", "Role", "SystemContent"]
