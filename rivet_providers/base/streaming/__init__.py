"""Stream decoding primitives.

Byte stream -> text -> SSE records -> validated JSON parse results.
"""

from .text_decoder import decode_text_stream
from .event_source import EventSourceMessage, EventSourceParser, iter_event_source_messages
from .json_event_stream import JsonEventStream, parse_json_event_stream

__all__ = [
    "EventSourceMessage",
    "EventSourceParser",
    "JsonEventStream",
    "decode_text_stream",
    "iter_event_source_messages",
    "parse_json_event_stream",
]
