"""Server-Sent Events framing.

Splits a text stream into discrete event records following the
``text/event-stream`` rules:

- lines end with CRLF, LF or CR, and a line ending may be split across
  chunks;
- a blank line dispatches the record being assembled;
- ``data`` lines accumulate and are joined with ``\\n``;
- ``event``, ``id`` and ``retry`` fields are recognized, other fields and
  ``:`` comment lines are ignored;
- a record without any ``data`` line is not dispatched;
- an unterminated record at end of stream is discarded.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable, Iterator, List, Optional


@dataclass(frozen=True)
class EventSourceMessage:
    """One dispatched SSE record."""

    data: str
    event: Optional[str] = None
    id: Optional[str] = None
    retry: Optional[int] = None


class EventSourceParser:
    """Stateful SSE parser fed with arbitrary text chunks.

    One parser instance holds the partial line and partial record of a single
    stream and must not be shared between streams.
    """

    def __init__(self) -> None:
        self._buffer = ""
        self._pending_cr = False
        self._first_chunk = True
        self._data: List[str] = []
        self._event: Optional[str] = None
        self._last_event_id: Optional[str] = None
        self._retry: Optional[int] = None

    def feed(self, text: str) -> List[EventSourceMessage]:
        """Consume ``text`` and return the records completed by it."""
        if self._first_chunk and text:
            self._first_chunk = False
            if text.startswith("\ufeff"):
                text = text[1:]
        if self._pending_cr and text:
            self._pending_cr = False
            if text.startswith("\n"):
                text = text[1:]

        messages: List[EventSourceMessage] = []
        buf = self._buffer + text
        start = 0
        length = len(buf)
        i = 0
        while i < length:
            ch = buf[i]
            if ch == "\r" or ch == "\n":
                message = self._process_line(buf[start:i])
                if message is not None:
                    messages.append(message)
                if ch == "\r":
                    if i + 1 == length:
                        self._pending_cr = True
                    elif buf[i + 1] == "\n":
                        i += 1
                start = i + 1
            i += 1
        self._buffer = buf[start:]
        return messages

    def _process_line(self, line: str) -> Optional[EventSourceMessage]:
        if line == "":
            return self._dispatch()
        if line.startswith(":"):
            return None
        field, sep, value = line.partition(":")
        if sep and value.startswith(" "):
            value = value[1:]
        if field == "data":
            self._data.append(value)
        elif field == "event":
            self._event = value
        elif field == "id":
            if "\0" not in value:
                self._last_event_id = value
        elif field == "retry":
            if value.isascii() and value.isdigit():
                self._retry = int(value)
        return None

    def _dispatch(self) -> Optional[EventSourceMessage]:
        data, event = self._data, self._event
        self._data = []
        self._event = None
        if not data:
            return None
        return EventSourceMessage(
            data="\n".join(data),
            event=event or None,
            id=self._last_event_id,
            retry=self._retry,
        )


def iter_event_source_messages(text_chunks: Iterable[str]) -> Iterator[EventSourceMessage]:
    """Yield SSE records from a stream of text chunks, in arrival order."""
    parser = EventSourceParser()
    for chunk in text_chunks:
        yield from parser.feed(chunk)


__all__ = ["EventSourceMessage", "EventSourceParser", "iter_event_source_messages"]
