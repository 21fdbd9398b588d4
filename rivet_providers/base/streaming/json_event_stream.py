"""JSON event stream decoding.

``parse_json_event_stream`` is the single-pass pipeline turning a raw byte
stream into a lazy sequence of :data:`ParseResult` values:

1. bytes are decoded incrementally to text (``decode_text_stream``);
2. text is framed into SSE records (``iter_event_source_messages``);
3. each record's data is parsed as JSON and validated against the schema,
   except the ``[DONE]`` sentinel which is skipped without ending the stream.

A malformed record yields a ``ParseFailure`` and decoding continues with the
next record. The sequence ends only when the byte source is exhausted.

``JsonEventStream`` wraps the pipeline with explicit ``close()`` so the
underlying HTTP response can be released as soon as the consumer is done,
whether it exhausted the stream or stopped early.
"""

from __future__ import annotations

import logging
from typing import Any, Callable, Generic, Iterable, Iterator, Optional, TypeVar

from ..cancellation import CancellationToken, raise_if_cancelled
from ..constants import STREAM_DONE_SENTINEL
from ..log_support import LogContext
from ..logging import log_event, normalized_log_event, resolve_logger
from ..parsing import ParseResult, safe_parse_json
from .event_source import iter_event_source_messages
from .text_decoder import decode_text_stream

T = TypeVar("T")


def _guarded_chunks(
    chunks: Iterable[bytes],
    cancellation: Optional[CancellationToken],
) -> Iterator[bytes]:
    """Pull chunks one at a time, checking the token before every pull."""
    it = iter(chunks)
    while True:
        raise_if_cancelled(cancellation)
        try:
            chunk = next(it)
        except StopIteration:
            return
        yield chunk


def _logged_text(texts: Iterable[str], logger: logging.Logger, ctx: Optional[LogContext]) -> Iterator[str]:
    for text in texts:
        log_event(logger, "stream.decoded", ctx, level=logging.DEBUG, text=text)
        yield text


def parse_json_event_stream(
    stream: Iterable[bytes],
    schema: Any = None,
    *,
    cancellation: Optional[CancellationToken] = None,
    logger: Optional[logging.Logger] = None,
    ctx: Optional[LogContext] = None,
) -> Iterator[ParseResult]:
    """Decode an SSE byte stream into parse results, lazily.

    Parameters:
        stream: Iterable of raw byte chunks (e.g. ``httpx.Response.iter_bytes()``).
        schema: Payload schema, see :func:`~rivet_providers.base.parsing.as_validator`.
        cancellation: Optional token checked before every pull from ``stream``
            and before every yielded result.
        logger: Optional logger receiving debug events; silent by default.
        ctx: Optional log context merged into every event.

    Yields:
        One ``ParseResult`` per non-sentinel record, in arrival order.

    Raises:
        AbortError: when ``cancellation`` is signalled; nothing further is
            yielded.
    """
    log = resolve_logger(logger)
    emitted = 0
    failures = 0
    texts = _logged_text(decode_text_stream(_guarded_chunks(stream, cancellation)), log, ctx)
    for message in iter_event_source_messages(texts):
        if message.data == STREAM_DONE_SENTINEL:
            log_event(log, "stream.done_sentinel", ctx, level=logging.DEBUG)
            continue
        log_event(log, "stream.record", ctx, level=logging.DEBUG, sse_event=message.event, data=message.data)
        result = safe_parse_json(message.data, schema)
        if not result.success:
            failures += 1
            log_event(log, "stream.parse_error", ctx, level=logging.DEBUG, error=str(result.error))
        raise_if_cancelled(cancellation)
        emitted += 1
        yield result
    normalized_log_event(log, "stream.done", ctx, phase="finalize", emitted=emitted, level=logging.DEBUG, failures=failures)


class JsonEventStream(Generic[T]):
    """Closable, single-pass iterator over decoded stream events.

    Iteration is lazy: each ``next()`` pulls only as many bytes as needed for
    the next record. The ``on_close`` callback runs exactly once, when the
    stream is exhausted, when it raises, or when ``close()`` is called
    (including via ``with`` or garbage collection of a started stream).
    """

    def __init__(self, results: Iterator[ParseResult], on_close: Optional[Callable[[], None]] = None) -> None:
        self._results = results
        self._on_close = on_close
        self._closed = False

    @property
    def closed(self) -> bool:
        return self._closed

    def __iter__(self) -> "JsonEventStream[T]":
        return self

    def __next__(self) -> ParseResult:
        if self._closed:
            raise StopIteration
        try:
            return next(self._results)
        except BaseException:
            self.close()
            raise

    def close(self) -> None:
        """Stop decoding and release the byte source. Idempotent."""
        if self._closed:
            return
        self._closed = True
        try:
            close = getattr(self._results, "close", None)
            if close is not None:
                close()
        finally:
            if self._on_close is not None:
                self._on_close()

    def __enter__(self) -> "JsonEventStream[T]":
        return self

    def __exit__(self, *exc_info: Any) -> None:
        self.close()

    def __del__(self) -> None:  # pragma: no cover - GC timing
        if not self._closed:
            self.close()


__all__ = ["JsonEventStream", "parse_json_event_stream"]
