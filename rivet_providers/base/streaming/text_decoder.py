"""Incremental byte-to-text decoding for streamed responses.

Chunks arriving from the network may split a multi-byte UTF-8 character;
the stateful decoder keeps the partial bytes until the rest arrives. Invalid
sequences are replaced with U+FFFD instead of failing the stream.
"""

from __future__ import annotations

import codecs
from typing import Iterable, Iterator


def decode_text_stream(chunks: Iterable[bytes], encoding: str = "utf-8") -> Iterator[str]:
    """Yield decoded text for each byte chunk, preserving chunk boundaries.

    Empty decodes (a chunk holding only part of a character) are skipped. Any
    bytes left over when the source closes are flushed as a final piece.
    """
    decoder = codecs.getincrementaldecoder(encoding)(errors="replace")
    for chunk in chunks:
        if not chunk:
            continue
        text = decoder.decode(chunk)
        if text:
            yield text
    tail = decoder.decode(b"", final=True)
    if tail:
        yield tail


__all__ = ["decode_text_stream"]
