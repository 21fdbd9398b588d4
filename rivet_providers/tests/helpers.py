"""Shared helpers for building server-sent event bodies in tests.

Payloads are JSON-encoded with ``ensure_ascii=False`` so non-ASCII text goes
over the wire as raw UTF-8 bytes, the way real servers send it.
"""
from __future__ import annotations

import json
from typing import Any


def sse_record(data: Any) -> str:
    """Frame one SSE record; non-string data is JSON-encoded."""
    text = data if isinstance(data, str) else json.dumps(data, ensure_ascii=False)
    return "".join(f"data: {line}\n" for line in text.split("\n")) + "\n"


def sse_body(*records: Any) -> bytes:
    """Frame several SSE records into one UTF-8 body."""
    return "".join(sse_record(r) for r in records).encode("utf-8")
