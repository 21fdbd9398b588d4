"""Request and response header helpers."""

from __future__ import annotations

import platform
from typing import Dict, Mapping, Optional

import httpx


def remove_undefined_entries(headers: Optional[Mapping[str, Optional[str]]]) -> Dict[str, str]:
    """Return a copy of ``headers`` without ``None`` values."""
    if not headers:
        return {}
    return {k: v for k, v in headers.items() if v is not None}


def get_runtime_user_agent() -> str:
    """Return the runtime identity segment, e.g. ``runtime/python/3.12.4``."""
    return f"runtime/{platform.python_implementation().lower()}/{platform.python_version()}"


def with_user_agent_suffix(
    headers: Optional[Mapping[str, Optional[str]]],
    *user_agent_suffix_parts: str,
) -> Dict[str, str]:
    """Append suffix parts to the ``User-Agent`` header.

    Header names are matched case-insensitively; an existing ``User-Agent``
    value is kept as the prefix. ``None``-valued headers are dropped.
    """
    cleaned = remove_undefined_entries(headers)
    current = ""
    for name in list(cleaned):
        if name.lower() == "user-agent":
            current = cleaned.pop(name)
    parts = [p for p in (current, *user_agent_suffix_parts) if p]
    cleaned["User-Agent"] = " ".join(parts)
    return cleaned


def extract_response_headers(response: httpx.Response) -> Dict[str, str]:
    """Return response headers as a plain dict with lower-cased names."""
    return {k.lower(): v for k, v in response.headers.items()}


__all__ = [
    "extract_response_headers",
    "get_runtime_user_agent",
    "remove_undefined_entries",
    "with_user_agent_suffix",
]
