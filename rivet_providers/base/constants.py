"""Base shared constants for the transport and stream decoding layers.

Central location to avoid scattering magic strings and default numbers.
"""
from __future__ import annotations

VERSION = "0.1.0"

# User-agent suffix appended to every request issued by ``post_to_api``.
PROVIDER_UTILS_USER_AGENT = f"ai-sdk/provider-utils/{VERSION}"

# Terminal sentinel some servers send as the last SSE data payload.
STREAM_DONE_SENTINEL = "[DONE]"

JSON_CONTENT_TYPE = "application/json"
FORM_CONTENT_TYPE = "application/x-www-form-urlencoded"

# Pool purpose key for the shared transport client.
TRANSPORT_CLIENT_PURPOSE = "post"

__all__ = [
    "VERSION",
    "PROVIDER_UTILS_USER_AGENT",
    "STREAM_DONE_SENTINEL",
    "JSON_CONTENT_TYPE",
    "FORM_CONTENT_TYPE",
    "TRANSPORT_CLIENT_PURPOSE",
]
