"""Shared HTTP client pool.

Purpose:
    Provide a centralized, thread-safe pool of reusable ``httpx.Client``
    instances so repeated API calls share connections. Timeouts derive
    exclusively from :func:`get_timeout_config`.

Lifecycle & cleanup:
    - Clients are cached by a composite key of ``base_url`` and ``purpose``.
    - All clients are closed at interpreter exit via ``atexit``. Tests may
      call :func:`close_all_clients` explicitly.
    - ``post_to_api`` accepts an explicit client, which bypasses the pool
      entirely (used with ``httpx.MockTransport`` in tests).
"""

from __future__ import annotations

import atexit
import threading
from typing import Dict, Optional, Tuple

import httpx

from ..timeouts import get_timeout_config

_CLIENTS: Dict[Tuple[Optional[str], str], httpx.Client] = {}
_LOCK = threading.RLock()


def get_httpx_client(base_url: Optional[str], purpose: str) -> httpx.Client:
    """Return a pooled ``httpx.Client`` for the given base URL and purpose.

    Parameters:
        base_url: Optional API base URL set on the client so relative request
            paths resolve against it. ``None`` groups clients under a shared
            key and requires absolute URLs.
        purpose: A short string discriminating separate pools. Keep stable to
            maximize reuse.

    Returns:
        A reusable ``httpx.Client`` instance.
    """
    key = (base_url, purpose)
    client = _CLIENTS.get(key)
    if client is not None and not client.is_closed:
        return client

    with _LOCK:
        client = _CLIENTS.get(key)
        if client is not None and not client.is_closed:
            return client
        timeout = get_timeout_config().to_httpx()
        client = httpx.Client(base_url=base_url, timeout=timeout) if base_url else httpx.Client(timeout=timeout)
        _CLIENTS[key] = client
        return client


def close_all_clients() -> None:
    """Close and clear all pooled HTTP clients."""
    with _LOCK:
        clients = list(_CLIENTS.values())
        _CLIENTS.clear()
    for c in clients:
        c.close()


atexit.register(close_all_clients)

__all__ = ["get_httpx_client", "close_all_clients"]
