"""Pytest configuration for the rivet_providers test suite.

Provides an ``httpx.MockTransport``-backed client factory so transport tests
never touch the network, and a teardown that closes pooled clients created
during a test. SSE body builders live in ``helpers``.
"""

from __future__ import annotations

from typing import Callable, Iterator, List

import httpx
import pytest

from rivet_providers.base.http import close_all_clients


@pytest.fixture()
def make_client() -> Iterator[Callable[[Callable[[httpx.Request], httpx.Response]], httpx.Client]]:
    """Yield a factory building clients around a request handler."""
    clients: List[httpx.Client] = []

    def factory(handler: Callable[[httpx.Request], httpx.Response]) -> httpx.Client:
        client = httpx.Client(transport=httpx.MockTransport(handler))
        clients.append(client)
        return client

    yield factory
    for client in clients:
        client.close()

@pytest.fixture(autouse=True)
def _close_pooled_clients() -> Iterator[None]:
    yield
    close_all_clients()
