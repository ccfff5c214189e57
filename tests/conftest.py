"""
Shared pytest fixtures for Stellar Client tests.

HTTP is never real: clients are ``httpx.Client`` instances whose transport
is an ``httpx.MockTransport`` answering from inline fixtures.
"""

from typing import Any, Callable, Dict, List, Optional, Tuple

import httpx
import pytest

HORIZON_URL = "https://horizon.example.org/"


@pytest.fixture
def canned_client() -> Callable[..., Tuple[httpx.Client, List[httpx.Request]]]:
    """Factory for a client answering every request with one canned response.

    Returns the client and the list the sent requests are recorded into.
    """
    clients: List[httpx.Client] = []

    def _make(
        json_body: Any = None,
        status_code: int = 200,
        headers: Optional[Dict[str, str]] = None,
        base_url: str = HORIZON_URL,
    ) -> Tuple[httpx.Client, List[httpx.Request]]:
        recorded: List[httpx.Request] = []

        def handler(request: httpx.Request) -> httpx.Response:
            request.read()
            recorded.append(request)
            return httpx.Response(status_code, json=json_body, headers=headers)

        client = httpx.Client(transport=httpx.MockTransport(handler), base_url=base_url)
        clients.append(client)
        return client, recorded

    yield _make

    for client in clients:
        client.close()
