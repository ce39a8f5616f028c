"""Shared fixtures for SteamClient tests."""

import httpx
import pytest_asyncio

from steamapi.client import SteamClient


@pytest_asyncio.fixture
async def build_client():
    """Build SteamClients backed by a mock transport, closed after the test."""
    http_clients: list[httpx.AsyncClient] = []

    async def _build(handler) -> SteamClient:
        client = SteamClient(api_key="KEY")
        await client._client.aclose()
        client._client = httpx.AsyncClient(transport=httpx.MockTransport(handler))
        http_clients.append(client._client)
        return client

    yield _build

    for http_client in http_clients:
        await http_client.aclose()
