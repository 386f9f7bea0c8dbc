"""Shared test fixtures for the dicelab test suite.

async_client  (function scope)
    An httpx AsyncClient wired straight to the FastAPI app through
    ASGITransport. No server process is started.

Parser, engine and report tests need no fixtures.
"""

from __future__ import annotations

import pytest_asyncio
from httpx import ASGITransport, AsyncClient

from dicelab.main import app


@pytest_asyncio.fixture
async def async_client():
    async with AsyncClient(transport=ASGITransport(app=app), base_url="http://test") as ac:
        yield ac
