"""Pytest configuration and fixtures for adsim tests."""

from collections.abc import AsyncGenerator

import pytest
import pytest_asyncio
from httpx import ASGITransport, AsyncClient

from adsim.main import app
from adsim.schemas.simulate import InputSnapshot


@pytest_asyncio.fixture(scope="function")
async def test_client() -> AsyncGenerator[AsyncClient, None]:
    """Create test HTTP client bound to the ASGI app."""
    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as client:
        yield client


@pytest.fixture
def default_snapshot() -> InputSnapshot:
    """Calculator's initial form values."""
    return InputSnapshot()


@pytest.fixture
def snapshot_factory():
    """Factory fixture building snapshots from snake_case overrides."""

    def _make(**overrides) -> InputSnapshot:
        return InputSnapshot(**overrides)

    return _make
