"""Pytest configuration and fixtures."""

from collections.abc import AsyncIterator
from datetime import datetime

import pytest
from httpx import ASGITransport, AsyncClient

from timesuggest.main import app
from timesuggest.suggestions.service import TimeSuggester

# Wednesday, January 14, 2026
REFERENCE_NOW = datetime(2026, 1, 14, 10, 0, 0)


@pytest.fixture
async def client() -> AsyncIterator[AsyncClient]:
    """Create async test client for FastAPI app with a fixed-clock suggester."""
    app.state.suggester = TimeSuggester(clock=lambda: REFERENCE_NOW)

    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as ac:
        yield ac

    # Clean up app state
    del app.state.suggester
