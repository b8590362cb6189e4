"""Test fixtures — async client with a passthrough dispatcher."""

import pytest
import pytest_asyncio
from httpx import ASGITransport, AsyncClient

from worldbanc.api.deps import get_dispatcher
from worldbanc.config import settings
from worldbanc.main import create_app
from worldbanc.services.dispatcher import RequestDispatcher
from worldbanc.services.platform import PassthroughPlatform


@pytest.fixture
def dispatcher():
    return RequestDispatcher(platform=PassthroughPlatform(), host_name="test-host")


@pytest_asyncio.fixture
async def client(dispatcher: RequestDispatcher):
    """Provide an async test client with the dispatcher dependency overridden."""
    app = create_app()
    app.dependency_overrides[get_dispatcher] = lambda: dispatcher

    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as c:
        yield c


@pytest.fixture
def auth_headers():
    return {"Authorization": f"Bearer {settings.token}"}
