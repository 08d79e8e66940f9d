import httpx
import pytest
from httpx import ASGITransport

BACKEND_URL = "http://backend.test"


@pytest.fixture
def mock_env(monkeypatch):
    monkeypatch.setenv("HOSTEL_API_BASE_URL", BACKEND_URL)
    monkeypatch.setenv("NOTIFICATION_MAX_ATTEMPTS", "2")
    monkeypatch.setenv("NOTIFICATION_RETRY_DELAY", "0")
    monkeypatch.setenv("ADMIN_COOKIE_NAME", "adminId")


@pytest.fixture
async def backend():
    async with httpx.AsyncClient(base_url=BACKEND_URL) as c:
        yield c


@pytest.fixture
async def client(mock_env):
    from hostel_web.main import app, lifespan

    async with lifespan(app):
        async with httpx.AsyncClient(
            transport=ASGITransport(app=app),
            base_url="http://test",
        ) as c:
            yield c


@pytest.fixture
async def admin_client(client):
    client.cookies.set("adminId", "1")
    yield client
