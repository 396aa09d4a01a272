import pytest
import inspect
from datetime import datetime, timezone
from httpx import AsyncClient, ASGITransport

from app.main import app
from app.core import redis as redis_module
from app.core.config import settings
from app.schemas.pricing import Coordinate


class FakeRedis:
    """In-memory stand-in for the handful of redis.asyncio calls we make."""

    def __init__(self):
        self.store = {}
        self.expiry = {}

    async def get(self, key):
        return self.store.get(key)

    async def set(self, key, value, ex=None):
        if isinstance(value, str):
            value = value.encode()
        self.store[key] = value
        self.expiry[key] = ex

    async def ping(self):
        return True

    async def aclose(self):
        pass


@pytest.fixture
async def test_client():
    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as client:
        yield client


@pytest.fixture
def fake_redis(monkeypatch):
    fake = FakeRedis()
    monkeypatch.setattr(redis_module, "redis", fake)
    monkeypatch.setattr(settings, "REDIS_URL", "redis://fake:6379/0")
    return fake


@pytest.fixture
def fixed_now():
    return datetime(2026, 3, 2, 12, 0, tzinfo=timezone.utc)


@pytest.fixture
def delhi_pickup():
    return Coordinate(latitude=28.6139, longitude=77.2090)


@pytest.fixture
def delhi_drop():
    return Coordinate(latitude=28.7041, longitude=77.1025)


@pytest.fixture
def valid_estimate_data():
    return {
        "service_type": "two-wheeler",
        "pickup_location": {
            "address": "Connaught Place, New Delhi",
            "coordinates": {"latitude": 28.6139, "longitude": 77.2090},
        },
        "drop_location": {
            "address": "Model Town, New Delhi",
            "coordinates": {"latitude": 28.7041, "longitude": 77.1025},
        },
    }


def pytest_configure(config):
    config.addinivalue_line(
        "markers", "integration: marks tests as integration tests"
    )
    config.addinivalue_line(
        "markers", "unit: marks tests as unit tests"
    )
    config.addinivalue_line(
        "markers", "pricing: marks tests related to pricing"
    )
    config.addinivalue_line(
        "markers", "surge: marks tests related to surge pricing"
    )
    config.addinivalue_line(
        "markers", "cache: marks tests related to estimate caching"
    )


def pytest_collection_modifyitems(config, items):
    """
    Modify test collection to handle asyncio tests
    """
    for item in items:
        if inspect.iscoroutinefunction(getattr(item, "function", None)):
            item.add_marker(pytest.mark.asyncio)
