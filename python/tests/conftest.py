from collections.abc import AsyncGenerator, Generator
from datetime import datetime, timezone

import httpx
import pytest
from fastapi import FastAPI

from myapp.config import Settings, get_settings
from myapp.main import create_app
from tests.fixtures import FixedClock

FIXED_NOW = datetime(2024, 1, 1, tzinfo=timezone.utc)


@pytest.fixture(autouse=True)
def fresh_settings() -> Generator[None, None, None]:
    # Settings are cached process-wide; every test starts from the current env.
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()


@pytest.fixture
def settings() -> Settings:
    return Settings(_env_file=None, app_version="1.2.3")


@pytest.fixture
def clock() -> FixedClock:
    return FixedClock(FIXED_NOW)


@pytest.fixture
def app(settings: Settings, clock: FixedClock) -> FastAPI:
    return create_app(settings, clock)


@pytest.fixture
async def client(app: FastAPI) -> AsyncGenerator[httpx.AsyncClient, None]:
    transport = httpx.ASGITransport(app=app)
    async with httpx.AsyncClient(transport=transport, base_url="http://test") as c:
        yield c
