"""
Shared fixtures: test settings, an app client and an isolated SQLite store.
"""

import pytest
import pytest_asyncio
from fastapi.testclient import TestClient

from auth.jwt import TokenService
from config.settings import Settings
from database.session import build_engine, build_session_factory, init_models
from main import create_app

TEST_SECRET = "test-jwt-secret-for-testing-only"


@pytest.fixture
def settings(tmp_path) -> Settings:
    return Settings(
        database_url=f"sqlite+aiosqlite:///{tmp_path / 'test.db'}",
        jwt_secret=TEST_SECRET,
        jwt_expiry_seconds=3600,
        bcrypt_rounds=4,
    )

@pytest.fixture
def token_service() -> TokenService:
    return TokenService(TEST_SECRET, 3600)

@pytest.fixture
def client(settings):
    app = create_app(settings)
    with TestClient(app, raise_server_exceptions=False) as test_client:
        yield test_client

@pytest_asyncio.fixture
async def db_session(settings):
    engine = build_engine(settings.database_url)
    await init_models(engine)
    factory = build_session_factory(engine)
    async with factory() as session:
        yield session
    await engine.dispose()
