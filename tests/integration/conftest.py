"""Integration test fixtures for database and HTTP client operations.

Cloud mode runs against an in-memory SQLite database with foreign keys
enforced, so ON DELETE CASCADE and owner scoping behave as in production.
"""

from collections.abc import AsyncGenerator
from pathlib import Path

import pytest
from httpx import ASGITransport, AsyncClient
from sqlalchemy.ext.asyncio import AsyncEngine

from src.seo_center.core.config import get_settings
from src.seo_center.core.db import build_engine, create_schema
from src.seo_center.main import create_app
from src.seo_center.persistence import LocalPersistence, ObjectStorage, RemotePersistence
from src.seo_center.services.identity import IdentitySignal
from src.seo_center.services.store import ProjectStore


@pytest.fixture(scope="function")
async def engine() -> AsyncGenerator[AsyncEngine]:
    """Fresh in-memory database with all tables created."""
    test_engine = build_engine("sqlite+aiosqlite:///:memory:")
    await create_schema(test_engine)
    yield test_engine
    await test_engine.dispose()


@pytest.fixture
def remote(storage: ObjectStorage, engine: AsyncEngine) -> RemotePersistence:
    return RemotePersistence(storage, engine=engine)


@pytest.fixture
async def store(
    local: LocalPersistence, remote: RemotePersistence, identity: IdentitySignal
) -> ProjectStore:
    """Started store wired to the identity signal, in guest mode."""
    store = ProjectStore(local=local, remote=remote, identity=identity)
    await store.start()
    return store


@pytest.fixture
async def client(
    tmp_path: Path, engine: AsyncEngine, monkeypatch: pytest.MonkeyPatch
) -> AsyncGenerator[AsyncClient]:
    """HTTP client against a fully started app.

    ASGITransport does not send lifespan events, so the lifespan context is
    entered here.
    """
    monkeypatch.setenv("LOCAL_DATA_DIR", str(tmp_path / "local"))
    monkeypatch.setenv("ATTACHMENTS_DIR", str(tmp_path / "storage"))
    monkeypatch.setenv("ATTACHMENTS_PUBLIC_URL", "http://test/storage")
    get_settings.cache_clear()

    app = create_app(engine=engine)
    async with app.router.lifespan_context(app):
        async with AsyncClient(
            transport=ASGITransport(app=app),
            base_url="http://test",
        ) as client:
            yield client

    get_settings.cache_clear()
