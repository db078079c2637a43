"""Root test fixtures shared across all test types.

This conftest contains fixtures that can be used by both unit and integration tests.
Database-specific fixtures are in tests/integration/conftest.py.
"""

import os

# Set APP_ENV and an in-memory database before any app imports
os.environ.setdefault("APP_ENV", "testing")
os.environ.setdefault("DATABASE_URL", "sqlite+aiosqlite:///:memory:")

# ruff: noqa: E402 - Imports must be after env var setup
from pathlib import Path

import pytest

from src.seo_center.core.config import get_settings
from src.seo_center.persistence import LocalPersistence, ObjectStorage, RemotePersistence
from src.seo_center.schemas.store import ProjectCreate
from src.seo_center.services.identity import IdentitySignal
from src.seo_center.services.store import ProjectStore
from tests.factories import ProjectCreateFactory

# Clear settings cache to ensure test environment variables are picked up
get_settings.cache_clear()

TEST_BUCKET = "task-attachments"
TEST_PUBLIC_URL = "http://test/storage"


@pytest.fixture
def local(tmp_path: Path) -> LocalPersistence:
    """Guest persistence writing into a per-test directory."""
    return LocalPersistence(tmp_path / "local")


@pytest.fixture
def storage(tmp_path: Path) -> ObjectStorage:
    """Attachment bucket rooted in a per-test directory."""
    return ObjectStorage(tmp_path / "storage", TEST_BUCKET, TEST_PUBLIC_URL)


@pytest.fixture
def identity() -> IdentitySignal:
    return IdentitySignal()


@pytest.fixture
async def guest_store(local: LocalPersistence, storage: ObjectStorage) -> ProjectStore:
    """Started store in guest mode.

    The remote side has no engine and is never reached while no one signs in.
    """
    store = ProjectStore(local=local, remote=RemotePersistence(storage))
    await store.start()
    return store


@pytest.fixture
def project_fields() -> ProjectCreate:
    return ProjectCreateFactory.build()
