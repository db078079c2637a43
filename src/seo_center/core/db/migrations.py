"""Schema bootstrap for both production and tests."""

from alembic.config import Config
from sqlalchemy.ext.asyncio import AsyncEngine
from sqlmodel import SQLModel

from alembic import command

# Register tables on SQLModel.metadata
from src.seo_center import models  # noqa: F401


def run_migrations_sync() -> None:
    """Run Alembic migrations synchronously."""
    alembic_cfg = Config("alembic.ini")
    command.upgrade(alembic_cfg, "head")


async def create_schema(engine: AsyncEngine) -> None:
    """Create all tables directly from model metadata.

    Used by tests and by AUTO_CREATE_SCHEMA deployments (SQLite) that skip Alembic.
    """
    async with engine.begin() as conn:
        await conn.run_sync(SQLModel.metadata.create_all)
