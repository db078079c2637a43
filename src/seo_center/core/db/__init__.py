"""Database utilities - engine, session, schema bootstrap."""

from src.seo_center.core.db.engine import (
    build_engine,
    dispose_engine,
    enable_sqlite_foreign_keys,
    get_engine,
)
from src.seo_center.core.db.migrations import create_schema, run_migrations_sync
from src.seo_center.core.db.session import OWNER_KEY, get_session, session_owner

__all__ = [
    # Engine
    "build_engine",
    "dispose_engine",
    "enable_sqlite_foreign_keys",
    "get_engine",
    # Session
    "OWNER_KEY",
    "get_session",
    "session_owner",
    # Schema
    "create_schema",
    "run_migrations_sync",
]
