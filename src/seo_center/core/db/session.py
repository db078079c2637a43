"""Database session management."""

from collections.abc import AsyncGenerator
from contextlib import asynccontextmanager

from sqlalchemy import event
from sqlalchemy.ext.asyncio import AsyncEngine, AsyncSession, async_sessionmaker
from sqlalchemy.orm import ORMExecuteState, with_loader_criteria
from sqlmodel import SQLModel

from src.seo_center.core.db.engine import get_engine
from src.seo_center.models import SeoProject, SeoTask, TaskHistory

OWNER_KEY = "owner_id"

# Every table carrying an owner_id column
OWNED_MODELS: tuple[type[SQLModel], ...] = (SeoProject, SeoTask, TaskHistory)


def session_owner(session: AsyncSession) -> str:
    """Return the identity a session is bound to."""
    return session.info[OWNER_KEY]


@asynccontextmanager
async def get_session(
    owner_id: str,
    engine: AsyncEngine | None = None,
) -> AsyncGenerator[AsyncSession]:
    """Create a database session scoped to a single owner.

    Args:
        owner_id: Identity every statement in this session is restricted to.
        engine: Optional engine override for testing.

    Yields:
        AsyncSession whose ORM SELECT statements only ever see rows where
        owner_id matches.

    Note:
        The restriction is attached at execution time, so repositories
        cannot forget it. Updates and deletes go through rows loaded by
        such a SELECT; inserts read the owner from session.info.
    """
    if not owner_id:
        raise ValueError("A database session requires an owner identity")
    if engine is None:
        engine = get_engine()

    session_factory = async_sessionmaker(
        bind=engine,
        class_=AsyncSession,
        expire_on_commit=False,
        autoflush=False,
    )

    async with session_factory(info={OWNER_KEY: owner_id}) as session:

        @event.listens_for(session.sync_session, "do_orm_execute")
        def _restrict_to_owner(state: ORMExecuteState) -> None:
            if state.is_select and not state.is_column_load and not state.is_relationship_load:
                state.statement = state.statement.options(
                    *(
                        with_loader_criteria(model, model.owner_id == owner_id)  # type: ignore[attr-defined]
                        for model in OWNED_MODELS
                    )
                )

        yield session
