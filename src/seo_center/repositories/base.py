"""Base repository with common owner-scoped operations."""

from typing import Generic, TypeVar
from uuid import UUID

from sqlalchemy.ext.asyncio import AsyncSession
from sqlmodel import SQLModel, select

from src.seo_center.core.db import session_owner

ModelType = TypeVar("ModelType", bound=SQLModel)


class BaseRepository(Generic[ModelType]):
    """Base repository providing common database operations.

    Repositories handle data access only. Transaction control (commit)
    should be done by the caller. The session restricts every SELECT to its
    owner, and add() stamps that owner on new rows, so a repository can
    neither read nor write another owner's data.
    """

    model: type[ModelType]

    def __init__(self, session: AsyncSession):
        self.session = session

    @property
    def owner_id(self) -> str:
        return session_owner(self.session)

    async def get_by_id(self, id: UUID) -> ModelType | None:
        """Get a record by its primary key."""
        result = await self.session.execute(
            select(self.model).where(self.model.id == id)  # type: ignore[attr-defined]
        )
        return result.scalar_one_or_none()

    def add(self, entity: ModelType) -> None:
        """Stamp the session owner and add entity to session (no flush/commit)."""
        entity.owner_id = self.owner_id  # type: ignore[attr-defined]
        self.session.add(entity)

    def add_all(self, entities: list[ModelType]) -> None:
        for entity in entities:
            self.add(entity)

    async def delete(self, entity: ModelType) -> None:
        """Mark a previously loaded (hence owned) entity for deletion."""
        await self.session.delete(entity)
