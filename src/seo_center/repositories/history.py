"""Repository for TaskHistory (append-only)."""

from collections.abc import Sequence

from sqlmodel import select

from src.seo_center.models import TaskHistory
from src.seo_center.repositories.base import BaseRepository


class HistoryRepository(BaseRepository[TaskHistory]):
    model = TaskHistory

    async def list_newest_first(self) -> Sequence[TaskHistory]:
        result = await self.session.execute(
            select(TaskHistory).order_by(TaskHistory.change_date.desc())  # type: ignore[attr-defined]
        )
        return result.scalars().all()
