"""Repository for SeoProject."""

from collections.abc import Sequence

from sqlmodel import select

from src.seo_center.models import SeoProject
from src.seo_center.repositories.base import BaseRepository


class ProjectRepository(BaseRepository[SeoProject]):
    model = SeoProject

    async def list_newest_first(self) -> Sequence[SeoProject]:
        result = await self.session.execute(
            select(SeoProject).order_by(SeoProject.created_at.desc())  # type: ignore[attr-defined]
        )
        return result.scalars().all()
