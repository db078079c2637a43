"""Repository for SeoTask."""

from collections.abc import Sequence
from datetime import timedelta
from typing import Any
from uuid import UUID

from sqlmodel import select

from src.seo_center.catalog import TaskTemplate
from src.seo_center.models import SeoTask, TaskStatus
from src.seo_center.models.base import utc_now
from src.seo_center.repositories.base import BaseRepository


class TaskRepository(BaseRepository[SeoTask]):
    model = SeoTask

    async def list_oldest_first(self) -> Sequence[SeoTask]:
        result = await self.session.execute(
            select(SeoTask).order_by(SeoTask.created_at.asc(), SeoTask.id)  # type: ignore[attr-defined]
        )
        return result.scalars().all()

    def add_from_templates(self, project_id: UUID, templates: Sequence[TaskTemplate]) -> None:
        """Clone the catalog onto a project with every progress field at default.

        created_at advances by one microsecond per template so that ordering by
        creation time reproduces catalog order.
        """
        now = utc_now()
        self.add_all(
            [
                SeoTask(
                    project_id=project_id,
                    category=template.category.value,
                    title=template.title,
                    description=template.description,
                    why_it_matters=template.why_it_matters,
                    execution_steps=list(template.execution_steps),
                    tools_required=list(template.tools_required),
                    expected_impact=template.expected_impact.value,
                    priority=template.priority.value,
                    status=TaskStatus.NOT_STARTED.value,
                    completion_date=None,
                    notes="",
                    proof_url="",
                    time_spent_minutes=0,
                    attachments=[],
                    created_at=now + timedelta(microseconds=index),
                )
                for index, template in enumerate(templates)
            ]
        )

    @staticmethod
    def apply(task: SeoTask, columns: dict[str, Any]) -> None:
        """Write only the given columns onto a loaded task."""
        for column, value in columns.items():
            setattr(task, column, value)
