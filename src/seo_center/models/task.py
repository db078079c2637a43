"""Task model - one catalog item cloned onto a project."""

from datetime import datetime
from uuid import UUID, uuid4

from sqlalchemy import Column
from sqlmodel import Field, SQLModel

from src.seo_center.models.base import JSONList, utc_now
from src.seo_center.models.enums import TaskStatus


class SeoTask(SQLModel, table=True):
    """Actionable checklist item belonging to a project."""

    __tablename__ = "tasks"

    id: UUID = Field(default_factory=uuid4, primary_key=True)
    owner_id: str = Field(max_length=128, index=True)
    project_id: UUID = Field(foreign_key="projects.id", ondelete="CASCADE", index=True)

    # Seeded from the template catalog
    category: str = Field(max_length=20)
    title: str = Field(max_length=300)
    description: str = Field(default="")
    why_it_matters: str = Field(default="")
    execution_steps: list[str] = Field(
        default_factory=list, sa_column=Column(JSONList, nullable=False)
    )
    tools_required: list[str] = Field(
        default_factory=list, sa_column=Column(JSONList, nullable=False)
    )
    expected_impact: str = Field(default="medium", max_length=10)
    priority: str = Field(default="medium", max_length=10)

    # Mutable progress fields
    status: str = Field(default=TaskStatus.NOT_STARTED.value, max_length=20)
    completion_date: datetime | None = Field(default=None)
    notes: str = Field(default="")
    proof_url: str = Field(default="")
    time_spent_minutes: int = Field(default=0, ge=0)
    attachments: list[str] = Field(
        default_factory=list, sa_column=Column(JSONList, nullable=False)
    )

    created_at: datetime = Field(default_factory=utc_now, index=True)
