"""Task history model - append-only status transitions."""

from datetime import datetime
from uuid import UUID, uuid4

from sqlmodel import Field, SQLModel

from src.seo_center.models.base import utc_now


class TaskHistory(SQLModel, table=True):
    """Status change of a task.

    Title and category are snapshots taken at change time, not a join.
    """

    __tablename__ = "history"

    id: UUID = Field(default_factory=uuid4, primary_key=True)
    owner_id: str = Field(max_length=128, index=True)
    task_id: UUID = Field(foreign_key="tasks.id", ondelete="CASCADE", index=True)

    task_title: str = Field(max_length=300)
    category: str = Field(max_length=20)
    old_status: str = Field(max_length=20)
    new_status: str = Field(max_length=20)
    changed_by: str = Field(default="Admin", max_length=100)
    change_date: datetime = Field(default_factory=utc_now, index=True)
    notes: str = Field(default="")
