"""Application records held in the store snapshot.

These are the immutable read views handed to callers. Field names are
snake_case in Python and camelCase on the wire (JSON blob and HTTP), which
matches the browser storage format the guest blob originated from. That
format writes ISO timestamps with a trailing "Z"; they are normalized to the
naive UTC used everywhere else.
"""

from datetime import UTC, date, datetime
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, field_validator
from pydantic.alias_generators import to_camel

from src.seo_center.models.enums import Impact, Priority, SEOCategory, TaskStatus


class RecordModel(BaseModel):
    """Frozen camelCase record."""

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        frozen=True,
    )

    @field_validator("*")
    @classmethod
    def naive_utc(cls, v: Any) -> Any:
        """Store every timestamp as naive UTC, whatever offset it arrived with."""
        if isinstance(v, datetime) and v.tzinfo is not None:
            return v.astimezone(UTC).replace(tzinfo=None)
        return v


class Project(RecordModel):
    id: str
    name: str
    domain: str
    start_date: date
    client_name: str = ""
    industry: str = ""
    created_at: datetime


class Task(RecordModel):
    id: str
    project_id: str
    category: SEOCategory
    title: str
    description: str = ""
    why_it_matters: str = ""
    execution_steps: tuple[str, ...] = ()
    tools_required: tuple[str, ...] = ()
    expected_impact: Impact
    priority: Priority
    status: TaskStatus = TaskStatus.NOT_STARTED
    completion_date: datetime | None = None
    notes: str = ""
    proof_url: str = ""
    time_spent_minutes: int = Field(default=0, ge=0)
    attachments: tuple[str, ...] = ()
    created_at: datetime


class HistoryEntry(RecordModel):
    id: str
    task_id: str
    task_title: str
    category: SEOCategory
    old_status: TaskStatus
    new_status: TaskStatus
    changed_by: str = "Admin"
    change_date: datetime
    notes: str = ""


class StoreData(RecordModel):
    """Whole snapshot: the unit of local persistence and of remote fetches."""

    projects: tuple[Project, ...] = ()
    tasks: tuple[Task, ...] = ()
    history: tuple[HistoryEntry, ...] = ()


class ProjectCreate(RecordModel):
    """Fields supplied by the user when creating a project."""

    name: str = Field(min_length=1, max_length=200)
    domain: str = Field(min_length=1, max_length=255)
    start_date: date
    client_name: str = Field(default="", max_length=200)
    industry: str = Field(default="", max_length=200)

    @field_validator("name", "domain")
    @classmethod
    def validate_required_text(cls, v: str) -> str:
        v = v.strip()
        if not v:
            raise ValueError("Value cannot be empty or whitespace only")
        return v

    @field_validator("client_name", "industry")
    @classmethod
    def strip_optional_text(cls, v: str) -> str:
        return v.strip()


class TaskUpdate(RecordModel):
    """Sparse task update.

    Only fields explicitly set (model_fields_set) are applied; omitted fields
    are left untouched.
    """

    title: str | None = None
    description: str | None = None
    why_it_matters: str | None = None
    status: TaskStatus | None = None
    completion_date: datetime | None = None
    notes: str | None = None
    proof_url: str | None = None
    time_spent_minutes: int | None = Field(default=None, ge=0)
    attachments: tuple[str, ...] | None = None

    def changes(self) -> dict[str, object]:
        """Explicitly set fields by Python name.

        None is dropped for every field except completion_date, where it clears
        the stored date.
        """
        return {
            name: getattr(self, name)
            for name in sorted(self.model_fields_set)
            if getattr(self, name) is not None or name == "completion_date"
        }


class ProjectStats(RecordModel):
    total: int = 0
    done: int = 0
    in_progress: int = 0
    not_started: int = 0
    skipped: int = 0


class CategoryProgress(RecordModel):
    category: SEOCategory
    label: str
    done: int
    total: int
