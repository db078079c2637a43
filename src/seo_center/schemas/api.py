"""Schemas for API request/response that are not store records."""

from pydantic import BaseModel, Field, field_validator

from src.seo_center.models.enums import StoreMode
from src.seo_center.schemas.store import CategoryProgress, Project, ProjectStats, RecordModel


class SessionCreate(BaseModel):
    """Identity handed over by the external auth provider."""

    user_id: str = Field(min_length=1, max_length=128)

    @field_validator("user_id")
    @classmethod
    def validate_user_id(cls, v: str) -> str:
        v = v.strip()
        if not v:
            raise ValueError("user_id cannot be empty or whitespace only")
        return v


class SessionRead(RecordModel):
    mode: StoreMode
    user_id: str | None
    loading: bool


class ProjectSummary(RecordModel):
    project: Project
    score: int
    stats: ProjectStats
    categories: tuple[CategoryProgress, ...]


class AttachmentRead(RecordModel):
    reference: str
