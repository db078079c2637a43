"""Project model - owner-scoped SEO engagement."""

from datetime import date, datetime
from uuid import UUID, uuid4

from sqlmodel import Field, SQLModel

from src.seo_center.models.base import utc_now


class SeoProject(SQLModel, table=True):
    """One tracked SEO engagement for a client domain.

    Tasks and history rows reference it with ON DELETE CASCADE.
    """

    __tablename__ = "projects"

    id: UUID = Field(default_factory=uuid4, primary_key=True)
    owner_id: str = Field(max_length=128, index=True)
    name: str = Field(max_length=200)
    domain: str = Field(max_length=255)
    start_date: date
    client_name: str = Field(default="", max_length=200)
    industry: str = Field(default="", max_length=200)
    created_at: datetime = Field(default_factory=utc_now, index=True)
