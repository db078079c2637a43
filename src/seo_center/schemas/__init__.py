"""Application records and request schemas."""

from src.seo_center.schemas.store import (
    CategoryProgress,
    HistoryEntry,
    Project,
    ProjectCreate,
    ProjectStats,
    StoreData,
    Task,
    TaskUpdate,
)

__all__ = [
    "CategoryProgress",
    "HistoryEntry",
    "Project",
    "ProjectCreate",
    "ProjectStats",
    "StoreData",
    "Task",
    "TaskUpdate",
]
