"""Owner-scoped repositories for the cloud store."""

from src.seo_center.repositories.history import HistoryRepository
from src.seo_center.repositories.project import ProjectRepository
from src.seo_center.repositories.task import TaskRepository

__all__ = [
    "HistoryRepository",
    "ProjectRepository",
    "TaskRepository",
]
