"""Model exports.

Import from here: `from src.seo_center.models import SeoProject, SeoTask`
"""

from src.seo_center.models.enums import Impact, Priority, SEOCategory, StoreMode, TaskStatus
from src.seo_center.models.history import TaskHistory
from src.seo_center.models.project import SeoProject
from src.seo_center.models.task import SeoTask

__all__ = [
    # Enums
    "Impact",
    "Priority",
    "SEOCategory",
    "StoreMode",
    "TaskStatus",
    # Tables
    "SeoProject",
    "SeoTask",
    "TaskHistory",
]
