"""Static task catalog used to seed every project."""

from src.seo_center.catalog.categories import CATEGORIES, CategoryInfo, category_info
from src.seo_center.catalog.templates import TaskTemplate, all_templates

__all__ = [
    "CATEGORIES",
    "CategoryInfo",
    "TaskTemplate",
    "all_templates",
    "category_info",
]
