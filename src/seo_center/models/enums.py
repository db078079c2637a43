"""Shared enums for models."""

from enum import Enum


class SEOCategory(str, Enum):
    """Task category within the SEO catalog."""

    TECHNICAL = "technical"
    ON_PAGE = "on-page"
    CONTENT = "content"
    OFF_PAGE = "off-page"
    LOCAL = "local"
    TRACKING = "tracking"


class TaskStatus(str, Enum):
    """Task workflow status."""

    NOT_STARTED = "not-started"
    IN_PROGRESS = "in-progress"
    DONE = "done"
    SKIPPED = "skipped"


class Impact(str, Enum):
    """Expected impact of completing a task."""

    HIGH = "high"
    MEDIUM = "medium"
    LOW = "low"


class Priority(str, Enum):
    """Task priority."""

    CRITICAL = "critical"
    HIGH = "high"
    MEDIUM = "medium"
    LOW = "low"


class StoreMode(str, Enum):
    """Which persistence the store is currently bound to."""

    GUEST = "guest"
    LOADING = "loading"
    CLOUD = "cloud"
