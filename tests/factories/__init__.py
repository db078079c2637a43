"""Test factories for generating test data.

Re-exports all factories for convenient imports:
    from tests.factories import ProjectCreateFactory, TaskFactory, ...
"""

from tests.factories.base import BaseFactory, generate_id, utc_now
from tests.factories.store import (
    HistoryEntryFactory,
    ProjectCreateFactory,
    ProjectFactory,
    TaskFactory,
)

__all__ = [
    # Base
    "BaseFactory",
    "generate_id",
    "utc_now",
    # Store
    "HistoryEntryFactory",
    "ProjectCreateFactory",
    "ProjectFactory",
    "TaskFactory",
]
