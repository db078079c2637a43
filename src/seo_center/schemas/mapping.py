"""Bidirectional mapping between storage rows and application records.

Each table declares its full field → column list. The lists are checked
against both the SQLModel table and the pydantic record when this module is
imported, so a renamed or missing column fails at startup instead of
producing a silently empty field.
"""

from collections.abc import Mapping
from enum import Enum
from typing import Any
from uuid import UUID

from pydantic import BaseModel
from sqlmodel import SQLModel

from src.seo_center.core.exceptions import SchemaMappingError
from src.seo_center.models import SeoProject, SeoTask, TaskHistory
from src.seo_center.schemas.store import HistoryEntry, Project, Task, TaskUpdate

# Columns present on every table but never exposed to the application
STORAGE_ONLY_COLUMNS = frozenset({"owner_id"})

PROJECT_COLUMNS: Mapping[str, str] = {
    "id": "id",
    "name": "name",
    "domain": "domain",
    "start_date": "start_date",
    "client_name": "client_name",
    "industry": "industry",
    "created_at": "created_at",
}

TASK_COLUMNS: Mapping[str, str] = {
    "id": "id",
    "project_id": "project_id",
    "category": "category",
    "title": "title",
    "description": "description",
    "why_it_matters": "why_it_matters",
    "execution_steps": "execution_steps",
    "tools_required": "tools_required",
    "expected_impact": "expected_impact",
    "priority": "priority",
    "status": "status",
    "completion_date": "completion_date",
    "notes": "notes",
    "proof_url": "proof_url",
    "time_spent_minutes": "time_spent_minutes",
    "attachments": "attachments",
    "created_at": "created_at",
}

HISTORY_COLUMNS: Mapping[str, str] = {
    "id": "id",
    "task_id": "task_id",
    "task_title": "task_title",
    "category": "category",
    "old_status": "old_status",
    "new_status": "new_status",
    "changed_by": "changed_by",
    "change_date": "change_date",
    "notes": "notes",
}

# Sparse task updates write a subset of TASK_COLUMNS
TASK_UPDATE_COLUMNS: Mapping[str, str] = {
    "title": "title",
    "description": "description",
    "why_it_matters": "why_it_matters",
    "status": "status",
    "completion_date": "completion_date",
    "notes": "notes",
    "proof_url": "proof_url",
    "time_spent_minutes": "time_spent_minutes",
    "attachments": "attachments",
}


def check_mapping(
    columns: Mapping[str, str],
    record: type[BaseModel],
    table: type[SQLModel] | None,
) -> None:
    """Raise SchemaMappingError unless the mapping covers both sides exactly."""
    record_fields = set(record.model_fields)
    if set(columns) != record_fields:
        missing = sorted(record_fields - set(columns))
        extra = sorted(set(columns) - record_fields)
        raise SchemaMappingError(
            f"{record.__name__} mapping mismatch: missing={missing} unknown={extra}"
        )
    if table is None:
        return
    table_columns = set(table.model_fields) - STORAGE_ONLY_COLUMNS
    mapped_columns = set(columns.values())
    if mapped_columns != table_columns:
        missing = sorted(table_columns - mapped_columns)
        extra = sorted(mapped_columns - table_columns)
        raise SchemaMappingError(
            f"{table.__name__} column mismatch: unmapped={missing} unknown={extra}"
        )


check_mapping(PROJECT_COLUMNS, Project, SeoProject)
check_mapping(TASK_COLUMNS, Task, SeoTask)
check_mapping(HISTORY_COLUMNS, HistoryEntry, TaskHistory)
check_mapping(TASK_UPDATE_COLUMNS, TaskUpdate, None)
if not set(TASK_UPDATE_COLUMNS.values()) <= set(TASK_COLUMNS.values()):
    raise SchemaMappingError("Task update columns must be a subset of task columns")


def _to_record_value(value: Any) -> Any:
    if isinstance(value, UUID):
        return str(value)
    return value


def _to_column_value(value: Any) -> Any:
    if isinstance(value, Enum):
        return value.value
    if isinstance(value, tuple):
        return list(value)
    return value


def _from_row(row: SQLModel, columns: Mapping[str, str]) -> dict[str, Any]:
    return {field: _to_record_value(getattr(row, column)) for field, column in columns.items()}


def project_from_row(row: SeoProject) -> Project:
    return Project.model_validate(_from_row(row, PROJECT_COLUMNS))


def task_from_row(row: SeoTask) -> Task:
    return Task.model_validate(_from_row(row, TASK_COLUMNS))


def history_from_row(row: TaskHistory) -> HistoryEntry:
    return HistoryEntry.model_validate(_from_row(row, HISTORY_COLUMNS))


def task_update_columns(update: TaskUpdate) -> dict[str, Any]:
    """Translate the fields set on an update into column values."""
    return {
        TASK_UPDATE_COLUMNS[field]: _to_column_value(value)
        for field, value in update.changes().items()
    }


def history_row_values(entry: HistoryEntry) -> dict[str, Any]:
    """Column values for inserting a history entry (id left to the caller)."""
    return {
        column: _to_column_value(getattr(entry, field))
        for field, column in HISTORY_COLUMNS.items()
        if field not in ("id", "task_id")
    }
