"""Tests for the row <-> record mapping layer."""

from datetime import date, datetime
from uuid import uuid4

import pytest

from src.seo_center.core.exceptions import SchemaMappingError
from src.seo_center.models import SeoProject, SeoTask
from src.seo_center.models.enums import Impact, Priority, SEOCategory, TaskStatus
from src.seo_center.schemas.mapping import (
    PROJECT_COLUMNS,
    TASK_COLUMNS,
    check_mapping,
    history_row_values,
    project_from_row,
    task_from_row,
    task_update_columns,
)
from src.seo_center.schemas.store import Project, Task, TaskUpdate
from tests.factories import HistoryEntryFactory, utc_now

pytestmark = pytest.mark.unit


class TestCheckMapping:
    def test_declared_mappings_are_consistent(self):
        check_mapping(PROJECT_COLUMNS, Project, SeoProject)
        check_mapping(TASK_COLUMNS, Task, SeoTask)

    def test_missing_field_is_rejected(self):
        columns = {k: v for k, v in PROJECT_COLUMNS.items() if k != "domain"}
        with pytest.raises(SchemaMappingError, match="domain"):
            check_mapping(columns, Project, SeoProject)

    def test_unknown_column_is_rejected(self):
        columns = {**PROJECT_COLUMNS, "domain": "website"}
        with pytest.raises(SchemaMappingError, match="website"):
            check_mapping(columns, Project, SeoProject)


class TestRowConversion:
    def test_project_from_row(self):
        row = SeoProject(
            id=uuid4(),
            owner_id="user-a",
            name="Acme",
            domain="acme.com",
            start_date=date(2024, 1, 15),
            created_at=utc_now(),
        )
        project = project_from_row(row)

        assert project.id == str(row.id)
        assert project.name == "Acme"
        assert project.client_name == ""
        assert not hasattr(project, "owner_id")

    def test_task_from_row_converts_lists_and_enums(self):
        row = SeoTask(
            id=uuid4(),
            owner_id="user-a",
            project_id=uuid4(),
            category="local",
            title="Claim listing",
            execution_steps=["one", "two"],
            tools_required=[],
            expected_impact="high",
            priority="critical",
            status="in-progress",
            attachments=["https://cdn/x.png"],
            created_at=utc_now(),
        )
        task = task_from_row(row)

        assert task.category == SEOCategory.LOCAL
        assert task.execution_steps == ("one", "two")
        assert task.expected_impact == Impact.HIGH
        assert task.priority == Priority.CRITICAL
        assert task.status == TaskStatus.IN_PROGRESS
        assert task.attachments == ("https://cdn/x.png",)


class TestUpdateColumns:
    def test_only_set_fields_are_written(self):
        update = TaskUpdate(status=TaskStatus.DONE, notes="shipped")
        assert task_update_columns(update) == {"notes": "shipped", "status": "done"}

    def test_explicit_null_completion_date_is_written(self):
        update = TaskUpdate(completion_date=None)
        assert task_update_columns(update) == {"completion_date": None}

    def test_attachments_are_written_as_list(self):
        update = TaskUpdate(attachments=("a", "b"))
        assert task_update_columns(update) == {"attachments": ["a", "b"]}

    def test_empty_update_writes_nothing(self):
        assert task_update_columns(TaskUpdate()) == {}


def test_history_row_values_excludes_keys():
    entry = HistoryEntryFactory.build(new_status=TaskStatus.DONE)
    values = history_row_values(entry)

    assert "id" not in values
    assert "task_id" not in values
    assert values["new_status"] == "done"
    assert values["task_title"] == entry.task_title


def test_description_fields_are_updatable():
    update = TaskUpdate(description="d", why_it_matters="w")
    assert task_update_columns(update) == {"description": "d", "why_it_matters": "w"}


def test_aware_timestamps_become_naive_utc():
    entry = HistoryEntryFactory.build(change_date="2026-02-13T08:02:08+02:00")
    assert entry.change_date == datetime(2026, 2, 13, 6, 2, 8)
    assert entry.change_date.tzinfo is None
