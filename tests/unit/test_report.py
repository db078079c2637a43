"""Tests for the history CSV export."""

import csv
import io
from datetime import date, datetime

import pytest

from src.seo_center.models.enums import SEOCategory, TaskStatus
from src.seo_center.schemas.store import StoreData
from src.seo_center.services.report import (
    CSV_HEADERS,
    content_disposition,
    history_between,
    history_csv,
    report_filename,
)
from tests.factories import HistoryEntryFactory, ProjectFactory, TaskFactory

pytestmark = pytest.mark.unit


@pytest.fixture
def data() -> StoreData:
    project = ProjectFactory.build(id="p1", name="Acme  Web Shop")
    task = TaskFactory.build(project_id="p1", title="Fix titles")
    entries = (
        HistoryEntryFactory.build(task_id=task.id, change_date=datetime(2024, 3, 1, 0, 0, 0)),
        HistoryEntryFactory.build(task_id=task.id, change_date=datetime(2024, 3, 2, 23, 59, 59)),
        HistoryEntryFactory.build(task_id=task.id, change_date=datetime(2024, 3, 3, 0, 0, 1)),
    )
    return StoreData(projects=(project,), tasks=(task,), history=entries)


class TestHistoryBetween:
    def test_single_day(self, data: StoreData):
        entries = history_between(data, "p1", date(2024, 3, 1))
        assert [h.change_date.day for h in entries] == [1]

    def test_range_is_inclusive_and_newest_first(self, data: StoreData):
        entries = history_between(data, "p1", date(2024, 3, 1), date(2024, 3, 2))
        assert [h.change_date.day for h in entries] == [2, 1]

    def test_other_projects_are_excluded(self, data: StoreData):
        assert history_between(data, "other", date(2024, 3, 1), date(2024, 3, 3)) == ()


class TestHistoryCsv:
    def test_rows_and_quoting(self):
        entry = HistoryEntryFactory.build(
            task_id="t1",
            task_title='Add "schema", then test',
            category=SEOCategory.ON_PAGE,
            old_status=TaskStatus.IN_PROGRESS,
            new_status=TaskStatus.DONE,
            change_date=datetime(2024, 3, 1, 9, 5, 7),
            notes="line one\nline two",
        )
        rows = list(csv.reader(io.StringIO(history_csv([entry]))))

        assert rows[0] == list(CSV_HEADERS)
        assert rows[1] == [
            "2024-03-01 09:05:07",
            "t1",
            'Add "schema", then test',
            "on-page",
            "Status Update",
            "in-progress",
            "done",
            "Admin",
            "line one\nline two",
        ]

    def test_empty_report_has_header_only(self):
        assert history_csv([]) == ",".join(CSV_HEADERS) + "\r\n"


class TestReportFilename:
    def test_single_day(self, data: StoreData):
        name = report_filename(data.projects[0], date(2024, 3, 1))
        assert name == "Acme_Web_Shop_report_2024-03-01.csv"

    def test_range(self, data: StoreData):
        name = report_filename(data.projects[0], date(2024, 3, 1), date(2024, 3, 7))
        assert name == "Acme_Web_Shop_report_2024-03-01_to_2024-03-07.csv"


class TestContentDisposition:
    def test_ascii_name_is_plain(self):
        assert content_disposition("Acme_report_2024-03-01.csv") == (
            'attachment; filename="Acme_report_2024-03-01.csv"'
        )

    def test_non_ascii_name_gets_fallback_and_utf8_form(self):
        header = content_disposition("日本_report_2024-03-01.csv")

        header.encode("latin-1")
        assert 'filename="__report_2024-03-01.csv"' in header
        assert "filename*=utf-8''%E6%97%A5%E6%9C%AC_report_2024-03-01.csv" in header

    def test_quotes_are_not_passed_through(self):
        header = content_disposition('Say "hi"_report_2024-03-01.csv')

        assert 'filename="Say _hi__report_2024-03-01.csv"' in header
