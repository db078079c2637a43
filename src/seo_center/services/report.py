"""CSV export of a project's status history."""

import csv
import io
import re
from collections.abc import Sequence
from datetime import date, datetime, time
from urllib.parse import quote

from src.seo_center.schemas.store import HistoryEntry, Project, StoreData
from src.seo_center.services.views import history_of

CSV_HEADERS = (
    "Date",
    "Task ID",
    "Task Title",
    "Category",
    "Action",
    "Old Status",
    "New Status",
    "User",
    "Notes",
)


def history_between(
    data: StoreData,
    project_id: str,
    start: date,
    end: date | None = None,
) -> tuple[HistoryEntry, ...]:
    """Project history whose change date falls within [start, end], whole days inclusive."""
    end = end or start
    lower = datetime.combine(start, time.min)
    upper = datetime.combine(end, time.max)
    return tuple(h for h in history_of(data, project_id) if lower <= h.change_date <= upper)


def history_csv(entries: Sequence[HistoryEntry]) -> str:
    buffer = io.StringIO()
    writer = csv.writer(buffer, lineterminator="\r\n")
    writer.writerow(CSV_HEADERS)
    for h in entries:
        writer.writerow(
            (
                h.change_date.strftime("%Y-%m-%d %H:%M:%S"),
                h.task_id,
                h.task_title,
                h.category.value,
                "Status Update",
                h.old_status.value,
                h.new_status.value,
                h.changed_by,
                h.notes,
            )
        )
    return buffer.getvalue()


def report_filename(project: Project, start: date, end: date | None = None) -> str:
    stem = re.sub(r"\s+", "_", project.name)
    filename = f"{stem}_report_{start.isoformat()}"
    if end is not None and end != start:
        filename += f"_to_{end.isoformat()}"
    return f"{filename}.csv"


def content_disposition(filename: str) -> str:
    """Attachment header with an ASCII fallback and the UTF-8 name (RFC 6266)."""
    fallback = re.sub(r'[^\x20-\x7e]|["\\]', "_", filename)
    if fallback == filename:
        return f'attachment; filename="{filename}"'
    return f"attachment; filename=\"{fallback}\"; filename*=utf-8''{quote(filename)}"
