"""Derived read views over a snapshot. Pure functions, no side effects."""

from src.seo_center.catalog import CATEGORIES
from src.seo_center.models.enums import Impact, SEOCategory, TaskStatus
from src.seo_center.schemas.store import (
    CategoryProgress,
    HistoryEntry,
    Project,
    ProjectStats,
    StoreData,
    Task,
)

IMPACT_WEIGHTS: dict[Impact, int] = {
    Impact.HIGH: 3,
    Impact.MEDIUM: 2,
    Impact.LOW: 1,
}


def tasks_of(
    data: StoreData,
    project_id: str,
    category: SEOCategory | None = None,
) -> tuple[Task, ...]:
    return tuple(
        t
        for t in data.tasks
        if t.project_id == project_id and (category is None or t.category == category)
    )


def history_of(data: StoreData, project_id: str) -> tuple[HistoryEntry, ...]:
    """History of every task in the project, newest first."""
    task_ids = {t.id for t in tasks_of(data, project_id)}
    entries = [h for h in data.history if h.task_id in task_ids]
    return tuple(sorted(entries, key=lambda h: h.change_date, reverse=True))


def score_of(data: StoreData, project_id: str) -> int:
    """Impact-weighted completion percentage, 0-100.

    Measures coverage only: a task counts once it is marked done.
    """
    tasks = tasks_of(data, project_id)
    total = sum(IMPACT_WEIGHTS[t.expected_impact] for t in tasks)
    if total == 0:
        return 0
    done = sum(IMPACT_WEIGHTS[t.expected_impact] for t in tasks if t.status == TaskStatus.DONE)
    # Half-up rounding; round() would bank 62.5 down to 62
    return (200 * done + total) // (2 * total)


def stats_of(data: StoreData, project_id: str) -> ProjectStats:
    counts = dict.fromkeys(TaskStatus, 0)
    tasks = tasks_of(data, project_id)
    for t in tasks:
        counts[t.status] += 1
    return ProjectStats(
        total=len(tasks),
        done=counts[TaskStatus.DONE],
        in_progress=counts[TaskStatus.IN_PROGRESS],
        not_started=counts[TaskStatus.NOT_STARTED],
        skipped=counts[TaskStatus.SKIPPED],
    )


def category_progress(data: StoreData, project_id: str) -> tuple[CategoryProgress, ...]:
    """Done/total per category, in catalog category order."""
    tasks = tasks_of(data, project_id)
    return tuple(
        CategoryProgress(
            category=info.id,
            label=info.label,
            done=sum(1 for t in tasks if t.category == info.id and t.status == TaskStatus.DONE),
            total=sum(1 for t in tasks if t.category == info.id),
        )
        for info in CATEGORIES
    )


def search_projects(data: StoreData, query: str) -> tuple[Project, ...]:
    """Case-insensitive substring match on name, domain or client."""
    needle = query.strip().casefold()
    if not needle:
        return data.projects
    return tuple(
        p
        for p in data.projects
        if needle in p.name.casefold()
        or needle in p.domain.casefold()
        or needle in p.client_name.casefold()
    )
