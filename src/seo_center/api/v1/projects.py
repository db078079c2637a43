"""Project endpoints."""

from datetime import date
from typing import Annotated

from fastapi import APIRouter, HTTPException, Query, Response, status

from src.seo_center.api.dependencies import ExistingProject, Store
from src.seo_center.models.base import utc_now
from src.seo_center.models.enums import SEOCategory
from src.seo_center.schemas.api import ProjectSummary
from src.seo_center.schemas.store import HistoryEntry, Project, ProjectCreate, Task
from src.seo_center.services.report import (
    content_disposition,
    history_between,
    history_csv,
    report_filename,
)

router = APIRouter(prefix="/projects", tags=["projects"])


@router.get(
    "",
    response_model=list[Project],
    summary="List projects",
    description="Projects in the current mode, optionally filtered by name, domain or client.",
)
async def list_projects(
    store: Store,
    q: Annotated[str | None, Query(max_length=200, description="Search text")] = None,
) -> list[Project]:
    if q:
        return list(store.search_projects(q))
    return list(store.projects)


@router.post(
    "",
    response_model=Project,
    status_code=status.HTTP_201_CREATED,
    summary="Create project",
    description="Create a project and seed it with the full task catalog.",
    responses={
        201: {"description": "Project created"},
        502: {"description": "Storage backend failed"},
    },
)
async def create_project(request: ProjectCreate, store: Store) -> Project:
    project_id = await store.create_project(request)
    project = store.get_project(project_id) if project_id else None
    if project is None:
        raise HTTPException(
            status_code=status.HTTP_502_BAD_GATEWAY,
            detail="Project could not be created",
        )
    return project


@router.get(
    "/{project_id}/summary",
    response_model=ProjectSummary,
    summary="Project summary",
    description="Score, status counts and per-category progress.",
    responses={404: {"description": "Project not found"}},
)
async def get_project_summary(project: ExistingProject, store: Store) -> ProjectSummary:
    return ProjectSummary(
        project=project,
        score=store.score_of(project.id),
        stats=store.stats_of(project.id),
        categories=store.category_progress(project.id),
    )


@router.get(
    "/{project_id}/tasks",
    response_model=list[Task],
    summary="List project tasks",
    responses={404: {"description": "Project not found"}},
)
async def list_project_tasks(
    project: ExistingProject,
    store: Store,
    category: Annotated[SEOCategory | None, Query(description="Only this category")] = None,
) -> list[Task]:
    return list(store.tasks_of(project.id, category))


@router.get(
    "/{project_id}/history",
    response_model=list[HistoryEntry],
    summary="Project history",
    description="Status transitions of the project's tasks, newest first.",
    responses={404: {"description": "Project not found"}},
)
async def list_project_history(project: ExistingProject, store: Store) -> list[HistoryEntry]:
    return list(store.history_of(project.id))


@router.get(
    "/{project_id}/report.csv",
    summary="Export history report",
    description="History within a day range as CSV. Defaults to today (UTC).",
    responses={404: {"description": "Project not found"}},
)
async def export_history_report(
    project: ExistingProject,
    store: Store,
    start: Annotated[date | None, Query(description="First day (inclusive)")] = None,
    end: Annotated[date | None, Query(description="Last day (inclusive)")] = None,
) -> Response:
    start = start or utc_now().date()
    if end is not None and end < start:
        raise HTTPException(
            status_code=status.HTTP_422_UNPROCESSABLE_ENTITY,
            detail="end must not be before start",
        )
    entries = history_between(store.snapshot, project.id, start, end)
    filename = report_filename(project, start, end)
    return Response(
        content=history_csv(entries),
        media_type="text/csv; charset=utf-8",
        headers={"Content-Disposition": content_disposition(filename)},
    )


@router.delete(
    "/{project_id}",
    status_code=status.HTTP_204_NO_CONTENT,
    summary="Delete project",
    description="Delete a project with all of its tasks and history.",
    responses={
        204: {"description": "Project deleted"},
        404: {"description": "Project not found"},
    },
)
async def delete_project(project: ExistingProject, store: Store) -> None:
    await store.delete_project(project.id)
