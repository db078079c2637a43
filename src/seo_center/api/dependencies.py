"""Request dependencies for the single-operator store."""

from typing import Annotated

from fastapi import Depends, HTTPException, Request, status

from src.seo_center.core.config import Settings, get_settings
from src.seo_center.schemas.store import Project, Task
from src.seo_center.services.identity import IdentitySignal
from src.seo_center.services.store import ProjectStore


def get_store(request: Request) -> ProjectStore:
    return request.app.state.store


def get_identity(request: Request) -> IdentitySignal:
    return request.app.state.identity


Store = Annotated[ProjectStore, Depends(get_store)]
Identity = Annotated[IdentitySignal, Depends(get_identity)]
AppSettings = Annotated[Settings, Depends(get_settings)]


def get_existing_project(project_id: str, store: Store) -> Project:
    project = store.get_project(project_id)
    if project is None:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail=f"Project {project_id} not found",
        )
    return project


def get_existing_task(task_id: str, store: Store) -> Task:
    task = store.get_task(task_id)
    if task is None:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail=f"Task {task_id} not found",
        )
    return task


ExistingProject = Annotated[Project, Depends(get_existing_project)]
ExistingTask = Annotated[Task, Depends(get_existing_task)]
