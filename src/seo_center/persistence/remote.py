"""Cloud-mode persistence: owner-scoped relational tables plus the attachment bucket."""

import time
from collections.abc import Iterator, Sequence
from contextlib import contextmanager
from uuid import UUID

from pydantic import ValidationError
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncEngine

from src.seo_center.catalog import TaskTemplate
from src.seo_center.core.db import get_session
from src.seo_center.core.exceptions import AttachmentError, RemoteStoreError
from src.seo_center.core.logging import get_logger
from src.seo_center.models import SeoProject, TaskHistory
from src.seo_center.persistence.attachments import AttachmentUpload, ObjectStorage, safe_filename
from src.seo_center.repositories import HistoryRepository, ProjectRepository, TaskRepository
from src.seo_center.schemas.mapping import (
    history_from_row,
    history_row_values,
    project_from_row,
    task_from_row,
    task_update_columns,
)
from src.seo_center.schemas.store import HistoryEntry, Project, ProjectCreate, StoreData, TaskUpdate

logger = get_logger(__name__)


@contextmanager
def _remote_errors(operation: str) -> Iterator[None]:
    """Translate driver and mapping failures into a single RemoteStoreError."""
    try:
        yield
    except RemoteStoreError:
        raise
    except (SQLAlchemyError, ValidationError, ValueError, OSError) as e:
        raise RemoteStoreError(f"{operation} failed: {e}") from e


def _uuid(value: str) -> UUID:
    return UUID(value)


class RemotePersistence:
    """CRUD against the projects, tasks and history tables.

    Every call opens a session bound to ``user_id``; rows belonging to other
    owners are invisible to it. Errors surface as RemoteStoreError or
    AttachmentError and are turned into sentinels by the cloud backend.
    """

    def __init__(self, storage: ObjectStorage, engine: AsyncEngine | None = None):
        self.storage = storage
        self.engine = engine

    async def fetch_all(self, user_id: str) -> StoreData:
        """Load the owner's full snapshot in one go.

        Projects newest first, tasks oldest first, history newest first.
        A failure of any of the three reads fails the whole fetch.
        """
        with _remote_errors("fetch_all"):
            async with get_session(user_id, self.engine) as session:
                project_rows = await ProjectRepository(session).list_newest_first()
                task_rows = await TaskRepository(session).list_oldest_first()
                history_rows = await HistoryRepository(session).list_newest_first()

            return StoreData(
                projects=tuple(project_from_row(row) for row in project_rows),
                tasks=tuple(task_from_row(row) for row in task_rows),
                history=tuple(history_from_row(row) for row in history_rows),
            )

    async def insert_project(self, user_id: str, fields: ProjectCreate) -> Project:
        with _remote_errors("insert_project"):
            async with get_session(user_id, self.engine) as session:
                project = SeoProject(
                    owner_id=user_id,
                    name=fields.name,
                    domain=fields.domain,
                    start_date=fields.start_date,
                    client_name=fields.client_name,
                    industry=fields.industry,
                )
                ProjectRepository(session).add(project)
                try:
                    await session.commit()
                except Exception:
                    await session.rollback()
                    raise
            return project_from_row(project)

    async def insert_tasks_for_project(
        self,
        user_id: str,
        project_id: str,
        templates: Sequence[TaskTemplate],
    ) -> None:
        """Bulk insert one not-started task per template in a single transaction."""
        with _remote_errors("insert_tasks_for_project"):
            async with get_session(user_id, self.engine) as session:
                project = await ProjectRepository(session).get_by_id(_uuid(project_id))
                if project is None:
                    raise RemoteStoreError(f"Project {project_id} not found")

                TaskRepository(session).add_from_templates(project.id, templates)
                try:
                    await session.commit()
                except Exception:
                    await session.rollback()
                    raise

    async def update_task_fields(self, user_id: str, task_id: str, update: TaskUpdate) -> None:
        """Write only the fields set on the update."""
        columns = task_update_columns(update)
        if not columns:
            return

        with _remote_errors("update_task_fields"):
            async with get_session(user_id, self.engine) as session:
                repo = TaskRepository(session)
                task = await repo.get_by_id(_uuid(task_id))
                if task is None:
                    raise RemoteStoreError(f"Task {task_id} not found")

                repo.apply(task, columns)
                try:
                    await session.commit()
                except Exception:
                    await session.rollback()
                    raise

    async def insert_history_entry(self, user_id: str, entry: HistoryEntry) -> None:
        with _remote_errors("insert_history_entry"):
            async with get_session(user_id, self.engine) as session:
                task = await TaskRepository(session).get_by_id(_uuid(entry.task_id))
                if task is None:
                    raise RemoteStoreError(f"Task {entry.task_id} not found")

                HistoryRepository(session).add(
                    TaskHistory(
                        id=_uuid(entry.id),
                        owner_id=user_id,
                        task_id=task.id,
                        **history_row_values(entry),
                    )
                )
                try:
                    await session.commit()
                except Exception:
                    await session.rollback()
                    raise

    async def delete_project(self, user_id: str, project_id: str) -> None:
        """Delete a project; tasks and history go with it via ON DELETE CASCADE."""
        with _remote_errors("delete_project"):
            async with get_session(user_id, self.engine) as session:
                repo = ProjectRepository(session)
                project = await repo.get_by_id(_uuid(project_id))
                if project is None:
                    logger.info("Project already absent", project_id=project_id)
                    return

                await repo.delete(project)
                try:
                    await session.commit()
                except Exception:
                    await session.rollback()
                    raise

    def _owner_prefix(self, user_id: str) -> str:
        if not user_id or safe_filename(user_id) != user_id:
            raise AttachmentError(f"Identity cannot be used as a storage prefix: {user_id!r}")
        return f"{user_id}/"

    async def upload_attachment(self, user_id: str, task_id: str, upload: AttachmentUpload) -> str:
        """Store the file under ``<owner>/<task>/<millis>-<name>`` and return its public URL."""
        prefix = self._owner_prefix(user_id)
        filename = f"{int(time.time() * 1000)}-{safe_filename(upload.filename)}"
        path = f"{prefix}{safe_filename(task_id)}/{filename}"
        await self.storage.upload(path, upload.data)
        return self.storage.public_url(path)

    async def delete_attachment(self, user_id: str, path: str) -> None:
        """Remove an object; only paths under the caller's own prefix are allowed."""
        if not path.startswith(self._owner_prefix(user_id)):
            raise AttachmentError(f"Path {path!r} is outside the caller's namespace")
        await self.storage.remove(path)
