"""Guest and cloud implementations of the store's persistence operations.

The store picks one backend per identity transition. Each operation takes
the current snapshot and returns the snapshot to show next; failures are
logged and answered with the previous snapshot plus a sentinel value.
"""

from collections.abc import Callable, Sequence
from datetime import timedelta
from typing import Protocol
from uuid import uuid4

from src.seo_center.catalog import TaskTemplate
from src.seo_center.core.exceptions import AttachmentError, RemoteStoreError
from src.seo_center.core.logging import get_logger
from src.seo_center.models.base import utc_now
from src.seo_center.models.enums import StoreMode
from src.seo_center.persistence import AttachmentUpload, LocalPersistence, RemotePersistence
from src.seo_center.schemas.store import (
    HistoryEntry,
    Project,
    ProjectCreate,
    StoreData,
    Task,
    TaskUpdate,
)

logger = get_logger(__name__)

TemplateSource = Callable[[], Sequence[TaskTemplate]]


class StoreBackend(Protocol):
    """Operation set shared by guest and cloud modes."""

    mode: StoreMode

    async def load(self) -> StoreData: ...

    async def create_project(
        self, data: StoreData, fields: ProjectCreate
    ) -> tuple[StoreData, str]: ...

    async def update_task(
        self, data: StoreData, task: Task, update: TaskUpdate, entry: HistoryEntry | None
    ) -> StoreData: ...

    async def upload_attachment(
        self, data: StoreData, task: Task, upload: AttachmentUpload
    ) -> tuple[StoreData, str | None]: ...

    async def delete_attachment(self, data: StoreData, task: Task, reference: str) -> StoreData: ...

    async def delete_project(self, data: StoreData, project_id: str) -> StoreData: ...


def seed_tasks(project_id: str, templates: Sequence[TaskTemplate]) -> tuple[Task, ...]:
    """One not-started task per template, in catalog order."""
    now = utc_now()
    return tuple(
        Task(
            id=str(uuid4()),
            project_id=project_id,
            category=template.category,
            title=template.title,
            description=template.description,
            why_it_matters=template.why_it_matters,
            execution_steps=template.execution_steps,
            tools_required=template.tools_required,
            expected_impact=template.expected_impact,
            priority=template.priority,
            created_at=now + timedelta(microseconds=index),
        )
        for index, template in enumerate(templates)
    )


def without_reference(attachments: Sequence[str], reference: str) -> tuple[str, ...]:
    """Drop the first occurrence of reference."""
    remaining = list(attachments)
    if reference in remaining:
        remaining.remove(reference)
    return tuple(remaining)


def _replace_task(data: StoreData, task_id: str, changes: dict[str, object]) -> StoreData:
    return data.model_copy(
        update={
            "tasks": tuple(
                t.model_copy(update=changes) if t.id == task_id else t for t in data.tasks
            )
        }
    )


class GuestBackend:
    """Local-file persistence. Every change rewrites the whole blob."""

    mode = StoreMode.GUEST

    def __init__(self, local: LocalPersistence, templates: TemplateSource):
        self.local = local
        self.templates = templates

    async def load(self) -> StoreData:
        return await self.local.load()

    async def _commit(self, data: StoreData) -> bool:
        try:
            await self.local.save(data)
        except OSError as e:
            logger.error("Failed to save local store", error=str(e))
            return False
        return True

    async def create_project(self, data: StoreData, fields: ProjectCreate) -> tuple[StoreData, str]:
        project = Project(
            id=str(uuid4()),
            name=fields.name,
            domain=fields.domain,
            start_date=fields.start_date,
            client_name=fields.client_name,
            industry=fields.industry,
            created_at=utc_now(),
        )
        tasks = seed_tasks(project.id, self.templates())
        updated = data.model_copy(
            update={
                "projects": data.projects + (project,),
                "tasks": data.tasks + tasks,
            }
        )
        if not await self._commit(updated):
            return data, ""
        return updated, project.id

    async def update_task(
        self, data: StoreData, task: Task, update: TaskUpdate, entry: HistoryEntry | None
    ) -> StoreData:
        updated = data
        if entry is not None:
            updated = updated.model_copy(update={"history": updated.history + (entry,)})
        updated = _replace_task(updated, task.id, update.changes())
        return updated if await self._commit(updated) else data

    async def upload_attachment(
        self, data: StoreData, task: Task, upload: AttachmentUpload
    ) -> tuple[StoreData, str | None]:
        reference = upload.as_data_uri()
        updated = _replace_task(data, task.id, {"attachments": task.attachments + (reference,)})
        if not await self._commit(updated):
            return data, None
        return updated, reference

    async def delete_attachment(self, data: StoreData, task: Task, reference: str) -> StoreData:
        updated = _replace_task(
            data, task.id, {"attachments": without_reference(task.attachments, reference)}
        )
        return updated if await self._commit(updated) else data

    async def delete_project(self, data: StoreData, project_id: str) -> StoreData:
        # No referential integrity on disk: resolve the cascade before removing anything
        task_ids = {t.id for t in data.tasks if t.project_id == project_id}
        updated = StoreData(
            projects=tuple(p for p in data.projects if p.id != project_id),
            tasks=tuple(t for t in data.tasks if t.project_id != project_id),
            history=tuple(h for h in data.history if h.task_id not in task_ids),
        )
        return updated if await self._commit(updated) else data


class CloudBackend:
    """Remote persistence for one signed-in identity.

    Every mutation is followed by a full re-fetch; a failed re-fetch keeps the
    last good snapshot.
    """

    mode = StoreMode.CLOUD

    def __init__(self, remote: RemotePersistence, user_id: str, templates: TemplateSource):
        self.remote = remote
        self.user_id = user_id
        self.templates = templates

    async def refresh(self, current: StoreData) -> StoreData:
        try:
            return await self.remote.fetch_all(self.user_id)
        except RemoteStoreError as e:
            logger.error("Failed to fetch cloud data", error=str(e))
            return current

    async def load(self) -> StoreData:
        return await self.refresh(StoreData())

    async def create_project(self, data: StoreData, fields: ProjectCreate) -> tuple[StoreData, str]:
        try:
            project = await self.remote.insert_project(self.user_id, fields)
        except RemoteStoreError as e:
            logger.error("Failed to create project", error=str(e))
            return data, ""

        try:
            await self.remote.insert_tasks_for_project(self.user_id, project.id, self.templates())
        except RemoteStoreError as e:
            logger.error("Failed to seed project tasks", project_id=project.id, error=str(e))
            # Compensate so a project never exists without its tasks
            try:
                await self.remote.delete_project(self.user_id, project.id)
            except RemoteStoreError as cleanup_error:
                logger.error(
                    "Failed to roll back partially created project",
                    project_id=project.id,
                    error=str(cleanup_error),
                )
            return await self.refresh(data), ""

        logger.info("Project created", project_id=project.id)
        return await self.refresh(data), project.id

    async def update_task(
        self, data: StoreData, task: Task, update: TaskUpdate, entry: HistoryEntry | None
    ) -> StoreData:
        try:
            if entry is not None:
                await self.remote.insert_history_entry(self.user_id, entry)
            await self.remote.update_task_fields(self.user_id, task.id, update)
        except RemoteStoreError as e:
            logger.error("Failed to update task", task_id=task.id, error=str(e))
        return await self.refresh(data)

    async def upload_attachment(
        self, data: StoreData, task: Task, upload: AttachmentUpload
    ) -> tuple[StoreData, str | None]:
        try:
            url = await self.remote.upload_attachment(self.user_id, task.id, upload)
        except AttachmentError as e:
            logger.error("Failed to upload attachment", task_id=task.id, error=str(e))
            return data, None

        try:
            await self.remote.update_task_fields(
                self.user_id,
                task.id,
                TaskUpdate(attachments=task.attachments + (url,)),
            )
        except RemoteStoreError as e:
            logger.error("Failed to record attachment", task_id=task.id, error=str(e))
            await self._remove_object(url)
            return await self.refresh(data), None

        return await self.refresh(data), url

    async def _remove_object(self, reference: str) -> None:
        path = self.remote.storage.path_from_url(reference)
        if path is None:
            return
        try:
            await self.remote.delete_attachment(self.user_id, path)
        except AttachmentError as e:
            # A dangling object is acceptable; a stuck list entry is not
            logger.warning("Failed to delete attachment object", path=path, error=str(e))

    async def delete_attachment(self, data: StoreData, task: Task, reference: str) -> StoreData:
        await self._remove_object(reference)
        try:
            await self.remote.update_task_fields(
                self.user_id,
                task.id,
                TaskUpdate(attachments=without_reference(task.attachments, reference)),
            )
        except RemoteStoreError as e:
            logger.error("Failed to remove attachment reference", task_id=task.id, error=str(e))
        return await self.refresh(data)

    async def delete_project(self, data: StoreData, project_id: str) -> StoreData:
        try:
            await self.remote.delete_project(self.user_id, project_id)
        except RemoteStoreError as e:
            logger.error("Failed to delete project", project_id=project_id, error=str(e))
        return await self.refresh(data)
