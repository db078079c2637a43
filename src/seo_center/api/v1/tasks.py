"""Task endpoints."""

from typing import Annotated

from fastapi import APIRouter, Header, HTTPException, Query, Request, status

from src.seo_center.api.dependencies import AppSettings, ExistingTask, Store
from src.seo_center.persistence import AttachmentUpload
from src.seo_center.schemas.api import AttachmentRead
from src.seo_center.schemas.store import Task, TaskUpdate

router = APIRouter(prefix="/tasks", tags=["tasks"])


@router.get(
    "/{task_id}",
    response_model=Task,
    summary="Get task",
    responses={404: {"description": "Task not found"}},
)
async def get_task(task: ExistingTask) -> Task:
    return task


@router.patch(
    "/{task_id}",
    response_model=Task,
    summary="Update task",
    description="Update only the supplied fields. A status change is recorded in history.",
    responses={404: {"description": "Task not found"}},
)
async def update_task(request: TaskUpdate, task: ExistingTask, store: Store) -> Task:
    await store.update_task(task.id, request)
    updated = store.get_task(task.id)
    if updated is None:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail=f"Task {task.id} not found",
        )
    return updated


@router.post(
    "/{task_id}/attachments",
    response_model=AttachmentRead,
    status_code=status.HTTP_201_CREATED,
    summary="Upload attachment",
    description="Attach an image (raw request body) to a task.",
    responses={
        404: {"description": "Task not found"},
        413: {"description": "File too large"},
        415: {"description": "Not an image"},
        502: {"description": "Storage backend failed"},
    },
)
async def upload_attachment(
    request: Request,
    task: ExistingTask,
    store: Store,
    settings: AppSettings,
    filename: Annotated[str, Query(min_length=1, max_length=255)],
    content_type: Annotated[str, Header()] = "application/octet-stream",
) -> AttachmentRead:
    if not content_type.startswith("image/"):
        raise HTTPException(
            status_code=status.HTTP_415_UNSUPPORTED_MEDIA_TYPE,
            detail="Only image attachments are supported",
        )

    data = await request.body()
    if not data:
        raise HTTPException(
            status_code=status.HTTP_422_UNPROCESSABLE_ENTITY,
            detail="Attachment body is empty",
        )
    if len(data) > settings.attachment_max_bytes:
        raise HTTPException(
            status_code=status.HTTP_413_REQUEST_ENTITY_TOO_LARGE,
            detail=f"Attachment exceeds {settings.attachment_max_bytes} bytes",
        )

    upload = AttachmentUpload(filename=filename, content_type=content_type, data=data)
    reference = await store.upload_attachment(task.id, upload)
    if reference is None:
        raise HTTPException(
            status_code=status.HTTP_502_BAD_GATEWAY,
            detail="Attachment could not be stored",
        )
    return AttachmentRead(reference=reference)


@router.delete(
    "/{task_id}/attachments",
    status_code=status.HTTP_204_NO_CONTENT,
    summary="Delete attachment",
    responses={404: {"description": "Task or attachment not found"}},
)
async def delete_attachment(
    task: ExistingTask,
    store: Store,
    reference: Annotated[str, Query(min_length=1)],
) -> None:
    if reference not in task.attachments:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail="Attachment not found on task",
        )
    await store.delete_attachment(task.id, reference)
