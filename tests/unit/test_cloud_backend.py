"""Unit tests for CloudBackend failure handling, with a mocked remote."""

from unittest.mock import AsyncMock, MagicMock

import pytest

from src.seo_center.catalog import all_templates
from src.seo_center.core.exceptions import AttachmentError, RemoteStoreError
from src.seo_center.models.enums import TaskStatus
from src.seo_center.persistence import AttachmentUpload, ObjectStorage
from src.seo_center.schemas.store import StoreData, TaskUpdate
from src.seo_center.services.backends import CloudBackend
from tests.factories import HistoryEntryFactory, ProjectCreateFactory, ProjectFactory, TaskFactory

pytestmark = pytest.mark.unit


PNG = AttachmentUpload(filename="proof.png", content_type="image/png", data=b"\x89PNG")


@pytest.fixture
def mock_remote(storage: ObjectStorage) -> MagicMock:
    """Create mock remote persistence with a real bucket for URL parsing."""
    remote = MagicMock()
    remote.storage = storage
    remote.fetch_all = AsyncMock(return_value=StoreData())
    remote.insert_project = AsyncMock(return_value=ProjectFactory.build())
    remote.insert_tasks_for_project = AsyncMock()
    remote.update_task_fields = AsyncMock()
    remote.insert_history_entry = AsyncMock()
    remote.delete_project = AsyncMock()
    remote.upload_attachment = AsyncMock()
    remote.delete_attachment = AsyncMock()
    return remote


@pytest.fixture
def backend(mock_remote: MagicMock) -> CloudBackend:
    return CloudBackend(mock_remote, "user-a", all_templates)


class TestCreateProject:
    async def test_success_seeds_and_refreshes(self, backend: CloudBackend, mock_remote):
        project = mock_remote.insert_project.return_value
        refreshed = StoreData(projects=(project,))
        mock_remote.fetch_all.return_value = refreshed

        data, project_id = await backend.create_project(StoreData(), ProjectCreateFactory.build())

        assert project_id == project.id
        assert data == refreshed
        mock_remote.insert_tasks_for_project.assert_awaited_once_with(
            "user-a", project.id, all_templates()
        )

    async def test_project_insert_failure_returns_sentinel(
        self, backend: CloudBackend, mock_remote
    ):
        mock_remote.insert_project.side_effect = RemoteStoreError("down")
        current = StoreData(projects=(ProjectFactory.build(),))

        data, project_id = await backend.create_project(current, ProjectCreateFactory.build())

        assert project_id == ""
        assert data == current
        mock_remote.insert_tasks_for_project.assert_not_called()

    async def test_seeding_failure_deletes_the_project(self, backend: CloudBackend, mock_remote):
        project = mock_remote.insert_project.return_value
        mock_remote.insert_tasks_for_project.side_effect = RemoteStoreError("timeout")

        data, project_id = await backend.create_project(StoreData(), ProjectCreateFactory.build())

        assert project_id == ""
        mock_remote.delete_project.assert_awaited_once_with("user-a", project.id)
        mock_remote.fetch_all.assert_awaited()

    async def test_failed_rollback_is_logged_not_raised(self, backend: CloudBackend, mock_remote):
        mock_remote.insert_tasks_for_project.side_effect = RemoteStoreError("timeout")
        mock_remote.delete_project.side_effect = RemoteStoreError("still down")

        _, project_id = await backend.create_project(StoreData(), ProjectCreateFactory.build())

        assert project_id == ""


class TestUpdateTask:
    async def test_history_is_written_before_fields(self, backend: CloudBackend, mock_remote):
        order: list[str] = []
        mock_remote.insert_history_entry.side_effect = lambda *a: order.append("history")
        mock_remote.update_task_fields.side_effect = lambda *a: order.append("fields")
        task = TaskFactory.build()
        entry = HistoryEntryFactory.build(task_id=task.id)

        await backend.update_task(StoreData(), task, TaskUpdate(status=TaskStatus.DONE), entry)

        assert order == ["history", "fields"]

    async def test_history_failure_skips_field_update(self, backend: CloudBackend, mock_remote):
        mock_remote.insert_history_entry.side_effect = RemoteStoreError("denied")
        task = TaskFactory.build()
        entry = HistoryEntryFactory.build(task_id=task.id)

        await backend.update_task(StoreData(), task, TaskUpdate(status=TaskStatus.DONE), entry)

        mock_remote.update_task_fields.assert_not_called()
        mock_remote.fetch_all.assert_awaited_once()

    async def test_failed_refresh_keeps_last_snapshot(self, backend: CloudBackend, mock_remote):
        mock_remote.fetch_all.side_effect = RemoteStoreError("offline")
        task = TaskFactory.build()
        current = StoreData(tasks=(task,))

        data = await backend.update_task(current, task, TaskUpdate(notes="x"), None)

        assert data == current


class TestAttachments:
    async def test_upload_failure_returns_none(self, backend: CloudBackend, mock_remote):
        mock_remote.upload_attachment.side_effect = AttachmentError("bucket full")

        _, reference = await backend.upload_attachment(StoreData(), TaskFactory.build(), PNG)

        assert reference is None
        mock_remote.update_task_fields.assert_not_called()

    async def test_unrecorded_upload_is_removed(
        self, backend: CloudBackend, mock_remote, storage: ObjectStorage
    ):
        url = storage.public_url("user-a/t1/1-proof.png")
        mock_remote.upload_attachment.return_value = url
        mock_remote.update_task_fields.side_effect = RemoteStoreError("write failed")

        _, reference = await backend.upload_attachment(StoreData(), TaskFactory.build(), PNG)

        assert reference is None
        mock_remote.delete_attachment.assert_awaited_once_with("user-a", "user-a/t1/1-proof.png")

    async def test_delete_tolerates_missing_object(self, backend: CloudBackend, mock_remote, storage):
        url = storage.public_url("user-a/t1/1-proof.png")
        task = TaskFactory.build(attachments=(url, "data:image/png;base64,AA"))
        mock_remote.delete_attachment.side_effect = AttachmentError("not found")

        await backend.delete_attachment(StoreData(tasks=(task,)), task, url)

        update = mock_remote.update_task_fields.await_args.args[2]
        assert update.attachments == ("data:image/png;base64,AA",)

    async def test_data_uri_removal_skips_bucket(self, backend: CloudBackend, mock_remote):
        task = TaskFactory.build(attachments=("data:image/png;base64,AA",))

        await backend.delete_attachment(StoreData(tasks=(task,)), task, task.attachments[0])

        mock_remote.delete_attachment.assert_not_called()
        assert mock_remote.update_task_fields.await_args.args[2].attachments == ()
