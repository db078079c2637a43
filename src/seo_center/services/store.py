"""Project/task store: one snapshot, two persistence modes.

The store owns the in-memory snapshot and the guest/cloud state machine:

    Guest --sign in--> Loading(uid) --fetch resolves--> Cloud(uid)
    Cloud(uid) --sign out--> Guest
    Cloud(a) --switch account--> Loading(b)

Callers only ever see frozen records, and every mutation goes through an
operation here. Mutations run one at a time, each starting from the
snapshot the previous one left. No operation raises for ordinary failures: they log and
return "", None or nothing.
"""

import asyncio
from collections.abc import Callable, Sequence
from uuid import uuid4

from src.seo_center.catalog import TaskTemplate, all_templates
from src.seo_center.core.logging import get_logger
from src.seo_center.models.base import utc_now
from src.seo_center.models.enums import SEOCategory, StoreMode, TaskStatus
from src.seo_center.persistence import AttachmentUpload, LocalPersistence, RemotePersistence
from src.seo_center.schemas.store import (
    CategoryProgress,
    HistoryEntry,
    Project,
    ProjectCreate,
    ProjectStats,
    StoreData,
    Task,
    TaskUpdate,
)
from src.seo_center.services import views
from src.seo_center.services.backends import CloudBackend, GuestBackend, StoreBackend
from src.seo_center.services.identity import IdentitySignal

logger = get_logger(__name__)

StoreListener = Callable[["ProjectStore"], None]


class ProjectStore:
    """Single owner of the project/task/history snapshot."""

    def __init__(
        self,
        local: LocalPersistence,
        remote: RemotePersistence,
        identity: IdentitySignal | None = None,
        templates: Callable[[], Sequence[TaskTemplate]] = all_templates,
        actor_label: str = "Admin",
    ):
        self._remote = remote
        self._templates = templates
        self._guest = GuestBackend(local, templates)
        self._backend: StoreBackend = self._guest
        self._identity = identity
        self.actor_label = actor_label

        self._data = StoreData()
        self._mode = StoreMode.GUEST
        self._user_id: str | None = None
        self._generation = 0
        self._started = False
        self._listeners: list[StoreListener] = []
        # Serializes read-modify-commit so concurrent operations build on each other
        self._write_lock = asyncio.Lock()

        if identity is not None:
            identity.subscribe(self.set_identity)

    # --- State ---

    @property
    def snapshot(self) -> StoreData:
        return self._data

    @property
    def projects(self) -> tuple[Project, ...]:
        return self._data.projects

    @property
    def tasks(self) -> tuple[Task, ...]:
        return self._data.tasks

    @property
    def history(self) -> tuple[HistoryEntry, ...]:
        return self._data.history

    @property
    def mode(self) -> StoreMode:
        return self._mode

    @property
    def user_id(self) -> str | None:
        return self._user_id

    @property
    def loading(self) -> bool:
        return self._mode == StoreMode.LOADING

    @property
    def is_guest(self) -> bool:
        return self._mode == StoreMode.GUEST

    def subscribe(self, listener: StoreListener) -> Callable[[], None]:
        """Call listener(store) after every snapshot or mode change."""
        self._listeners.append(listener)

        def _unsubscribe() -> None:
            if listener in self._listeners:
                self._listeners.remove(listener)

        return _unsubscribe

    def _notify(self) -> None:
        for listener in list(self._listeners):
            try:
                listener(self)
            except Exception as e:
                logger.warning("Store listener failed", listener=repr(listener), error=str(e))

    def _set_state(self, mode: StoreMode, data: StoreData) -> None:
        self._mode = mode
        self._data = data
        self._notify()

    def _apply(self, generation: int, data: StoreData) -> bool:
        """Install a result unless the identity changed while it was computed."""
        if generation != self._generation:
            logger.info("Discarding result for previous identity")
            return False
        self._data = data
        self._notify()
        return True

    # --- Mode transitions ---

    async def start(self) -> None:
        """Load the initial snapshot for whatever identity is current."""
        user_id = self._identity.current_user_id if self._identity is not None else None
        await self.set_identity(user_id)

    async def set_identity(self, user_id: str | None) -> None:
        """React to the identity signal."""
        user_id = user_id or None
        if self._started and user_id == self._user_id:
            return

        self._started = True
        self._generation += 1
        generation = self._generation
        self._user_id = user_id

        if user_id is None:
            self._backend = self._guest
            data = await self._guest.load()
            if generation == self._generation:
                self._set_state(StoreMode.GUEST, data)
                logger.info("Store in guest mode", projects=len(data.projects))
            return

        backend = CloudBackend(self._remote, user_id, self._templates)
        self._backend = backend
        self._set_state(StoreMode.LOADING, StoreData())

        data = await backend.load()
        if generation != self._generation:
            logger.info("Discarding fetch for previous identity")
            return
        self._set_state(StoreMode.CLOUD, data)
        logger.info("Store in cloud mode", projects=len(data.projects))

    # --- Operations ---

    def get_task(self, task_id: str) -> Task | None:
        return next((t for t in self._data.tasks if t.id == task_id), None)

    def get_project(self, project_id: str) -> Project | None:
        return next((p for p in self._data.projects if p.id == project_id), None)

    async def create_project(self, fields: ProjectCreate) -> str:
        """Create a project seeded with the full catalog.

        Returns the new id, or "" if nothing was created.
        """
        async with self._write_lock:
            generation, backend = self._generation, self._backend
            data, project_id = await backend.create_project(self._data, fields)
            if not self._apply(generation, data):
                return ""
            return project_id

    def _history_entry(self, task: Task, update: TaskUpdate) -> HistoryEntry | None:
        if update.status is None or update.status == task.status:
            return None
        return HistoryEntry(
            id=str(uuid4()),
            task_id=task.id,
            task_title=task.title,
            category=task.category,
            old_status=task.status,
            new_status=update.status,
            changed_by=self.actor_label,
            change_date=utc_now(),
            notes=update.notes or "",
        )

    async def update_task(self, task_id: str, update: TaskUpdate) -> None:
        """Merge the set fields of update into a task.

        A real status change appends a history entry built from the task as
        it was before this update, and is persisted before the task itself.
        Moving to done without a completion date stamps the current time.
        """
        async with self._write_lock:
            task = self.get_task(task_id)
            if task is None:
                return

            entry = self._history_entry(task, update)
            if (
                entry is not None
                and update.status == TaskStatus.DONE
                and update.completion_date is None
            ):
                update = TaskUpdate.model_validate(
                    {**update.model_dump(exclude_unset=True), "completion_date": entry.change_date}
                )

            generation, backend = self._generation, self._backend
            data = await backend.update_task(self._data, task, update, entry)
            self._apply(generation, data)

    async def upload_attachment(self, task_id: str, upload: AttachmentUpload) -> str | None:
        """Attach a file to a task. Returns its reference, or None on failure."""
        async with self._write_lock:
            task = self.get_task(task_id)
            if task is None:
                return None

            generation, backend = self._generation, self._backend
            data, reference = await backend.upload_attachment(self._data, task, upload)
            if not self._apply(generation, data):
                return None
            return reference

    async def delete_attachment(self, task_id: str, reference: str) -> None:
        async with self._write_lock:
            task = self.get_task(task_id)
            if task is None:
                return

            generation, backend = self._generation, self._backend
            data = await backend.delete_attachment(self._data, task, reference)
            self._apply(generation, data)

    async def delete_project(self, project_id: str) -> None:
        """Delete a project with all of its tasks and their history."""
        async with self._write_lock:
            generation, backend = self._generation, self._backend
            data = await backend.delete_project(self._data, project_id)
            self._apply(generation, data)

    # --- Read views ---

    def tasks_of(self, project_id: str, category: SEOCategory | None = None) -> tuple[Task, ...]:
        return views.tasks_of(self._data, project_id, category)

    def history_of(self, project_id: str) -> tuple[HistoryEntry, ...]:
        return views.history_of(self._data, project_id)

    def score_of(self, project_id: str) -> int:
        return views.score_of(self._data, project_id)

    def stats_of(self, project_id: str) -> ProjectStats:
        return views.stats_of(self._data, project_id)

    def category_progress(self, project_id: str) -> tuple[CategoryProgress, ...]:
        return views.category_progress(self._data, project_id)

    def search_projects(self, query: str) -> tuple[Project, ...]:
        return views.search_projects(self._data, query)
