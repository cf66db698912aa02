"""Task store: async CRUD over the persisted task collection."""

import asyncio
import logging
import uuid
from typing import List, Optional

from pydantic import ValidationError as PydanticValidationError

from taskboard.core.config import settings
from taskboard.core.errors import AuthRequiredError, CorruptStateError, NotFoundError
from taskboard.core.security import OpaqueTokenStrategy, TokenStrategy
from taskboard.schemas.task import Task, TaskCreate, TaskList, TaskUpdate, utcnow
from taskboard.services.storage import StorageArea, TASKS_KEY

logger = logging.getLogger(__name__)


def generate_id() -> str:
    return uuid.uuid4().hex


class TaskStore:
    """
    Every operation waits `latency` seconds, checks the token, then reads
    the whole collection and (for mutations) rewrites it in full.

    There is no locking: two mutations started without awaiting the first
    race and the last write wins.
    """

    def __init__(
        self,
        storage: StorageArea,
        tokens: TokenStrategy = None,
        latency: Optional[float] = None,
    ):
        self._storage = storage
        self._tokens = tokens or OpaqueTokenStrategy()
        self.latency = latency if latency is not None else settings.TASK_LATENCY_MS / 1000

    async def list(self, token: str) -> List[Task]:
        await self._delay(token)
        return self._load()

    async def create(self, token: str, fields: TaskCreate) -> Task:
        await self._delay(token)
        tasks = self._load()

        now = utcnow()
        task = Task(id=generate_id(), created_at=now, updated_at=now, **fields.model_dump())
        tasks.append(task)
        self._save(tasks)

        logger.info(f"Task created id={task.id}")
        return task

    async def update(self, token: str, task_id: str, fields: TaskUpdate) -> Task:
        await self._delay(token)
        tasks = self._load()

        index = next((i for i, t in enumerate(tasks) if t.id == task_id), None)
        if index is None:
            raise NotFoundError(task_id)

        update_data = fields.model_dump(exclude_unset=True)
        update_data["updated_at"] = utcnow()
        tasks[index] = Task.model_validate({**tasks[index].model_dump(), **update_data})
        self._save(tasks)

        logger.info(f"Task updated id={task_id} fields={sorted(update_data)}")
        return tasks[index]

    async def delete(self, token: str, task_id: str) -> None:
        await self._delay(token)
        tasks = self._load()

        remaining = [t for t in tasks if t.id != task_id]
        if len(remaining) == len(tasks):
            raise NotFoundError(task_id)

        self._save(remaining)
        logger.info(f"Task deleted id={task_id}")

    async def _delay(self, token: str) -> None:
        # Simule un appel réseau
        await asyncio.sleep(self.latency)
        if not self._tokens.validate(token):
            raise AuthRequiredError()

    def _load(self) -> List[Task]:
        raw = self._storage.get(TASKS_KEY)
        if not raw:
            return []
        try:
            return TaskList.validate_json(raw)
        except PydanticValidationError as e:
            logger.error(f"Persisted task collection is unreadable: {e.error_count()} error(s)")
            raise CorruptStateError(TASKS_KEY, "invalid task collection") from e

    def _save(self, tasks: List[Task]) -> None:
        self._storage.set(TASKS_KEY, TaskList.dump_json(tasks).decode())
