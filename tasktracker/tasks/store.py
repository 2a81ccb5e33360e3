from __future__ import annotations

import asyncio
import logging
from typing import Dict, Iterable, Optional

from .schemas import Task

logger = logging.getLogger(__name__)


class TaskStore:
    """In-memory store backing the Tasks API.

    Every operation holds the store lock for its whole body, so a
    check-then-write such as ``add_task`` is atomic with respect to other
    requests. Tasks are copied on the way in and out; callers never share
    a model instance with the store.
    """

    def __init__(self) -> None:
        self._lock = asyncio.Lock()
        self._tasks: Dict[str, Task] = {}

    async def list_tasks(self) -> Dict[str, Task]:
        async with self._lock:
            return {task_id: task.model_copy(deep=True) for task_id, task in self._tasks.items()}

    async def get_task(self, task_id: str) -> Optional[Task]:
        async with self._lock:
            task = self._tasks.get(task_id)
            return task.model_copy(deep=True) if task is not None else None

    async def put_task(self, task: Task) -> Task:
        """Insert or overwrite the task stored under ``task.id``."""
        async with self._lock:
            self._tasks[task.id] = task.model_copy(deep=True)
            logger.debug("Task stored id=%s", task.id)
            return task

    async def add_task(self, task: Task) -> bool:
        """Insert the task unless its id is already taken.

        Returns False without touching the store on collision.
        """
        async with self._lock:
            if task.id in self._tasks:
                logger.debug("Task id=%s already exists", task.id)
                return False
            self._tasks[task.id] = task.model_copy(deep=True)
            logger.debug("Task added id=%s", task.id)
            return True

    async def delete_task(self, task_id: str) -> bool:
        async with self._lock:
            removed = self._tasks.pop(task_id, None)
            if removed is None:
                return False
            logger.debug("Task deleted id=%s", task_id)
            return True

    async def count(self) -> int:
        async with self._lock:
            return len(self._tasks)

    async def clear(self) -> None:
        async with self._lock:
            self._tasks.clear()

    async def seed(self, tasks: Iterable[Task]) -> int:
        """Upsert each task and return how many are stored afterwards."""
        async with self._lock:
            for task in tasks:
                self._tasks[task.id] = task.model_copy(deep=True)
            return len(self._tasks)
