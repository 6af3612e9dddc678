"""
MemoryTaskRepository - Implementation in-memory du repository.

Responsabilite unique:
----------------------
Stocker les taches en memoire (dev/tests).
"""

from threading import Lock
from typing import List

from src.domain.entities.task import Task
from src.domain.ports.task_repository import TaskRepositoryGateway


class MemoryTaskRepository(TaskRepositoryGateway):
    """Implementation in-memory du TaskRepositoryGateway, thread-safe."""

    def __init__(self):
        self._tasks: dict[str, Task] = {}
        self._lock = Lock()

    async def save(self, task: Task) -> None:
        with self._lock:
            self._tasks[task.id] = task

    def clear(self) -> None:
        with self._lock:
            self._tasks.clear()

    def __len__(self) -> int:
        return len(self._tasks)

    async def list(self) -> List[Task]:
        with self._lock:
            return list(self._tasks.values())
