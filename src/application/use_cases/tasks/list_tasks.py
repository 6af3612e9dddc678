"""
ListTasksUseCase - Liste de toutes les taches.

Pendant de ListUsersUseCase: pas de filtre, ordre du gateway.
"""

from dataclasses import dataclass, field
from datetime import datetime
from typing import Optional

from src.application.use_cases.base import UseCase
from src.domain.entities.task import Task
from src.domain.ports.task_repository import TaskRepositoryGateway


@dataclass(frozen=True)
class TaskOutput:
    """Representation d'une tache."""

    id: str
    title: str
    description: str
    status: str
    owner_id: str
    assignee_id: Optional[str]
    start_date: Optional[datetime]
    end_date: Optional[datetime]
    created_at: datetime
    updated_at: Optional[datetime]

    @classmethod
    def from_entity(cls, task: Task) -> "TaskOutput":
        return cls(
            id=task.id,
            title=task.title,
            description=task.description,
            status=task.status,
            owner_id=task.owner_id,
            assignee_id=task.assignee_id,
            start_date=task.start_date,
            end_date=task.end_date,
            created_at=task.created,
            updated_at=task.updated,
        )


@dataclass(frozen=True)
class ListTasksOutput:
    """Taches dans l'ordre du gateway."""

    tasks: list[TaskOutput] = field(default_factory=list)


class ListTasksUseCase(UseCase[None, ListTasksOutput]):
    """Use case de liste des taches."""

    def __init__(self, task_repository: TaskRepositoryGateway) -> None:
        self._task_repository = task_repository

    async def execute(self, request: None = None) -> ListTasksOutput:
        tasks = await self._task_repository.list()
        return ListTasksOutput(tasks=[TaskOutput.from_entity(t) for t in tasks])
