"""
CreateTaskUseCase - Creation d'une tache.

Responsabilite unique:
----------------------
Construire une Task au statut initial "TODO" et la persister.

Dependances:
------------
- TaskRepositoryGateway: Persister la tache
"""

from dataclasses import dataclass

from src.application.use_cases.base import UseCase
from src.domain.entities.task import DEFAULT_STATUS, Task
from src.domain.ports.task_repository import TaskRepositoryGateway


@dataclass(frozen=True)
class CreateTaskInput:
    """
    Requete de creation de tache.

    Attributes:
        title: Titre (non vide).
        description: Description (non vide).
        owner_id: ID du User createur.
    """

    title: str
    description: str
    owner_id: str


@dataclass(frozen=True)
class CreateTaskOutput:
    """Tache creee."""

    id: str
    title: str
    description: str
    status: str
    owner_id: str


class CreateTaskUseCase(UseCase[CreateTaskInput, CreateTaskOutput]):
    """Use case de creation de tache."""

    def __init__(self, task_repository: TaskRepositoryGateway) -> None:
        self._task_repository = task_repository

    async def execute(self, request: CreateTaskInput) -> CreateTaskOutput:
        task = Task(
            title=request.title,
            description=request.description,
            status=DEFAULT_STATUS,
            owner_id=request.owner_id,
        )

        await self._task_repository.save(task)

        return CreateTaskOutput(
            id=task.id,
            title=task.title,
            description=task.description,
            status=task.status,
            owner_id=task.owner_id,
        )
