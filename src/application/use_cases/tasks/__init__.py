"""
Use Cases taches.

- CreateTaskUseCase: Creer une tache au statut "TODO"
- ListTasksUseCase: Lister les taches
"""

from src.application.use_cases.tasks.create_task import (
    CreateTaskInput,
    CreateTaskOutput,
    CreateTaskUseCase,
)
from src.application.use_cases.tasks.list_tasks import (
    ListTasksOutput,
    ListTasksUseCase,
    TaskOutput,
)

__all__ = [
    "CreateTaskUseCase",
    "CreateTaskInput",
    "CreateTaskOutput",
    "ListTasksUseCase",
    "ListTasksOutput",
    "TaskOutput",
]
