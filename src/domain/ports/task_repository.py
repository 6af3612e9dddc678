"""
Port TaskRepositoryGateway - Interface pour la persistence des taches.

Meme contrat que UserRepositoryGateway:
- save(): upsert par task.id
- list(): toutes les taches, ordre de stockage, liste vide si aucune
"""

from abc import ABC, abstractmethod

from src.domain.entities.task import Task


class TaskRepositoryGateway(ABC):
    """
    Interface Repository pour les taches.

    Implementee par SqlAlchemyTaskRepository et MemoryTaskRepository.
    """

    @abstractmethod
    async def save(self, task: Task) -> None:
        """Persiste une tache (create ou update)."""
        ...

    @abstractmethod
    async def list(self) -> list[Task]:
        """Liste toutes les taches dans l'ordre de stockage."""
        ...
