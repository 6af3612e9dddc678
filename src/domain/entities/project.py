"""
Entite Project - Agregat racine regroupant des taches.

Le Project possede exclusivement ses Tasks: elles ne sont ajoutees,
retirees ou remplacees qu'a travers ses operations.

Stockage des taches:
--------------------
Mapping ordonne (ordre d'insertion) indexe par task.id. L'ordre est
conserve par les requetes mais n'a pas de sens metier. Le retrait
et la recherche se font par identifiant, jamais par instance.

Concurrence:
------------
Aucune protection interne. Un meme Project ne doit etre mute que
par un seul ecrivain a la fois.
"""

from datetime import datetime
from typing import Iterator, Optional, Union

from src.domain.entities.base import Entity
from src.domain.entities.task import Task
from src.domain.exceptions import (
    DuplicateTaskError,
    InvalidDescriptionError,
    InvalidNameError,
    InvalidOwnerIdError,
    TaskNotFoundError,
)
from src.domain.value_objects.entity_id import is_valid_entity_id


class Project(Entity):
    """
    Projet et ses taches.

    Ordre de validation a la construction:
    id -> name -> description -> owner_id.

    Example:
        >>> project = Project("Website", "Relaunch", owner_id="u1")
        >>> task = Task("Design", "Mockups", "TODO", owner_id="u1")
        >>> project.add_task(task)
        >>> project.get_tasks_by_status("TODO") == [task]
        True
    """

    __slots__ = (
        "_name",
        "_description",
        "_owner_id",
        "_start_date",
        "_end_date",
        "_tasks",
    )

    def __init__(
        self,
        name: str,
        description: str,
        owner_id: str,
        start_date: Optional[datetime] = None,
        end_date: Optional[datetime] = None,
        tasks: Optional[list[Task]] = None,
        *,
        id: Optional[str] = None,
        created: Optional[datetime] = None,
        updated: Optional[datetime] = None,
    ) -> None:
        super().__init__(id=id, created=created, updated=updated)
        self._check_name(name)
        self._check_description(description)
        self._check_owner_id(owner_id)

        self._name = name
        self._description = description
        self._owner_id = owner_id
        self._start_date = start_date
        self._end_date = end_date
        self._tasks: dict[str, Task] = {}
        for task in tasks or []:
            if task.id in self._tasks:
                raise DuplicateTaskError(task.id, self.id)
            self._tasks[task.id] = task

    @staticmethod
    def is_valid_name(name: object) -> bool:
        return isinstance(name, str) and len(name) > 0

    @staticmethod
    def is_valid_description(description: object) -> bool:
        return isinstance(description, str) and len(description) > 0

    @staticmethod
    def is_valid_owner_id(owner_id: object) -> bool:
        return is_valid_entity_id(owner_id)

    def _check_name(self, name: object) -> None:
        if not self.is_valid_name(name):
            raise InvalidNameError(name)

    def _check_description(self, description: object) -> None:
        if not self.is_valid_description(description):
            raise InvalidDescriptionError(description)

    def _check_owner_id(self, owner_id: object) -> None:
        if not self.is_valid_owner_id(owner_id):
            raise InvalidOwnerIdError(owner_id)

    # ------------------------------------------------------------------
    # Champs
    # ------------------------------------------------------------------

    @property
    def name(self) -> str:
        return self._name

    @name.setter
    def name(self, name: str) -> None:
        self._check_name(name)
        self._name = name
        self._touch()

    @property
    def description(self) -> str:
        return self._description

    @description.setter
    def description(self, description: str) -> None:
        self._check_description(description)
        self._description = description
        self._touch()

    @property
    def owner_id(self) -> str:
        return self._owner_id

    @owner_id.setter
    def owner_id(self, owner_id: str) -> None:
        self._check_owner_id(owner_id)
        self._owner_id = owner_id
        self._touch()

    @property
    def start_date(self) -> Optional[datetime]:
        return self._start_date

    @start_date.setter
    def start_date(self, start_date: Optional[datetime]) -> None:
        self._start_date = start_date
        self._touch()

    @property
    def end_date(self) -> Optional[datetime]:
        return self._end_date

    @end_date.setter
    def end_date(self, end_date: Optional[datetime]) -> None:
        self._end_date = end_date
        self._touch()

    def update(
        self,
        name: Optional[str] = None,
        description: Optional[str] = None,
        owner_id: Optional[str] = None,
        start_date: Optional[datetime] = None,
        end_date: Optional[datetime] = None,
    ) -> None:
        """
        Met a jour plusieurs champs en une fois.

        Les champs a None sont ignores; les champs fournis sont tous
        valides avant la premiere modification. updated avance une fois.

        Raises:
            FieldValidationError: Premier champ fourni invalide.
        """
        if name is not None:
            self._check_name(name)
        if description is not None:
            self._check_description(description)
        if owner_id is not None:
            self._check_owner_id(owner_id)

        if name is not None:
            self._name = name
        if description is not None:
            self._description = description
        if owner_id is not None:
            self._owner_id = owner_id
        if start_date is not None:
            self._start_date = start_date
        if end_date is not None:
            self._end_date = end_date
        self._touch()

    # ------------------------------------------------------------------
    # Taches
    # ------------------------------------------------------------------

    @property
    def tasks(self) -> list[Task]:
        """Copie des taches dans l'ordre d'insertion."""
        return list(self._tasks.values())

    def add_task(self, task: Task) -> None:
        """
        Ajoute une tache a la fin du projet.

        Raises:
            DuplicateTaskError: Une tache avec le meme id existe deja.
        """
        if task.id in self._tasks:
            raise DuplicateTaskError(task.id, self.id)
        self._tasks[task.id] = task
        self._touch()

    def remove_task(self, task: Union[Task, str]) -> Task:
        """
        Retire une tache par son identifiant.

        Args:
            task: La tache ou son id.

        Returns:
            La tache retiree.

        Raises:
            TaskNotFoundError: Aucune tache avec cet id.
        """
        task_id = task.id if isinstance(task, Task) else task
        if task_id not in self._tasks:
            raise TaskNotFoundError(task_id, self.id)
        removed = self._tasks.pop(task_id)
        self._touch()
        return removed

    def update_task(self, task: Task) -> None:
        """
        Remplace sur place la tache de meme id (l'ordre est conserve).

        Raises:
            TaskNotFoundError: Aucune tache avec cet id.
        """
        if task.id not in self._tasks:
            raise TaskNotFoundError(task.id, self.id)
        self._tasks[task.id] = task
        self._touch()

    def get_task_by_id(self, task_id: str) -> Optional[Task]:
        return self._tasks.get(task_id)

    def get_tasks_by_status(self, status: str) -> list[Task]:
        return [t for t in self._tasks.values() if t.status == status]

    def get_tasks_by_assignee(self, assignee_id: str) -> list[Task]:
        return [t for t in self._tasks.values() if t.assignee_id == assignee_id]

    def get_tasks_by_owner(self, owner_id: str) -> list[Task]:
        return [t for t in self._tasks.values() if t.owner_id == owner_id]

    def __len__(self) -> int:
        return len(self._tasks)

    def __bool__(self) -> bool:
        # Un projet sans tache reste un projet
        return True

    def __contains__(self, task: Union[Task, str]) -> bool:
        task_id = task.id if isinstance(task, Task) else task
        return task_id in self._tasks

    def __iter__(self) -> Iterator[Task]:
        return iter(list(self._tasks.values()))

    def __repr__(self) -> str:
        return f"Project(id={self.id}, name='{self._name}', tasks={len(self)})"
