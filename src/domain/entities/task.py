"""
Entite Task - Tache a realiser.

Une tache reference son proprietaire et son assigne par identifiant
(owner_id, assignee_id). Elle ne possede aucun User: la resolution
se fait a l'exterieur, via les gateways.

Le statut est un jeton libre non vide (pas d'enumeration fixe).
Les taches creees par CreateTaskUseCase demarrent en "TODO".
"""

from datetime import datetime
from typing import Optional

from src.domain.entities.base import Entity
from src.domain.exceptions import (
    InvalidDescriptionError,
    InvalidOwnerIdError,
    InvalidStatusError,
    InvalidTitleError,
)
from src.domain.value_objects.entity_id import is_valid_entity_id

DEFAULT_STATUS = "TODO"


def _is_non_empty(value: object) -> bool:
    return isinstance(value, str) and len(value) > 0


class Task(Entity):
    """
    Tache d'un projet.

    Ordre de validation a la construction:
    id -> title -> description -> status -> owner_id.

    Attributes:
        title: Titre (non vide).
        description: Description (non vide).
        status: Statut libre (non vide).
        owner_id: ID du User createur.
        assignee_id: ID du User assigne (optionnel).
        start_date: Debut prevu (optionnel).
        end_date: Fin prevue (optionnel).
    """

    __slots__ = (
        "_title",
        "_description",
        "_status",
        "_owner_id",
        "_assignee_id",
        "_start_date",
        "_end_date",
    )

    def __init__(
        self,
        title: str,
        description: str,
        status: str,
        owner_id: str,
        assignee_id: Optional[str] = None,
        start_date: Optional[datetime] = None,
        end_date: Optional[datetime] = None,
        *,
        id: Optional[str] = None,
        created: Optional[datetime] = None,
        updated: Optional[datetime] = None,
    ) -> None:
        super().__init__(id=id, created=created, updated=updated)
        self._check_title(title)
        self._check_description(description)
        self._check_status(status)
        self._check_owner_id(owner_id)

        self._title = title
        self._description = description
        self._status = status
        self._owner_id = owner_id
        self._assignee_id = assignee_id or None
        self._start_date = start_date
        self._end_date = end_date

    @staticmethod
    def is_valid_title(title: object) -> bool:
        return _is_non_empty(title)

    @staticmethod
    def is_valid_description(description: object) -> bool:
        return _is_non_empty(description)

    @staticmethod
    def is_valid_status(status: object) -> bool:
        return _is_non_empty(status)

    @staticmethod
    def is_valid_owner_id(owner_id: object) -> bool:
        return is_valid_entity_id(owner_id)

    def _check_title(self, title: object) -> None:
        if not self.is_valid_title(title):
            raise InvalidTitleError(title)

    def _check_description(self, description: object) -> None:
        if not self.is_valid_description(description):
            raise InvalidDescriptionError(description)

    def _check_status(self, status: object) -> None:
        if not self.is_valid_status(status):
            raise InvalidStatusError(status)

    def _check_owner_id(self, owner_id: object) -> None:
        if not self.is_valid_owner_id(owner_id):
            raise InvalidOwnerIdError(owner_id)

    @property
    def title(self) -> str:
        return self._title

    @title.setter
    def title(self, title: str) -> None:
        self._check_title(title)
        self._title = title
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
    def status(self) -> str:
        return self._status

    @status.setter
    def status(self, status: str) -> None:
        self._check_status(status)
        self._status = status
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
    def assignee_id(self) -> Optional[str]:
        return self._assignee_id

    @assignee_id.setter
    def assignee_id(self, assignee_id: Optional[str]) -> None:
        """Assigne la tache (None pour la desassigner)."""
        self._assignee_id = assignee_id or None
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
        title: Optional[str] = None,
        description: Optional[str] = None,
        status: Optional[str] = None,
        owner_id: Optional[str] = None,
    ) -> None:
        """
        Met a jour plusieurs champs en une fois.

        Les champs a None sont ignores; les champs fournis sont tous
        valides avant la premiere modification. updated avance une fois.

        Raises:
            FieldValidationError: Premier champ fourni invalide.
        """
        if title is not None:
            self._check_title(title)
        if description is not None:
            self._check_description(description)
        if status is not None:
            self._check_status(status)
        if owner_id is not None:
            self._check_owner_id(owner_id)

        if title is not None:
            self._title = title
        if description is not None:
            self._description = description
        if status is not None:
            self._status = status
        if owner_id is not None:
            self._owner_id = owner_id
        self._touch()

    def __repr__(self) -> str:
        return f"Task(id={self.id}, title='{self._title}', status={self._status})"
