"""
ListUsersUseCase - Liste de tous les utilisateurs.

Pas de filtre ni de pagination: l'ordre est celui du gateway.
"""

from dataclasses import dataclass, field
from datetime import datetime
from typing import Optional

from src.application.use_cases.base import UseCase
from src.domain.entities.user import User
from src.domain.ports.user_repository import UserRepositoryGateway


@dataclass(frozen=True)
class UserOutput:
    """Representation d'un utilisateur (sans mot de passe)."""

    id: str
    name: str
    email: str
    role: str
    created_at: datetime
    updated_at: Optional[datetime]

    @classmethod
    def from_entity(cls, user: User) -> "UserOutput":
        return cls(
            id=user.id,
            name=user.name,
            email=user.email,
            role=user.role,
            created_at=user.created,
            updated_at=user.updated,
        )


@dataclass(frozen=True)
class ListUsersOutput:
    """Utilisateurs dans l'ordre du gateway."""

    users: list[UserOutput] = field(default_factory=list)


class ListUsersUseCase(UseCase[None, ListUsersOutput]):
    """Use case de liste des utilisateurs."""

    def __init__(self, user_repository: UserRepositoryGateway) -> None:
        self._user_repository = user_repository

    async def execute(self, request: None = None) -> ListUsersOutput:
        users = await self._user_repository.list()
        return ListUsersOutput(users=[UserOutput.from_entity(u) for u in users])
