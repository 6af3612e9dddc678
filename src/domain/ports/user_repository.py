"""
Port UserRepositoryGateway - Interface pour la persistence des utilisateurs.

Ce port definit le contrat que doivent implementer les adapters
de persistence pour les utilisateurs. Les use cases en dependent
sans connaitre la technologie de stockage.

Contrat:
--------
- save(): upsert par user.id, ne retourne rien. Un echec est une
  erreur d'infrastructure, propagee telle quelle.
- list(): tous les utilisateurs dans l'ordre de stockage, sans filtre.
  Retourne une liste vide s'il n'y a rien (jamais d'erreur "not found").

Usage:
------
    class CreateUserUseCase:
        def __init__(self, user_repository: UserRepositoryGateway):
            self._user_repository = user_repository

        async def execute(self, request):
            user = User(...)
            await self._user_repository.save(user)
"""

from abc import ABC, abstractmethod

from src.domain.entities.user import User


class UserRepositoryGateway(ABC):
    """
    Interface Repository pour les utilisateurs.

    Implementee par SqlAlchemyUserRepository et MemoryUserRepository.
    """

    @abstractmethod
    async def save(self, user: User) -> None:
        """Persiste un utilisateur (create ou update)."""
        ...

    @abstractmethod
    async def list(self) -> list[User]:
        """Liste tous les utilisateurs dans l'ordre de stockage."""
        ...
