"""
MemoryUserRepository - Implementation in-memory du repository.

Responsabilite unique:
----------------------
Stocker les utilisateurs en memoire (dev/tests).
En production, utiliser SqlAlchemyUserRepository.
"""

from threading import Lock
from typing import List

from src.domain.entities.user import User
from src.domain.ports.user_repository import UserRepositoryGateway


class MemoryUserRepository(UserRepositoryGateway):
    """
    Implementation in-memory du UserRepositoryGateway.

    Thread-safe avec verrou. Le dict conserve l'ordre d'insertion;
    un save sur un id existant remplace l'entree en place.
    """

    def __init__(self):
        self._users: dict[str, User] = {}
        self._lock = Lock()

    async def save(self, user: User) -> None:
        with self._lock:
            self._users[user.id] = user

    def clear(self) -> None:
        """Vide le repository (tests)."""
        with self._lock:
            self._users.clear()

    def __len__(self) -> int:
        return len(self._users)

    async def list(self) -> List[User]:
        with self._lock:
            return list(self._users.values())
