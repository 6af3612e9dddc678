"""
Ports du domaine (Hexagonal Architecture).

Les Ports sont des interfaces qui definissent les contrats
entre le domaine et le monde exterieur.

Ports disponibles:
------------------
- UserRepositoryGateway: Persistence des utilisateurs
- TaskRepositoryGateway: Persistence des taches

Pattern:
--------
Les Ports sont des ABC implementees par des Adapters dans
la couche Infrastructure, injectees par constructeur dans
les use cases.
"""

from src.domain.ports.task_repository import TaskRepositoryGateway
from src.domain.ports.user_repository import UserRepositoryGateway

__all__ = [
    "UserRepositoryGateway",
    "TaskRepositoryGateway",
]
