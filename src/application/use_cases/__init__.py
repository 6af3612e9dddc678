"""
Use Cases de l'application.

Les Use Cases orchestrent les entites du domaine et les gateways
de persistence pour realiser les fonctionnalites de l'application.

Chaque Use Case:
    - A une seule responsabilite
    - Utilise les ports (interfaces) pour les dependances
    - Ne connait pas les details d'implementation
"""

from src.application.use_cases.base import UseCase
from src.application.use_cases.tasks import CreateTaskUseCase, ListTasksUseCase
from src.application.use_cases.users import CreateUserUseCase, ListUsersUseCase

__all__ = [
    "UseCase",
    "CreateUserUseCase",
    "ListUsersUseCase",
    "CreateTaskUseCase",
    "ListTasksUseCase",
]
