"""
Use Cases utilisateurs.

- CreateUserUseCase: Creer un utilisateur
- ListUsersUseCase: Lister les utilisateurs
"""

from src.application.use_cases.users.create_user import (
    CreateUserInput,
    CreateUserOutput,
    CreateUserUseCase,
)
from src.application.use_cases.users.list_users import (
    ListUsersOutput,
    ListUsersUseCase,
    UserOutput,
)

__all__ = [
    "CreateUserUseCase",
    "CreateUserInput",
    "CreateUserOutput",
    "ListUsersUseCase",
    "ListUsersOutput",
    "UserOutput",
]
