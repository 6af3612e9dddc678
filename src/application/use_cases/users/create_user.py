"""
CreateUserUseCase - Creation d'un nouvel utilisateur.

Responsabilite unique:
----------------------
Construire un User valide et le persister.

Dependances:
------------
- UserRepositoryGateway: Persister l'utilisateur

Erreurs:
--------
- FieldValidationError: donnees invalides, le gateway n'est pas appele
- Erreur d'infrastructure du gateway: propagee sans traduction
"""

from dataclasses import dataclass
from datetime import datetime

from src.application.use_cases.base import UseCase
from src.domain.entities.user import User
from src.domain.ports.user_repository import UserRepositoryGateway


@dataclass(frozen=True)
class CreateUserInput:
    """
    Requete de creation utilisateur.

    Attributes:
        name: Nom (3 caracteres minimum).
        email: Adresse email.
        password: Mot de passe en clair (8 caracteres minimum).
        role: "Admin" ou "User".
    """

    name: str
    email: str
    password: str
    role: str


@dataclass(frozen=True)
class CreateUserOutput:
    """
    Utilisateur cree.

    Le mot de passe n'en fait jamais partie.
    """

    id: str
    name: str
    email: str
    role: str
    created_at: datetime


class CreateUserUseCase(UseCase[CreateUserInput, CreateUserOutput]):
    """
    Use case de creation utilisateur.

    Example:
        >>> use_case = CreateUserUseCase(user_repository)
        >>> output = await use_case.execute(CreateUserInput(
        ...     name="John Doe",
        ...     email="email@test.com",
        ...     password="12345678",
        ...     role="Admin",
        ... ))
        >>> output.role
        'Admin'
    """

    def __init__(self, user_repository: UserRepositoryGateway) -> None:
        self._user_repository = user_repository

    async def execute(self, request: CreateUserInput) -> CreateUserOutput:
        user = User(
            name=request.name,
            email=request.email,
            password=request.password,
            role=request.role,
        )

        await self._user_repository.save(user)

        return CreateUserOutput(
            id=user.id,
            name=user.name,
            email=user.email,
            role=user.role,
            created_at=user.created,
        )
