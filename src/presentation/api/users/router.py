"""
Users Router - Endpoints utilisateurs.

Endpoints:
----------
- POST /users: Creer un utilisateur
- GET /users: Lister les utilisateurs

Les erreurs de validation du domaine sont traduites en 400 par le
handler global de main.py.
"""

from dataclasses import asdict

from fastapi import APIRouter, Depends, status

from src.application.use_cases.users import (
    CreateUserInput,
    CreateUserUseCase,
    ListUsersUseCase,
)
from src.infrastructure.logging import get_logger
from src.presentation.api.dependencies import (
    get_create_user_use_case,
    get_list_users_use_case,
)
from src.presentation.api.users.schemas import (
    CreatedUserResponse,
    CreateUserRequest,
    UserListResponse,
)

logger = get_logger(__name__)

router = APIRouter(prefix="/users", tags=["Users"])


@router.post(
    "",
    response_model=CreatedUserResponse,
    status_code=status.HTTP_201_CREATED,
    summary="Creer un utilisateur",
)
async def create_user(
    request: CreateUserRequest,
    use_case: CreateUserUseCase = Depends(get_create_user_use_case),
):
    output = await use_case.execute(
        CreateUserInput(
            name=request.name,
            email=request.email,
            password=request.password,
            role=request.role,
        )
    )
    logger.info("user_created", user_id=output.id, role=output.role)
    return CreatedUserResponse(**asdict(output))


@router.get(
    "",
    response_model=UserListResponse,
    summary="Lister les utilisateurs",
)
async def list_users(
    use_case: ListUsersUseCase = Depends(get_list_users_use_case),
):
    output = await use_case.execute()
    return UserListResponse(**asdict(output))
