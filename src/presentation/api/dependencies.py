"""
Dependencies - Injection de dependances FastAPI.

Responsabilite unique:
----------------------
Fournir les use cases aux endpoints depuis le Container attache
a l'application (app.state.container).

Usage:
------
    @router.post("")
    async def create_user(
        use_case: CreateUserUseCase = Depends(get_create_user_use_case),
    ):
        ...
"""

from fastapi import Depends, Request

from src.application.use_cases import (
    CreateTaskUseCase,
    CreateUserUseCase,
    ListTasksUseCase,
    ListUsersUseCase,
)
from src.infrastructure.container import Container


def get_container(request: Request) -> Container:
    """Retourne le Container de l'application."""
    return request.app.state.container


def get_create_user_use_case(
    container: Container = Depends(get_container),
) -> CreateUserUseCase:
    return container.create_user


def get_list_users_use_case(
    container: Container = Depends(get_container),
) -> ListUsersUseCase:
    return container.list_users


def get_create_task_use_case(
    container: Container = Depends(get_container),
) -> CreateTaskUseCase:
    return container.create_task


def get_list_tasks_use_case(
    container: Container = Depends(get_container),
) -> ListTasksUseCase:
    return container.list_tasks
