"""
Tasks Router - Endpoints taches.

Endpoints:
----------
- POST /tasks: Creer une tache (statut TODO)
- GET /tasks: Lister les taches
"""

from dataclasses import asdict

from fastapi import APIRouter, Depends, status

from src.application.use_cases.tasks import (
    CreateTaskInput,
    CreateTaskUseCase,
    ListTasksUseCase,
)
from src.infrastructure.logging import get_logger
from src.presentation.api.dependencies import (
    get_create_task_use_case,
    get_list_tasks_use_case,
)
from src.presentation.api.tasks.schemas import (
    CreatedTaskResponse,
    CreateTaskRequest,
    TaskListResponse,
)

logger = get_logger(__name__)

router = APIRouter(prefix="/tasks", tags=["Tasks"])


@router.post(
    "",
    response_model=CreatedTaskResponse,
    status_code=status.HTTP_201_CREATED,
    summary="Creer une tache",
)
async def create_task(
    request: CreateTaskRequest,
    use_case: CreateTaskUseCase = Depends(get_create_task_use_case),
):
    output = await use_case.execute(
        CreateTaskInput(
            title=request.title,
            description=request.description,
            owner_id=request.owner_id,
        )
    )
    logger.info("task_created", task_id=output.id, owner_id=output.owner_id)
    return CreatedTaskResponse(**asdict(output))


@router.get(
    "",
    response_model=TaskListResponse,
    summary="Lister les taches",
)
async def list_tasks(
    use_case: ListTasksUseCase = Depends(get_list_tasks_use_case),
):
    output = await use_case.execute()
    return TaskListResponse(**asdict(output))
