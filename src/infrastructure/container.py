"""
Container d'injection de dependances.

Ce module fournit un conteneur qui initialise et connecte
tous les composants de l'architecture hexagonale: repositories
(SQLAlchemy ou memoire selon la configuration) et use cases.
"""

from dataclasses import dataclass
from typing import Optional

from src.application.use_cases import (
    CreateTaskUseCase,
    CreateUserUseCase,
    ListTasksUseCase,
    ListUsersUseCase,
)
from src.domain.ports import TaskRepositoryGateway, UserRepositoryGateway
from src.infrastructure.adapters import MemoryTaskRepository, MemoryUserRepository
from src.infrastructure.config import Settings, get_settings
from src.infrastructure.logging import get_logger
from src.infrastructure.persistence import (
    DatabaseManager,
    SqlAlchemyTaskRepository,
    SqlAlchemyUserRepository,
)

logger = get_logger(__name__)


@dataclass
class Container:
    """
    Conteneur d'injection de dependances.

    Example:
        >>> container = Container.create(Settings(repository_backend="memory"))
        >>> output = await container.create_user.execute(request)
    """

    # Repositories
    user_repository: UserRepositoryGateway
    task_repository: TaskRepositoryGateway

    # Use Cases
    create_user: CreateUserUseCase
    list_users: ListUsersUseCase
    create_task: CreateTaskUseCase
    list_tasks: ListTasksUseCase

    # None avec le backend memoire
    db: Optional[DatabaseManager] = None

    @classmethod
    def create(cls, settings: Optional[Settings] = None) -> "Container":
        """
        Factory pour creer un conteneur avec toutes les dependances.

        Args:
            settings: Configuration (defaut: get_settings()).

        Returns:
            Container configure avec tous les composants.
        """
        settings = settings or get_settings()

        db = None
        if settings.repository_backend == "memory":
            user_repository = MemoryUserRepository()
            task_repository = MemoryTaskRepository()
        else:
            db = DatabaseManager(settings.database_url)
            db.create_tables()
            user_repository = SqlAlchemyUserRepository(db)
            task_repository = SqlAlchemyTaskRepository(db)

        logger.info("container_created", backend=settings.repository_backend)

        return cls(
            user_repository=user_repository,
            task_repository=task_repository,
            create_user=CreateUserUseCase(user_repository),
            list_users=ListUsersUseCase(user_repository),
            create_task=CreateTaskUseCase(task_repository),
            list_tasks=ListTasksUseCase(task_repository),
            db=db,
        )

    def shutdown(self) -> None:
        """Libere les connexions de la base."""
        if self.db is not None:
            self.db.dispose()
