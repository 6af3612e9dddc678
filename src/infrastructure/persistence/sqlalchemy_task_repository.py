"""
SqlAlchemyTaskRepository - Adapter SQLAlchemy du TaskRepositoryGateway.

Meme schema que SqlAlchemyUserRepository: sessions synchrones
executees via asyncio.to_thread, erreurs converties en PersistenceError.
"""

import asyncio
from typing import List

from sqlalchemy import func
from sqlalchemy.exc import SQLAlchemyError

from src.domain.entities.task import Task
from src.domain.ports.task_repository import TaskRepositoryGateway
from src.infrastructure.logging import get_logger
from src.infrastructure.persistence.database import DatabaseManager
from src.infrastructure.persistence.exceptions import PersistenceError
from src.infrastructure.persistence.models import TaskModel

logger = get_logger(__name__)


class SqlAlchemyTaskRepository(TaskRepositoryGateway):
    """Implementation SQLAlchemy du TaskRepositoryGateway."""

    def __init__(self, db: DatabaseManager):
        self._db = db

    async def save(self, task: Task) -> None:
        """Insere ou remplace la tache."""
        try:
            await asyncio.to_thread(self._save_sync, task)
        except SQLAlchemyError as e:
            logger.error("task_save_failed", task_id=task.id, error=str(e))
            raise PersistenceError("save task", e) from e
        logger.debug("task_saved", task_id=task.id, owner_id=task.owner_id)

    def _save_sync(self, task: Task) -> None:
        with self._db.write_lock, self._db.get_session() as session:
            model = session.get(TaskModel, task.id)
            if model is None:
                last = session.query(func.max(TaskModel.position)).scalar()
                model = TaskModel(id=task.id, position=(last or 0) + 1)
                session.add(model)

            model.title = task.title
            model.description = task.description
            model.status = task.status
            model.owner_id = task.owner_id
            model.assignee_id = task.assignee_id
            model.start_date = task.start_date
            model.end_date = task.end_date
            model.created = task.created
            model.updated = task.updated

    def _list_sync(self) -> List[Task]:
        with self._db.get_session() as session:
            models = session.query(TaskModel).order_by(TaskModel.position).all()
            return [_model_to_entity(m) for m in models]

    async def list(self) -> List[Task]:
        """Retourne toutes les taches dans l'ordre de stockage."""
        try:
            return await asyncio.to_thread(self._list_sync)
        except SQLAlchemyError as e:
            logger.error("task_list_failed", error=str(e))
            raise PersistenceError("list tasks", e) from e


def _model_to_entity(model: TaskModel) -> Task:
    return Task(
        title=model.title,
        description=model.description,
        status=model.status,
        owner_id=model.owner_id,
        assignee_id=model.assignee_id,
        start_date=model.start_date,
        end_date=model.end_date,
        id=model.id,
        created=model.created,
        updated=model.updated,
    )
