"""
SqlAlchemyUserRepository - Adapter SQLAlchemy du UserRepositoryGateway.

Responsabilite unique:
----------------------
Persister les utilisateurs dans la table users et les relire dans
l'ordre de stockage.

Les sessions SQLAlchemy sont synchrones: chaque operation s'execute
dans un thread via asyncio.to_thread pour ne pas bloquer la boucle.
Toute SQLAlchemyError est convertie en PersistenceError.

Les ecritures passent par db.write_lock: la position d'un nouvel
utilisateur (max + 1) est lue puis inseree sans entrelacement.
"""

import asyncio
from typing import List

from sqlalchemy import func
from sqlalchemy.exc import SQLAlchemyError

from src.domain.entities.user import User
from src.domain.ports.user_repository import UserRepositoryGateway
from src.infrastructure.logging import get_logger
from src.infrastructure.persistence.database import DatabaseManager
from src.infrastructure.persistence.exceptions import PersistenceError
from src.infrastructure.persistence.models import UserModel

logger = get_logger(__name__)


class SqlAlchemyUserRepository(UserRepositoryGateway):
    """
    Implementation SQLAlchemy du UserRepositoryGateway.

    Example:
        >>> db = DatabaseManager("sqlite:///./taskboard.db")
        >>> db.create_tables()
        >>> repo = SqlAlchemyUserRepository(db)
        >>> await repo.save(user)
    """

    def __init__(self, db: DatabaseManager):
        self._db = db

    async def save(self, user: User) -> None:
        """Insere ou remplace l'utilisateur (meme id = remplacement en place)."""
        try:
            await asyncio.to_thread(self._save_sync, user)
        except SQLAlchemyError as e:
            logger.error("user_save_failed", user_id=user.id, error=str(e))
            raise PersistenceError("save user", e) from e
        logger.debug("user_saved", user_id=user.id)

    def _save_sync(self, user: User) -> None:
        with self._db.write_lock, self._db.get_session() as session:
            model = session.get(UserModel, user.id)
            if model is None:
                last = session.query(func.max(UserModel.position)).scalar()
                model = UserModel(id=user.id, position=(last or 0) + 1)
                session.add(model)

            model.name = user.name
            model.email = user.email
            model.password = user.password
            model.role = user.role
            model.created = user.created
            model.updated = user.updated

    def _list_sync(self) -> List[User]:
        with self._db.get_session() as session:
            models = session.query(UserModel).order_by(UserModel.position).all()
            return [_model_to_entity(m) for m in models]

    async def list(self) -> List[User]:
        """Retourne tous les utilisateurs dans l'ordre de stockage."""
        try:
            return await asyncio.to_thread(self._list_sync)
        except SQLAlchemyError as e:
            logger.error("user_list_failed", error=str(e))
            raise PersistenceError("list users", e) from e


def _model_to_entity(model: UserModel) -> User:
    """Convertit un UserModel en entite User."""
    return User(
        name=model.name,
        email=model.email,
        password=model.password,
        role=model.role,
        id=model.id,
        created=model.created,
        updated=model.updated,
    )
