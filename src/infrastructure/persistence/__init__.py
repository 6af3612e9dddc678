"""
Persistence - Adapters SQLAlchemy.

Usage:
------
    from src.infrastructure.persistence import DatabaseManager, SqlAlchemyUserRepository

    db = DatabaseManager(settings.database_url)
    db.create_tables()
    users = SqlAlchemyUserRepository(db)
"""

from src.infrastructure.persistence.database import DatabaseManager
from src.infrastructure.persistence.exceptions import PersistenceError
from src.infrastructure.persistence.sqlalchemy_task_repository import SqlAlchemyTaskRepository
from src.infrastructure.persistence.sqlalchemy_user_repository import SqlAlchemyUserRepository

__all__ = [
    "DatabaseManager",
    "PersistenceError",
    "SqlAlchemyUserRepository",
    "SqlAlchemyTaskRepository",
]
