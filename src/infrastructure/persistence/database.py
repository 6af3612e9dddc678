"""
DatabaseManager - Connexion SQLAlchemy et gestion des sessions.

Architecture Hexagonale:
------------------------
Ce module fait partie de la couche Infrastructure (Adapters). Il est
utilise par les repositories SQLAlchemy qui implementent les gateways
du domaine.

    src/infrastructure/persistence/
    ├── database.py                      <- CE FICHIER
    ├── exceptions.py                    PersistenceError
    ├── models/                          Modeles ORM (UserModel, TaskModel)
    ├── sqlalchemy_user_repository.py    UserRepositoryGateway
    └── sqlalchemy_task_repository.py    TaskRepositoryGateway

Connection Pooling:
-------------------
Pour PostgreSQL (et tout moteur hors SQLite):
- pool_size=5: Connexions maintenues en permanence
- max_overflow=10: Connexions temporaires supplementaires
- pool_recycle=1800: Recyclage toutes les 30 min (evite timeout)
- pool_pre_ping=True: Verification avant utilisation

SQLite n'utilise pas ces options; check_same_thread est desactive car
les repositories executent les sessions dans un thread pool. Une base
SQLite en memoire (sqlite://) utilise un StaticPool: tous les threads
partagent la meme connexion, donc les memes tables.
"""

import threading
from contextlib import contextmanager
from typing import Iterator, Optional

from sqlalchemy import create_engine
from sqlalchemy.engine import make_url
from sqlalchemy.orm import Session, sessionmaker
from sqlalchemy.pool import StaticPool

from src.infrastructure.logging import get_logger
from src.infrastructure.persistence.models import Base

logger = get_logger(__name__)

DEFAULT_DATABASE_URL = "sqlite:///./taskboard.db"


class DatabaseManager:
    """
    Gestionnaire central de connexion a la base de donnees.

    Encapsule la configuration SQLAlchemy et fournit un context
    manager pour les sessions avec gestion automatique des
    transactions (commit/rollback).

    Example:
        >>> db = DatabaseManager("sqlite:///./taskboard.db")
        >>> db.create_tables()
        >>> with db.get_session() as session:
        ...     users = session.query(UserModel).all()
        # Commit automatique si pas d'exception
        # Rollback automatique en cas d'erreur
    """

    def __init__(self, database_url: Optional[str] = None):
        self.database_url = database_url or DEFAULT_DATABASE_URL
        url = make_url(self.database_url)

        if url.get_backend_name() == "sqlite":
            sqlite_options = {}
            if url.database in (None, "", ":memory:"):
                # Une seule connexion partagee: sinon chaque thread ouvre sa propre base vide
                sqlite_options["poolclass"] = StaticPool
            self.engine = create_engine(
                self.database_url,
                connect_args={"check_same_thread": False},
                echo=False,
                **sqlite_options,
            )
        else:
            self.engine = create_engine(
                self.database_url,
                pool_pre_ping=True,
                pool_size=5,
                max_overflow=10,
                pool_timeout=30,
                pool_recycle=1800,
                echo=False,
            )
        self.SessionLocal = sessionmaker(bind=self.engine, expire_on_commit=False)
        # Serialise les ecritures qui attribuent une position (lecture du max puis insertion)
        self.write_lock = threading.Lock()

    def create_tables(self) -> None:
        """Cree toutes les tables si elles n'existent pas."""
        Base.metadata.create_all(self.engine)
        logger.info("tables_created", backend=self.engine.url.get_backend_name())

    def dispose(self) -> None:
        """Ferme toutes les connexions du pool."""
        self.engine.dispose()

    @contextmanager
    def get_session(self) -> Iterator[Session]:
        """Context manager pour les sessions avec gestion automatique des transactions."""
        session = self.SessionLocal()
        try:
            yield session
            session.commit()
        except Exception:
            session.rollback()
            raise
        finally:
            session.close()
