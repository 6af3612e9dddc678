"""
Configuration et fixtures pytest.
"""

from datetime import datetime

import pytest

from src.domain.entities import Project, Task, User
from src.infrastructure.adapters import MemoryTaskRepository, MemoryUserRepository
from src.infrastructure.config import Settings

# ═══════════════════════════════════════════════════════════════════════════════
# FIXTURES - ENTITIES
# ═══════════════════════════════════════════════════════════════════════════════

@pytest.fixture
def sample_user() -> User:
    """User valide pour les tests."""
    return User(
        name="John Doe",
        email="email@test.com",
        password="12345678",
        role="Admin",
    )


@pytest.fixture
def sample_task(sample_user) -> Task:
    """Task valide au statut TODO."""
    return Task(
        title="Design",
        description="Maquettes de la page d'accueil",
        status="TODO",
        owner_id=sample_user.id,
    )


@pytest.fixture
def sample_project(sample_user) -> Project:
    """Project vide."""
    return Project(
        name="Website",
        description="Refonte du site",
        owner_id=sample_user.id,
        start_date=datetime(2024, 1, 1),
    )


# ═══════════════════════════════════════════════════════════════════════════════
# FIXTURES - INFRASTRUCTURE
# ═══════════════════════════════════════════════════════════════════════════════

@pytest.fixture
def user_repository() -> MemoryUserRepository:
    return MemoryUserRepository()


@pytest.fixture
def task_repository() -> MemoryTaskRepository:
    return MemoryTaskRepository()


@pytest.fixture
def sqlite_url(tmp_path) -> str:
    """URL d'une base SQLite fichier, isolee par test."""
    return f"sqlite:///{tmp_path / 'taskboard.db'}"


@pytest.fixture
def memory_settings() -> Settings:
    """Settings avec le backend memoire (pas de base)."""
    return Settings(
        _env_file=None,
        env="test",
        repository_backend="memory",
        log_level="WARNING",
        json_logs=False,
    )
