"""
Modeles SQLAlchemy - exports centralises.

Organisation par domaine:
- base: Base declarative
- user_models: Utilisateurs
- task_models: Taches
"""

from src.infrastructure.persistence.models.base import Base
from src.infrastructure.persistence.models.task_models import TaskModel
from src.infrastructure.persistence.models.user_models import UserModel

__all__ = [
    "Base",
    "UserModel",
    "TaskModel",
]
