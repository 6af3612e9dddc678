"""
Adapters in-memory des gateways du domaine.

Utilises en developpement et dans les tests (REPOSITORY_BACKEND=memory).
"""

from src.infrastructure.adapters.memory_task_repository import MemoryTaskRepository
from src.infrastructure.adapters.memory_user_repository import MemoryUserRepository

__all__ = ["MemoryUserRepository", "MemoryTaskRepository"]
