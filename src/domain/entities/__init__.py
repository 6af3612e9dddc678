"""
Entites du domaine.

Les entites sont des objets metier avec une identite propre
et un cycle de vie. Contrairement aux Value Objects, deux entites
avec les memes attributs ne sont pas egales si leurs identifiants different.

Entites principales:
    - User: Utilisateur avec role
    - Task: Tache, reference son proprietaire et son assigne par id
    - Project: Agregat racine possedant ses taches
"""

from src.domain.entities.base import Entity
from src.domain.entities.project import Project
from src.domain.entities.task import DEFAULT_STATUS, Task
from src.domain.entities.user import User

__all__ = [
    "Entity",
    "User",
    "Task",
    "Project",
    "DEFAULT_STATUS",
]
