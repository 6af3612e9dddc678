"""
Domain Layer - Coeur metier de l'application.

Ce module contient:
    - entities/: Entites du domaine (User, Task, Project)
    - value_objects/: Objets valeur (Role, identifiants)
    - ports/: Contrats de persistence (gateways)
    - exceptions: Exceptions metier

Principes:
    - AUCUNE dependance vers les couches externes
    - Logique metier pure
    - Testable sans infrastructure
"""

from src.domain.exceptions import (
    DomainException,
    DuplicateTaskError,
    FieldValidationError,
    TaskNotFoundError,
)

__all__ = [
    "DomainException",
    "FieldValidationError",
    "TaskNotFoundError",
    "DuplicateTaskError",
]
