"""
Identifiants opaques des entites.

Les entites (User, Task, Project) sont identifiees par une chaine
opaque non vide. Les nouveaux identifiants sont des UUID4 serialises.
Les references entre entites (owner_id, assignee_id) sont de simples
identifiants, jamais des objets.
"""

from uuid import uuid4


def new_entity_id() -> str:
    """Genere un nouvel identifiant unique."""
    return str(uuid4())


def is_valid_entity_id(value: object) -> bool:
    """True si value est une chaine non vide."""
    return isinstance(value, str) and len(value) > 0
