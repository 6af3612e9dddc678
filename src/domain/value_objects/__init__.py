"""
Value Objects du domaine.

Les Value Objects sont des objets immuables qui encapsulent
des valeurs avec leur logique de validation.
"""

from src.domain.value_objects.entity_id import is_valid_entity_id, new_entity_id
from src.domain.value_objects.role import VALID_ROLES, Role, RoleLevel

__all__ = [
    "Role",
    "RoleLevel",
    "VALID_ROLES",
    "new_entity_id",
    "is_valid_entity_id",
]
