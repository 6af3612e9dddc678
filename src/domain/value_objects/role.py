"""
Value Object Role - Role d'un utilisateur.

Roles disponibles:
------------------
- Admin: Administrateur du workspace
- User: Utilisateur standard

La casse est canonique et sensible: "Admin" et "User" sont les seuls
jetons acceptes, partout (entite, DTOs, persistence, API).
"""

from dataclasses import dataclass
from enum import Enum

from src.domain.exceptions import InvalidRoleError


class RoleLevel(Enum):
    """Niveaux de role utilisateur."""

    ADMIN = "Admin"
    USER = "User"

    def __str__(self) -> str:
        return self.value


VALID_ROLES: tuple[str, ...] = tuple(level.value for level in RoleLevel)


@dataclass(frozen=True)
class Role:
    """
    Role utilisateur.

    Value Object immutable representant le niveau d'acces
    d'un utilisateur.

    Attributes:
        level: Niveau du role (Admin, User).

    Example:
        >>> Role.from_string("Admin").is_admin
        True
        >>> Role.is_valid("admin")
        False
    """

    level: RoleLevel

    @classmethod
    def admin(cls) -> "Role":
        """Cree un role administrateur."""
        return cls(level=RoleLevel.ADMIN)

    @classmethod
    def user(cls) -> "Role":
        """Cree un role utilisateur standard."""
        return cls(level=RoleLevel.USER)

    @staticmethod
    def is_valid(role_str: object) -> bool:
        """True si role_str est exactement un des jetons canoniques."""
        return isinstance(role_str, str) and role_str in VALID_ROLES

    @classmethod
    def from_string(cls, role_str: str) -> "Role":
        """
        Cree un Role depuis une chaine.

        Args:
            role_str: Nom du role ("Admin" ou "User"), casse exacte.

        Returns:
            Instance de Role correspondante.

        Raises:
            InvalidRoleError: Si le role est inconnu.
        """
        if not cls.is_valid(role_str):
            raise InvalidRoleError(role_str, VALID_ROLES)
        return cls(level=RoleLevel(role_str))

    @property
    def is_admin(self) -> bool:
        """True si role administrateur."""
        return self.level == RoleLevel.ADMIN

    def __str__(self) -> str:
        return str(self.level)

    def __repr__(self) -> str:
        return f"Role({self.level.value})"
