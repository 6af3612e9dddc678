"""
Entite User - Utilisateur de l'application.

Attributes:
-----------
- id: Identifiant opaque (UUID4 par defaut)
- name: Nom affichable (3 caracteres minimum)
- email: Adresse email au format local@domain.tld
- password: Mot de passe (8 caracteres minimum), stocke tel que fourni
- role: "Admin" ou "User"
- created: Date de creation
- updated: Date de derniere modification (None si jamais modifie)

Discipline de mutation:
-----------------------
Stricte. Chaque setter valide sa valeur: une valeur invalide leve
l'erreur de champ correspondante sans modifier l'entite ni updated.

Securite:
---------
Le mot de passe n'est jamais expose par les DTOs de sortie. Le hachage
au repos est une decision de l'adapter de persistence.
"""

import re
from datetime import datetime
from typing import Optional

from src.domain.entities.base import Entity
from src.domain.exceptions import (
    InvalidEmailError,
    InvalidNameError,
    InvalidPasswordError,
    InvalidRoleError,
)
from src.domain.value_objects.role import VALID_ROLES, Role

EMAIL_PATTERN = re.compile(r"^[^\s@]+@[^\s@]+\.[^\s@]+$")


class User(Entity):
    """
    Utilisateur de l'application.

    La construction valide les champs dans l'ordre
    id -> name -> email -> password -> role et echoue sur le premier
    champ invalide.

    Example:
        >>> user = User(
        ...     name="John Doe",
        ...     email="email@test.com",
        ...     password="12345678",
        ...     role="Admin",
        ... )
        >>> user.updated is None
        True
        >>> user.name = "Jane Doe"
        >>> user.updated is not None
        True
    """

    MIN_NAME_LENGTH = 3
    MIN_PASSWORD_LENGTH = 8

    __slots__ = ("_name", "_email", "_password", "_role")

    def __init__(
        self,
        name: str,
        email: str,
        password: str,
        role: str,
        *,
        id: Optional[str] = None,
        created: Optional[datetime] = None,
        updated: Optional[datetime] = None,
    ) -> None:
        super().__init__(id=id, created=created, updated=updated)
        self._check_name(name)
        self._check_email(email)
        self._check_password(password)
        self._check_role(role)

        self._name = name
        self._email = email
        self._password = password
        self._role = Role.from_string(role)

    # ------------------------------------------------------------------
    # Validateurs purs
    # ------------------------------------------------------------------

    @classmethod
    def is_valid_name(cls, name: object) -> bool:
        return isinstance(name, str) and len(name) >= cls.MIN_NAME_LENGTH

    @staticmethod
    def is_valid_email(email: object) -> bool:
        return isinstance(email, str) and EMAIL_PATTERN.match(email) is not None

    @classmethod
    def is_valid_password(cls, password: object) -> bool:
        return isinstance(password, str) and len(password) >= cls.MIN_PASSWORD_LENGTH

    @staticmethod
    def is_valid_role(role: object) -> bool:
        return Role.is_valid(role)

    def _check_name(self, name: object) -> None:
        if not self.is_valid_name(name):
            raise InvalidNameError(name, min_length=self.MIN_NAME_LENGTH)

    def _check_email(self, email: object) -> None:
        if not self.is_valid_email(email):
            raise InvalidEmailError(email)

    def _check_password(self, password: object) -> None:
        if not self.is_valid_password(password):
            raise InvalidPasswordError(password, min_length=self.MIN_PASSWORD_LENGTH)

    def _check_role(self, role: object) -> None:
        if not self.is_valid_role(role):
            raise InvalidRoleError(role, VALID_ROLES)

    # ------------------------------------------------------------------
    # Accesseurs et mutations
    # ------------------------------------------------------------------

    @property
    def name(self) -> str:
        return self._name

    @name.setter
    def name(self, name: str) -> None:
        self._check_name(name)
        self._name = name
        self._touch()

    @property
    def email(self) -> str:
        return self._email

    @email.setter
    def email(self, email: str) -> None:
        self._check_email(email)
        self._email = email
        self._touch()

    @property
    def password(self) -> str:
        return self._password

    @password.setter
    def password(self, password: str) -> None:
        self._check_password(password)
        self._password = password
        self._touch()

    @property
    def role(self) -> str:
        """Jeton canonique du role ("Admin" ou "User")."""
        return str(self._role)

    @role.setter
    def role(self, role: str) -> None:
        self._check_role(role)
        self._role = Role.from_string(role)
        self._touch()

    @property
    def is_admin(self) -> bool:
        """True si administrateur."""
        return self._role.is_admin

    def update(
        self,
        name: Optional[str] = None,
        email: Optional[str] = None,
        password: Optional[str] = None,
        role: Optional[str] = None,
    ) -> None:
        """
        Met a jour plusieurs champs en une fois.

        Les champs a None sont ignores. Tous les champs fournis sont
        valides avant toute modification: si l'un est invalide, rien
        n'est modifie. Sinon updated avance une seule fois.

        Raises:
            FieldValidationError: Premier champ fourni invalide.
        """
        if name is not None:
            self._check_name(name)
        if email is not None:
            self._check_email(email)
        if password is not None:
            self._check_password(password)
        if role is not None:
            self._check_role(role)

        if name is not None:
            self._name = name
        if email is not None:
            self._email = email
        if password is not None:
            self._password = password
        if role is not None:
            self._role = Role.from_string(role)
        self._touch()

    def __str__(self) -> str:
        return f"{self._name} ({self._role})"

    def __repr__(self) -> str:
        return f"User(id={self.id}, name='{self._name}', role={self._role})"
