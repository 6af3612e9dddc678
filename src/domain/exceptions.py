"""
Exceptions metier du domaine.

Ces exceptions representent des violations des regles metier
et sont independantes de l'infrastructure.

Hierarchie:
-----------
    DomainException
    ├── FieldValidationError (un champ d'entite invalide)
    │   ├── InvalidIdError
    │   ├── InvalidNameError
    │   ├── InvalidTitleError
    │   ├── InvalidDescriptionError
    │   ├── InvalidStatusError
    │   ├── InvalidEmailError
    │   ├── InvalidPasswordError
    │   ├── InvalidRoleError
    │   └── InvalidOwnerIdError
    └── Coherence de l'agregat Project
        ├── TaskNotFoundError
        └── DuplicateTaskError

Les erreurs d'infrastructure (persistence) ne derivent PAS de
DomainException: voir src.infrastructure.persistence.exceptions.
"""

from typing import Any


class DomainException(Exception):
    """Exception de base pour toutes les erreurs du domaine."""

    def __init__(self, message: str, code: str | None = None) -> None:
        """
        Initialise une exception du domaine.

        Args:
            message: Message d'erreur descriptif.
            code: Code d'erreur optionnel pour identification programmatique.
        """
        super().__init__(message)
        self.message = message
        self.code = code or self.__class__.__name__

    def __str__(self) -> str:
        return f"[{self.code}] {self.message}"


class FieldValidationError(DomainException):
    """
    Leve quand un champ d'entite ne respecte pas son validateur.

    Attributes:
        field: Nom du premier champ invalide rencontre.
        invalid_value: Valeur rejetee.
    """

    field: str = "unknown"

    def __init__(self, value: Any, reason: str, code: str) -> None:
        super().__init__(f"Invalid {self.field}: {reason}", code=code)
        self.invalid_value = value


class InvalidIdError(FieldValidationError):
    """Leve quand un identifiant est vide."""

    field = "id"

    def __init__(self, value: Any) -> None:
        super().__init__(value, "id must be a non-empty string", code="INVALID_ID")


class InvalidNameError(FieldValidationError):
    """Leve quand un nom est invalide (vide ou trop court)."""

    field = "name"

    def __init__(self, value: Any, min_length: int = 1) -> None:
        super().__init__(
            value,
            f"name must have at least {min_length} character(s)",
            code="INVALID_NAME",
        )
        self.min_length = min_length


class InvalidTitleError(FieldValidationError):
    """Leve quand le titre d'une tache est vide."""

    field = "title"

    def __init__(self, value: Any) -> None:
        super().__init__(value, "title must not be empty", code="INVALID_TITLE")


class InvalidDescriptionError(FieldValidationError):
    """Leve quand une description est vide."""

    field = "description"

    def __init__(self, value: Any) -> None:
        super().__init__(
            value, "description must not be empty", code="INVALID_DESCRIPTION"
        )


class InvalidStatusError(FieldValidationError):
    """Leve quand le statut d'une tache est vide."""

    field = "status"

    def __init__(self, value: Any) -> None:
        super().__init__(value, "status must not be empty", code="INVALID_STATUS")


class InvalidEmailError(FieldValidationError):
    """Leve quand une adresse email ne respecte pas le format local@domain.tld."""

    field = "email"

    def __init__(self, value: Any) -> None:
        super().__init__(
            value,
            f"'{value}' is not a valid email address",
            code="INVALID_EMAIL",
        )


class InvalidPasswordError(FieldValidationError):
    """Leve quand un mot de passe est trop court."""

    field = "password"

    def __init__(self, value: Any, min_length: int) -> None:
        # La valeur rejetee n'est jamais recopiee dans le message
        super().__init__(
            value,
            f"password must have at least {min_length} characters",
            code="INVALID_PASSWORD",
        )
        self.min_length = min_length


class InvalidRoleError(FieldValidationError):
    """Leve quand un role n'appartient pas a l'enumeration."""

    field = "role"

    def __init__(self, value: Any, valid_roles: tuple[str, ...]) -> None:
        super().__init__(
            value,
            f"'{value}' is not a valid role. Valid roles: {', '.join(valid_roles)}",
            code="INVALID_ROLE",
        )


class InvalidOwnerIdError(FieldValidationError):
    """Leve quand la reference vers le proprietaire est vide."""

    field = "owner_id"

    def __init__(self, value: Any) -> None:
        super().__init__(
            value, "owner_id must be a non-empty user id", code="INVALID_OWNER_ID"
        )


class TaskNotFoundError(DomainException):
    """Leve quand une tache n'appartient pas au projet."""

    def __init__(self, task_id: str, project_id: str) -> None:
        super().__init__(
            f"Task '{task_id}' not found in project '{project_id}'",
            code="TASK_NOT_FOUND",
        )
        self.task_id = task_id
        self.project_id = project_id


class DuplicateTaskError(DomainException):
    """Leve quand une tache avec le meme id est deja dans le projet."""

    def __init__(self, task_id: str, project_id: str) -> None:
        super().__init__(
            f"Task '{task_id}' already belongs to project '{project_id}'",
            code="DUPLICATE_TASK",
        )
        self.task_id = task_id
        self.project_id = project_id
