"""
Erreurs d'infrastructure de la persistence.

PersistenceError ne derive PAS de DomainException: un echec de
stockage n'est pas une violation de regle metier. Les use cases la
laissent remonter telle quelle, la couche presentation la traduit
en erreur serveur.
"""

from typing import Optional


class PersistenceError(Exception):
    """Leve quand un adapter de persistence echoue (driver, connexion...)."""

    def __init__(self, operation: str, cause: Optional[BaseException] = None) -> None:
        message = f"Persistence failure during '{operation}'"
        if cause is not None:
            message += f": {cause}"
        super().__init__(message)
        self.operation = operation
        self.cause = cause
