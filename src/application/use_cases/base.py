"""
UseCase - Contrat commun des cas d'utilisation.

Pattern Command:
----------------
Chaque use case recoit un DTO d'entree et retourne un DTO de sortie
via une unique methode execute(). Les dependances (gateways) sont
injectees par le constructeur.

execute() est une coroutine: le seul point de suspension est l'appel
au gateway (I/O). Aucun etat n'est partage entre deux executions.
"""

from abc import ABC, abstractmethod
from typing import Generic, TypeVar

InputT = TypeVar("InputT")
OutputT = TypeVar("OutputT")


class UseCase(ABC, Generic[InputT, OutputT]):
    """Cas d'utilisation avec un point d'entree unique."""

    @abstractmethod
    async def execute(self, request: InputT) -> OutputT:
        """Execute le cas d'utilisation."""
        ...
