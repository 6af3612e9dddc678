"""
Entity - Base commune des entites du domaine.

Responsabilite unique:
----------------------
Porter l'identite (id) et l'historique de mutation (created/updated).

Regles:
-------
- id: chaine opaque non vide, immuable apres creation
- created: fixe a la construction, ne change jamais
- updated: None jusqu'a la premiere mutation reussie, puis "maintenant"
  a chaque mutation reussie. Une mutation rejetee ne touche pas updated.
"""

from datetime import datetime
from typing import Optional

from src.domain.exceptions import InvalidIdError
from src.domain.value_objects.entity_id import is_valid_entity_id, new_entity_id


class Entity:
    """
    Base des entites identifiees et horodatees.

    Les sous-classes valident leurs propres champs apres l'id,
    dans l'ordre declare par chaque entite.
    """

    __slots__ = ("_id", "_created", "_updated")

    def __init__(
        self,
        id: Optional[str] = None,
        created: Optional[datetime] = None,
        updated: Optional[datetime] = None,
    ) -> None:
        if id is None:
            id = new_entity_id()
        elif not self.is_valid_id(id):
            raise InvalidIdError(id)

        self._id = id
        self._created = created or datetime.now()
        # Meme regle que _touch(): updated ne precede jamais created
        if updated is not None and updated < self._created:
            updated = self._created
        self._updated = updated

    @staticmethod
    def is_valid_id(id: object) -> bool:
        """True si l'identifiant est une chaine non vide."""
        return is_valid_entity_id(id)

    @property
    def id(self) -> str:
        return self._id

    @property
    def created(self) -> datetime:
        return self._created

    @property
    def updated(self) -> Optional[datetime]:
        return self._updated

    def _touch(self) -> None:
        """Marque l'entite comme modifiee."""
        now = datetime.now()
        # updated ne peut jamais preceder created (horloge murale non monotone)
        self._updated = now if now >= self._created else self._created

    def __eq__(self, other: object) -> bool:
        """Compare par ID."""
        if type(other) is type(self):
            return self._id == other._id
        return NotImplemented

    def __hash__(self) -> int:
        return hash((type(self).__name__, self._id))
