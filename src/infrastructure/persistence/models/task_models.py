"""
Modele SQLAlchemy pour les taches.

owner_id et assignee_id sont de simples references vers users.id,
sans contrainte de cle etrangere: la resolution se fait hors du
stockage des taches.
"""

from sqlalchemy import Column, DateTime, Index, Integer, String, Text

from src.infrastructure.persistence.models.base import Base


class TaskModel(Base):
    """
    Table tasks - Taches.

    Colonnes:
        id: Identifiant opaque
        position: Rang d'insertion (ordre de list())
        title, description, status: Champs metier
        owner_id: ID du createur
        assignee_id: ID de l'assigne (NULL si non assignee)
        start_date, end_date: Dates prevues (optionnelles)
        created, updated: Horodatage
    """

    __tablename__ = "tasks"

    id = Column(String(64), primary_key=True)
    position = Column(Integer, nullable=False)
    title = Column(String(255), nullable=False)
    description = Column(Text, nullable=False)
    status = Column(String(50), nullable=False, index=True)
    owner_id = Column(String(64), nullable=False, index=True)
    assignee_id = Column(String(64), nullable=True, index=True)
    start_date = Column(DateTime, nullable=True)
    end_date = Column(DateTime, nullable=True)
    created = Column(DateTime, nullable=False)
    updated = Column(DateTime, nullable=True)

    __table_args__ = (
        Index("idx_tasks_position", "position", unique=True),
    )
