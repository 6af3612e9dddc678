"""
Modele SQLAlchemy pour les utilisateurs.

Tables:
-------
- users: Utilisateurs avec role

Le mot de passe est stocke tel que fourni par l'entite.
La colonne position (unique) donne l'ordre de stockage renvoye par list().
"""

from sqlalchemy import Column, DateTime, Index, Integer, String

from src.infrastructure.persistence.models.base import Base


class UserModel(Base):
    """
    Table users - Utilisateurs de l'application.

    Colonnes:
        id: Identifiant opaque (UUID serialise)
        position: Rang d'insertion (ordre de list())
        name: Nom affichable
        email: Adresse email
        password: Mot de passe
        role: Admin ou User
        created: Date de creation
        updated: Derniere modification (NULL si jamais modifie)
    """

    __tablename__ = "users"

    id = Column(String(64), primary_key=True)
    position = Column(Integer, nullable=False)
    name = Column(String(255), nullable=False)
    email = Column(String(255), nullable=False, index=True)
    password = Column(String(255), nullable=False)
    role = Column(String(20), nullable=False)
    created = Column(DateTime, nullable=False)
    updated = Column(DateTime, nullable=True)

    __table_args__ = (
        Index("idx_users_position", "position", unique=True),
    )
