"""
Base declarative SQLAlchemy commune a tous les modeles.
"""

from sqlalchemy.orm import DeclarativeBase


class Base(DeclarativeBase):
    """Base declarative des modeles ORM."""
