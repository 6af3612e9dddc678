"""
Infrastructure Layer - Adapters et configuration.

Cette couche contient:
    - config/: Settings pydantic-settings
    - logging/: structlog
    - persistence/: SQLAlchemy (DatabaseManager, modeles, repositories)
    - adapters/: Repositories in-memory
    - container.py: Cablage des dependances
"""

__all__ = []
