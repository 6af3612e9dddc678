"""
Configuration de l'application.

Usage:
------
    from src.infrastructure.config import get_settings

    settings = get_settings()
    db = DatabaseManager(settings.database_url)
"""

from src.infrastructure.config.settings import Settings, get_settings

__all__ = ["Settings", "get_settings"]
