"""
Configuration de l'application - Settings Pydantic.

Responsabilite unique:
----------------------
Charger et valider la configuration depuis les variables d'env
(et le fichier .env s'il existe).

Variables:
----------
- ENV: development | production (logs JSON en production)
- DATABASE_URL: URL SQLAlchemy (defaut: SQLite local)
- REPOSITORY_BACKEND: sqlalchemy | memory
- LOG_LEVEL: DEBUG, INFO, WARNING, ERROR
- API_PREFIX: Prefixe des routes REST
"""

from functools import lru_cache
from typing import Literal

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """
    Configuration de l'application.

    Chargee depuis les variables d'environnement.
    """

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    env: Literal["development", "production", "test"] = "development"

    # Persistence
    database_url: str = "sqlite:///./taskboard.db"
    repository_backend: Literal["sqlalchemy", "memory"] = "sqlalchemy"

    # Logging
    log_level: str = "INFO"
    json_logs: bool | None = None

    # API
    api_title: str = "Taskboard API"
    api_version: str = "1.0.0"
    api_prefix: str = "/api/v1"

    # CORS
    cors_origins: list[str] = ["*"]

    @property
    def is_production(self) -> bool:
        return self.env == "production"

    @property
    def use_json_logs(self) -> bool:
        """JSON en production, sauf surcharge explicite via JSON_LOGS."""
        if self.json_logs is not None:
            return self.json_logs
        return self.is_production


@lru_cache
def get_settings() -> Settings:
    """Retourne la configuration (cached)."""
    return Settings()
