from __future__ import annotations
"""server/client_api/core/config.py
~~~~~~~~~~~~~~~~~~~~~~~~
Paramètres (pydantic-settings).
"""

from typing import Optional
from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    # "Connection string" SQLAlchemy (PostgreSQL en prod, SQLite en dev/tests)
    DATABASE_URL: str = "postgresql+psycopg://postgres:postgres@db:5432/clients"
    DB_CONNECT_TIMEOUT: int = Field(5, ge=1)
    API_PREFIX: str = "/api"
    CORS_ALLOW_ORIGINS: Optional[str] = None
    LOG_LEVEL: str = "INFO"
    # Dev uniquement : create_all au démarrage au lieu d'alembic upgrade
    AUTO_CREATE_SCHEMA: bool = False

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=True,
        extra="ignore",
    )


settings = Settings()
