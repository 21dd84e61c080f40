from __future__ import annotations
"""
server/client_api/infrastructure/persistence/database/base.py

Base ORM SQLAlchemy 2.x.

L'import des modèles en bas de fichier est volontaire : il remplit
Base.metadata avec toutes les tables, pour que `Base.metadata.create_all`
(SQLite en tests, AUTO_CREATE_SCHEMA en dev) et Alembic voient le schéma complet.
"""

from sqlalchemy.orm import DeclarativeBase


class Base(DeclarativeBase):
    """Base declarative pour tous les modèles."""
    pass


from client_api.infrastructure.persistence.database.models import *  # noqa: F403,F401,E402

__all__ = ["Base"]
