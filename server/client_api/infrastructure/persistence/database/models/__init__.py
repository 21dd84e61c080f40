from __future__ import annotations
"""server/client_api/infrastructure/persistence/database/models/__init__.py
~~~~~~~~~~~~~~~~~~~~~~~~
Modèles ORM (register for Alembic).
"""

from .client import Client

__all__ = ["Client"]
