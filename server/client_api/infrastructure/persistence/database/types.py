from __future__ import annotations
"""server/client_api/infrastructure/persistence/database/types.py
~~~~~~~~~~~~~~~~~~~~~~~~
Types de colonnes custom.
"""
from sqlalchemy import DateTime
from sqlalchemy.types import TypeDecorator

from client_api.core.utils.datetime import ensure_utc, to_naive_utc


class UTCDateTime(TypeDecorator):
    """
    Timestamp toujours renvoyé en UTC "aware".

    PostgreSQL (timestamptz) conserve le fuseau ; SQLite le perd. On stocke
    donc de l'UTC naïf côté SQLite et on ré-attache UTC à la lecture.
    """

    impl = DateTime(timezone=True)
    cache_ok = True

    def process_bind_param(self, value, dialect):
        if dialect.name == "sqlite":
            return to_naive_utc(value)
        return ensure_utc(value)

    def process_result_value(self, value, dialect):
        return ensure_utc(value)
