# server/client_api/core/utils/datetime.py
"""server/client_api/core/utils/datetime.py
~~~~~~~~~~~~~~~~~~~~~~~~
Utilitaires pour la gestion des dates et heures.
"""

from datetime import datetime, timezone
from typing import Optional


def ensure_utc(dt: Optional[datetime]) -> Optional[datetime]:
    """Retourne le datetime en UTC "aware". Un datetime naïf est considéré comme UTC."""
    if dt is None:
        return None
    if dt.tzinfo is None:
        return dt.replace(tzinfo=timezone.utc)
    return dt.astimezone(timezone.utc)


def to_naive_utc(dt: Optional[datetime]) -> Optional[datetime]:
    """UTC sans tzinfo, pour les backends qui ne stockent pas le fuseau (SQLite)."""
    if dt is None:
        return None
    return ensure_utc(dt).replace(tzinfo=None)
