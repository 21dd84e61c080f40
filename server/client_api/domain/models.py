# server/client_api/domain/models.py
from __future__ import annotations
"""
Enregistrements métier (simples dataclasses) échangés entre repository et API.
Indépendants de l'ORM : aucune modification implicite, chaque écriture passe
par un appel explicite au repository.
"""
from dataclasses import dataclass
from datetime import datetime
from typing import Optional


@dataclass(frozen=True)
class ClientFields:
    """Champs modifiables d'un client (écrasés en bloc par un update)."""
    name: Optional[str] = None
    email: Optional[str] = None
    became_customer_date: Optional[datetime] = None


@dataclass(frozen=True)
class ClientRecord:
    id: Optional[int]
    name: Optional[str] = None
    email: Optional[str] = None
    became_customer_date: Optional[datetime] = None
    version: int = 1

    def fields(self) -> ClientFields:
        return ClientFields(
            name=self.name,
            email=self.email,
            became_customer_date=self.became_customer_date,
        )
