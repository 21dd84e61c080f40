from __future__ import annotations
"""
server/client_api/api/schemas/client.py
~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~
Pydantic schemas pour les clients.

- JSON en camelCase (`becameCustomerDate`), snake_case accepté en entrée.
- Aucun champ obligatoire en entrée : tout corps JSON objet est accepté,
  les champs inconnus sont ignorés, l'`id` du corps est ignoré.
- Aucune validation de format (email libre, nom libre).
"""

import datetime as dt

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

from client_api.domain.models import ClientFields, ClientRecord


class ClientBase(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    name: str | None = None
    email: str | None = None
    became_customer_date: dt.datetime | None = None


class ClientIn(ClientBase):
    """Payload de création / mise à jour."""

    # Accepté pour compatibilité avec les clients qui renvoient l'objet complet.
    id: int | None = Field(default=None, description="Ignored: assigned by storage.")

    model_config = ConfigDict(
        json_schema_extra={
            "example": {
                "name": "Client 1",
                "email": "client1@test.com",
                "becameCustomerDate": "2024-01-15T10:30:00Z",
            }
        }
    )

    def to_fields(self) -> ClientFields:
        return ClientFields(
            name=self.name,
            email=self.email,
            became_customer_date=self.became_customer_date,
        )

    def to_record(self) -> ClientRecord:
        return ClientRecord(id=None, **vars(self.to_fields()))


class ClientOut(ClientBase):
    id: int

    @classmethod
    def from_record(cls, record: ClientRecord) -> "ClientOut":
        return cls(
            id=record.id,
            name=record.name,
            email=record.email,
            became_customer_date=record.became_customer_date,
        )
