from __future__ import annotations

"""
Repository d'accès aux clients.

Principes:
- Retourne des ClientRecord (dataclasses figées), jamais d'objets ORM : pas de
  suivi de modifications implicite côté appelant.
- Chaque écriture est UNE requête SQL commitée immédiatement (pas de
  transaction multi-lignes). Le RETURNING de cette requête décide
  "trouvé / introuvable", sans lecture préalable.
- Concurrence : sans version attendue, le dernier écrit gagne. Avec des
  versions attendues (If-Match), l'écriture est gardée par
  `WHERE version IN (...)` ; une course perdue donne ClientVersionConflictError
  si la ligne existe encore, ClientNotFoundError sinon.
- Les erreurs SQL ne sont jamais avalées : rollback puis re-raise.
"""

import logging
from typing import Collection, Optional

from sqlalchemy import delete, select, update
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from client_api.core.utils.datetime import ensure_utc
from client_api.domain.exceptions import ClientNotFoundError, ClientVersionConflictError
from client_api.domain.models import ClientFields, ClientRecord
from client_api.infrastructure.persistence.database.models.client import Client

logger = logging.getLogger(__name__)


def _to_record(row: Client) -> ClientRecord:
    return ClientRecord(
        id=row.id,
        name=row.name,
        email=row.email,
        became_customer_date=ensure_utc(row.became_customer_date),
        version=row.version,
    )


class ClientRepository:
    """CRUD sur la table clients."""

    def __init__(self, session: Session) -> None:
        self.s = session

    # ---------------------------
    # Lectures
    # ---------------------------

    def list_all(self) -> list[ClientRecord]:
        """Tous les clients, triés par id. Pas de filtre ni de pagination."""
        stmt = select(Client).order_by(Client.id).execution_options(populate_existing=True)
        return [_to_record(row) for row in self.s.scalars(stmt).all()]

    def get_by_id(self, client_id: int) -> Optional[ClientRecord]:
        """Le client, ou None s'il n'existe pas."""
        stmt = (
            select(Client)
            .where(Client.id == client_id)
            .execution_options(populate_existing=True)
        )
        row = self.s.scalars(stmt).one_or_none()
        return _to_record(row) if row is not None else None

    # ---------------------------
    # Écritures
    # ---------------------------

    def insert(self, client: ClientRecord) -> ClientRecord:
        """
        Persiste un nouveau client et le retourne tel que stocké.
        Un id absent (None ou 0) est attribué par la base.
        """
        row = Client(
            name=client.name,
            email=client.email,
            became_customer_date=ensure_utc(client.became_customer_date),
            version=1,
        )
        if client.id:
            row.id = client.id

        self.s.add(row)
        try:
            self.s.commit()
        except SQLAlchemyError:
            self.s.rollback()
            raise

        logger.info("Client %s created", row.id)
        return _to_record(row)

    def update(
        self,
        client_id: int,
        fields: ClientFields,
        *,
        expected_versions: Optional[Collection[int]] = None,
    ) -> ClientRecord:
        """
        Écrase name, email et became_customer_date, incrémente la version.

        Raises:
            ClientNotFoundError: aucun client avec cet id.
            ClientVersionConflictError: version stockée hors de `expected_versions`
                (la ligne reste inchangée).
        """
        t = Client.__table__
        stmt = (
            update(t)
            .where(t.c.id == client_id)
            .values(
                name=fields.name,
                email=fields.email,
                became_customer_date=fields.became_customer_date,
                version=t.c.version + 1,
            )
            .returning(*t.c)
        )
        if expected_versions is not None:
            stmt = stmt.where(t.c.version.in_(list(expected_versions)))

        try:
            row = self.s.execute(stmt).mappings().one_or_none()
            if row is None:
                self.s.rollback()
                self._raise_missing_or_conflict(client_id, expected_versions)
            self.s.commit()
        except SQLAlchemyError:
            self.s.rollback()
            raise

        logger.info("Client %s updated (version %s)", client_id, row["version"])
        return ClientRecord(**dict(row))

    def delete(
        self,
        client_id: int,
        *,
        expected_versions: Optional[Collection[int]] = None,
    ) -> None:
        """
        Supprime le client.

        Raises:
            ClientNotFoundError: aucun client avec cet id.
            ClientVersionConflictError: version stockée hors de `expected_versions`.
        """
        t = Client.__table__
        stmt = delete(t).where(t.c.id == client_id).returning(t.c.id)
        if expected_versions is not None:
            stmt = stmt.where(t.c.version.in_(list(expected_versions)))

        try:
            deleted_id = self.s.execute(stmt).scalar_one_or_none()
            if deleted_id is None:
                self.s.rollback()
                self._raise_missing_or_conflict(client_id, expected_versions)
            self.s.commit()
        except SQLAlchemyError:
            self.s.rollback()
            raise

        logger.info("Client %s deleted", client_id)

    # ---------------------------
    # Interne
    # ---------------------------

    def _raise_missing_or_conflict(
        self,
        client_id: int,
        expected_versions: Optional[Collection[int]],
    ) -> None:
        current = self.get_by_id(client_id) if expected_versions is not None else None
        if current is None:
            logger.info("Client %s not found", client_id)
            raise ClientNotFoundError(client_id)
        logger.warning(
            "Client %s version conflict (expected %s, actual %s)",
            client_id,
            list(expected_versions),
            current.version,
        )
        raise ClientVersionConflictError(client_id, list(expected_versions), current.version)
