# server/tests/unit/conftest.py
# ─────────────────────────────────────────────────────────────────────────────
# Conftest pour les TESTS UNITAIRES.
#
# - `repo`    : ClientRepository sur une session SQLite in-memory.
# - `api`     : TestClient dont la dépendance get_db pointe sur la même base.
# - `make_client` : insère un client directement via le repository.
# ─────────────────────────────────────────────────────────────────────────────

from __future__ import annotations

import datetime as dt

import pytest
from fastapi.testclient import TestClient

from client_api.domain.models import ClientRecord
from client_api.infrastructure.persistence.database.session import get_db as real_get_db
from client_api.infrastructure.persistence.repositories.client_repository import ClientRepository
from client_api.main import app

T0 = dt.datetime(2024, 1, 15, 10, 30, tzinfo=dt.timezone.utc)


@pytest.fixture
def db(Session):
    with Session() as s:
        yield s


@pytest.fixture
def repo(db) -> ClientRepository:
    return ClientRepository(db)


@pytest.fixture
def api(Session):
    """TestClient avec get_db -> session SQLite de test."""
    def _get_db_for_tests():
        s = Session()
        try:
            yield s
        finally:
            s.close()

    app.dependency_overrides[real_get_db] = _get_db_for_tests
    try:
        yield TestClient(app)
    finally:
        app.dependency_overrides.pop(real_get_db, None)


@pytest.fixture
def make_client(Session):
    """Insère un client (id optionnel) dans sa propre session et le retourne."""
    def _make(**overrides) -> ClientRecord:
        data = {
            "id": None,
            "name": "Client 1",
            "email": "client1@test.com",
            "became_customer_date": T0,
        }
        data.update(overrides)
        with Session() as s:
            return ClientRepository(s).insert(ClientRecord(**data))
    return _make
