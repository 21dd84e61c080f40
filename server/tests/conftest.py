# server/tests/conftest.py
"""
Conftest *global* pour toute la suite de tests.

Points clés :
- Centralise l'option pytest --api (URL d'une stack lancée, tests d'intégration).
- Pour les tests @unit uniquement :
  - DATABASE_URL SQLite in-memory (jamais de Postgres en unit).
  - Monte une DB SQLite in-memory partagée + Base.metadata.create_all.
  - Purge toutes les tables après chaque test.
"""

import os

import pytest
import requests
from requests.adapters import HTTPAdapter
from urllib3.util.retry import Retry

from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import StaticPool


# ============================================================================
# Helpers
# ============================================================================
def _is_unit(request: pytest.FixtureRequest) -> bool:
    """True si le test courant est marqué @pytest.mark.unit."""
    return request.node.get_closest_marker("unit") is not None


# ============================================================================
# Options CLI & ENV (avant tout import client_api.*)
# ============================================================================
def pytest_addoption(parser):
    parser.addoption("--api", action="store", default=os.getenv("API", "http://localhost:8000"))


def pytest_configure(config) -> None:
    """
    S'exécute avant la collecte : Settings() est instancié à l'import de
    client_api.core.config, il doit donc voir une base SQLite.
    """
    os.environ.setdefault("DATABASE_URL", "sqlite+pysqlite:///:memory:")


# ============================================================================
# Fixtures communes : API + requests.Session avec retries
# ============================================================================
@pytest.fixture(scope="session")
def api_base(pytestconfig) -> str:
    return pytestconfig.getoption("--api").rstrip("/")


@pytest.fixture(scope="session")
def session_retry() -> requests.Session:
    """
    Session HTTP avec backoff & retries (intégration).
    """
    s = requests.Session()
    retries = Retry(
        total=3,
        backoff_factor=0.3,
        status_forcelist=(502, 503, 504),
        allowed_methods=frozenset({"GET", "PUT", "DELETE", "HEAD", "OPTIONS"}),
        raise_on_status=False,
    )
    s.mount("http://", HTTPAdapter(max_retries=retries))
    s.mount("https://", HTTPAdapter(max_retries=retries))
    return s


# ============================================================================
# UNIT-ONLY: DB SQLite in-memory partagée + Base.metadata.create_all
# ============================================================================
@pytest.fixture(scope="session")
def _sqlite_engine_unit():
    """
    Engine in-memory **partagé** entre connexions (StaticPool + check_same_thread=False).
    """
    engine = create_engine(
        "sqlite+pysqlite:///:memory:",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )

    from client_api.infrastructure.persistence.database.base import Base

    Base.metadata.create_all(engine)
    yield engine
    engine.dispose()


@pytest.fixture(scope="session")
def _Session_unit(_sqlite_engine_unit):
    """
    sessionmaker lié au moteur SQLite in-memory (mêmes options que l'app).
    """
    return sessionmaker(
        bind=_sqlite_engine_unit,
        autoflush=True,
        expire_on_commit=False,
    )


@pytest.fixture
def Session(request, _Session_unit):
    """
    sessionmaker à utiliser comme `with Session() as s:` pour les tests unitaires.
    Skippé s'il est injecté dans un test non marqué @unit.
    """
    if not _is_unit(request):
        pytest.skip("Session fixture is only available for unit tests")
    return _Session_unit


@pytest.fixture(autouse=True)
def _clear_db_between_unit_tests(request, _Session_unit):
    """
    Après chaque test unitaire, on vide toutes les tables.
    ⚠️ Générateur : doit 'yield' aussi hors unit.
    """
    if not _is_unit(request):
        yield
        return

    yield
    from client_api.infrastructure.persistence.database.base import Base

    with _Session_unit() as s:
        for table in reversed(Base.metadata.sorted_tables):
            s.execute(table.delete())
        s.commit()
