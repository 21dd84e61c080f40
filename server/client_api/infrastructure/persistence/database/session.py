# server/client_api/infrastructure/persistence/database/session.py
from __future__ import annotations

"""SQLAlchemy engine/session setup + FastAPI dependency."""

from typing import Iterator

from sqlalchemy import create_engine
from sqlalchemy.engine import Engine
from sqlalchemy.engine.url import make_url
from sqlalchemy.orm import Session, sessionmaker
from sqlalchemy.pool import StaticPool

from client_api.core.config import settings

_engine: Engine | None = None
_SessionLocal: sessionmaker | None = None


def init_engine(database_url: str | None = None) -> Engine:
    """
    Create a singleton SQLAlchemy Engine, with dialect-aware connect_args.
    - PostgreSQL: pass connect_timeout
    - SQLite: share in-memory DB across connections (StaticPool), disable same-thread check
    """
    global _engine
    if _engine is not None:
        return _engine

    url = make_url(database_url or settings.DATABASE_URL)
    backend = url.get_backend_name()  # e.g. "postgresql", "sqlite"
    kwargs: dict = dict(pool_pre_ping=True)
    connect_args: dict = {}

    if backend.startswith("postgresql"):
        connect_args["connect_timeout"] = settings.DB_CONNECT_TIMEOUT
    elif backend.startswith("sqlite"):
        connect_args["check_same_thread"] = False
        if (url.database or "").strip() in ("", ":memory:"):
            kwargs["poolclass"] = StaticPool

    _engine = create_engine(url, connect_args=connect_args, **kwargs)
    return _engine


def init_sessionmaker() -> sessionmaker:
    """Create (once) and return the SessionLocal factory."""
    global _SessionLocal
    if _SessionLocal is None:
        _SessionLocal = sessionmaker(
            bind=init_engine(),
            autoflush=True,
            expire_on_commit=False,
        )
    return _SessionLocal


def dispose_engine() -> None:
    """Close pooled connections and forget the singletons (shutdown, tests)."""
    global _engine, _SessionLocal
    if _engine is not None:
        _engine.dispose()
    _engine = None
    _SessionLocal = None


def get_session() -> Session:
    """Return a new Session (caller is responsible for closing it)."""
    return init_sessionmaker()()


# FastAPI dependency (auto-close): one Session per HTTP request
def get_db() -> Iterator[Session]:
    """
    Usage:
        def endpoint(db: Session = Depends(get_db)): ...
    """
    db = get_session()
    try:
        yield db
    finally:
        db.close()
