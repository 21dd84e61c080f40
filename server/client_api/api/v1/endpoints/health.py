from __future__ import annotations
"""server/client_api/api/v1/endpoints/health.py
~~~~~~~~~~~~~~~~~~~~~~~~
Health check (API + base).
"""
import logging

from fastapi import APIRouter, Depends, status
from fastapi.responses import JSONResponse
from sqlalchemy import text
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from client_api.infrastructure.persistence.database.session import get_db

logger = logging.getLogger(__name__)

router = APIRouter()


@router.get("/health", response_model=None)
def health(db: Session = Depends(get_db)) -> dict[str, str] | JSONResponse:
    try:
        db.execute(text("SELECT 1"))
    except SQLAlchemyError:
        logger.warning("health: database unreachable", exc_info=True)
        return JSONResponse(
            status_code=status.HTTP_503_SERVICE_UNAVAILABLE,
            content={"status": "degraded", "database": "error"},
        )
    return {"status": "ok", "database": "ok"}
