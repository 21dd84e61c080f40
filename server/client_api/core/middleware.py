from __future__ import annotations
"""server/client_api/core/middleware.py
~~~~~~~~~~~~~~~~~~~~~~~~
Middleware global + traduction des erreurs en réponses HTTP.

- ClientNotFoundError        -> 404, corps vide
- ClientVersionConflictError -> 412, corps vide (+ ETag courant si connu)
- SQLAlchemyError            -> 500 {"detail": "internal_error"} (loggé avec traceback)
- Toute autre exception      -> 500 par défaut de Starlette (requête loggée en ERROR puis re-raise)
"""
import logging
import time

from fastapi import FastAPI, Request, Response, status
from fastapi.responses import JSONResponse
from sqlalchemy.exc import SQLAlchemyError

from client_api.core.utils.etag import format_etag
from client_api.domain.exceptions import ClientNotFoundError, ClientVersionConflictError

logger = logging.getLogger(__name__)


async def _client_not_found(request: Request, exc: ClientNotFoundError) -> Response:
    return Response(status_code=status.HTTP_404_NOT_FOUND)


async def _client_version_conflict(request: Request, exc: ClientVersionConflictError) -> Response:
    headers = {"ETag": format_etag(exc.actual)} if exc.actual is not None else None
    return Response(status_code=status.HTTP_412_PRECONDITION_FAILED, headers=headers)


async def _storage_error(request: Request, exc: SQLAlchemyError) -> JSONResponse:
    logger.error(
        "Storage failure on %s %s",
        request.method,
        request.url.path,
        exc_info=exc,
    )
    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        content={"detail": "internal_error"},
    )


async def _log_requests(request: Request, call_next) -> Response:
    started = time.perf_counter()
    try:
        response = await call_next(request)
    except Exception:
        logger.exception(
            "%s %s -> unhandled error (%.1f ms)",
            request.method,
            request.url.path,
            (time.perf_counter() - started) * 1000,
        )
        raise
    logger.info(
        "%s %s -> %s (%.1f ms)",
        request.method,
        request.url.path,
        response.status_code,
        (time.perf_counter() - started) * 1000,
    )
    return response


def install_global_middleware(app: FastAPI) -> None:
    """À appeler avant le démarrage de l'app (Starlette refuse ensuite add_middleware)."""
    app.middleware("http")(_log_requests)
    app.add_exception_handler(ClientNotFoundError, _client_not_found)
    app.add_exception_handler(ClientVersionConflictError, _client_version_conflict)
    app.add_exception_handler(SQLAlchemyError, _storage_error)
