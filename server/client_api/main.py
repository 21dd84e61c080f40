from __future__ import annotations
"""server/client_api/main.py
~~~~~~~~~~~~~~~~~~~~~~~~
Point d'entrée FastAPI.

    uvicorn client_api.main:app
"""
import logging
from typing import List

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from client_api.api.v1.router import api_router
from client_api.core.config import settings
from client_api.core.logging import setup_logging
from client_api.core.middleware import install_global_middleware
from client_api.infrastructure.persistence.database.base import Base
from client_api.infrastructure.persistence.database.session import dispose_engine, init_engine

logger = logging.getLogger(__name__)

app = FastAPI(
    title="Client API",
    version="v1",
    docs_url="/swagger",
    openapi_url="/swagger/v1/swagger.json",
    redoc_url=None,
)

allow_origins: List[str] = []
if origins := settings.CORS_ALLOW_ORIGINS:
    allow_origins = [o.strip() for o in origins.split(",") if o.strip()]

app.add_middleware(
    CORSMiddleware,
    allow_origins=allow_origins or ["*"],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
    expose_headers=["Location", "ETag"],
)
install_global_middleware(app)


@app.on_event("startup")
def startup() -> None:
    setup_logging(settings.LOG_LEVEL)
    if settings.AUTO_CREATE_SCHEMA:
        logger.info("AUTO_CREATE_SCHEMA enabled: creating missing tables")
        Base.metadata.create_all(bind=init_engine())


@app.on_event("shutdown")
def shutdown() -> None:
    dispose_engine()


app.include_router(api_router, prefix=settings.API_PREFIX)
