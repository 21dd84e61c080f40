from __future__ import annotations
"""server/client_api/api/v1/router.py
~~~~~~~~~~~~~~~~~~~~~~~~
Router principal API v1.
"""
from fastapi import APIRouter
from client_api.api.v1.endpoints import clients, health


api_router = APIRouter()
api_router.include_router(health.router, tags=["health"])
api_router.include_router(clients.router)
