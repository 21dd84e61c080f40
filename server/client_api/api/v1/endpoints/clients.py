from __future__ import annotations
"""
server/client_api/api/v1/endpoints/clients.py
~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~
CRUD /clients.

- GET    /clients        : 200 + liste complète
- GET    /clients/{id}   : 200 + client (ETag) | 404
- POST   /clients        : 201 + client créé, Location -> GET /clients/{id}
- PUT    /clients/{id}   : 204 (ETag) | 404 | 412 si If-Match ne correspond pas
- DELETE /clients/{id}   : 204 | 404 | 412 si If-Match ne correspond pas

Les erreurs métier (ClientNotFoundError, ClientVersionConflictError) sont
traduites en 404 / 412 (corps vide) par core.middleware.
"""

from typing import Optional

from fastapi import APIRouter, Depends, Header, Path, Request, Response, status
from sqlalchemy.orm import Session

from client_api.api.schemas.client import ClientIn, ClientOut
from client_api.core.utils.etag import format_etag, parse_if_match
from client_api.domain.exceptions import ClientNotFoundError
from client_api.infrastructure.persistence.database.session import get_db
from client_api.infrastructure.persistence.repositories.client_repository import ClientRepository

router = APIRouter(prefix="/clients", tags=["clients"])

_NOT_FOUND = {status.HTTP_404_NOT_FOUND: {"description": "Client not found"}}
_PRECONDITION = {status.HTTP_412_PRECONDITION_FAILED: {"description": "If-Match does not match the current version"}}

# Bornes de la colonne Integer : un id hors plage ne peut correspondre à aucune ligne
MAX_CLIENT_ID = 2**31 - 1


def get_client_repository(db: Session = Depends(get_db)) -> ClientRepository:
    return ClientRepository(db)


@router.get("", response_model=list[ClientOut])
def list_clients(repo: ClientRepository = Depends(get_client_repository)) -> list[ClientOut]:
    return [ClientOut.from_record(r) for r in repo.list_all()]


@router.get("/{client_id}", response_model=ClientOut, name="get_client", responses=_NOT_FOUND)
def get_client(
    response: Response,
    client_id: int = Path(..., ge=1, le=MAX_CLIENT_ID),
    repo: ClientRepository = Depends(get_client_repository),
) -> ClientOut:
    record = repo.get_by_id(client_id)
    if record is None:
        raise ClientNotFoundError(client_id)
    response.headers["ETag"] = format_etag(record.version)
    return ClientOut.from_record(record)


@router.post("", response_model=ClientOut, status_code=status.HTTP_201_CREATED)
def create_client(
    payload: ClientIn,
    request: Request,
    response: Response,
    repo: ClientRepository = Depends(get_client_repository),
) -> ClientOut:
    record = repo.insert(payload.to_record())
    response.headers["Location"] = str(request.url_for("get_client", client_id=record.id))
    response.headers["ETag"] = format_etag(record.version)
    return ClientOut.from_record(record)


@router.put(
    "/{client_id}",
    status_code=status.HTTP_204_NO_CONTENT,
    response_class=Response,
    responses={**_NOT_FOUND, **_PRECONDITION},
)
def update_client(
    payload: ClientIn,
    client_id: int = Path(..., ge=1, le=MAX_CLIENT_ID),
    if_match: Optional[str] = Header(default=None, alias="If-Match"),
    repo: ClientRepository = Depends(get_client_repository),
) -> Response:
    record = repo.update(
        client_id,
        payload.to_fields(),
        expected_versions=parse_if_match(if_match),
    )
    return Response(
        status_code=status.HTTP_204_NO_CONTENT,
        headers={"ETag": format_etag(record.version)},
    )


@router.delete(
    "/{client_id}",
    status_code=status.HTTP_204_NO_CONTENT,
    response_class=Response,
    responses={**_NOT_FOUND, **_PRECONDITION},
)
def delete_client(
    client_id: int = Path(..., ge=1, le=MAX_CLIENT_ID),
    if_match: Optional[str] = Header(default=None, alias="If-Match"),
    repo: ClientRepository = Depends(get_client_repository),
) -> Response:
    repo.delete(client_id, expected_versions=parse_if_match(if_match))
    return Response(status_code=status.HTTP_204_NO_CONTENT)
