from __future__ import annotations
"""server/client_api/domain/exceptions.py
~~~~~~~~~~~~~~~~~~~~~~~~
Erreurs métier levées par le repository, traduites en HTTP par core.middleware.
"""
from typing import Optional, Sequence


class ClientError(Exception):
    """Base des erreurs sur la ressource Client."""

    def __init__(self, client_id: int, message: str) -> None:
        super().__init__(message)
        self.client_id = client_id


class ClientNotFoundError(ClientError):
    def __init__(self, client_id: int) -> None:
        super().__init__(client_id, f"Client {client_id} not found")


class ClientVersionConflictError(ClientError):
    """La version stockée ne correspond à aucune des versions attendues (If-Match)."""

    def __init__(
        self,
        client_id: int,
        expected: Sequence[int],
        actual: Optional[int] = None,
    ) -> None:
        super().__init__(
            client_id,
            f"Client {client_id} version mismatch (expected {list(expected)}, actual {actual})",
        )
        self.expected = tuple(expected)
        self.actual = actual
