from __future__ import annotations
"""server/client_api/core/utils/etag.py
~~~~~~~~~~~~~~~~~~~~~~~~
ETag <-> version de ligne.

La version entière d'un client est exposée comme entity tag HTTP : `"3"`.
`If-Match` accepte `"3"`, `W/"3"`, une liste séparée par des virgules, ou `*`.
"""

from typing import Optional


def format_etag(version: int) -> str:
    return f'"{version}"'


def parse_if_match(header: Optional[str]) -> Optional[tuple[int, ...]]:
    """
    Traduit un en-tête If-Match en versions attendues.

    - None (absent) ou `*` -> None : aucune contrainte de version.
    - sinon -> tuple des versions lisibles ; les tags illisibles sont ignorés,
      un tuple vide ne correspond donc à aucune ligne (412).
    """
    if header is None:
        return None
    header = header.strip()
    if header == "*":
        return None

    versions: list[int] = []
    for raw in header.split(","):
        tag = raw.strip()
        if tag.startswith("W/"):
            tag = tag[2:]
        tag = tag.strip('"')
        if tag.isdigit():
            versions.append(int(tag))
    return tuple(versions)
