from __future__ import annotations
"""server/client_api/infrastructure/persistence/database/models/client.py
~~~~~~~~~~~~~~~~~~~~~~~~
Table clients.
"""
import datetime as dt

from sqlalchemy import Integer, String
from sqlalchemy.orm import Mapped, mapped_column

from client_api.infrastructure.persistence.database.base import Base
from client_api.infrastructure.persistence.database.types import UTCDateTime


class Client(Base):
    __tablename__ = "clients"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    name: Mapped[str | None] = mapped_column(String(255), nullable=True)
    email: Mapped[str | None] = mapped_column(String(255), nullable=True)
    became_customer_date: Mapped[dt.datetime | None] = mapped_column(UTCDateTime(), nullable=True)
    # Jeton de concurrence optimiste (exposé en ETag), incrémenté à chaque update
    version: Mapped[int] = mapped_column(Integer, nullable=False, default=1, server_default="1")
