from __future__ import annotations

from datetime import datetime, timezone
from typing import Any

from sqlalchemy import BigInteger, DateTime, Integer
from sqlalchemy.orm import Mapped, mapped_column

from app.service.core.constants import PING_TABLE
from app.service.db.base import Base


class PingRecord(Base):
    __tablename__ = PING_TABLE

    # BIGINT identity; в SQLite автоинкремент работает только для INTEGER
    id: Mapped[int] = mapped_column(
        BigInteger().with_variant(Integer(), "sqlite"),
        primary_key=True,
        autoincrement=True,
    )
    created_at: Mapped[datetime] = mapped_column(DateTime(timezone=True), nullable=False)

    def __init__(self, **kwargs: Any) -> None:
        # время фиксируется при создании объекта, а не при flush
        kwargs.setdefault("created_at", datetime.now(timezone.utc))
        super().__init__(**kwargs)

    def __repr__(self) -> str:
        return f"PingRecord(id={self.id!r}, created_at={self.created_at!r})"
