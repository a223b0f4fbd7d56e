from __future__ import annotations

import logging
from typing import Any

from sqlalchemy import create_engine, text
from sqlalchemy.engine import Engine
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import sessionmaker

from app.service.core.config import Settings, get_settings
from app.service.db.base import Base

log = logging.getLogger(__name__)


def _engine_kwargs(s: Settings) -> dict[str, Any]:
    kwargs: dict[str, Any] = {"pool_pre_ping": True, "future": True}
    if s.is_sqlite:
        # у SQLite свой пул, размеры пула ему не передаём
        kwargs["connect_args"] = {"check_same_thread": False}
        return kwargs
    kwargs.update(
        pool_recycle=s.SQL_POOL_RECYCLE,
        pool_size=s.SQL_POOL_SIZE,
        max_overflow=s.SQL_MAX_OVERFLOW,
        pool_timeout=s.SQL_POOL_TIMEOUT,
    )
    return kwargs


s = get_settings()

engine = create_engine(str(s.DATABASE_URL), **_engine_kwargs(s))

SessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=engine)

def get_db():
    db = SessionLocal()
    try:
        yield db
    finally:
        db.close()


def init_db(bind: Engine) -> None:
    """Создаёт таблицу ping_record, если её ещё нет."""
    # регистрирует модель в Base.metadata
    from app.service.models.ping_record import PingRecord  # noqa: F401

    Base.metadata.create_all(bind=bind, checkfirst=True)


def check_connection(bind: Engine) -> bool:
    try:
        with bind.connect() as conn:
            conn.execute(text("SELECT 1"))
    except SQLAlchemyError as e:
        log.warning("DB is not reachable: %s", e)
        return False
    log.info("DB connected: %s", bind.url.render_as_string(hide_password=True))
    return True
