"""
Слой хранения PingRecord.

Две операции: insert() и count(). Любая ошибка SQLAlchemy превращается
в StorageError, повторов нет.
"""

from __future__ import annotations

import logging

from fastapi import Depends
from sqlalchemy import func
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from app.service.core.errors import StorageError
from app.service.db.session import get_db
from app.service.models.ping_record import PingRecord

log = logging.getLogger(__name__)


class PingRecordStorage:
    def __init__(self, db: Session):
        self.db = db

    def insert(self, record: PingRecord) -> int:
        """Сохраняет запись и возвращает присвоенный БД id."""
        try:
            self.db.add(record)
            self.db.commit()
            self.db.refresh(record)
        except SQLAlchemyError as e:
            self.db.rollback()
            raise StorageError("failed to insert ping record") from e
        log.debug("Saved %r", record)
        return int(record.id)

    def count(self) -> int:
        try:
            total = self.db.query(func.count(PingRecord.id)).scalar()
        except SQLAlchemyError as e:
            self.db.rollback()
            raise StorageError("failed to count ping records") from e
        return int(total or 0)


def get_storage(db: Session = Depends(get_db)) -> PingRecordStorage:
    return PingRecordStorage(db)
