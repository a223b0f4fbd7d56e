from __future__ import annotations

import logging

from fastapi import Depends, HTTPException
from pydantic import BaseModel

from app.service.core.errors import StorageError
from app.service.db.storage import PingRecordStorage, get_storage
from app.service.models.ping_record import PingRecord

log = logging.getLogger(__name__)


class PingOut(BaseModel):
    savedId: int
    totalRows: int


def ping_db(storage: PingRecordStorage = Depends(get_storage)) -> PingOut:
    """
    Пишет одну строку в ping_record и возвращает её id и общее число строк.
    totalRows считается после вставки, т.е. включает новую запись.
    """
    try:
        saved_id = storage.insert(PingRecord())
        total = storage.count()
    except StorageError as e:
        log.error("DB ping failed: %s", e, exc_info=True)
        # детали драйвера наружу не отдаём
        raise HTTPException(status_code=500, detail="Internal Server Error")
    return PingOut(savedId=saved_id, totalRows=total)
