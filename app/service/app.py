from __future__ import annotations

import logging
from contextlib import asynccontextmanager
from typing import AsyncIterator

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from app.service.core.config import get_settings
from app.service.db.session import check_connection, engine, init_db

from app.service.routes.init import api_router

settings = get_settings()
log = logging.getLogger("startup")


def setup_logging() -> None:
    logging.basicConfig(
        level=getattr(logging, settings.LOG_LEVEL.upper(), logging.INFO),
        format="%(asctime)s %(levelname)s [%(name)s] %(message)s",
    )


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncIterator[None]:
    # недоступная БД не роняет процесс: /db/ping просто ответит 500
    if check_connection(engine) and settings.DB_CREATE_SCHEMA:
        init_db(engine)
        log.info("Schema ensured (DB_CREATE_SCHEMA=true)")
    yield
    engine.dispose()
    log.info("Server shutdown")

def create_app() -> FastAPI:
    setup_logging()
    app = FastAPI(lifespan=lifespan, title="Legacy Service API", version="0.1.0")

    allow_credentials = not ("*" in settings.ALLOWED_ORIGINS)
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.ALLOWED_ORIGINS if settings.ALLOWED_ORIGINS else ["*"],
        allow_credentials=allow_credentials,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    # Роутеры
    app.include_router(api_router)

    return app

app = create_app()
