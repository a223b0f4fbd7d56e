from __future__ import annotations

import os

# окружение должно быть выставлено до импорта приложения
os.environ["DATABASE_URL"] = "sqlite://"
os.environ["DB_SCHEMA"] = ""
os.environ["DB_CREATE_SCHEMA"] = "false"
os.environ.setdefault("LOG_LEVEL", "DEBUG")

import pytest
from fastapi.testclient import TestClient
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import StaticPool

from app.service.app import app
from app.service.db.session import get_db, init_db


@pytest.fixture
def engine():
    """Отдельная in-memory база на каждый тест."""
    eng = create_engine(
        "sqlite://",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    init_db(eng)
    yield eng
    eng.dispose()


@pytest.fixture
def db_session(engine):
    session = sessionmaker(autocommit=False, autoflush=False, bind=engine)()
    try:
        yield session
    finally:
        session.close()


@pytest.fixture
def client(engine):
    SessionTest = sessionmaker(autocommit=False, autoflush=False, bind=engine)

    def _get_db():
        db = SessionTest()
        try:
            yield db
        finally:
            db.close()

    app.dependency_overrides[get_db] = _get_db
    try:
        yield TestClient(app)
    finally:
        app.dependency_overrides.clear()
