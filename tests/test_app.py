"""Tests for app assembly: route table, settings, DB helpers."""

from __future__ import annotations

from sqlalchemy import create_engine, inspect

from app.service.core.config import Settings
from app.service.core.constants import PING_TABLE
from app.service.db.session import _engine_kwargs, check_connection, init_db
from app.service.routes.init import ROUTES, api_router, build_router


class TestRouteTable:
    def test_table_lists_both_endpoints(self):
        assert [(m, p) for m, p, _, _ in ROUTES] == [("GET", "/hello"), ("GET", "/db/ping")]

    def test_router_built_from_table(self):
        paths = {(r.path, tuple(sorted(r.methods))) for r in api_router.routes}
        assert ("/hello", ("GET",)) in paths
        assert ("/db/ping", ("GET",)) in paths

    def test_build_router_accepts_custom_table(self):
        router = build_router([("GET", "/x", lambda: {"ok": True}, {})])
        assert [r.path for r in router.routes] == ["/x"]


class TestSettings:
    def test_reads_environment(self, monkeypatch):
        monkeypatch.setenv("PORT", "9000")
        monkeypatch.setenv("DB_CREATE_SCHEMA", "yes")
        monkeypatch.setenv("ALLOWED_ORIGINS", "http://a, http://b,")

        s = Settings()

        assert s.PORT == 9000
        assert s.DB_CREATE_SCHEMA is True
        assert s.ALLOWED_ORIGINS == ["http://a", "http://b"]

    def test_postgres_url_gets_pool_options(self, monkeypatch):
        monkeypatch.setenv("DATABASE_URL", "postgresql+psycopg2://u:p@localhost:5432/x")
        kwargs = _engine_kwargs(Settings())

        assert kwargs["pool_size"] == Settings().SQL_POOL_SIZE
        assert "connect_args" not in kwargs

    def test_sqlite_url_skips_pool_options(self, monkeypatch):
        monkeypatch.setenv("DATABASE_URL", "sqlite://")
        kwargs = _engine_kwargs(Settings())

        assert "pool_size" not in kwargs
        assert kwargs["connect_args"] == {"check_same_thread": False}


class TestDbHelpers:
    def test_init_db_is_idempotent(self):
        eng = create_engine("sqlite://")
        init_db(eng)
        init_db(eng)
        assert PING_TABLE in inspect(eng).get_table_names()

    def test_check_connection_ok(self):
        assert check_connection(create_engine("sqlite://")) is True

    def test_check_connection_unreachable(self, tmp_path):
        eng = create_engine(f"sqlite:///{tmp_path / 'missing' / 'db.sqlite'}")
        assert check_connection(eng) is False


class TestLifespan:
    def test_startup_and_shutdown_with_unprovisioned_db(self, client):
        with client as c:
            assert c.get("/hello").status_code == 200
