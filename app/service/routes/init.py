from __future__ import annotations

from typing import Any, Callable

from fastapi import APIRouter
from fastapi.responses import PlainTextResponse

from .db_ping import PingOut, ping_db
from .hello import hello

# (method, path, handler, extra options for add_api_route)
ROUTES: list[tuple[str, str, Callable[..., Any], dict[str, Any]]] = [
    ("GET", "/hello", hello, {"response_class": PlainTextResponse, "tags": ["hello"]}),
    ("GET", "/db/ping", ping_db, {"response_model": PingOut, "tags": ["db"]}),
]


def build_router(routes=ROUTES) -> APIRouter:
    router = APIRouter()
    for method, path, endpoint, options in routes:
        router.add_api_route(path, endpoint, methods=[method], **options)
    return router


api_router = build_router()
