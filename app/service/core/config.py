from __future__ import annotations

import os
from functools import lru_cache
from pydantic import BaseModel, AnyUrl, Field
from dotenv import load_dotenv

load_dotenv()


def _env_bool(name: str, default: str) -> bool:
    return os.getenv(name, default).strip().lower() in ("1", "true", "yes", "on")


class Settings(BaseModel):
    # FastAPI / CORS
    DEBUG: bool = Field(default_factory=lambda: _env_bool("DEBUG", "true"))
    LOG_LEVEL: str = Field(default_factory=lambda: os.getenv("LOG_LEVEL", "INFO"))
    ALLOWED_ORIGINS: list[str] = Field(
        default_factory=lambda: [
            o.strip() for o in (os.getenv("ALLOWED_ORIGINS") or "*").split(",")
            if o.strip()
        ]
    )
    HOST: str = Field(default_factory=lambda: os.getenv("HOST", "0.0.0.0"))
    PORT: int = Field(default_factory=lambda: int(os.getenv("PORT", "8080")))

    # DB
    DATABASE_URL: AnyUrl | str = Field(
        default_factory=lambda: os.getenv(
            "DATABASE_URL", "postgresql+psycopg2://legacy:legacy_pass@db:5432/legacydb"
        )
    )
    # пустая строка -> схема по умолчанию (для SQLite только так)
    DB_SCHEMA: str = Field(default_factory=lambda: os.getenv("DB_SCHEMA", "public"))
    DB_CREATE_SCHEMA: bool = Field(default_factory=lambda: _env_bool("DB_CREATE_SCHEMA", "false"))

    # Pool
    SQL_POOL_SIZE: int = Field(default_factory=lambda: int(os.getenv("SQL_POOL_SIZE", "5")))
    SQL_MAX_OVERFLOW: int = Field(default_factory=lambda: int(os.getenv("SQL_MAX_OVERFLOW", "10")))
    SQL_POOL_TIMEOUT: int = Field(default_factory=lambda: int(os.getenv("SQL_POOL_TIMEOUT", "30")))
    SQL_POOL_RECYCLE: int = Field(default_factory=lambda: int(os.getenv("SQL_POOL_RECYCLE", "1800")))

    @property
    def is_sqlite(self) -> bool:
        return str(self.DATABASE_URL).startswith("sqlite")


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    """Возвращает кэшированный объект настроек."""
    return Settings()
