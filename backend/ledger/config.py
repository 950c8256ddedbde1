# backend/ledger/config.py
"""
Runtime settings, read once from the environment.

A local ``.env`` file is honoured via python-dotenv, so ``DATABASE_URL`` and
friends can live next to the code in dev and come from the process
environment in production.
"""
from __future__ import annotations

import os
from dataclasses import dataclass, field
from typing import List

from dotenv import load_dotenv

load_dotenv()

DEFAULT_CORS_ORIGINS = (
    "http://localhost:3000",
    "http://127.0.0.1:3000",
    "http://localhost:5173",
    "http://127.0.0.1:5173",
)


def _env_flag(name: str, default: str = "false") -> bool:
    return os.getenv(name, default).lower() in {"1", "true", "yes", "on"}


def _env_list(name: str, default: tuple[str, ...]) -> List[str]:
    raw = os.getenv(name)
    if not raw:
        return list(default)
    return [item.strip() for item in raw.split(",") if item.strip()]


@dataclass(frozen=True)
class Settings:
    database_url: str = field(
        default_factory=lambda: os.getenv("DATABASE_URL", "sqlite:///./ledger.db")
    )
    sql_echo: bool = field(default_factory=lambda: _env_flag("SQL_ECHO"))
    cors_origins: List[str] = field(
        default_factory=lambda: _env_list("CORS_ORIGINS", DEFAULT_CORS_ORIGINS)
    )
    log_level: str = field(default_factory=lambda: os.getenv("LOG_LEVEL", "INFO").upper())
    tz: str = field(default_factory=lambda: os.getenv("TZ", "UTC"))


def mask_url(url: str | None) -> str | None:
    """Hide the password part of a database URL before it reaches a log line."""
    if not url or "://" not in url or "@" not in url:
        return url
    scheme, rest = url.split("://", 1)
    creds, host = rest.rsplit("@", 1)
    if ":" in creds:
        creds = creds.split(":", 1)[0] + ":***"
    return f"{scheme}://{creds}@{host}"


def db_driver_from_url(url: str | None) -> str | None:
    if not url or "://" not in url:
        return None
    scheme = url.split("://", 1)[0]  # e.g., "postgresql+psycopg2"
    if "+" in scheme:
        return scheme.split("+", 1)[1]  # "psycopg2"
    return scheme  # fallback


settings = Settings()
