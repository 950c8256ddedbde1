# ledger/api/system.py
from __future__ import annotations

from datetime import datetime
from zoneinfo import ZoneInfo

from fastapi import APIRouter
from sqlalchemy import text

from ledger import __version__
from ledger.config import db_driver_from_url, settings
from ledger.db import engine

router = APIRouter(tags=["ops"])


@router.get("/health")
def health():
    """Liveness check with a lightweight DB probe and local time."""
    now_local = datetime.now(ZoneInfo(settings.tz)).isoformat()

    db = {"status": "ok", "driver": db_driver_from_url(settings.database_url)}
    try:
        with engine.connect() as conn:
            conn.execute(text("SELECT 1"))
    except Exception as e:
        db["status"] = f"error: {type(e).__name__}"

    return {
        "status": "ok",
        "time": {"tz": settings.tz, "now": now_local},
        "db": db,
    }


@router.get("/version")
def version():
    """Minimal runtime info; confirms DB driver for the UI."""
    return {
        "app": "Session Ledger",
        "version": __version__,
        "db_driver": db_driver_from_url(settings.database_url),
        "tz": settings.tz,
    }
