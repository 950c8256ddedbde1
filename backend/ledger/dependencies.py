"""
Shared FastAPI dependency helpers.

`get_db` hands each request its own SQLAlchemy session and makes sure it is
rolled back on failure and closed afterward. Tests swap it out through
``app.dependency_overrides``.
"""

from typing import Generator

from sqlalchemy.orm import Session

from ledger.db import SessionLocal


def get_db() -> Generator[Session, None, None]:
    """Yield a database session and close it after the request."""
    db = SessionLocal()
    try:
        yield db
    except Exception:
        db.rollback()
        raise
    finally:
        db.close()
