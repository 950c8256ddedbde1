# tests/conftest.py
import os

# Point the app at a throwaway database before anything imports ledger.db
os.environ["DATABASE_URL"] = "sqlite://"

import pytest  # noqa: E402
from fastapi.testclient import TestClient  # noqa: E402
from sqlalchemy import create_engine, event  # noqa: E402
from sqlalchemy.orm import sessionmaker  # noqa: E402
from sqlalchemy.pool import StaticPool  # noqa: E402

from ledger import dependencies  # noqa: E402
from ledger.main import app  # noqa: E402
from ledger.models import Base  # noqa: E402


@pytest.fixture
def engine():
    """One in-memory SQLite database per test, shared across threads."""
    eng = create_engine(
        "sqlite://",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    Base.metadata.create_all(eng)
    yield eng
    eng.dispose()


@pytest.fixture
def statements(engine):
    """Every SQL statement sent to the test database, in order."""
    seen = []

    @event.listens_for(engine, "before_cursor_execute")
    def _record(conn, cursor, statement, parameters, context, executemany):
        seen.append(statement)

    yield seen
    event.remove(engine, "before_cursor_execute", _record)


@pytest.fixture
def session_factory(engine, monkeypatch):
    """Point the real get_db dependency at the test database."""
    TestingSession = sessionmaker(autocommit=False, autoflush=False, bind=engine)
    monkeypatch.setattr(dependencies, "SessionLocal", TestingSession)
    return TestingSession


@pytest.fixture
def db(session_factory):
    with session_factory() as session:
        yield session


@pytest.fixture
def client(session_factory):
    with TestClient(app) as c:
        yield c
