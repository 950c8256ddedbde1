# backend/ledger/db.py
import logging

from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker, declarative_base

from ledger.config import mask_url, settings

logger = logging.getLogger(__name__)

DATABASE_URL = settings.database_url
logger.info("DATABASE_URL = %s", mask_url(DATABASE_URL))

# SQLite needs this to be shared with FastAPI's threadpool workers
_connect_args = {"check_same_thread": False} if DATABASE_URL.startswith("sqlite") else {}

engine = create_engine(DATABASE_URL, echo=settings.sql_echo, connect_args=_connect_args)
SessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=engine)
Base = declarative_base()
