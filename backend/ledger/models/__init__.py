# backend/ledger/models/__init__.py
"""
Central model registry.

Import this once at startup (e.g., in main.py) so SQLAlchemy sees all mapped
classes before the metadata is used.
"""
from ledger.db import Base  # re-export Base
from .transactions import Transaction  # noqa: F401

__all__ = ["Base", "Transaction"]
