from __future__ import annotations

import uuid

from sqlalchemy import Column, DateTime, Numeric, String, Uuid, func

from ledger.db import Base


# ---- Model -------------------------------------------------------------------
class Transaction(Base):
    __tablename__ = "transactions"

    id = Column(Uuid, primary_key=True, default=uuid.uuid4)

    # Core
    title = Column(String, nullable=False)
    # Signed: credits are stored positive, debits negative. There is no type column.
    amount = Column(Numeric(10, 2), nullable=False)

    # Owning anonymous session (from the sessionId cookie)
    session_id = Column(Uuid, nullable=False, index=True)

    created_at = Column(DateTime(timezone=True), nullable=False, server_default=func.now())
