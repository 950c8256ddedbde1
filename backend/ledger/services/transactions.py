# ledger/services/transactions.py
from __future__ import annotations

import uuid
from decimal import Decimal
from typing import List, Optional

from sqlalchemy import func, select
from sqlalchemy.orm import Session

from ledger.models.transactions import Transaction
from ledger.schemas.transactions import TransactionCreate


def create_transaction(db: Session, session_id: uuid.UUID, tx: TransactionCreate) -> Transaction:
    db_tx = Transaction(
        id=uuid.uuid4(),
        title=tx.title,
        amount=tx.signed_amount(),
        session_id=session_id,
    )
    db.add(db_tx)
    db.commit()
    return db_tx


def list_transactions(db: Session, session_id: uuid.UUID) -> List[Transaction]:
    stmt = select(Transaction).where(Transaction.session_id == session_id)
    return list(db.execute(stmt).scalars().all())


def get_transaction(db: Session, session_id: uuid.UUID, tx_id: uuid.UUID) -> Optional[Transaction]:
    # Both filters: an id from another session must look exactly like a missing one.
    stmt = select(Transaction).where(
        Transaction.id == tx_id,
        Transaction.session_id == session_id,
    )
    return db.execute(stmt).scalars().first()


def summarize(db: Session, session_id: uuid.UUID) -> Decimal:
    """Sum of the session's signed amounts; zero when it has no rows."""
    stmt = (
        select(func.coalesce(func.sum(Transaction.amount), 0))
        .where(Transaction.session_id == session_id)
    )
    return db.execute(stmt).scalar_one()
