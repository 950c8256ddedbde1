from __future__ import annotations

import logging
import uuid

from fastapi import APIRouter, Depends, Response, status
from sqlalchemy.orm import Session

from ledger.dependencies import get_db
from ledger.schemas.transactions import (
    Summary,
    SummaryResponse,
    TransactionCreate,
    TransactionList,
    TransactionLookup,
    TransactionRead,
)
from ledger.services import transactions as svc
from ledger.session import SessionContext, require_session, resolve_session

router = APIRouter(prefix="/transactions", tags=["Transactions"])
logger = logging.getLogger(__name__)


# --- endpoints ---------------------------------------------------------------
# Both "/transactions" and "/transactions/" answer directly, without a redirect.
@router.get("", response_model=TransactionList, include_in_schema=False)
@router.get("/", response_model=TransactionList, summary="List this session's transactions")
def list_transactions(
    session: SessionContext = Depends(require_session),
    db: Session = Depends(get_db),
) -> TransactionList:
    rows = svc.list_transactions(db, session.session_id)
    return TransactionList(transactions=[TransactionRead.model_validate(r) for r in rows])


# Must stay above "/{tx_id}" so the literal path is matched first.
@router.get("/summary", response_model=SummaryResponse, summary="Sum of this session's amounts")
def get_summary(
    session: SessionContext = Depends(require_session),
    db: Session = Depends(get_db),
) -> SummaryResponse:
    total = svc.summarize(db, session.session_id)
    return SummaryResponse(summary=Summary(amount=float(total)))


@router.get("/{tx_id}", response_model=TransactionLookup)
def get_transaction(
    tx_id: uuid.UUID,
    session: SessionContext = Depends(require_session),
    db: Session = Depends(get_db),
) -> TransactionLookup:
    tx = svc.get_transaction(db, session.session_id, tx_id)
    # Not found is an empty payload, not a 404
    return TransactionLookup(transactions=TransactionRead.model_validate(tx) if tx else None)


@router.post(
    "",
    status_code=status.HTTP_201_CREATED,
    response_class=Response,
    include_in_schema=False,
)
@router.post(
    "/",
    status_code=status.HTTP_201_CREATED,
    response_class=Response,
    summary="Record a credit or debit",
)
def create_transaction(
    payload: TransactionCreate,
    session: SessionContext = Depends(resolve_session),
    db: Session = Depends(get_db),
) -> None:
    svc.create_transaction(db, session.session_id, payload)
    logger.info(
        "create_transaction session=%s type=%s new_session=%s",
        session.session_id,
        payload.type.value,
        session.created,
    )
