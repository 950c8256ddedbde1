# ledger/schemas/transactions.py
from __future__ import annotations

import uuid
from datetime import datetime
from decimal import Decimal
from enum import Enum
from typing import List, Optional

from pydantic import BaseModel, ConfigDict, Field, field_serializer, field_validator

# Mirrors the Numeric(10, 2) amount column
AMOUNT_PLACES = 2
AMOUNT_LIMIT = Decimal(10) ** 8


class TransactionType(str, Enum):
    credit = "credit"
    debit = "debit"


class TransactionCreate(BaseModel):
    title: str = Field(..., min_length=1)
    # JSON numbers only: no numeric strings, no booleans, no NaN/Infinity
    amount: float = Field(..., strict=True, allow_inf_nan=False)
    type: TransactionType

    @field_validator("amount")
    @classmethod
    def _fits_column(cls, v: float) -> float:
        value = Decimal(str(v))
        if value.as_tuple().exponent < -AMOUNT_PLACES:
            raise ValueError(f"amount must have at most {AMOUNT_PLACES} decimal places")
        if abs(value) >= AMOUNT_LIMIT:
            raise ValueError(f"amount must be smaller than {AMOUNT_LIMIT} in magnitude")
        return v

    def signed_amount(self) -> Decimal:
        """Amount as it is stored: positive for credit, negated for debit."""
        value = Decimal(str(self.amount))
        return value if self.type is TransactionType.credit else -value


class TransactionRead(BaseModel):
    id: uuid.UUID
    title: str
    amount: Decimal | float
    session_id: uuid.UUID
    created_at: Optional[datetime] = None

    model_config = ConfigDict(from_attributes=True)

    # ensure JSON returns a number, not a string
    @field_serializer("amount")
    def _serialize_amount(self, v: Decimal | float):
        return float(v) if v is not None else v


class TransactionList(BaseModel):
    transactions: List[TransactionRead]


class TransactionLookup(BaseModel):
    # None means "no such transaction in this session"
    transactions: Optional[TransactionRead] = None


class Summary(BaseModel):
    amount: float = 0.0


class SummaryResponse(BaseModel):
    summary: Summary
