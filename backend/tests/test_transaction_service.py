import uuid
from decimal import Decimal

import pytest
from pydantic import ValidationError

from ledger.schemas.transactions import TransactionCreate, TransactionType
from ledger.services import transactions as svc


def _create(db, session_id, title, amount, type_):
    payload = TransactionCreate(title=title, amount=amount, type=type_)
    return svc.create_transaction(db, session_id, payload)


class TestSignedAmount:
    def test_credit_keeps_sign(self):
        tx = TransactionCreate(title="Salary", amount=1000, type="credit")
        assert tx.type is TransactionType.credit
        assert tx.signed_amount() == Decimal("1000")

    def test_debit_is_negated(self):
        tx = TransactionCreate(title="Rent", amount=400, type="debit")
        assert tx.signed_amount() == Decimal("-400")

    def test_fractional_amount_has_no_float_noise(self):
        tx = TransactionCreate(title="Coffee", amount=3.1, type="debit")
        assert tx.signed_amount() == Decimal("-3.1")

    @pytest.mark.parametrize("amount", ["12", None, float("nan"), float("inf")])
    def test_non_numeric_amount_is_rejected(self, amount):
        with pytest.raises(ValidationError):
            TransactionCreate(title="Bad", amount=amount, type="credit")

    def test_unknown_type_is_rejected(self):
        with pytest.raises(ValidationError) as exc:
            TransactionCreate(title="Bad", amount=1, type="transfer")
        assert exc.value.errors()[0]["loc"] == ("type",)


def test_list_only_returns_own_session(db):
    mine, theirs = uuid.uuid4(), uuid.uuid4()
    _create(db, mine, "Salary", 1000, "credit")
    _create(db, theirs, "Other", 5, "credit")

    rows = svc.list_transactions(db, mine)
    assert [r.title for r in rows] == ["Salary"]
    assert all(r.session_id == mine for r in rows)


def test_ids_are_unique_across_sessions(db):
    a = _create(db, uuid.uuid4(), "A", 1, "credit")
    b = _create(db, uuid.uuid4(), "B", 1, "credit")
    assert a.id != b.id


def test_get_requires_matching_session(db):
    owner = uuid.uuid4()
    tx = _create(db, owner, "Salary", 1000, "credit")

    assert svc.get_transaction(db, owner, tx.id).title == "Salary"
    assert svc.get_transaction(db, uuid.uuid4(), tx.id) is None


def test_summarize(db):
    session_id = uuid.uuid4()
    assert svc.summarize(db, session_id) == Decimal("0")

    _create(db, session_id, "Salary", 1000, "credit")
    _create(db, session_id, "Rent", 400, "debit")
    assert svc.summarize(db, session_id) == Decimal("600")
