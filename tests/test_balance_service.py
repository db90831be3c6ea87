from decimal import Decimal
import logging
import pytest
from pydantic import ValidationError
from splitledger.core.errors import DegenerateInputError, UnknownMemberError
from splitledger.schemas.member import Member
from splitledger.schemas.transaction import Transaction
from splitledger.services.balance_service import aggregate, check_balance_drift, is_settled
from conftest import expense, income


def by_id(balances):
    return {b.id: b for b in balances}


def test_single_payer_three_members(trio):
    balances = by_id(aggregate(trio, [expense(300, "A")]))

    assert balances["A"].paid == Decimal("300")
    assert balances["A"].share == Decimal("100")
    assert balances["A"].balance == Decimal("200")
    assert balances["B"].balance == Decimal("-100")
    assert balances["C"].balance == Decimal("-100")


def test_everyone_paid_equally(trio):
    txs = [expense(100, "A"), expense(100, "B"), expense(100, "C")]
    balances = aggregate(trio, txs)

    assert all(b.paid == Decimal("100") for b in balances)
    assert all(b.share == Decimal("100") for b in balances)
    assert all(b.balance == 0 for b in balances)


def test_output_follows_member_order(members):
    reordered = [members[2], members[0], members[3], members[1]]
    balances = aggregate(reordered, [expense(40, "B")])

    assert [b.id for b in balances] == ["C", "A", "D", "B"]


def test_income_reduces_share_not_paid(trio, caplog):
    with caplog.at_level(logging.WARNING):
        balances = by_id(aggregate(trio, [expense(300, "A"), income(60)]))

    for b in balances.values():
        assert b.share == Decimal("80")
    assert balances["A"].paid == Decimal("300")
    assert balances["B"].paid == 0

    assert balances["A"].balance == Decimal("220")
    assert balances["B"].balance == Decimal("-80")
    assert balances["C"].balance == Decimal("-80")

    # income is credited to nobody, so the group is left holding it
    assert sum(b.balance for b in balances.values()) == Decimal("60")
    assert "do not sum to zero" in caplog.text


def test_payer_on_income_is_ignored(trio):
    plain = aggregate(trio, [expense(300, "A"), income(60)])
    named = aggregate(trio, [expense(300, "A"), income(60, "B")])
    unknown = aggregate(trio, [expense(300, "A"), income(60, "Z")])

    assert plain == named == unknown


def test_thirds_sum_to_zero(trio):
    balances = aggregate(trio, [expense(100, "A"), expense("10.01", "C")])

    assert abs(sum(b.balance for b in balances)) < Decimal("1e-20")


def test_empty_members_rejected():
    with pytest.raises(DegenerateInputError):
        aggregate([], [expense(10, "A")])


def test_duplicate_members_rejected():
    m = Member(id="A", name="Alice")
    with pytest.raises(DegenerateInputError):
        aggregate([m, m], [])


def test_unknown_payer_rejected_by_default(trio):
    with pytest.raises(UnknownMemberError) as exc:
        aggregate(trio, [expense(90, "Z")])

    assert exc.value.member_id == "Z"


def test_unknown_payer_skipped_with_warning(trio, caplog):
    with caplog.at_level(logging.WARNING):
        balances = by_id(aggregate(trio, [expense(90, "Z")], unknown_payer_policy="skip"))

    assert all(b.paid == 0 for b in balances.values())
    assert balances["A"].balance == Decimal("-30")
    assert "unknown member Z" in caplog.text


def test_inputs_are_not_mutated(trio):
    txs = [expense(300, "A")]
    snapshot = [t.model_copy() for t in txs]

    aggregate(trio, txs)

    assert txs == snapshot


def test_expense_requires_payer():
    with pytest.raises(ValidationError):
        Transaction(amount=Decimal("10"), type="EXPENSE")


def test_amount_must_be_positive():
    with pytest.raises(ValidationError):
        Transaction(amount=Decimal("0"), type="EXPENSE", paidBy="A")


def test_check_balance_drift_returns_sum(trio):
    balances = aggregate(trio, [expense(300, "A")])

    assert check_balance_drift(balances) == 0


def test_is_settled(trio):
    assert is_settled(aggregate(trio, []))
    assert not is_settled(aggregate(trio, [expense(300, "A")]))
    assert is_settled(aggregate(trio, [expense("0.015", "A")]))
    assert not is_settled(aggregate(trio, [expense("0.06", "A")]))
