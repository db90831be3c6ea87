from decimal import Decimal
import pytest
from splitledger.schemas.member import Member
from splitledger.schemas.transaction import Transaction, TransactionType


@pytest.fixture
def members():
    return [
        Member(id="A", name="Alice", email="alice@test.com"),
        Member(id="B", name="Bob", email="bob@test.com"),
        Member(id="C", name="Charlie", email="charlie@test.com"),
        Member(id="D", name="David", email="david@test.com"),
    ]


@pytest.fixture
def trio(members):
    return members[:3]


def expense(amount, paid_by, **kwargs):
    return Transaction(amount=Decimal(str(amount)), type=TransactionType.EXPENSE, paid_by=paid_by, **kwargs)


def income(amount, paid_by=None, **kwargs):
    return Transaction(amount=Decimal(str(amount)), type=TransactionType.INCOME, paid_by=paid_by, **kwargs)
