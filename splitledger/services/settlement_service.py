import logging
from decimal import Decimal
from typing import List, Optional, Sequence
from splitledger.core.config import settings
from splitledger.core.errors import DegenerateInputError
from splitledger.core.utils import display_amount, qround
from splitledger.schemas.balances import Balance, NetBalance, UserBalanceOut
from splitledger.schemas.member import Member, MemberRef
from splitledger.schemas.settlements import Settlement, SettlementOut, SettlementReport
from splitledger.schemas.transaction import Transaction
from splitledger.services.balance_service import aggregate, is_settled
from splitledger.services.period_filter import filter_by_period

logger = logging.getLogger(__name__)


def settle(
    balances: Sequence[Balance | NetBalance],
    epsilon: Optional[Decimal] = None,
) -> List[Settlement]:
    """
    Greedy largest-first matching of debtors to creditors.

    Only `id` and `balance` of each entry are read. Balances within
    epsilon of zero are treated as settled; amounts are rounded to cents
    when emitted, never while matching.
    """
    eps = settings.SETTLEMENT_EPSILON if epsilon is None else epsilon

    ids = [b.id for b in balances]
    if len(ids) != len(set(ids)):
        raise DegenerateInputError("Duplicate ids in balances")

    creditors = []  # [id, amount_to_receive]
    debtors = []    # [id, amount_to_pay]

    for b in balances:
        if b.balance > eps:
            creditors.append([b.id, b.balance])
        elif b.balance < -eps:
            debtors.append([b.id, -b.balance])

    # sort is stable, ties keep input order
    creditors.sort(key=lambda x: x[1], reverse=True)
    debtors.sort(key=lambda x: x[1], reverse=True)

    settlements: List[Settlement] = []
    i = 0
    j = 0

    while i < len(creditors) and j < len(debtors):
        cred_id, cred_amt = creditors[i]
        debt_id, debt_amt = debtors[j]

        amount = min(cred_amt, debt_amt)

        if amount > eps:
            rounded = qround(amount)
            if rounded > 0:
                settlements.append(Settlement(from_id=debt_id, to_id=cred_id, amount=rounded))

        creditors[i][1] -= amount
        debtors[j][1] -= amount

        if creditors[i][1] <= eps:
            i += 1
        if debtors[j][1] <= eps:
            j += 1

    return settlements


def build_settlement_report(
    members: Sequence[Member],
    transactions: Sequence[Transaction],
    month: Optional[int] = None,
    year: Optional[int] = None,
) -> SettlementReport:
    in_period = filter_by_period(transactions, month, year)
    balances = aggregate(members, in_period)
    settlements = settle(balances)

    by_id = {m.id: m for m in members}

    user_balances = [
        UserBalanceOut(
            user_id=b.id,
            name=by_id[b.id].name,
            email=by_id[b.id].email,
            avatar=by_id[b.id].avatar,
            paid=display_amount(b.paid),
            share=display_amount(b.share),
            balance=display_amount(b.balance),
        )
        for b in balances
    ]

    settlement_out = [
        SettlementOut(
            from_=MemberRef.of(by_id[s.from_id]),
            to=MemberRef.of(by_id[s.to_id]),
            amount=float(s.amount),
        )
        for s in settlements
    ]

    logger.debug(
        "Settlement report: %d members, %d/%d transactions in period, %d settlements",
        len(members), len(in_period), len(transactions), len(settlement_out),
    )

    return SettlementReport(
        user_balances=user_balances,
        settlements=settlement_out,
        is_settled=is_settled(balances),
    )
