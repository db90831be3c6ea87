import logging
from decimal import Decimal
from typing import Dict, List, Optional, Sequence
from splitledger.core.config import settings
from splitledger.core.errors import DegenerateInputError, UnknownMemberError
from splitledger.core.utils import ZERO, decimal_sum
from splitledger.schemas.balances import Balance
from splitledger.schemas.member import Member
from splitledger.schemas.transaction import Transaction, TransactionType

logger = logging.getLogger(__name__)


def aggregate(
    members: Sequence[Member],
    transactions: Sequence[Transaction],
    unknown_payer_policy: Optional[str] = None,
) -> List[Balance]:
    """
    Fold a group's transactions into one Balance per member.

        paid    = EXPENSE amounts paid by the member
        share   = (sum of EXPENSE amounts - sum of INCOME amounts) / member_count
        balance = paid - share

    INCOME carries no payer, so `paid_by` on an INCOME is ignored.
    Output follows the order of `members`.
    """
    if not members:
        raise DegenerateInputError("Cannot compute balances for a group with no members")

    member_ids = [m.id for m in members]
    if len(member_ids) != len(set(member_ids)):
        raise DegenerateInputError("Duplicate member ids in group")

    policy = unknown_payer_policy or settings.UNKNOWN_PAYER_POLICY

    paid: Dict[str, Decimal] = {uid: ZERO for uid in member_ids}
    shared_total = ZERO

    for tx in transactions:
        if tx.type == TransactionType.INCOME:
            shared_total -= tx.amount
            continue

        shared_total += tx.amount

        if tx.paid_by not in paid:
            if policy == "reject":
                raise UnknownMemberError(tx.paid_by)
            logger.warning(
                "Skipping credit of %s for unknown member %s",
                tx.amount, tx.paid_by,
            )
            continue

        paid[tx.paid_by] += tx.amount

    # divide once so equal payments cancel exactly
    share = shared_total / Decimal(len(members))

    balances = [
        Balance(
            id=uid,
            paid=paid[uid],
            share=share,
            balance=paid[uid] - share,
        )
        for uid in member_ids
    ]

    check_balance_drift(balances)
    return balances


def check_balance_drift(
    balances: Sequence[Balance],
    tolerance: Optional[Decimal] = None,
) -> Decimal:
    """Sum of all balances; logs a warning when it strays past tolerance."""
    tolerance = settings.BALANCE_DRIFT_TOLERANCE if tolerance is None else tolerance
    drift = decimal_sum(b.balance for b in balances)

    if abs(drift) > tolerance:
        logger.warning(
            "Balances do not sum to zero (drift %s over %d members)",
            drift, len(balances),
        )

    return drift


def is_settled(
    balances: Sequence[Balance],
    tolerance: Optional[Decimal] = None,
) -> bool:
    """
    A group is settled if:
        abs(balance) <= tolerance
        for every member
    """
    tolerance = settings.SETTLEMENT_EPSILON if tolerance is None else tolerance

    for b in balances:
        if abs(b.balance) > tolerance:
            return False

    return True
