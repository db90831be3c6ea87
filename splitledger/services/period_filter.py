from typing import List, Optional, Sequence
from splitledger.core.errors import DegenerateInputError
from splitledger.schemas.transaction import Transaction


def filter_by_period(
    transactions: Sequence[Transaction],
    month: Optional[int] = None,
    year: Optional[int] = None,
) -> List[Transaction]:
    # only filter when both parts of the window are given
    if month is None or year is None:
        return list(transactions)

    if not 1 <= month <= 12:
        raise DegenerateInputError(f"Month must be between 1 and 12, got {month}")

    return [
        tx for tx in transactions
        if tx.date is not None
        and tx.date.month == month
        and tx.date.year == year
    ]
