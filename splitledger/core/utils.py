from decimal import Decimal, ROUND_HALF_UP, getcontext
from typing import Iterable

getcontext().prec = 28
CENTS = Decimal("0.01")
ZERO = Decimal("0")


def qround(d: Decimal) -> Decimal:
    return d.quantize(CENTS, rounding=ROUND_HALF_UP)


def display_amount(d: Decimal) -> float:
    """Rounded float for response payloads."""
    return float(qround(d))


def decimal_sum(values: Iterable[Decimal]) -> Decimal:
    return sum(values, ZERO)
