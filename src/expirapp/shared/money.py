"""Money arithmetic in integer cents.

Amounts are persisted as floats; comparisons and sums go through cents so
that ``3 x 10.10`` and ``30.30`` are the same amount.
"""

from collections.abc import Iterable


def to_cents(amount: float | None) -> int:
    if amount is None:
        return 0
    return int(round(amount * 100))


def from_cents(cents: int) -> float:
    return round(cents / 100, 2)


def line_total_cents(quantity: int, unit_price: float) -> int:
    return quantity * to_cents(unit_price)


def sum_cents(amounts: Iterable[float]) -> int:
    return sum(to_cents(amount) for amount in amounts)
