"""Decimal money helpers shared by the calculators and the settlement planner.

All money is kept in cents. When a split does not divide evenly, the leftover
cents are handed out one at a time so totals are preserved exactly.
"""

from decimal import Decimal, ROUND_DOWN, ROUND_HALF_UP
from typing import Dict, List, Mapping, Union

CENTS = Decimal("0.01")
ZERO = Decimal("0")

Number = Union[int, Decimal]


def to_cents(value: Number) -> Decimal:
    """Quantize a money value to cents, rounding half up."""
    return Decimal(value).quantize(CENTS, rounding=ROUND_HALF_UP)


def split_evenly(total: Number, parts: int) -> List[Decimal]:
    """Split ``total`` into ``parts`` cent amounts that sum to it exactly.

    Earlier parts absorb the remainder: 9 / 4 -> [2.25, 2.25, 2.25, 2.25],
    4 / 3 -> [1.34, 1.33, 1.33].
    """
    if parts <= 0:
        raise ValueError("parts must be positive")
    cents = int((Decimal(total) * 100).to_integral_value(rounding=ROUND_DOWN))
    share, remainder = divmod(cents, parts)
    return [
        (Decimal(share + (1 if idx < remainder else 0)) / 100).quantize(CENTS)
        for idx in range(parts)
    ]


def allocate_cents(raw: Mapping[str, Decimal]) -> Dict[str, Decimal]:
    """Round each amount to cents while keeping the rounded total equal to the
    rounded raw total (zero for redistributive games)."""
    if not raw:
        return {}
    target = to_cents(sum(raw.values(), ZERO))
    rounded = {key: to_cents(value) for key, value in raw.items()}
    residual_cents = int((target - sum(rounded.values(), ZERO)) / CENTS)
    if residual_cents == 0:
        return rounded

    # Players whose rounding cost them the most get the spare cents first.
    step = CENTS if residual_cents > 0 else -CENTS
    order = sorted(
        raw,
        key=lambda key: (raw[key] - rounded[key]) * (1 if residual_cents > 0 else -1),
        reverse=True,
    )
    for idx in range(abs(residual_cents)):
        key = order[idx % len(order)]
        rounded[key] += step
    return rounded


def differential_money(totals: Mapping[str, Number], rate: Number) -> Dict[str, Decimal]:
    """Money for each player's difference from the field average, zero-sum."""
    if not totals:
        return {}
    values = {key: Decimal(value) for key, value in totals.items()}
    average = sum(values.values(), ZERO) / len(values)
    return allocate_cents({key: (value - average) * Decimal(rate) for key, value in values.items()})
