# utils/fare_stats.py
"""
Derived values for the result view. Everything here is recomputed from the
leg list on every render; nothing is stored.
"""
from __future__ import annotations
from dataclasses import dataclass
from typing import Iterable, List, Optional, Tuple

from models.fare import FareLeg, LegType
from utils.money import round_to_tens

GOOD_PRICE_MAX = 1500
FAIR_PRICE_MAX = 1800


@dataclass(frozen=True)
class PriceIndicator:
    level: str
    label: str
    color: str


GOOD = PriceIndicator("good", "Good price", "green")
FAIR = PriceIndicator("fair", "Fair price", "orange")
HIGH = PriceIndicator("high", "High price", "red")


def partition_legs(legs: Iterable[FareLeg]) -> Tuple[List[FareLeg], List[FareLeg]]:
    outbound: List[FareLeg] = []
    inbound: List[FareLeg] = []
    for leg in legs:
        if leg.leg_type == LegType.OUTBOUND:
            outbound.append(leg)
        else:
            inbound.append(leg)
    return outbound, inbound


def price_range(legs: Iterable[FareLeg]) -> Optional[Tuple[int, int]]:
    """(min, max) over the priced legs, each rounded to tens; None when nothing is priced."""
    prices = [leg.price for leg in legs if leg.price is not None]
    if not prices:
        return None
    return round_to_tens(min(prices)), round_to_tens(max(prices))


def price_indicator(price: float) -> PriceIndicator:
    if price <= GOOD_PRICE_MAX:
        return GOOD
    if price <= FAIR_PRICE_MAX:
        return FAIR
    return HIGH
