# agents/fare_report_agent.py
from __future__ import annotations
from typing import List, Optional, Sequence

from config import settings
from models.fare import FareLeg
from utils.date_parser import format_long_date
from utils.fare_stats import partition_legs, price_indicator, price_range
from utils.money import format_currency


class FareReportAgent:
    def __init__(self, currency_symbol: Optional[str] = None, locale: Optional[str] = None):
        self.currency_symbol = currency_symbol or settings.currency_symbol
        self.locale = locale or settings.display_locale

    def render(self, legs: Sequence[FareLeg]) -> str:
        lines: List[str] = []
        if not legs:
            return "- _No fares found._"

        outbound, inbound = partition_legs(legs)
        first = legs[0]
        lines.append(f"✈️ **{first.origin} → {first.destination}**")
        lines.append("")

        for title, section in (("Outbound", outbound), ("Return", inbound)):
            if not section:
                continue
            lines.append(f"### {title}")
            extremes = price_range(section)
            if extremes:
                low, high = extremes
                lines.append(f"- Lowest: {self._money(low)}")
                lines.append(f"- Highest: {self._money(high)}")
            for leg in section:
                when = format_long_date(leg.date, self.locale)
                if leg.price is None:
                    lines.append(f"- {leg.origin} → {leg.destination} | {when} | ⚠️ {leg.error}")
                else:
                    indicator = price_indicator(leg.price)
                    lines.append(
                        f"- {leg.origin} → {leg.destination} | {when} | {self._money(leg.price)} ({indicator.label})"
                    )
            lines.append("")

        return "\n".join(lines).rstrip()

    def _money(self, amount: float) -> str:
        return format_currency(amount, self.currency_symbol, self.locale)
