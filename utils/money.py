# utils/money.py
from __future__ import annotations
import math

# (thousands separator, decimal separator) per language
_SEPARATORS = {
    "pt": (".", ","),
    "de": (".", ","),
    "es": (".", ","),
    "fr": (" ", ","),
    "en": (",", "."),
}


def round_to_tens(x: float) -> int:
    """Nearest multiple of 10; halves on the quotient round away from zero (1245 -> 1250)."""
    q = float(x) / 10
    rounded = math.floor(abs(q) + 0.5)
    if not rounded:
        return 0
    return int(math.copysign(rounded, q)) * 10


def format_amount(amount: float, locale: str = "pt-BR") -> str:
    """
    Thousands-grouped number in the given locale, e.g. 1234.5 -> '1.234,5' (pt-BR).
    At most two decimals are shown and trailing zeros are dropped; the value is
    never rounded to tens here.
    """
    lang = (locale or "en").split("-")[0].lower()
    thousands, decimal = _SEPARATORS.get(lang, _SEPARATORS["en"])

    value = float(amount)
    sign = "-" if value < 0 else ""
    whole, _, frac = f"{abs(value):.2f}".partition(".")
    frac = frac.rstrip("0")
    if whole == "0" and not frac:
        sign = ""
    grouped = f"{int(whole):,}".replace(",", thousands)
    return f"{sign}{grouped}{decimal}{frac}" if frac else f"{sign}{grouped}"


def format_currency(amount: float, symbol: str = "R$", locale: str = "pt-BR") -> str:
    return f"{symbol} {format_amount(amount, locale)}".strip()
