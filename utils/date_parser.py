# utils/date_parser.py
from __future__ import annotations
from datetime import date, datetime
from typing import Optional

import dateparser

# Dates arrive from the date picker (ISO) or from the CLI / query string,
# where Brazilian-style input is common.
PREFERRED_LANGS = ["en", "pt"]

_WEEKDAYS = {
    "pt": [
        "segunda-feira",
        "terça-feira",
        "quarta-feira",
        "quinta-feira",
        "sexta-feira",
        "sábado",
        "domingo",
    ],
    "en": ["Monday", "Tuesday", "Wednesday", "Thursday", "Friday", "Saturday", "Sunday"],
}
_MONTHS = {
    "pt": [
        "janeiro",
        "fevereiro",
        "março",
        "abril",
        "maio",
        "junho",
        "julho",
        "agosto",
        "setembro",
        "outubro",
        "novembro",
        "dezembro",
    ],
    "en": [
        "January",
        "February",
        "March",
        "April",
        "May",
        "June",
        "July",
        "August",
        "September",
        "October",
        "November",
        "December",
    ],
}

NO_DATE_LABEL = "Select a date"


def parse_date(value: str) -> Optional[date]:
    """
    Parses common date inputs. Supports:
    - YYYY-MM-DD (what the date picker and the backend send)
    - YYYY/MM/DD
    - DD/MM/YYYY
    - DD.MM.YYYY
    - Natural language dates (e.g., "16 de setembro de 2025") via dateparser
    If parsing fails, returns None.
    """
    if not value:
        return None

    v = value.strip()
    if not v:
        return None

    fmts = ["%Y-%m-%d", "%Y/%m/%d", "%d/%m/%Y", "%d.%m.%Y"]
    for fmt in fmts:
        try:
            return datetime.strptime(v, fmt).date()
        except ValueError:
            pass

    try:
        return datetime.fromisoformat(v).date()
    except ValueError:
        pass

    parsed = dateparser.parse(
        v,
        languages=PREFERRED_LANGS,
        settings={"PREFER_DATES_FROM": "future", "DATE_ORDER": "DMY"},
    )
    if parsed:
        return parsed.date()
    return None


def _lang(locale: str) -> str:
    lang = (locale or "en").split("-")[0].lower()
    return lang if lang in _MONTHS else "en"


def format_long_date(value: Optional[date], locale: str = "pt-BR") -> str:
    """
    Long, human readable date for the result cards:
    'terça-feira, 16 de setembro de 2025' (pt) or 'Tuesday, September 16, 2025' (en).
    """
    if value is None:
        return NO_DATE_LABEL
    lang = _lang(locale)
    weekday = _WEEKDAYS[lang][value.weekday()]
    month = _MONTHS[lang][value.month - 1]
    if lang == "pt":
        return f"{weekday}, {value.day} de {month} de {value.year}"
    return f"{weekday}, {month} {value.day}, {value.year}"
