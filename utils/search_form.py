# utils/search_form.py
"""
Form state helpers for the Streamlit view. Kept free of streamlit imports so
they can be tested on their own.
"""
from __future__ import annotations
from dataclasses import dataclass
from datetime import date
from typing import List, Optional, Tuple

from models.fare import FareLeg

QueryKey = Tuple[str, str, str, str]


def is_search_ready(origin: str, destination: str, departure: Optional[date]) -> bool:
    origin = (origin or "").strip()
    destination = (destination or "").strip()
    return bool(origin and destination and departure and origin != destination)


def make_query_key(origin: str, destination: str, departure: Optional[date], return_date: Optional[date]) -> QueryKey:
    return (
        (origin or "").strip(),
        (destination or "").strip(),
        departure.isoformat() if departure else "",
        return_date.isoformat() if return_date else "",
    )


@dataclass(frozen=True)
class SearchResult:
    key: QueryKey
    legs: List[FareLeg]


def current_legs(stored: Optional[SearchResult], key: QueryKey) -> List[FareLeg]:
    """Legs of the last search, but only while the form still matches the query that produced them."""
    if stored is None or stored.key != key:
        return []
    return stored.legs
