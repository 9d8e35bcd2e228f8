# utils/autocomplete.py
from __future__ import annotations
from typing import List, Optional, Sequence

from models.airport import AirportRecord

MIN_TERM_LENGTH = 2
MAX_CANDIDATES = 20
MAX_SUGGESTIONS = 10


def filter_airports(
    search_term: str,
    exclude_value: str,
    directory: Optional[Sequence[AirportRecord]],
    show_all: bool = False,
) -> List[str]:
    """
    Suggestion strings for one of the airport fields.

    `exclude_value` is whatever the opposite field currently holds, so the same
    airport is never offered for both ends of the trip.
    """
    if not directory:
        return []

    term = (search_term or "").strip().lower()
    if show_all:
        candidates = list(directory)
    else:
        if len(term) < MIN_TERM_LENGTH:
            return []
        candidates = [a for a in directory if term in a.haystack][:MAX_CANDIDATES]

    seen = set()
    suggestions: List[str] = []
    for airport in candidates:
        label = airport.label
        if not label or label == exclude_value or label in seen:
            continue
        seen.add(label)
        suggestions.append(label)
        if len(suggestions) == MAX_SUGGESTIONS:
            break
    return suggestions
