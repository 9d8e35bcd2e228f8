# utils/airport_codes.py
from __future__ import annotations
import re

# "São Paulo, Brasil (GRU)" -> GRU
_LABEL_CODE = re.compile(r"\(([A-Za-z0-9]{3,4})\)\s*$")


def to_airport_code(value: str) -> str:
    """
    Accepts either a suggestion label ('Paris, France (CDG)') or a bare code ('cdg')
    and returns the code upper-cased, exactly as the predictor should receive it.
    """
    v = (value or "").strip()

    match = _LABEL_CODE.search(v)
    if match:
        return match.group(1).upper()

    if len(v) == 3 and v.isalpha():
        return v.upper()

    # fail loudly so the caller can answer with a validation error
    raise ValueError(f"No airport code found in: {v!r}")
