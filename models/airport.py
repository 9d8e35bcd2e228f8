# models/airport.py
from __future__ import annotations
from dataclasses import dataclass
from typing import Any, Dict, Optional


@dataclass(frozen=True)
class AirportRecord:
    name: str
    city: str
    country: str
    iata_code: Optional[str] = None

    @classmethod
    def from_dict(cls, d: Dict[str, Any]) -> "AirportRecord":
        code = d.get("iata_code")
        code = str(code).strip().upper() if code else None
        return cls(
            name=str(d.get("name") or ""),
            city=str(d.get("city") or ""),
            country=str(d.get("country") or ""),
            iata_code=code or None,
        )

    def to_dict(self) -> Dict[str, Any]:
        return {
            "name": self.name,
            "city": self.city,
            "country": self.country,
            "iata_code": self.iata_code,
        }

    @property
    def label(self) -> str:
        """Display string used by the suggestion dropdowns, e.g. 'Paris, France (CDG)'."""
        place = ", ".join(part for part in (self.city, self.country) if part)
        return f"{place} ({self.iata_code or ''})"

    @property
    def haystack(self) -> str:
        return f"{self.name} {self.city} {self.country} {self.iata_code or ''}".lower()
