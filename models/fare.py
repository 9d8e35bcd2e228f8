# models/fare.py
from __future__ import annotations
from dataclasses import dataclass
from datetime import date
from enum import Enum
from typing import Any, Dict, Optional

from utils.date_parser import parse_date

PREDICTION_ERROR = "Prediction error"


class LegType(str, Enum):
    OUTBOUND = "ida"
    RETURN = "volta"


@dataclass(frozen=True)
class PredictionRequest:
    carrier: str
    origin: str
    destination: str
    month: int
    year: int

    def __post_init__(self):
        if not 1 <= self.month <= 12:
            raise ValueError(f"month must be within 1-12, got {self.month}")

    @classmethod
    def for_date(cls, carrier: str, origin: str, destination: str, travel_date: date) -> "PredictionRequest":
        return cls(
            carrier=carrier,
            origin=origin,
            destination=destination,
            month=travel_date.month,
            year=travel_date.year,
        )

    def to_payload(self) -> Dict[str, Any]:
        # field names expected by the predictor service
        return {
            "empresa": self.carrier,
            "origem": self.origin,
            "destino": self.destination,
            "mes": self.month,
            "ano": self.year,
        }


@dataclass(frozen=True)
class FareLeg:
    """
    One predicted leg of a trip. Exactly one of price/error is set:
    a priced leg carries no error, a failed prediction carries no price.
    """
    origin: str
    destination: str
    date: date
    leg_type: LegType
    price: Optional[float] = None
    error: Optional[str] = None

    def __post_init__(self):
        if (self.price is None) == (self.error is None):
            raise ValueError("FareLeg needs exactly one of price or error")

    @classmethod
    def priced(cls, origin: str, destination: str, travel_date: date, leg_type: LegType, price: float) -> "FareLeg":
        return cls(origin, destination, travel_date, leg_type, price=float(price))

    @classmethod
    def failed(
        cls,
        origin: str,
        destination: str,
        travel_date: date,
        leg_type: LegType,
        error: str = PREDICTION_ERROR,
    ) -> "FareLeg":
        return cls(origin, destination, travel_date, leg_type, error=error)

    @property
    def ok(self) -> bool:
        return self.price is not None

    def to_dict(self) -> Dict[str, Any]:
        return {
            "origin": self.origin,
            "destination": self.destination,
            "date": self.date.isoformat(),
            "type": self.leg_type.value,
            "price": self.price,
            "error": self.error,
        }

    @classmethod
    def from_dict(cls, d: Dict[str, Any]) -> "FareLeg":
        travel_date = d.get("date")
        if not isinstance(travel_date, date):
            travel_date = parse_date(str(travel_date or ""))
        if travel_date is None:
            raise ValueError(f"Invalid leg date: {d.get('date')!r}")

        price = d.get("price")
        error = d.get("error")
        if price is None and not error:
            error = PREDICTION_ERROR
        return cls(
            origin=str(d.get("origin") or ""),
            destination=str(d.get("destination") or ""),
            date=travel_date,
            leg_type=LegType(d.get("type")),
            price=float(price) if price is not None else None,
            error=None if price is not None else str(error),
        )
