# clients/flights_api_client.py
from __future__ import annotations
import logging
from datetime import date
from typing import Any, Dict, List, Optional

import requests

from config import settings
from models.airport import AirportRecord
from models.fare import FareLeg

logger = logging.getLogger(__name__)


class FlightsApiError(RuntimeError):
    """The backend could not complete a fare search."""


class FlightsApiClient:
    """
    Used by the UI to talk to the backend proxy (server.py).
    """

    def __init__(self, base_url: Optional[str] = None, timeout: Optional[int] = None):
        self.base_url = (base_url or settings.flights_api_url).rstrip("/")
        self.timeout = timeout or settings.http_timeout

    def search(
        self,
        origin: str,
        destination: str,
        departure: date,
        return_date: Optional[date] = None,
    ) -> List[FareLeg]:
        params: Dict[str, Any] = {
            "origin": origin,
            "destination": destination,
            "departure": departure.isoformat(),
        }
        if return_date:
            params["return"] = return_date.isoformat()

        try:
            res = requests.get(f"{self.base_url}/api/flights", params=params, timeout=self.timeout)
        except requests.RequestException as e:
            logger.error("❌ Flights API unreachable: %s", e)
            raise FlightsApiError("Failed to fetch flights.") from e

        if not res.ok:
            message = self._message(res) or "Failed to fetch flights."
            logger.error("❌ Flights API error %s: %s", res.status_code, message)
            raise FlightsApiError(message)

        try:
            data = res.json()
            if not isinstance(data, list):
                raise ValueError(f"expected a list of legs, got {type(data).__name__}")
            return [FareLeg.from_dict(item) for item in data]
        except (ValueError, TypeError, AttributeError) as e:
            logger.error("❌ Unexpected flights payload: %s", e)
            raise FlightsApiError("Failed to fetch flights.") from e

    def airports(self) -> List[AirportRecord]:
        try:
            res = requests.get(f"{self.base_url}/api/flights/airports", timeout=self.timeout)
            res.raise_for_status()
            data = res.json()
        except (requests.RequestException, ValueError) as e:
            logger.error("❌ Failed to load airports: %s", e)
            return []
        if not isinstance(data, list):
            logger.error("❌ Airports endpoint did not return a list")
            return []
        return [AirportRecord.from_dict(a) for a in data if isinstance(a, dict) and a.get("iata_code")]

    def _message(self, res: requests.Response) -> str:
        try:
            body = res.json()
        except ValueError:
            return ""
        return str(body.get("message", "")) if isinstance(body, dict) else ""
