# agents/fare_search_agent.py
from __future__ import annotations
import logging
import math
from concurrent.futures import ThreadPoolExecutor
from datetime import date
from typing import Any, Dict, List, Optional

from clients.predictor_client import FarePredictorClient, PredictorUnavailableError
from config import settings
from models.fare import FareLeg, LegType, PREDICTION_ERROR, PredictionRequest
from utils.airport_codes import to_airport_code

logger = logging.getLogger(__name__)

FETCH_FAILED = "Failed to fetch flights."


class FareSearchError(RuntimeError):
    """The search could not complete because the predictor was unreachable."""


class FareSearchAgent:
    """
    Builds one prediction request per leg (outbound, and return when a return
    date is given), calls the predictor for both legs concurrently and turns
    the answers into FareLegs, outbound first.
    """

    def __init__(self, predictor: Optional[FarePredictorClient] = None, carrier: Optional[str] = None):
        self.predictor = predictor or FarePredictorClient()
        self.carrier = carrier or settings.default_carrier

    def run(
        self,
        origin: str,
        destination: str,
        departure_date: Optional[date],
        return_date: Optional[date] = None,
    ) -> List[FareLeg]:
        if not origin or not destination or not departure_date:
            raise ValueError("origin, destination and departure_date are required")

        origin_code = to_airport_code(origin)
        destination_code = to_airport_code(destination)

        legs = [(origin_code, destination_code, departure_date, LegType.OUTBOUND)]
        if return_date:
            legs.append((destination_code, origin_code, return_date, LegType.RETURN))

        logger.info(
            "🔎 Predicting fares %s -> %s on %s%s",
            origin_code,
            destination_code,
            departure_date,
            f" (return {return_date})" if return_date else "",
        )
        with ThreadPoolExecutor(max_workers=len(legs)) as pool:
            futures = [pool.submit(self._predict_leg, *leg) for leg in legs]
            try:
                results = [f.result() for f in futures]
            except PredictorUnavailableError as e:
                logger.error("❌ %s", e)
                raise FareSearchError(FETCH_FAILED) from e

        logger.info("✅ %d leg(s) predicted", len(results))
        return results

    def _predict_leg(self, origin: str, destination: str, travel_date: date, leg_type: LegType) -> FareLeg:
        request = PredictionRequest.for_date(self.carrier, origin, destination, travel_date)
        response = self.predictor.predict(request)
        price = self._extract_fare(response)
        if price is None:
            logger.warning("⚠️ No usable fare for %s -> %s: %r", origin, destination, response)
            return FareLeg.failed(origin, destination, travel_date, leg_type, PREDICTION_ERROR)
        return FareLeg.priced(origin, destination, travel_date, leg_type, price)

    def _extract_fare(self, response: Dict[str, Any]) -> Optional[float]:
        raw = response.get("predicted_tarifa")
        if raw is None or isinstance(raw, bool):
            return None
        try:
            price = float(raw)
        except (TypeError, ValueError, OverflowError):
            return None
        if not math.isfinite(price) or price <= 0:
            return None
        return price
