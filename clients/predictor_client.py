# clients/predictor_client.py
from __future__ import annotations
import logging
from typing import Any, Dict, Optional

import requests

from config import settings
from models.fare import PredictionRequest

logger = logging.getLogger(__name__)


class PredictorUnavailableError(RuntimeError):
    """The predictor could not be reached or answered with a non-success status."""


class FarePredictorClient:
    """
    Thin client for the fare prediction service (POST {base_url}/predict).
    The service is a black box: we send the request payload and hand back its JSON.
    """

    def __init__(self, base_url: Optional[str] = None, timeout: Optional[int] = None):
        self.base_url = (base_url or settings.python_api_url).rstrip("/")
        self.timeout = timeout or settings.http_timeout

    def predict(self, request: PredictionRequest) -> Dict[str, Any]:
        url = f"{self.base_url}/predict"
        payload = request.to_payload()
        logger.debug("POST %s %s", url, payload)
        try:
            res = requests.post(url, json=payload, timeout=self.timeout)
            res.raise_for_status()
            data = res.json()
        except requests.RequestException as e:
            # includes connection errors, timeouts, HTTP errors and invalid JSON bodies
            raise PredictorUnavailableError(f"Predictor call failed for {request.origin}->{request.destination}: {e}") from e
        except ValueError as e:
            raise PredictorUnavailableError(f"Predictor returned a non-JSON body: {e}") from e

        if not isinstance(data, dict):
            logger.warning("⚠️ Unexpected predictor response shape: %r", data)
            return {}
        return data
