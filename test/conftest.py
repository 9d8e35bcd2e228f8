import threading
from typing import Any, Dict, List

import pytest
import requests

from models.airport import AirportRecord
from models.fare import PredictionRequest


class FakeResponse:
    def __init__(self, payload: Any = None, status_code: int = 200, json_error: bool = False):
        self._payload = payload
        self.status_code = status_code
        self._json_error = json_error

    @property
    def ok(self) -> bool:
        return self.status_code < 400

    def json(self):
        if self._json_error:
            raise requests.exceptions.JSONDecodeError("Expecting value", "", 0)
        return self._payload

    def raise_for_status(self):
        if not self.ok:
            raise requests.HTTPError(f"{self.status_code} Error", response=self)


class FakePredictor:
    """Stands in for FarePredictorClient; answers from a {(origin, destination): response} map."""

    def __init__(self, responses: Dict[tuple, Any], default: Any = None):
        self.responses = responses
        self.default = default if default is not None else {}
        self.calls: List[PredictionRequest] = []
        self._lock = threading.Lock()

    def predict(self, request: PredictionRequest) -> Dict[str, Any]:
        with self._lock:
            self.calls.append(request)
        answer = self.responses.get((request.origin, request.destination), self.default)
        if isinstance(answer, Exception):
            raise answer
        return answer


@pytest.fixture
def airports() -> List[AirportRecord]:
    return [
        AirportRecord("Guarulhos International Airport", "São Paulo", "Brazil", "GRU"),
        AirportRecord("Congonhas Airport", "São Paulo", "Brazil", "CGH"),
        AirportRecord("Rio de Janeiro/Galeão International Airport", "Rio de Janeiro", "Brazil", "GIG"),
        AirportRecord("Santos Dumont Airport", "Rio de Janeiro", "Brazil", "SDU"),
        AirportRecord("Charles de Gaulle Airport", "Paris", "France", "CDG"),
        AirportRecord("Orly Airport", "Paris", "France", "ORY"),
        AirportRecord("Heathrow Airport", "London", "United Kingdom", "LHR"),
    ]


@pytest.fixture
def fake_response():
    return FakeResponse


@pytest.fixture
def fake_predictor():
    return FakePredictor
