import pytest
import requests

from clients import predictor_client
from clients.predictor_client import FarePredictorClient, PredictorUnavailableError
from models.fare import PredictionRequest

REQUEST = PredictionRequest(carrier="AZU", origin="GRU", destination="CDG", month=9, year=2025)


def test_posts_payload_to_predict_endpoint(monkeypatch, fake_response):
    captured = {}

    def fake_post(url, json=None, timeout=None):
        captured.update(url=url, json=json, timeout=timeout)
        return fake_response({"predicted_tarifa": 1432.0})

    monkeypatch.setattr(predictor_client.requests, "post", fake_post)
    client = FarePredictorClient(base_url="http://ml:5000/", timeout=3)

    assert client.predict(REQUEST) == {"predicted_tarifa": 1432.0}
    assert captured == {
        "url": "http://ml:5000/predict",
        "json": {"empresa": "AZU", "origem": "GRU", "destino": "CDG", "mes": 9, "ano": 2025},
        "timeout": 3,
    }


def test_base_url_comes_from_settings(monkeypatch):
    from config import settings

    monkeypatch.setattr(settings, "python_api_url", "http://predictor.internal:8080")
    assert FarePredictorClient().base_url == "http://predictor.internal:8080"


def test_connection_error_is_transport_failure(monkeypatch):
    def fake_post(*args, **kwargs):
        raise requests.ConnectionError("refused")

    monkeypatch.setattr(predictor_client.requests, "post", fake_post)
    with pytest.raises(PredictorUnavailableError):
        FarePredictorClient(base_url="http://ml:5000").predict(REQUEST)


def test_error_status_is_transport_failure(monkeypatch, fake_response):
    monkeypatch.setattr(predictor_client.requests, "post", lambda *a, **k: fake_response({}, status_code=503))
    with pytest.raises(PredictorUnavailableError):
        FarePredictorClient(base_url="http://ml:5000").predict(REQUEST)


def test_non_json_body_is_transport_failure(monkeypatch, fake_response):
    monkeypatch.setattr(predictor_client.requests, "post", lambda *a, **k: fake_response(json_error=True))
    with pytest.raises(PredictorUnavailableError):
        FarePredictorClient(base_url="http://ml:5000").predict(REQUEST)


def test_non_object_body_is_treated_as_empty(monkeypatch, fake_response):
    monkeypatch.setattr(predictor_client.requests, "post", lambda *a, **k: fake_response([1, 2, 3]))
    assert FarePredictorClient(base_url="http://ml:5000").predict(REQUEST) == {}
