import json

import requests

from clients import airport_directory_client
from clients.airport_directory_client import AirportDirectoryClient
from utils.autocomplete import filter_airports

RAW = [
    {"name": "Guarulhos International Airport", "city": "São Paulo", "country": "Brazil", "iata_code": "GRU"},
    {"name": "Campo de Marte Airport", "city": "São Paulo", "country": "Brazil", "iata_code": None},
    {"name": "Jacarepaguá Airport", "city": "Rio de Janeiro", "country": "Brazil", "iata_code": ""},
    {"name": "Charles de Gaulle Airport", "city": "Paris", "country": "France", "iata_code": "cdg"},
]


def test_reads_local_dataset_and_drops_airports_without_code(tmp_path):
    path = tmp_path / "airports.json"
    path.write_text(json.dumps(RAW), encoding="utf-8")

    airports = AirportDirectoryClient(source=str(path)).load()

    assert [a.iata_code for a in airports] == ["GRU", "CDG"]
    assert airports[1].label == "Paris, France (CDG)"


def test_fetches_remote_dataset(monkeypatch, fake_response):
    calls = []

    def fake_get(url, timeout=None):
        calls.append(url)
        return fake_response(RAW)

    monkeypatch.setattr(airport_directory_client.requests, "get", fake_get)
    airports = AirportDirectoryClient(source="https://example.org/airports.json").load()

    assert calls == ["https://example.org/airports.json"]
    assert len(airports) == 2


def test_bundled_dataset_loads():
    airports = AirportDirectoryClient(source="data/airports.json").load()
    assert airports
    assert all(a.iata_code for a in airports)


def test_remote_failure_degrades_to_empty_directory(monkeypatch):
    def fake_get(*args, **kwargs):
        raise requests.ConnectionError("offline")

    monkeypatch.setattr(airport_directory_client.requests, "get", fake_get)
    airports = AirportDirectoryClient(source="https://example.org/airports.json").load()

    assert airports == []
    assert filter_airports("paris", "", airports) == []
    assert filter_airports("", "", airports, show_all=True) == []


def test_missing_file_and_bad_json_degrade_to_empty(tmp_path):
    assert AirportDirectoryClient(source=str(tmp_path / "nope.json")).load() == []

    bad = tmp_path / "bad.json"
    bad.write_text("{not json", encoding="utf-8")
    assert AirportDirectoryClient(source=str(bad)).load() == []

    not_a_list = tmp_path / "obj.json"
    not_a_list.write_text('{"airports": []}', encoding="utf-8")
    assert AirportDirectoryClient(source=str(not_a_list)).load() == []
