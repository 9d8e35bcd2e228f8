# server.py
"""
Backend proxy between the UI and the fare prediction service.

    GET  /api/flights?origin=GRU&destination=CDG&departure=2025-09-16[&return=2025-09-23]
    GET  /api/flights/airports
    GET  /api/flights/test
    POST /api/flights/search   {"origin": ..., "destination": ...}
"""
from __future__ import annotations
import logging
from typing import List, Optional

from flask import Blueprint, Flask, current_app, jsonify, request
from flask_cors import CORS

from agents.fare_search_agent import FareSearchAgent, FareSearchError, FETCH_FAILED
from clients.airport_directory_client import AirportDirectoryClient
from config import settings
from models.airport import AirportRecord
from utils.date_parser import parse_date
from utils.logging_config import setup_logging

logger = logging.getLogger(__name__)

flights = Blueprint("flights", __name__, url_prefix="/api/flights")


class AirportDirectory:
    """Loaded on first use, read-only afterwards."""

    def __init__(self, client: Optional[AirportDirectoryClient] = None):
        self.client = client or AirportDirectoryClient()
        self._airports: Optional[List[AirportRecord]] = None

    def all(self) -> List[AirportRecord]:
        if self._airports is None:
            self._airports = self.client.load()
        return self._airports


@flights.route("/test", methods=["GET"])
def health():
    return jsonify({"message": "Backend is running!"})


@flights.route("/search", methods=["POST"])
def search_echo():
    body = request.get_json(silent=True) or {}
    return jsonify({"result": f"Searching flights from {body.get('origin')} to {body.get('destination')}"})


@flights.route("/airports", methods=["GET"])
def airports():
    directory: AirportDirectory = current_app.config["AIRPORT_DIRECTORY"]
    return jsonify([a.to_dict() for a in directory.all()])


@flights.route("", methods=["GET"])
def search_flights():
    origin = request.args.get("origin", "").strip()
    destination = request.args.get("destination", "").strip()
    departure_raw = request.args.get("departure", "").strip()
    return_raw = request.args.get("return", "").strip()

    if not origin or not destination or not departure_raw:
        return jsonify({"message": "Missing required parameters."}), 400

    departure = parse_date(departure_raw)
    if departure is None:
        return jsonify({"message": f"Invalid date: {departure_raw}"}), 400
    return_date = None
    if return_raw:
        return_date = parse_date(return_raw)
        if return_date is None:
            return jsonify({"message": f"Invalid date: {return_raw}"}), 400

    agent: FareSearchAgent = current_app.config["FARE_SEARCH_AGENT"]
    try:
        legs = agent.run(origin, destination, departure, return_date)
    except ValueError as e:
        return jsonify({"message": str(e)}), 400
    except FareSearchError:
        logger.exception("Fare search failed")
        return jsonify({"message": FETCH_FAILED}), 500

    return jsonify([leg.to_dict() for leg in legs])


def create_app(
    agent: Optional[FareSearchAgent] = None,
    directory: Optional[AirportDirectory] = None,
) -> Flask:
    app = Flask(__name__)
    CORS(app)
    app.config["FARE_SEARCH_AGENT"] = agent or FareSearchAgent()
    app.config["AIRPORT_DIRECTORY"] = directory or AirportDirectory()
    app.register_blueprint(flights)
    return app


app = create_app()


if __name__ == "__main__":
    setup_logging()
    logger.info("Backend running on port %d", settings.backend_port)
    app.run(port=settings.backend_port)
