# main.py
from __future__ import annotations
import argparse
import logging
from typing import Optional, Sequence

from agents.fare_report_agent import FareReportAgent
from agents.fare_search_agent import FareSearchAgent, FareSearchError
from config import settings
from utils.date_parser import parse_date
from utils.logging_config import setup_logging


def build_arg_parser() -> argparse.ArgumentParser:
    p = argparse.ArgumentParser(description="Predict outbound/return fares for a route")
    p.add_argument("origin", help="Origin IATA code, e.g. GRU")
    p.add_argument("destination", help="Destination IATA code, e.g. CDG")
    p.add_argument("departure", help="Departure date, e.g. 2025-09-16")
    p.add_argument("--return", dest="return_date", help="Optional return date")
    p.add_argument("--carrier", default=None, help=f"Carrier code (default {settings.default_carrier})")
    p.add_argument("--log-level", default=settings.log_level)
    return p


def main(argv: Optional[Sequence[str]] = None) -> int:
    args = build_arg_parser().parse_args(argv)
    setup_logging(args.log_level)

    departure = parse_date(args.departure)
    if departure is None:
        logging.error("Invalid departure date: %s", args.departure)
        return 2
    return_date = None
    if args.return_date:
        return_date = parse_date(args.return_date)
        if return_date is None:
            logging.error("Invalid return date: %s", args.return_date)
            return 2

    agent = FareSearchAgent(carrier=args.carrier)
    try:
        legs = agent.run(args.origin, args.destination, departure, return_date)
    except ValueError as e:
        logging.error("%s", e)
        return 2
    except FareSearchError:
        logging.exception("Fare search failed")
        return 1

    print(FareReportAgent().render(legs))
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
