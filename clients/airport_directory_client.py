# clients/airport_directory_client.py
from __future__ import annotations
import json
import logging
from pathlib import Path
from typing import Any, List, Optional

import requests

from config import settings
from models.airport import AirportRecord

logger = logging.getLogger(__name__)


class AirportDirectoryClient:
    """
    Loads the airport directory from a JSON endpoint or a local static dataset.
    Only airports with an IATA code are kept. Any failure yields an empty
    directory so autocomplete degrades to "no suggestions".
    """

    def __init__(self, source: Optional[str] = None, timeout: Optional[int] = None):
        self.source = source or settings.airports_source
        self.timeout = timeout or settings.http_timeout

    def is_remote(self) -> bool:
        return self.source.startswith(("http://", "https://"))

    def load(self) -> List[AirportRecord]:
        try:
            raw = self._fetch_remote() if self.is_remote() else self._read_file()
        except (requests.RequestException, OSError, ValueError) as e:
            logger.error("❌ Failed to load airports from %s: %s", self.source, e)
            return []

        if not isinstance(raw, list):
            logger.error("❌ Airport source %s did not return a list", self.source)
            return []

        airports: List[AirportRecord] = []
        for item in raw:
            if not isinstance(item, dict):
                continue
            record = AirportRecord.from_dict(item)
            if record.iata_code:
                airports.append(record)

        logger.info("✅ Loaded %d airports from %s", len(airports), self.source)
        return airports

    def _fetch_remote(self) -> Any:
        res = requests.get(self.source, timeout=self.timeout)
        res.raise_for_status()
        return res.json()

    def _read_file(self) -> Any:
        path = Path(self.source)
        if not path.is_absolute() and not path.exists():
            # relative to the project root when started from elsewhere
            path = Path(__file__).resolve().parents[1] / self.source
        return json.loads(path.read_text(encoding="utf-8"))
