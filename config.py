# config.py
"""
Environment driven settings for the UI, the backend proxy and the HTTP clients.
Keeps os.getenv calls in one place; a local .env file is honoured.
"""
from __future__ import annotations

import os
from dataclasses import dataclass, field

from dotenv import load_dotenv

load_dotenv()


def _env_int(name: str, default: int) -> int:
    raw = os.getenv(name)
    if raw is None or not raw.strip():
        return default
    try:
        return int(raw)
    except ValueError:
        return default


@dataclass
class Settings:
    python_api_url: str = field(default_factory=lambda: os.getenv("PYTHON_API_URL", "http://localhost:5000"))
    default_carrier: str = field(default_factory=lambda: os.getenv("DEFAULT_CARRIER", "AZU"))
    airports_source: str = field(default_factory=lambda: os.getenv("AIRPORTS_SOURCE", "data/airports.json"))
    flights_api_url: str = field(default_factory=lambda: os.getenv("FLIGHTS_API_URL", "http://localhost:3001"))
    backend_port: int = field(default_factory=lambda: _env_int("BACKEND_PORT", 3001))
    http_timeout: int = field(default_factory=lambda: _env_int("HTTP_TIMEOUT", 15))
    display_locale: str = field(default_factory=lambda: os.getenv("DISPLAY_LOCALE", "pt-BR"))
    currency_symbol: str = field(default_factory=lambda: os.getenv("CURRENCY_SYMBOL", "R$"))
    log_level: str = field(default_factory=lambda: os.getenv("LOG_LEVEL", "INFO"))


settings = Settings()
