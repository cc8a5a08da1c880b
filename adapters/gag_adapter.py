"""GAG aggregator adapter - live shop stock and the current weather event.
"""

from typing import Any, Optional
import logging

import httpx

from adapters.http_client import build_client, get_json
from app.config import settings

logger = logging.getLogger("gardenboard.gag")

_client: Optional[httpx.Client] = None

# Stock response key -> upstream shop endpoint
SHOP_ENDPOINTS = {
    "seeds": "/seeds",
    "gear": "/gear",
    "eggs": "/eggs",
    "cosmetics": "/cosmetics",
    "honey": "/honey",
}


# ------------------ Connection ------------------
def _get_client() -> httpx.Client:
    """Lazy init HTTP client."""
    global _client
    if _client is None:
        _client = build_client(settings.gag_api_base_url, timeout=settings.stock_alldata_timeout)
    return _client


def connect(base_url: Optional[str] = None, transport: Optional[httpx.BaseTransport] = None):
    """(Re)create the client, optionally over a custom transport."""
    global _client
    close()
    url = base_url or settings.gag_api_base_url
    _client = build_client(url, timeout=settings.stock_alldata_timeout, transport=transport)
    logger.info("GAG client ready for %s", url)


def close():
    """Close the HTTP client."""
    global _client
    try:
        if _client is not None:
            _client.close()
            logger.info("GAG client closed")
    except Exception:
        logger.exception("Error closing GAG client")
    finally:
        _client = None


# ------------------ Endpoints ------------------
def fetch_all_data() -> Any:
    """Fetch every shop in a single call (``/alldata``)."""
    return get_json(_get_client(), "/alldata", timeout=settings.stock_alldata_timeout)


def fetch_shop(key: str) -> Any:
    """Fetch one shop by its stock key (``seeds``, ``gear``, ...)."""
    return get_json(_get_client(), SHOP_ENDPOINTS[key], timeout=settings.stock_endpoint_timeout)


def fetch_weather() -> Any:
    """Fetch the current weather event."""
    return get_json(_get_client(), "/weather", timeout=settings.weather_timeout)
