"""Cycleon adapter - item/weather statistics and restock predictions.

The upstream serves a self-signed certificate, so verification follows
``settings.cycleon_verify_ssl`` (off by default).
"""

from typing import Any, Optional
from urllib.parse import quote
import logging

import httpx

from adapters.http_client import build_client, get_json, make_timeout
from app.config import settings

logger = logging.getLogger("gardenboard.cycleon")

_client: Optional[httpx.Client] = None


# ------------------ Connection ------------------
def _get_client() -> httpx.Client:
    """Lazy init HTTP client."""
    global _client
    if _client is None:
        _client = build_client(
            settings.cycleon_api_base_url,
            timeout=settings.forecast_timeout,
            verify=settings.cycleon_verify_ssl,
        )
    return _client


def connect(base_url: Optional[str] = None, transport: Optional[httpx.BaseTransport] = None):
    """(Re)create the client, optionally over a custom transport."""
    global _client
    close()
    url = base_url or settings.cycleon_api_base_url
    _client = build_client(
        url,
        timeout=settings.forecast_timeout,
        verify=settings.cycleon_verify_ssl,
        transport=transport,
    )
    logger.info("Cycleon client ready for %s", url)


def close():
    """Close the HTTP client."""
    global _client
    try:
        if _client is not None:
            _client.close()
            logger.info("Cycleon client closed")
    except Exception:
        logger.exception("Error closing Cycleon client")
    finally:
        _client = None


def encode_segment(value: str) -> str:
    """Percent-encode a single path segment (spaces become %20, slashes are escaped)."""
    return quote(value, safe="")


# ------------------ Statistics ------------------
def get_items() -> Any:
    return get_json(_get_client(), "/items", timeout=settings.forecast_timeout)


def get_weather_list() -> Any:
    return get_json(_get_client(), "/weather", timeout=settings.forecast_timeout)


def get_item_stats() -> Any:
    return get_json(_get_client(), "/item-stats", timeout=settings.forecast_timeout)


def get_all_weather_stats() -> Any:
    return get_json(_get_client(), "/weather-stats", timeout=settings.forecast_timeout)


def get_weather_stats(weather: str) -> Any:
    return get_json(
        _get_client(),
        f"/weather-stats/{encode_segment(weather)}",
        timeout=settings.forecast_timeout,
    )


# ------------------ Predictions ------------------
def predict_item(item: str) -> Any:
    return get_json(
        _get_client(),
        f"/predict/items/{encode_segment(item)}",
        timeout=make_timeout(settings.predict_item_timeout, settings.predict_item_connect_timeout),
    )


def predict_weather(weather: str) -> Any:
    return get_json(
        _get_client(),
        f"/predict/weather/{encode_segment(weather)}",
        timeout=make_timeout(settings.predict_weather_timeout, settings.predict_weather_connect_timeout),
    )
