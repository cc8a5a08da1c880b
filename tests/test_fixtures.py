"""
Shared test fixtures and utilities for the GardenBoard test suite.

This module contains the fake upstream servers, realistic upstream payloads and the
test client that are reused across test files.
"""

from typing import Any, Callable, Dict, List, Optional

import httpx
from fastapi.testclient import TestClient

from main import app

# The lifespan is not entered (no ``with`` block), so the adapter clients
# installed by the upstream fixtures are not replaced on startup.
client = TestClient(app)


Handler = Callable[[httpx.Request], httpx.Response]


class FakeUpstream:
    """
    In-memory stand-in for a third-party API, served through ``httpx.MockTransport``.

    Routes are keyed by the raw (percent-encoded) request path. Unregistered
    paths answer 404 with a FastAPI-style ``detail`` body, like the real APIs.

    Example:
        >>> fake = FakeUpstream()
        >>> fake.add("/weather", json={"type": "rain"})
        >>> fake.fail("/alldata", status=502)
        >>> fake.disconnect("/seeds")
    """

    def __init__(self):
        self.routes: Dict[str, Handler] = {}
        self.calls: List[str] = []

    def add(self, path: str, json: Any = None, status: int = 200, text: Optional[str] = None):
        if text is not None:
            self.routes[path] = lambda request: httpx.Response(status, text=text)
        else:
            self.routes[path] = lambda request: httpx.Response(status, json=json)

    def fail(self, path: str, status: int = 500, json: Any = None):
        self.add(path, json=json if json is not None else {"detail": "Upstream failure"}, status=status)

    def disconnect(self, path: str):
        def _raise(request: httpx.Request) -> httpx.Response:
            raise httpx.ConnectError("Connection refused", request=request)

        self.routes[path] = _raise

    def handler(self, request: httpx.Request) -> httpx.Response:
        path = request.url.raw_path.decode("ascii")
        self.calls.append(path)

        route = self.routes.get(path)
        if route is None:
            return httpx.Response(404, json={"detail": "Not Found"})
        return route(request)

    def transport(self) -> httpx.MockTransport:
        return httpx.MockTransport(self.handler)


# Realistic upstream payloads

GAG_ALLDATA = {
    "seeds": [
        {"name": "Carrot", "quantity": 14, "image": "https://cdn.example/carrot.png"},
        {"name": "Strawberry", "quantity": 3},
        {"Name": "Blueberry", "Stock": "2"},
    ],
    "gear": [
        {"name": "Watering Can", "quantity": 2},
        {"title": "Trowel", "Quantity": 1.9},
    ],
    "eggs": [
        {"name": "Common Egg", "quantity": 1},
    ],
    "cosmetics": [
        {"name": "Sign Crate", "quantity": 1, "img": "https://cdn.example/sign.png"},
    ],
    "honey": [
        {"name": "Flower Seed Pack", "quantity": 5},
    ],
}

GAG_WEATHER = {
    "type": "rain",
    "active": True,
    "effects": ["Wet mutation chance", "Faster growth"],
    "lastUpdated": "2025-06-01T12:00:00Z",
}

CYCLEON_ITEMS = [
    {"name": "Carrot", "shops": ["Seed Shop"]},
    {"name": "Bamboo", "shops": ["Seed Shop"]},
    {"name": "Watering Can", "shops": ["Gear Shop"]},
    {"name": "Bug Egg", "shops": ["Egg Shop", "Event Shop"]},
    {"name": "Honey Sprinkler", "shops": ["Event Shop"]},
]

CYCLEON_ITEM_STATS = [
    {"item": "Carrot", "appearances": [3, 0, 2, 5, 1, 0, 4]},
    {"item": "Bamboo", "appearances": [0, 0, 0, 0, 0, 0, 0]},
    {"item": "Watering Can", "appearances": {"2025-06-01": 0, "2025-06-02": 2}},
    {"item": "Bug Egg", "appearances": [0, 0, 1, 0, 0, 0, 0]},
]

CYCLEON_WEATHER = [
    {"name": "Rain"},
    {"name": "Thunderstorm"},
    {"name": "Frost"},
]

CYCLEON_WEATHER_STATS = [
    {"weather": "Rain", "appearances": [6, 4, 5, 7, 3, 5, 6]},
    {"weather": "Frost", "appearances": [0, 1, 0, 0, 2, 0, 1]},
]

ITEM_PREDICTION = {
    "item": "Carrot Seed",
    "prediction_mode": "cycle",
    "next_occurrences": [
        {"predicted_time": "2025-06-01T12:05:00Z", "confidence": 72.5},
    ],
    "cycle_probabilities": [
        {"cycle": 1, "minutes_from_now": 5, "probability": 41.0},
        {"cycle": 2, "minutes_from_now": 10, "probability": 65.2},
    ],
    "confidence_windows": [
        {"confidence_level": 50, "cycles": 2},
        {"confidence_level": 90, "cycles": 6},
    ],
}

WEATHER_PREDICTION = {
    "weather": "thunderstorm",
    "prediction_mode": "interval",
    "next_occurrences": [{"predicted_time": "2025-06-01T14:00:00Z", "confidence": 55.0}],
    "time_window_probabilities": [{"window_minutes": 60, "probability": 20.0}],
}
