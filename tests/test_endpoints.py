"""
App-level endpoint tests: health, middleware headers, routing and docs.
"""

import httpx

from test_fixtures import client, GAG_ALLDATA
from app.config import settings


def test_health_check():
    r = client.get("/health-check")
    assert r.status_code == 200
    body = r.json()
    assert body["status"] == "ok"
    assert body["service"] == "GardenBoard"
    assert body["version"] == settings.app_version
    assert "timestamp" in body


def test_request_id_and_timing_headers():
    r = client.get("/health-check")
    assert r.headers["X-Request-ID"]
    assert float(r.headers["X-Process-Time"]) >= 0


def test_request_ids_are_unique():
    first = client.get("/health-check").headers["X-Request-ID"]
    second = client.get("/health-check").headers["X-Request-ID"]
    assert first != second


def test_cors_preflight_allows_configured_origin():
    r = client.options(
        "/proxy/stock",
        headers={
            "Origin": "http://localhost:3000",
            "Access-Control-Request-Method": "GET",
        },
    )
    assert r.status_code == 200
    assert r.headers["access-control-allow-origin"] == "http://localhost:3000"


def test_openapi_lists_proxy_routes():
    r = client.get("/openapi.json")
    assert r.status_code == 200
    paths = r.json()["paths"]
    for path in (
        "/proxy/stock",
        "/proxy/stock/{game}",
        "/proxy/events",
        "/proxy/events/{game}",
        "/proxy/forecast/items",
        "/proxy/forecast/weather",
        "/proxy/forecast/weather-stats/{weather}",
        "/proxy/forecast/all-item-stats",
        "/proxy/forecast/all-weather-stats",
        "/proxy/forecast/item-stats/{item}",
        "/proxy/forecast/items-by-category/{category}",
        "/proxy/forecast/debug-items",
        "/proxy/predict/items/{item}",
        "/proxy/predict/weather/{weather}",
        "/proxy/restock",
        "/proxy/restock/{shop}",
    ):
        assert path in paths


def test_upstream_requests_carry_client_headers(gag_upstream):
    seen = {}

    def capture(request):
        seen.update(request.headers)
        return httpx.Response(200, json=GAG_ALLDATA)

    gag_upstream.routes["/alldata"] = capture

    r = client.get("/proxy/stock")

    assert r.status_code == 200
    assert seen["user-agent"] == settings.user_agent
    assert seen["accept"] == "application/json"


def test_caller_request_id_is_echoed():
    r = client.get("/health-check", headers={"X-Request-ID": "dashboard-42"})
    assert r.headers["X-Request-ID"] == "dashboard-42"
