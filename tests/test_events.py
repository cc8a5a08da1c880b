"""
Weather event proxy tests.
"""

from datetime import datetime, timezone

import pytest

from test_fixtures import client, GAG_WEATHER
from app.config import settings
from services.events_service import EventsService, EVENT_DURATION_SECONDS

NOW = datetime(2025, 6, 1, 12, 30, tzinfo=timezone.utc)
NOW_UNIX = int(NOW.timestamp())
WEATHER_UNIX = 1748779200  # 2025-06-01T12:00:00Z


def test_build_event_from_weather():
    event = EventsService.build_event(GAG_WEATHER, NOW)

    assert event.name == "rain"
    assert event.display_name == "Rain"
    assert event.image == settings.image_cdn_base_url + "rain"
    assert event.description == "Wet mutation chance, Faster growth"
    assert event.last_seen == WEATHER_UNIX
    assert event.start_timestamp_unix == WEATHER_UNIX
    assert event.end_timestamp_unix == WEATHER_UNIX + EVENT_DURATION_SECONDS
    assert event.active is True
    assert event.duration == 3600


def test_build_event_without_effects():
    event = EventsService.build_event({"type": "frost", "effects": None}, NOW)
    assert event.description == "No effects"
    assert event.active is False


@pytest.mark.parametrize("raw", ["false", "true", 1, None])
def test_build_event_active_only_relays_booleans(raw):
    event = EventsService.build_event({"type": "frost", "active": raw}, NOW)
    assert event.active is False


def test_build_event_missing_last_updated_uses_now():
    event = EventsService.build_event({"type": "frost"}, NOW)
    assert event.last_seen == NOW_UNIX
    assert event.end_timestamp_unix == NOW_UNIX + 3600


def test_build_event_numeric_last_updated_kept():
    event = EventsService.build_event({"type": "frost", "lastUpdated": 1700000000}, NOW)
    assert event.last_seen == 1700000000


def test_build_event_garbage_last_updated_falls_back_to_now():
    event = EventsService.build_event({"type": "frost", "lastUpdated": "yesterday-ish"}, NOW)
    assert event.last_seen == NOW_UNIX


def test_build_event_display_name_only_capitalizes_first_letter():
    event = EventsService.build_event({"type": "blood moon"}, NOW)
    assert event.display_name == "Blood moon"
    assert event.image == settings.image_cdn_base_url + "blood moon"


def test_empty_feed():
    feed = EventsService.empty(NOW)
    assert feed.events == []
    assert feed.last_seen_events == []
    assert feed.next_event is None
    assert feed.timestamp == "2025-06-01T12:30:00.000000Z"


def test_events_endpoint_shape(gag_upstream):
    gag_upstream.add("/weather", json=GAG_WEATHER)

    r = client.get("/proxy/events")

    assert r.status_code == 200
    body = r.json()
    assert set(body) == {"events", "lastSeenEvents", "nextEvent", "timestamp"}
    assert body["events"] == []
    assert body["nextEvent"] is None
    assert body["timestamp"].endswith("Z")

    assert len(body["lastSeenEvents"]) == 1
    event = body["lastSeenEvents"][0]
    assert event["Name"] == "rain"
    assert event["DisplayName"] == "Rain"
    assert event["Image"] == settings.image_cdn_base_url + "rain"
    assert event["Description"] == "Wet mutation chance, Faster growth"
    assert event["LastSeen"] == WEATHER_UNIX
    assert event["start_timestamp_unix"] == WEATHER_UNIX
    assert event["end_timestamp_unix"] == WEATHER_UNIX + 3600
    assert event["active"] is True
    assert event["duration"] == 3600


def test_events_game_route(gag_upstream):
    gag_upstream.add("/weather", json=GAG_WEATHER)

    r = client.get("/proxy/events/grow-a-garden")

    assert r.status_code == 200
    assert r.json()["lastSeenEvents"][0]["Name"] == "rain"


def test_events_unknown_game_is_empty(gag_upstream):
    r = client.get("/proxy/events/adopt-me")

    assert r.status_code == 200
    assert r.json()["lastSeenEvents"] == []
    assert gag_upstream.calls == []


def test_events_upstream_error_is_empty(gag_upstream):
    gag_upstream.fail("/weather", status=500)

    r = client.get("/proxy/events")

    assert r.status_code == 200
    body = r.json()
    assert body["events"] == []
    assert body["lastSeenEvents"] == []
    assert body["nextEvent"] is None


def test_events_upstream_unreachable_is_empty(gag_upstream):
    gag_upstream.disconnect("/weather")

    r = client.get("/proxy/events")

    assert r.status_code == 200
    assert r.json()["lastSeenEvents"] == []


def test_events_missing_type_is_empty(gag_upstream):
    gag_upstream.add("/weather", json={"active": True, "effects": []})

    r = client.get("/proxy/events")

    assert r.status_code == 200
    assert r.json()["lastSeenEvents"] == []


def test_events_non_json_body_is_empty(gag_upstream):
    gag_upstream.add("/weather", text="<html>maintenance</html>")

    r = client.get("/proxy/events")

    assert r.status_code == 200
    assert r.json()["lastSeenEvents"] == []
