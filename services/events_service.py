from typing import Any, Dict, Optional
from datetime import datetime
import logging

from adapters import gag_adapter
from app.config import settings
from app.exceptions import UpstreamError, UpstreamStatusError
from core.utils.helpers import iso_timestamp, to_unix_timestamp, ucfirst, utc_now
from domain.enums import Game
from domain.schemas.event_schemas import EventsResponse, WeatherEvent

logger = logging.getLogger("gardenboard.events")

EVENT_DURATION_SECONDS = 3600


class EventsService:
    @staticmethod
    def empty(now: Optional[datetime] = None) -> EventsResponse:
        return EventsResponse(events=[], last_seen_events=[], next_event=None, timestamp=iso_timestamp(now))

    @staticmethod
    def build_event(weather: Dict[str, Any], now: Optional[datetime] = None) -> WeatherEvent:
        """
        Map the aggregator's weather object onto the dashboard event shape.

        Args:
            weather: upstream payload; must carry a ``type``
            now: reference time used when ``lastUpdated`` is missing

        Returns:
            WeatherEvent lasting one hour from its last-seen timestamp
        """
        weather_type = str(weather["type"])

        last_seen = to_unix_timestamp(weather.get("lastUpdated"), now)
        if last_seen is None:
            logger.warning(f"Unparseable lastUpdated {weather.get('lastUpdated')!r}, using current time")
            last_seen = int((now or utc_now()).timestamp())

        active = weather.get("active")
        if not isinstance(active, bool):
            active = False

        effects = weather.get("effects")
        if effects is None:
            effects = ["No effects"]
        elif not isinstance(effects, list):
            effects = [effects]

        return WeatherEvent(
            name=weather_type,
            display_name=ucfirst(weather_type),
            image=settings.image_cdn_base_url + weather_type.lower(),
            description=", ".join(str(effect) for effect in effects),
            last_seen=last_seen,
            start_timestamp_unix=last_seen,
            end_timestamp_unix=last_seen + EVENT_DURATION_SECONDS,
            active=active,
            duration=EVENT_DURATION_SECONDS,
        )

    @staticmethod
    def get_events(game: str = Game.GROW_A_GARDEN.value) -> EventsResponse:
        """Current weather event, or the empty feed when anything goes wrong."""
        if game != Game.GROW_A_GARDEN.value:
            return EventsService.empty()

        try:
            logger.info("Fetching weather data for GAG")
            weather = gag_adapter.fetch_weather()

            if isinstance(weather, dict) and weather.get("type") is not None:
                logger.info(f"Weather data received: type={weather['type']}")
                now = utc_now()
                return EventsResponse(
                    events=[],
                    last_seen_events=[EventsService.build_event(weather, now)],
                    next_event=None,
                    timestamp=iso_timestamp(now),
                )

            logger.warning("Weather API returned invalid data")
        except UpstreamStatusError as e:
            logger.warning(f"Weather API failed: HTTP {e.status_code}")
        except UpstreamError as e:
            logger.error(f"Weather API failed: {e}")

        return EventsService.empty()
