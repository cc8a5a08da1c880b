from typing import Any, Dict, List, Optional, Tuple
import logging

from adapters import cycleon_adapter
from app.exceptions import UpstreamConnectionError, UpstreamError, UpstreamStatusError
from domain.schemas.prediction_schemas import ItemPredictionError, WeatherPredictionError

logger = logging.getLogger("gardenboard.predict")

ITEM_PREDICTION_ARRAYS = ("next_occurrences", "cycle_probabilities", "confidence_windows")
WEATHER_PREDICTION_ARRAYS = ("next_occurrences", "time_window_probabilities", "confidence_windows")

WEATHER_SUGGESTION = 'Try a different weather name like "sunny", "rain", or "storm"'


def _ensure_arrays(payload: Dict[str, Any], keys: Tuple[str, ...]) -> Dict[str, Any]:
    for key in keys:
        if payload.get(key) is None:
            payload[key] = []
    return payload


def _require_object(payload: Any, url: Optional[str] = None) -> Dict[str, Any]:
    if not isinstance(payload, dict):
        raise UpstreamConnectionError("Prediction API returned an unexpected payload", url)
    return payload


def weather_name_variants(weather: str) -> List[str]:
    """
    Spellings of a weather name to try against the prediction API, in order.

    The upstream is picky about weather keys ("thunderstorm" vs "Thunder Storm"
    vs "thunder_storm"); duplicates are dropped while keeping order.
    """
    lowered = weather.lower()
    variants = [lowered, lowered.replace(" ", "_"), weather]
    return list(dict.fromkeys(variants))


class PredictionService:
    """Relays restock/occurrence predictions computed by the Cycleon API.

    Each method returns ``(body, status_code)`` so routes can mirror the
    upstream outcome without re-deriving it.
    """

    @staticmethod
    def predict_item(item: str) -> Tuple[Dict[str, Any], int]:
        logger.info(f"[ITEM PREDICT] Starting prediction for: {item}")
        try:
            prediction = _require_object(cycleon_adapter.predict_item(item))
        except UpstreamStatusError as e:
            if e.status_code == 404:
                message = e.detail or "Item not found in prediction database"
                logger.warning(f"Item not found in API: item={item} error={message}")
                return ItemPredictionError(item=item, error=message).model_dump(mode="json"), 404

            logger.warning(f"Item prediction API error: status={e.status_code} item={item} response={e.text[:500]}")
            error = ItemPredictionError(item=item, error=f"Prediction API returned status: {e.status_code}")
            return error.model_dump(mode="json"), e.status_code
        except UpstreamError as e:
            logger.error(f"Item prediction failed: {e}")
            error = ItemPredictionError(item=item, error=f"Connection failed: {e}")
            return error.model_dump(mode="json"), 503

        _ensure_arrays(prediction, ITEM_PREDICTION_ARRAYS)
        logger.info(
            f"Item prediction successful: item={item} "
            f"confidence_windows_count={len(prediction['confidence_windows'])}"
        )
        return prediction, 200

    @staticmethod
    def predict_weather(weather: str) -> Tuple[Dict[str, Any], int]:
        logger.info(f"[WEATHER PREDICT] Starting prediction for: {weather}")

        last_error: Optional[str] = None
        for variant in weather_name_variants(weather):
            logger.info(f"Trying weather format: {variant}")
            try:
                prediction = _require_object(cycleon_adapter.predict_weather(variant))
            except UpstreamStatusError as e:
                last_error = e.detail or f"HTTP {e.status_code}"
                logger.warning(f"Weather format failed: {variant} status={e.status_code} error={last_error}")
                continue
            except UpstreamError as e:
                last_error = str(e)
                logger.warning(f"Weather format error: {e}")
                continue

            logger.info(f"Weather prediction successful: weather={weather} format_used={variant}")
            return _ensure_arrays(prediction, WEATHER_PREDICTION_ARRAYS), 200

        logger.error(f"All weather formats failed for: {weather}")
        error = WeatherPredictionError(
            weather=weather,
            error=f"Weather prediction failed: {last_error or 'Unknown error'}",
            suggestion=WEATHER_SUGGESTION,
        )
        return error.model_dump(mode="json"), 404

    @staticmethod
    def connection_failure(weather: str, exc: Exception) -> Dict[str, Any]:
        """Body for an unexpected failure outside the variant loop."""
        error = WeatherPredictionError(weather=weather, error=f"Connection failed: {exc}")
        return error.model_dump(mode="json", exclude_none=True)
