"""
Forecast routes - appearance statistics relayed from the Cycleon API.
Backs the 7-day appearance charts and the item/weather pickers of the dashboard.
"""

from typing import Any, Callable, Optional
import logging
import traceback

from fastapi import APIRouter, status
from fastapi.responses import JSONResponse

from app.config import settings
from app.exceptions import NotFoundError, UpstreamError, UpstreamStatusError
from domain.schemas.forecast_schemas import DebugItemsResponse, ItemStatsNotFound, ProxyError
from services import ForecastService

router = APIRouter(prefix="/proxy/forecast", tags=["Forecast"])
logger = logging.getLogger("gardenboard.api.forecast")

ERROR_RESPONSES = {
    404: {"model": ProxyError},
    500: {"model": ProxyError},
}


def _relay(fetch: Callable[[], Any], label: str, status_override: Optional[int] = None):
    """
    Return the upstream payload, or the error body for the failure.

    Non-2xx upstream answers keep their status unless ``status_override`` is
    given; transport and decoding failures become a 500.
    """
    try:
        return fetch()
    except UpstreamStatusError as e:
        return JSONResponse(
            status_code=status_override or e.status_code,
            content=ProxyError(error=e.message).model_dump(exclude_none=True),
        )
    except UpstreamError as e:
        logger.error(f"{label} API error: {e}")
        return JSONResponse(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            content=ProxyError(error=str(e)).model_dump(exclude_none=True),
        )


@router.get("/items", responses=ERROR_RESPONSES)
def get_items():
    """All catalogue items, for search and dropdowns."""
    return _relay(ForecastService.get_items, "Items")


@router.get("/weather", responses=ERROR_RESPONSES)
def get_weather():
    """All weather types, for search and dropdowns."""
    return _relay(ForecastService.get_weather_list, "Weather")


@router.get("/weather-stats/{weather}", responses=ERROR_RESPONSES)
def get_weather_stats(weather: str):
    """Appearance statistics for one weather type."""
    return _relay(
        lambda: ForecastService.get_weather_stats(weather),
        "Weather stats",
        status_override=status.HTTP_404_NOT_FOUND,
    )


@router.get("/all-item-stats", responses=ERROR_RESPONSES)
def get_all_item_stats():
    return _relay(ForecastService.get_all_item_stats, "All item stats")


@router.get("/all-weather-stats", responses=ERROR_RESPONSES)
def get_all_weather_stats():
    return _relay(ForecastService.get_all_weather_stats, "All weather stats")


@router.get(
    "/item-stats/{item}",
    responses={404: {"model": ItemStatsNotFound}, 500: {"model": ProxyError}},
)
def get_item_stats(item: str):
    """
    Appearance statistics for a single item, matched by name ignoring case.

    Raises:
        404: If the item has never appeared in the shop
    """
    try:
        return _relay(lambda: ForecastService.find_item_stats(item), "Item stats search")
    except NotFoundError:
        return JSONResponse(
            status_code=status.HTTP_404_NOT_FOUND,
            content=ItemStatsNotFound(item=item).model_dump(),
        )


@router.get("/items-by-category/{category}", responses=ERROR_RESPONSES)
def get_items_by_category(category: str):
    """
    Items sold in shops matching ``category`` that have appeared at least once.

    - **category**: substring of the shop name, e.g. `seed`, `gear`, `egg`
    """
    try:
        return ForecastService.items_by_category(category)
    except UpstreamStatusError as e:
        return JSONResponse(
            status_code=e.status_code,
            content=ProxyError(error=e.message).model_dump(exclude_none=True),
        )
    except Exception as e:
        logger.exception(f"Get items by category error: {e}")
        body = ProxyError(
            error=f"Server error: {e}",
            trace=traceback.format_exc() if settings.debug else None,
        )
        return JSONResponse(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            content=body.model_dump(exclude_none=True),
        )


@router.get("/debug-items", response_model=DebugItemsResponse, responses=ERROR_RESPONSES)
def debug_items_with_stats():
    """Which catalogue items have statistics, grouped by shop category."""
    return _relay(ForecastService.debug_items, "Debug")
