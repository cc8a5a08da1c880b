"""
Domain schemas package - Pydantic models for the proxied payloads.
"""

from domain.schemas.stock_schemas import StockItem, StockResponse
from domain.schemas.event_schemas import WeatherEvent, EventsResponse
from domain.schemas.forecast_schemas import (
    ProxyError,
    ItemStatsNotFound,
    CategoryItemFlag,
    DebugItemsResponse,
)
from domain.schemas.prediction_schemas import (
    ItemPredictionError,
    WeatherPredictionError,
)
from domain.schemas.restock_schemas import ShopRestock, RestockScheduleResponse

__all__ = [
    "StockItem",
    "StockResponse",
    "WeatherEvent",
    "EventsResponse",
    "ProxyError",
    "ItemStatsNotFound",
    "CategoryItemFlag",
    "DebugItemsResponse",
    "ItemPredictionError",
    "WeatherPredictionError",
    "ShopRestock",
    "RestockScheduleResponse",
]
