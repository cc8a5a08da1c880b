"""Services package - Business logic layer"""

from services.stock_service import StockService
from services.events_service import EventsService
from services.forecast_service import ForecastService
from services.prediction_service import PredictionService
from services.restock_service import RestockService

__all__ = [
    "StockService",
    "EventsService",
    "ForecastService",
    "PredictionService",
    "RestockService",
]
