"""API routes package"""

from . import health, stock, events, forecast, predict, restock

__all__ = ["health", "stock", "events", "forecast", "predict", "restock"]
