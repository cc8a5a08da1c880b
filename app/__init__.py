"""Settings and the exception hierarchy shared by adapters, services and routes."""

from app.config import settings
from app.exceptions import (
    ServiceValidationError,
    NotFoundError,
    UpstreamError,
    UpstreamStatusError,
    UpstreamConnectionError,
)

__all__ = [
    "settings",
    "ServiceValidationError",
    "NotFoundError",
    "UpstreamError",
    "UpstreamStatusError",
    "UpstreamConnectionError",
]
