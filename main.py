"""
GardenBoard FastAPI Application
Proxy for Grow a Garden shop stock, weather events, appearance forecasts,
restock predictions and the per-shop restock countdowns.
"""

from contextlib import asynccontextmanager
import logging

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
import uvicorn

from adapters import gag_adapter, cycleon_adapter
from api.middleware import RequestLoggingMiddleware, register_exception_handlers
from api.routes import health, stock, events, forecast, predict, restock
from app.config import settings

logging.basicConfig(level=settings.log_level, format=settings.log_format)
_logger = logging.getLogger("gardenboard.main")

UPSTREAM_ADAPTERS = (gag_adapter, cycleon_adapter)
ROUTERS = (health, stock, events, forecast, predict, restock)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Open one HTTP client per upstream for the app's lifetime."""
    _logger.info(f"Starting {settings.app_name} in {settings.environment.value} mode")

    for adapter in UPSTREAM_ADAPTERS:
        adapter.connect()
    if not settings.cycleon_verify_ssl:
        _logger.warning(f"TLS verification is disabled for {settings.cycleon_api_base_url}")

    try:
        yield
    finally:
        _logger.info(f"Shutting down {settings.app_name}")
        for adapter in UPSTREAM_ADAPTERS:
            adapter.close()


docs_prefix = settings.api_prefix if settings.docs_enabled else None

app = FastAPI(
    title=settings.api_title,
    version=settings.app_version,
    description=settings.api_description,
    lifespan=lifespan,
    debug=settings.debug,
    openapi_url=f"{docs_prefix}/openapi.json" if docs_prefix is not None else None,
    docs_url=f"{docs_prefix}/docs" if docs_prefix is not None else None,
    redoc_url=f"{docs_prefix}/redoc" if docs_prefix is not None else None,
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins,
    allow_credentials=settings.cors_allow_credentials,
    allow_methods=settings.cors_allow_methods,
    allow_headers=settings.cors_allow_headers,
)
app.add_middleware(RequestLoggingMiddleware)

register_exception_handlers(app)

for module in ROUTERS:
    app.include_router(module.router, prefix=settings.api_prefix)


if __name__ == "__main__":
    uvicorn.run(
        "main:app",
        host=settings.host,
        port=settings.port,
        reload=settings.is_development(),
        log_level=settings.log_level.lower(),
    )
