"""
GardenBoard settings, loaded from environment variables or a .env file.

Upstream URLs, per-call timeouts and the restock timezone live here so a
deployment can point the proxy at mirrors or tune it without code changes.
"""

from enum import Enum
from zoneinfo import ZoneInfo, ZoneInfoNotFoundError

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


class Environment(str, Enum):
    DEVELOPMENT = "development"
    STAGING = "staging"
    PRODUCTION = "production"
    TESTING = "testing"


class Settings(BaseSettings):
    model_config = SettingsConfigDict(
        env_file=".env", env_file_encoding="utf-8", case_sensitive=False, extra="ignore"
    )

    # Service
    app_name: str = "GardenBoard"
    app_version: str = "1.0.0"
    environment: Environment = Environment.DEVELOPMENT
    debug: bool = Field(default=False, description="Adds tracebacks to items-by-category errors")
    host: str = "0.0.0.0"
    port: int = Field(default=8000, ge=1, le=65535)

    api_prefix: str = ""
    api_title: str = "GardenBoard API"
    api_description: str = "Grow a Garden stock, weather and forecast proxy"

    # Upstreams
    gag_api_base_url: str = Field(
        default="https://gagapi.onrender.com",
        description="Live stock and weather aggregator",
    )
    cycleon_api_base_url: str = Field(
        default="https://cycleonapi-production.up.railway.app",
        description="Appearance statistics and prediction API",
    )
    cycleon_verify_ssl: bool = Field(
        default=False, description="The prediction API serves a self-signed certificate"
    )
    image_cdn_base_url: str = Field(
        default="https://cdn.3itx.tech/image/GrowAGarden/",
        description="Prefix for item images the aggregator does not provide",
    )
    user_agent: str = Field(default="gardenboard/1.0", min_length=1)

    # Per-call timeouts, seconds
    stock_alldata_timeout: float = Field(default=30.0, gt=0)
    stock_endpoint_timeout: float = Field(default=10.0, gt=0)
    weather_timeout: float = Field(default=10.0, gt=0)
    forecast_timeout: float = Field(default=30.0, gt=0)
    predict_item_timeout: float = Field(default=30.0, gt=0)
    predict_item_connect_timeout: float = Field(default=10.0, gt=0)
    predict_weather_timeout: float = Field(default=15.0, gt=0)
    predict_weather_connect_timeout: float = Field(default=5.0, gt=0)

    # Shops restock on multiples of their interval after local midnight
    restock_timezone: str = "UTC"

    log_level: str = "INFO"
    log_format: str = "%(asctime)s %(levelname)s %(name)s: %(message)s"

    # CORS
    cors_origins: list[str] = ["http://localhost:3000", "http://localhost:8000"]
    cors_allow_credentials: bool = True
    cors_allow_methods: list[str] = ["GET"]
    cors_allow_headers: list[str] = ["*"]

    @field_validator("environment", mode="before")
    @classmethod
    def validate_environment(cls, v):
        if isinstance(v, str):
            return Environment(v.lower())
        return v

    @field_validator("log_level")
    @classmethod
    def validate_log_level(cls, v: str) -> str:
        level = v.upper()
        if level not in LOG_LEVELS:
            raise ValueError(f"log_level must be one of {', '.join(LOG_LEVELS)}")
        return level

    @field_validator("gag_api_base_url", "cycleon_api_base_url")
    @classmethod
    def strip_trailing_slash(cls, v: str) -> str:
        return v.rstrip("/")

    @field_validator("image_cdn_base_url")
    @classmethod
    def ensure_trailing_slash(cls, v: str) -> str:
        return v if v.endswith("/") else v + "/"

    @field_validator("restock_timezone")
    @classmethod
    def validate_timezone(cls, v: str) -> str:
        if v.upper() == "UTC":
            return "UTC"
        try:
            ZoneInfo(v)
        except (ZoneInfoNotFoundError, ValueError):
            raise ValueError(f"Unknown timezone: {v}")
        return v

    @property
    def docs_enabled(self) -> bool:
        """OpenAPI and the interactive docs are hidden in production"""
        return self.environment != Environment.PRODUCTION

    def is_development(self) -> bool:
        return self.environment == Environment.DEVELOPMENT


settings = Settings()
