"""Pydantic v2 configuration schema with strict validation."""

from enum import StrEnum

from pydantic import BaseModel, Field, field_validator, model_validator

from weatherapp.config.defaults import (
    DEFAULT_FORECAST_DAYS,
    DEFAULT_LISTEN_HOST,
    DEFAULT_LISTEN_PORT,
    DEFAULT_SERVICE_BASE_URL,
    MAX_TEMPERATURE_C,
    MIN_TEMPERATURE_C,
)


class EnvironmentMode(StrEnum):
    DEVELOPMENT = "development"
    PRODUCTION = "production"


class ServiceConfig(BaseModel):
    model_config = {"extra": "forbid"}

    listen_host: str = DEFAULT_LISTEN_HOST
    listen_port: int = Field(default=DEFAULT_LISTEN_PORT, ge=1, le=65535)
    environment: EnvironmentMode = EnvironmentMode.PRODUCTION
    forecast_days: int = Field(default=DEFAULT_FORECAST_DAYS, ge=1, le=14)
    min_temperature_c: int = Field(default=MIN_TEMPERATURE_C, ge=MIN_TEMPERATURE_C, le=MAX_TEMPERATURE_C)
    max_temperature_c: int = Field(default=MAX_TEMPERATURE_C, ge=MIN_TEMPERATURE_C, le=MAX_TEMPERATURE_C)

    @model_validator(mode="after")
    def _check_temperature_range(self) -> "ServiceConfig":
        if self.min_temperature_c > self.max_temperature_c:
            raise ValueError(
                f"min_temperature_c ({self.min_temperature_c}) exceeds "
                f"max_temperature_c ({self.max_temperature_c})"
            )
        return self

    @property
    def debug(self) -> bool:
        return self.environment == EnvironmentMode.DEVELOPMENT


class ClientConfig(BaseModel):
    model_config = {"extra": "forbid"}

    listen_host: str = DEFAULT_LISTEN_HOST
    listen_port: int = Field(default=DEFAULT_LISTEN_PORT, ge=1, le=65535)
    environment: EnvironmentMode = EnvironmentMode.PRODUCTION
    service_base_url: str = DEFAULT_SERVICE_BASE_URL
    request_timeout_seconds: float = Field(default=5.0, gt=0.0, le=60.0)
    max_retries: int = Field(default=1, ge=0, le=3)
    retry_delay_seconds: float = Field(default=0.5, ge=0.0, le=10.0)

    @field_validator("service_base_url")
    @classmethod
    def _normalize_base_url(cls, v: str) -> str:
        v = v.strip().rstrip("/")
        if not v.startswith(("http://", "https://")):
            raise ValueError(f"service_base_url must be http(s): {v!r}")
        return v

    @property
    def debug(self) -> bool:
        return self.environment == EnvironmentMode.DEVELOPMENT


class AppConfig(BaseModel):
    model_config = {"extra": "forbid"}

    service: ServiceConfig = ServiceConfig()
    client: ClientConfig = ClientConfig()
