"""Shared test fixtures."""

from datetime import date
from pathlib import Path

import pytest
import yaml

from weatherapp.config.schema import ClientConfig, ServiceConfig
from weatherapp.models.forecast import ForecastEntry

TEST_SERVICE_URL = "http://test-forecast.example.com"


@pytest.fixture(autouse=True)
def _clean_env(monkeypatch: pytest.MonkeyPatch) -> None:
    """Keep host environment variables out of config resolution."""
    for name in ("SERVICE_BASE_URL", "LISTEN_PORT", "ENVIRONMENT_MODE"):
        monkeypatch.delenv(name, raising=False)


@pytest.fixture
def service_config() -> ServiceConfig:
    return ServiceConfig()


@pytest.fixture
def client_config() -> ClientConfig:
    return ClientConfig(
        service_base_url=TEST_SERVICE_URL,
        request_timeout_seconds=1.0,
        max_retries=1,
        retry_delay_seconds=0.0,
    )


@pytest.fixture
def sample_entries() -> list[ForecastEntry]:
    return [
        ForecastEntry(date=date(2026, 10, 19), temperature_c=-7, summary="Freezing"),
        ForecastEntry(date=date(2026, 10, 20), temperature_c=3, summary="Chilly"),
        ForecastEntry(date=date(2026, 10, 21), temperature_c=14, summary="Mild"),
        ForecastEntry(date=date(2026, 10, 22), temperature_c=31, summary="Hot"),
        ForecastEntry(date=date(2026, 10, 23), temperature_c=44, summary="Scorching"),
    ]


@pytest.fixture
def sample_payload(sample_entries: list[ForecastEntry]) -> list[dict]:
    return [e.to_dict() for e in sample_entries]


@pytest.fixture
def config_yaml_path(tmp_path: Path) -> Path:
    """Write a minimal valid config YAML and return its path."""
    data = {
        "service": {"listen_port": 8080, "forecast_days": 7},
        "client": {
            "listen_port": 8081,
            "service_base_url": "http://forecast-service:8080/",
        },
    }
    path = tmp_path / "test_config.yaml"
    with open(path, "w") as f:
        yaml.dump(data, f)
    return path
