"""Tests for the forecast service HTTP interface."""

from datetime import date, timedelta
from unittest.mock import patch

import pytest
from fastapi.testclient import TestClient

from weatherapp.config.defaults import SUMMARIES
from weatherapp.config.schema import ServiceConfig
from weatherapp.models.forecast import forecast_from_list
from weatherapp.service.app import create_app


@pytest.fixture
def client(service_config: ServiceConfig) -> TestClient:
    return TestClient(create_app(service_config))


class TestWeatherForecastEndpoint:
    def test_returns_five_entries(self, client: TestClient):
        resp = client.get("/weatherforecast")
        assert resp.status_code == 200
        data = resp.json()
        assert isinstance(data, list)
        assert len(data) == 5

    def test_entry_shape(self, client: TestClient):
        data = client.get("/weatherforecast").json()
        for item in data:
            assert set(item) == {"date", "temperatureC", "temperatureF", "summary"}
            assert item["summary"] in SUMMARIES
            assert item["temperatureF"] == round(32 + item["temperatureC"] / 0.5556)

    def test_dates_consecutive(self, client: TestClient):
        entries = forecast_from_list(client.get("/weatherforecast").json())
        first = entries[0].date
        assert [e.date for e in entries] == [first + timedelta(days=i) for i in range(5)]
        assert first == date.today()

    def test_configured_days(self):
        client = TestClient(create_app(ServiceConfig(forecast_days=9)))
        assert len(client.get("/weatherforecast").json()) == 9

    def test_configured_range(self):
        config = ServiceConfig(min_temperature_c=5, max_temperature_c=5)
        client = TestClient(create_app(config))
        data = client.get("/weatherforecast").json()
        assert {item["temperatureC"] for item in data} == {5}

    def test_query_parameters_ignored(self, client: TestClient):
        resp = client.get("/weatherforecast", params={"days": 99})
        assert resp.status_code == 200
        assert len(resp.json()) == 5


class TestOtherRoutes:
    def test_unknown_path_is_404(self, client: TestClient):
        resp = client.get("/doesnotexist")
        assert resp.status_code == 404
        assert resp.json() == {"detail": "Not Found"}

    def test_no_https_redirect(self, client: TestClient):
        resp = client.get("/weatherforecast", follow_redirects=False)
        assert resp.status_code == 200

    def test_wrong_method(self, client: TestClient):
        resp = client.post("/weatherforecast")
        assert resp.status_code == 405

    def test_health(self, client: TestClient):
        resp = client.get("/health")
        assert resp.status_code == 200
        assert resp.json() == {
            "status": "ok",
            "service": "forecast-service",
            "environment": "production",
        }


class TestUnhandledFault:
    def test_generic_500(self, service_config: ServiceConfig):
        client = TestClient(create_app(service_config), raise_server_exceptions=False)
        with patch(
            "weatherapp.service.app.generate_forecast",
            side_effect=RuntimeError("boom"),
        ):
            resp = client.get("/weatherforecast")
        assert resp.status_code == 500
        assert resp.json() == {"detail": "Internal Server Error"}

    def test_development_includes_error(self):
        config = ServiceConfig(environment="development")
        client = TestClient(create_app(config), raise_server_exceptions=False)
        with patch(
            "weatherapp.service.app.generate_forecast",
            side_effect=RuntimeError("boom"),
        ):
            resp = client.get("/weatherforecast")
        assert resp.status_code == 500
        assert resp.json()["error"] == "RuntimeError: boom"
