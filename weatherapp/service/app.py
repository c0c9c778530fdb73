"""Forecast Service: FastAPI app serving freshly generated forecasts."""

import logging

from fastapi import APIRouter, FastAPI, Request
from fastapi.responses import JSONResponse

from weatherapp import __version__
from weatherapp.config.schema import ServiceConfig
from weatherapp.service.generator import generate_forecast

logger = logging.getLogger(__name__)

SERVICE_NAME = "forecast-service"

router = APIRouter()


def create_app(config: ServiceConfig | None = None) -> FastAPI:
    """Build the service app around an injected configuration.

    No HTTPS redirect is installed: TLS is terminated outside the container.
    """
    config = config or ServiceConfig()
    app = FastAPI(title="Forecast Service", version=__version__)
    app.state.config = config
    app.include_router(router)
    app.add_exception_handler(Exception, _unhandled_fault)
    logger.info(
        "Forecast service configured: environment=%s days=%d range=%d..%d",
        config.environment.value, config.forecast_days,
        config.min_temperature_c, config.max_temperature_c,
    )
    return app


@router.get("/weatherforecast")
def get_weather_forecast(request: Request) -> list[dict]:
    """Freshly generated forecast; nothing is cached between requests."""
    config: ServiceConfig = request.app.state.config
    entries = generate_forecast(
        config.forecast_days,
        min_temp_c=config.min_temperature_c,
        max_temp_c=config.max_temperature_c,
    )
    logger.debug("Generated %d forecast entries from %s", len(entries), entries[0].date)
    return [e.to_dict() for e in entries]


@router.get("/health")
def get_health(request: Request) -> dict:
    config: ServiceConfig = request.app.state.config
    return {
        "status": "ok",
        "service": SERVICE_NAME,
        "environment": config.environment.value,
    }


async def _unhandled_fault(request: Request, exc: Exception) -> JSONResponse:
    logger.exception("Unhandled fault on %s %s", request.method, request.url.path)
    body = {"detail": "Internal Server Error"}
    config: ServiceConfig = request.app.state.config
    if config.debug:
        body["error"] = f"{type(exc).__name__}: {exc}"
    return JSONResponse(body, status_code=500)
