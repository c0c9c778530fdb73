"""Forecast Client: FastAPI app rendering the upstream forecast."""

import logging

from fastapi import APIRouter, FastAPI, Request
from fastapi.responses import HTMLResponse, JSONResponse

from weatherapp import __version__
from weatherapp.client.errors import ForecastFetchError
from weatherapp.client.forecast_client import ForecastClient
from weatherapp.client.renderers import (
    UNAVAILABLE_TITLE,
    render_error_page,
    render_forecast_page,
)
from weatherapp.config.schema import ClientConfig

logger = logging.getLogger(__name__)

CLIENT_NAME = "forecast-client"

router = APIRouter()


def create_app(
    config: ClientConfig | None = None,
    forecast_client: ForecastClient | None = None,
) -> FastAPI:
    """Build the client app. No request is made to the service at startup."""
    config = config or ClientConfig()
    app = FastAPI(title="Forecast Client", version=__version__)
    app.state.config = config
    app.state.forecast_client = forecast_client or ForecastClient.from_config(config)
    app.include_router(router)
    logger.info(
        "Forecast client configured: service=%s timeout=%.1fs retries=%d",
        config.service_base_url, config.request_timeout_seconds, config.max_retries,
    )
    return app


def _log_fetch_error(e: ForecastFetchError) -> None:
    logger.error("Forecast fetch failed [%s] from %s: %s", e.kind, e.url, e)


# ── Pages ───────────────────────────────────────────────────────


@router.get("/", response_class=HTMLResponse)
def index(request: Request) -> HTMLResponse:
    config: ClientConfig = request.app.state.config
    client: ForecastClient = request.app.state.forecast_client
    try:
        entries = client.get_forecast()
    except ForecastFetchError as e:
        _log_fetch_error(e)
        html = render_error_page(
            e, service_url=client.base_url, show_detail=config.debug
        )
        return HTMLResponse(html, status_code=502)
    return HTMLResponse(render_forecast_page(entries, service_url=client.base_url))


# ── Data endpoints ──────────────────────────────────────────────


@router.get("/api/forecast")
def forward_forecast(request: Request):
    """Forward the upstream forecast as JSON."""
    client: ForecastClient = request.app.state.forecast_client
    try:
        entries = client.get_forecast()
    except ForecastFetchError as e:
        _log_fetch_error(e)
        return JSONResponse(
            {"error": e.kind, "detail": UNAVAILABLE_TITLE}, status_code=502
        )
    return [e.to_dict() for e in entries]


@router.get("/health")
def get_health(request: Request) -> dict:
    """Client liveness; reports upstream reachability without failing on it."""
    client: ForecastClient = request.app.state.forecast_client
    return {
        "status": "ok",
        "service": CLIENT_NAME,
        "upstream_reachable": client.check_service(),
    }
