"""Forecast Service HTTP client with bounded timeout and a single retry."""

import logging
import time

import httpx

from weatherapp import __version__
from weatherapp.client.errors import (
    ForecastFetchError,
    MalformedPayloadError,
    NetworkUnreachableError,
    UpstreamNonSuccessError,
    UpstreamTimeoutError,
)
from weatherapp.config.schema import ClientConfig
from weatherapp.models.forecast import ForecastEntry, forecast_from_list

logger = logging.getLogger(__name__)

FORECAST_PATH = "/weatherforecast"
HEALTH_PATH = "/health"
DEFAULT_USER_AGENT = f"weatherapp-client/{__version__}"


class ForecastClient:
    def __init__(
        self,
        base_url: str,
        timeout: float = 5.0,
        max_retries: int = 1,
        retry_delay: float = 0.5,
        user_agent: str = DEFAULT_USER_AGENT,
    ):
        self.base_url = base_url.rstrip("/")
        self.timeout = timeout
        self.max_retries = max_retries
        self.retry_delay = retry_delay
        self.user_agent = user_agent

    @classmethod
    def from_config(cls, config: ClientConfig) -> "ForecastClient":
        return cls(
            base_url=config.service_base_url,
            timeout=config.request_timeout_seconds,
            max_retries=config.max_retries,
            retry_delay=config.retry_delay_seconds,
        )

    @property
    def forecast_url(self) -> str:
        return f"{self.base_url}{FORECAST_PATH}"

    def get_forecast(self) -> list[ForecastEntry]:
        """Fetch and deserialize the forecast sequence.

        Transport errors, timeouts and 5xx responses are retried up to
        max_retries times; 4xx and malformed payloads fail immediately.
        Raises a ForecastFetchError subclass on failure.
        """
        url = self.forecast_url
        last_error: ForecastFetchError | None = None
        for attempt in range(self.max_retries + 1):
            try:
                return self._fetch_once(url)
            except (NetworkUnreachableError, UpstreamTimeoutError) as e:
                last_error = e
            except UpstreamNonSuccessError as e:
                if e.status_code < 500:
                    raise
                last_error = e

            if attempt < self.max_retries:
                logger.warning(
                    "Forecast fetch from %s failed (%s), retrying in %.1fs (attempt %d/%d)",
                    url, last_error.kind, self.retry_delay, attempt + 1, self.max_retries,
                )
                time.sleep(self.retry_delay)

        assert last_error is not None
        raise last_error

    def _fetch_once(self, url: str) -> list[ForecastEntry]:
        headers = {"User-Agent": self.user_agent, "Accept": "application/json"}
        try:
            resp = httpx.get(url, headers=headers, timeout=self.timeout)
        except httpx.TimeoutException as e:
            raise UpstreamTimeoutError(
                f"Forecast service timed out after {self.timeout:.1f}s: {e}", url
            ) from e
        except httpx.RequestError as e:
            raise NetworkUnreachableError(
                f"Forecast service unreachable: {e}", url
            ) from e

        if not resp.is_success:
            raise UpstreamNonSuccessError(
                f"Forecast service returned {resp.status_code}",
                url,
                status_code=resp.status_code,
            )

        try:
            return forecast_from_list(resp.json())
        except ValueError as e:
            # json.JSONDecodeError is a ValueError too
            raise MalformedPayloadError(f"Malformed forecast payload: {e}", url) from e

    def check_service(self) -> bool:
        """Probe the service health endpoint. Never raises."""
        try:
            resp = httpx.get(
                f"{self.base_url}{HEALTH_PATH}",
                headers={"User-Agent": self.user_agent},
                timeout=self.timeout,
            )
            return resp.status_code == 200
        except httpx.HTTPError:
            return False
