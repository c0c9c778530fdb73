"""Fetch error taxonomy surfaced by the forecast client."""


class ForecastFetchError(Exception):
    """Base class for every way a forecast fetch can fail."""

    kind = "FetchError"

    def __init__(self, message: str, url: str = ""):
        super().__init__(message)
        self.url = url


class NetworkUnreachableError(ForecastFetchError):
    kind = "NetworkUnreachable"


class UpstreamNonSuccessError(ForecastFetchError):
    kind = "UpstreamNonSuccess"

    def __init__(self, message: str, url: str = "", status_code: int = 0):
        super().__init__(message, url)
        self.status_code = status_code


class MalformedPayloadError(ForecastFetchError):
    kind = "MalformedPayload"


class UpstreamTimeoutError(ForecastFetchError):
    kind = "Timeout"
