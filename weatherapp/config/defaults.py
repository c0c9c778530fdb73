"""Default values shared by the service and client configurations."""

DEFAULT_LISTEN_HOST = "0.0.0.0"
DEFAULT_LISTEN_PORT = 80
DEFAULT_FORECAST_DAYS = 5

# Logical network name of the service inside the container network
DEFAULT_SERVICE_BASE_URL = "http://forecast-service"

MIN_TEMPERATURE_C = -20
MAX_TEMPERATURE_C = 55

SUMMARIES: tuple[str, ...] = (
    "Freezing",
    "Bracing",
    "Chilly",
    "Cool",
    "Mild",
    "Warm",
    "Balmy",
    "Hot",
    "Sweltering",
    "Scorching",
)
