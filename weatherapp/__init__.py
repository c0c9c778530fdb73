"""Sample weather forecast service and its consuming client."""

__version__ = "0.1.0"
