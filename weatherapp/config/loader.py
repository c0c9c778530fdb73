"""YAML config loader with environment overrides and dotted-key lookup."""

import logging
import os
from collections.abc import Mapping
from pathlib import Path
from typing import Any

import yaml

from weatherapp.config.schema import AppConfig

logger = logging.getLogger(__name__)

ENV_SERVICE_BASE_URL = "SERVICE_BASE_URL"
ENV_LISTEN_PORT = "LISTEN_PORT"
ENV_ENVIRONMENT_MODE = "ENVIRONMENT_MODE"


def load_config(
    path: str | Path | None = None,
    environ: Mapping[str, str] | None = None,
) -> AppConfig:
    """Load and validate config from an optional YAML file plus environment.

    Environment variables win over the file:
      SERVICE_BASE_URL -> client.service_base_url
      LISTEN_PORT      -> service.listen_port and client.listen_port
      ENVIRONMENT_MODE -> service.environment and client.environment
    """
    raw: dict[str, Any] = {}
    if path is not None:
        path = Path(path)
        with open(path) as f:
            raw = yaml.safe_load(f) or {}
        if not isinstance(raw, dict):
            raise ValueError(f"Config file {path} must contain a mapping")

    if environ is None:
        environ = os.environ
    raw = apply_env_overrides(raw, environ)
    return AppConfig(**raw)


def apply_env_overrides(raw: dict[str, Any], environ: Mapping[str, str]) -> dict[str, Any]:
    """Return a copy of the raw config dict with recognized env vars applied."""
    data = {k: dict(v) if isinstance(v, dict) else v for k, v in raw.items()}
    for section in ("service", "client"):
        value = data.get(section)
        # An empty YAML section ("service:") loads as None
        if value is None:
            data[section] = {}
        elif not isinstance(value, dict):
            raise ValueError(
                f"Config section '{section}' must be a mapping, got {type(value).__name__}"
            )
    service = data["service"]
    client = data["client"]

    base_url = environ.get(ENV_SERVICE_BASE_URL)
    if base_url:
        client["service_base_url"] = base_url
        logger.debug("Service base URL from environment: %s", base_url)

    port = environ.get(ENV_LISTEN_PORT)
    if port:
        service["listen_port"] = port
        client["listen_port"] = port

    mode = environ.get(ENV_ENVIRONMENT_MODE)
    if mode:
        service["environment"] = mode.strip().lower()
        client["environment"] = mode.strip().lower()

    return data


def get_config_value(config: AppConfig, dotted_key: str) -> Any:
    """Get a config value by dotted key path. E.g. 'client.service_base_url'."""
    parts = dotted_key.split(".")
    obj: Any = config
    for part in parts:
        if isinstance(obj, dict):
            obj = obj[part]
        elif part in getattr(type(obj), "model_fields", {}):
            obj = getattr(obj, part)
        else:
            raise KeyError(f"Config key not found: {dotted_key}")
    return obj
