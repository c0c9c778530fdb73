"""CLI entry point for the forecast service and client."""

import argparse
import logging

from weatherapp.client.errors import ForecastFetchError
from weatherapp.client.forecast_client import ForecastClient
from weatherapp.client.renderers import format_forecast_json, format_forecast_text
from weatherapp.config.loader import get_config_value, load_config
from weatherapp.config.schema import AppConfig, EnvironmentMode

logger = logging.getLogger(__name__)


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(
        prog="weatherapp",
        description="Sample weather forecast service and client",
    )
    parser.add_argument(
        "--config", default=None, help="Optional config YAML path"
    )

    sub = parser.add_subparsers(dest="command")

    # serve-service / serve-client
    sub.add_parser("serve-service", help="Run the forecast service")
    sub.add_parser("serve-client", help="Run the forecast client web app")

    # fetch
    fetch_p = sub.add_parser("fetch", help="Fetch the forecast once and print it")
    fetch_p.add_argument(
        "--format", choices=["text", "json"], default="text", help="Output format"
    )

    # config show
    config_p = sub.add_parser("config", help="Config operations")
    config_sub = config_p.add_subparsers(dest="config_command")
    show_p = config_sub.add_parser("show", help="Display resolved config")
    show_p.add_argument("key", nargs="?", help="Dotted key, e.g. client.listen_port")

    args = parser.parse_args(argv)

    if args.command is None:
        parser.print_help()
        return 1

    try:
        config = load_config(args.config)
    except (OSError, ValueError) as e:
        # pydantic's ValidationError is a ValueError
        print(f"Error: invalid configuration: {e}")
        return 1

    _setup_logging(config)

    if args.command == "serve-service":
        return _cmd_serve_service(config)
    elif args.command == "serve-client":
        return _cmd_serve_client(config)
    elif args.command == "fetch":
        return _cmd_fetch(config, args)
    elif args.command == "config":
        return _cmd_config(config, args)
    else:
        parser.print_help()
        return 1


def _setup_logging(config: AppConfig) -> None:
    """Development mode only raises verbosity."""
    debug = EnvironmentMode.DEVELOPMENT in (
        config.service.environment, config.client.environment
    )
    logging.basicConfig(
        level=logging.DEBUG if debug else logging.INFO,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )


def _cmd_serve_service(config: AppConfig) -> int:
    import uvicorn

    from weatherapp.service.app import create_app

    svc = config.service
    app = create_app(svc)
    uvicorn.run(
        app,
        host=svc.listen_host,
        port=svc.listen_port,
        log_level="debug" if svc.debug else "info",
    )
    return 0


def _cmd_serve_client(config: AppConfig) -> int:
    import uvicorn

    from weatherapp.client.app import create_app

    cli = config.client
    app = create_app(cli)
    uvicorn.run(
        app,
        host=cli.listen_host,
        port=cli.listen_port,
        log_level="debug" if cli.debug else "info",
    )
    return 0


def _cmd_fetch(config: AppConfig, args) -> int:
    client = ForecastClient.from_config(config.client)
    try:
        entries = client.get_forecast()
    except ForecastFetchError as e:
        logger.error("Forecast fetch failed [%s]: %s", e.kind, e)
        print(f"Error: forecast unavailable ({e.kind}): {e}")
        return 1

    if args.format == "json":
        print(format_forecast_json(entries))
    else:
        print(format_forecast_text(entries))
    return 0


def _cmd_config(config: AppConfig, args) -> int:
    if args.config_command != "show":
        print("Use: config show [key]")
        return 1
    if args.key is None:
        print(config.model_dump_json(indent=2))
        return 0
    try:
        value = get_config_value(config, args.key)
    except KeyError as e:
        print(f"Error: {e}")
        return 1
    if hasattr(value, "model_dump_json"):
        print(value.model_dump_json(indent=2))
    else:
        print(value)
    return 0
