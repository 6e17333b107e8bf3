"""CLI entry point for the weather lookup widget."""

import argparse
import asyncio
import logging

from weatherapp.config.loader import (
    get_config_value,
    load_config,
    redacted_dump,
    require_api_key,
)
from weatherapp.controller import QueryController
from weatherapp.errors import ApiKeyMissing
from weatherapp.models.weather import QueryStatus
from weatherapp.reporting.formatters import format_state_json, format_state_text


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(
        prog="weatherapp",
        description="City weather lookup with 5-day forecast",
    )
    parser.add_argument("--config", default=None, help="Config YAML path")

    sub = parser.add_subparsers(dest="command")

    # lookup
    lookup_p = sub.add_parser("lookup", help="Look up weather for a city")
    lookup_p.add_argument("city", help="City name")
    lookup_p.add_argument(
        "--json", action="store_true", help="Print the view state as JSON"
    )

    # serve
    serve_p = sub.add_parser("serve", help="Serve the browser widget")
    serve_p.add_argument("--host", default=None)
    serve_p.add_argument("--port", type=int, default=None)

    # config show / config get
    config_p = sub.add_parser("config", help="Config operations")
    config_sub = config_p.add_subparsers(dest="config_command")
    config_sub.add_parser("show", help="Display current config")
    get_p = config_sub.add_parser("get", help="Print one config value")
    get_p.add_argument("key", help="Dotted key, e.g. theme.night_start_hour")

    args = parser.parse_args(argv)

    if args.command is None:
        parser.print_help()
        return 1

    logging.basicConfig(
        level=logging.INFO,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    config = load_config(args.config)

    if args.command == "lookup":
        return _cmd_lookup(config, args)
    elif args.command == "serve":
        return _cmd_serve(config, args)
    elif args.command == "config":
        return _cmd_config(config, args)
    else:
        parser.print_help()
        return 1


def _cmd_lookup(config, args) -> int:
    try:
        controller = QueryController.from_config(config, require_api_key(config))
    except ApiKeyMissing as e:
        print(f"Error: {e}")
        return 1

    if not args.city.strip():
        print("Error: city name is empty")
        return 1

    state = asyncio.run(controller.submit_query(args.city))
    theme = controller.theme()
    if args.json:
        print(format_state_json(state, theme, config.display.icon_base_url))
    else:
        print(format_state_text(state, theme))
    return 0 if state.status == QueryStatus.SUCCESS else 1


def _cmd_serve(config, args) -> int:
    from weatherapp.web import serve

    try:
        serve(config, host=args.host, port=args.port)
    except ApiKeyMissing as e:
        print(f"Error: {e}")
        return 1
    return 0


def _cmd_config(config, args) -> int:
    if args.config_command == "show":
        print(redacted_dump(config))
        return 0
    elif args.config_command == "get":
        if args.key.split(".")[-1] == "api_key":
            print("Error: refusing to print the API key")
            return 1
        try:
            print(get_config_value(config, args.key))
            return 0
        except KeyError as e:
            print(f"Error: {e}")
            return 1
    else:
        print("Use: config show | config get key")
        return 1
