"""CLI entry point for the weather lookup client."""

import argparse
import asyncio
import logging

from skycast.config.loader import get_config_value, load_config
from skycast.config.schema import AppConfig
from skycast.ingest.openweather_client import OpenWeatherClient
from skycast.pipeline.search_session import SearchSession
from skycast.reporting.formatters import (
    MSG_EMPTY_QUERY,
    format_result_json,
    format_result_text,
    format_suggestions,
)

DEFAULT_CONFIG = "config/skycast.yaml"
MASK = "***"


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(
        prog="skycast",
        description="City weather lookup",
    )
    parser.add_argument(
        "--config", default=DEFAULT_CONFIG, help="Config YAML path"
    )
    parser.add_argument(
        "-v", "--verbose", action="store_true", help="Enable debug logging"
    )

    sub = parser.add_subparsers(dest="command")

    # lookup
    lookup_p = sub.add_parser("lookup", help="Current weather and today's range")
    lookup_p.add_argument("city", nargs="?", help="City name (default from config)")
    lookup_p.add_argument(
        "--suggest-first", action="store_true",
        help="Load geocoder suggestions for the city before looking it up",
    )
    lookup_p.add_argument("--json", action="store_true", help="JSON output")

    # suggest
    suggest_p = sub.add_parser("suggest", help="City name suggestions")
    suggest_p.add_argument("query", help="Partial city name")

    # config show / config get
    config_p = sub.add_parser("config", help="Config operations")
    config_sub = config_p.add_subparsers(dest="config_command")
    config_sub.add_parser("show", help="Display current config")
    get_p = config_sub.add_parser("get", help="Display one config value")
    get_p.add_argument("key", help="Dotted key, e.g. search.default_city")

    args = parser.parse_args(argv)

    if args.command is None:
        parser.print_help()
        return 1

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    config = load_config(args.config)

    if args.command == "lookup":
        return asyncio.run(_cmd_lookup(config, args))
    elif args.command == "suggest":
        return asyncio.run(_cmd_suggest(config, args))
    elif args.command == "config":
        return _cmd_config(config, args)
    else:
        parser.print_help()
        return 1


def _session(config: AppConfig) -> SearchSession:
    client = OpenWeatherClient.from_config(config.provider)
    return SearchSession(client, config.search)


async def _cmd_lookup(config: AppConfig, args) -> int:
    city = config.search.default_city if args.city is None else args.city
    if not city.strip():
        print(MSG_EMPTY_QUERY)
        return 1

    session = _session(config)
    if args.suggest_first:
        await session.refresh_suggestions(city)
    result = await session.search(city)
    if result is None:
        return 1

    if args.json:
        print(format_result_json(result))
    else:
        print(format_result_text(result))
    return 0 if result.ok else 1


async def _cmd_suggest(config: AppConfig, args) -> int:
    session = _session(config)
    suggestions = await session.refresh_suggestions(args.query)
    if not suggestions:
        print("No suggestions")
        return 1
    print(format_suggestions(suggestions))
    return 0


def _masked_config(config: AppConfig) -> AppConfig:
    if not config.provider.api_key:
        return config
    provider = config.provider.model_copy(update={"api_key": MASK})
    return config.model_copy(update={"provider": provider})


def _cmd_config(config: AppConfig, args) -> int:
    # The API key never reaches stdout, whichever key path is requested.
    config = _masked_config(config)
    if args.config_command == "show":
        print(config.model_dump_json(indent=2))
        return 0
    elif args.config_command == "get":
        try:
            value = get_config_value(config, args.key)
        except KeyError as e:
            print(f"Error: {e}")
            return 1
        print(f"{args.key} = {value}")
        return 0
    else:
        print("Use: config show | config get key")
        return 1
