"""CLI entry point for SkyLens."""

import argparse
import asyncio
import logging

from skylens.config.loader import get_config_value, load_config
from skylens.config.schema import AppConfig
from skylens.ingest.weather_client import WeatherClient
from skylens.models.common import City, TemperatureUnit
from skylens.presenters.contact_presenter import ContactPresenter, SimulatedSubmitter
from skylens.presenters.formatters import format_weather_json, format_weather_text
from skylens.presenters.weather_presenter import WeatherPresenter
from skylens.storage.database import open_database
from skylens.storage.preferences import SqlitePreferencesStore


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(
        prog="skylens",
        description="Current weather for Canadian cities",
    )
    parser.add_argument("--config", default=None, help="Config YAML path")
    parser.add_argument("--db", default=None, help="SQLite preferences DB path")
    parser.add_argument(
        "-v", "--verbose", action="store_true", help="Enable debug logging"
    )

    sub = parser.add_subparsers(dest="command")

    # weather
    weather_p = sub.add_parser("weather", help="Show current weather")
    weather_p.add_argument("--city", help="City name (saved as last city)")
    weather_p.add_argument(
        "--unit",
        choices=[u.value for u in TemperatureUnit],
        help="Temperature unit (saved as preferred unit)",
    )
    weather_p.add_argument("--json", action="store_true", help="JSON output")

    # cities / city / unit
    sub.add_parser("cities", help="List available cities")
    city_p = sub.add_parser("city", help="Set the default city")
    city_p.add_argument("name")
    unit_p = sub.add_parser("unit", help="Set or toggle the temperature unit")
    unit_p.add_argument(
        "value",
        nargs="?",
        default="toggle",
        choices=["toggle"] + [u.value for u in TemperatureUnit],
    )

    # contact
    contact_p = sub.add_parser("contact", help="Send a contact message")
    contact_p.add_argument("--name", default="")
    contact_p.add_argument("--email", default="")
    contact_p.add_argument("--phone", default="")

    # config show / config get
    config_p = sub.add_parser("config", help="Config operations")
    config_sub = config_p.add_subparsers(dest="config_command")
    config_sub.add_parser("show", help="Display current config")
    get_p = config_sub.add_parser("get", help="Get a config value")
    get_p.add_argument("key", help="Dotted key, e.g. api.timeout_seconds")

    args = parser.parse_args(argv)

    if args.command is None:
        parser.print_help()
        return 1

    config = load_config(args.config)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else config.log_level,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    if args.command == "weather":
        return _cmd_weather(config, args)
    elif args.command == "cities":
        return _cmd_cities(config, args)
    elif args.command == "city":
        return _cmd_city(config, args)
    elif args.command == "unit":
        return _cmd_unit(config, args)
    elif args.command == "contact":
        return _cmd_contact(config, args)
    elif args.command == "config":
        return _cmd_config(config, args)
    else:
        parser.print_help()
        return 1


def _db_path(config: AppConfig, args) -> str:
    return args.db or config.storage.db_path


def _cmd_weather(config: AppConfig, args) -> int:
    city: City | None = None
    if args.city:
        try:
            city = City.from_name(args.city)
        except ValueError as e:
            print(f"Error: {e}")
            return 1

    conn = open_database(_db_path(config, args))
    client = WeatherClient(
        base_url=config.api.base_url,
        timeout=config.api.timeout_seconds,
        user_agent=config.api.user_agent,
    )
    store = SqlitePreferencesStore(conn)
    # Unit is stored before the presenter loads it so a combined change fetches once
    if args.unit:
        store.save_preferred_unit(TemperatureUnit(args.unit))
    presenter = WeatherPresenter(client, store)

    async def run() -> None:
        if city is not None and city != presenter.selected_city:
            await presenter.select_city(city)
        else:
            await presenter.fetch_weather()

    try:
        asyncio.run(run())
    finally:
        conn.close()

    if args.json:
        print(format_weather_json(presenter))
    else:
        print(format_weather_text(presenter))
    return 0 if presenter.is_loaded else 1


def _cmd_cities(config: AppConfig, args) -> int:
    conn = open_database(_db_path(config, args))
    selected = SqlitePreferencesStore(conn).get_last_city()
    conn.close()
    for city in City:
        marker = "*" if city == selected else " "
        print(f"{marker} {city.display_name:<10} {city.provider_code}")
    return 0


def _cmd_city(config: AppConfig, args) -> int:
    try:
        city = City.from_name(args.name)
    except ValueError as e:
        print(f"Error: {e}")
        return 1
    conn = open_database(_db_path(config, args))
    SqlitePreferencesStore(conn).save_last_city(city)
    conn.close()
    print(f"City: {city.display_name}")
    return 0


def _cmd_unit(config: AppConfig, args) -> int:
    conn = open_database(_db_path(config, args))
    store = SqlitePreferencesStore(conn)
    if args.value == "toggle":
        unit = store.get_preferred_unit().toggled()
    else:
        unit = TemperatureUnit(args.value)
    store.save_preferred_unit(unit)
    conn.close()
    print(f"Unit: {unit.value} ({unit.symbol})")
    return 0


def _cmd_contact(config: AppConfig, args) -> int:
    presenter = ContactPresenter(
        SimulatedSubmitter(config.contact.submission_delay_seconds)
    )
    presenter.contact.name = args.name
    presenter.contact.email = args.email
    presenter.contact.phone = args.phone

    if not asyncio.run(presenter.submit_form()):
        for message in presenter.error_messages:
            print(f"- {message}")
        return 1
    print("Message sent. Thank you for reaching out!")
    return 0


def _cmd_config(config: AppConfig, args) -> int:
    if args.config_command == "show":
        print(config.model_dump_json(indent=2))
        return 0
    elif args.config_command == "get":
        try:
            print(get_config_value(config, args.key))
            return 0
        except KeyError as e:
            print(f"Error: {e}")
            return 1
    else:
        print("Use: config show | config get key")
        return 1
