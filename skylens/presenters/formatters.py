"""Display formatting for weather values and CLI output."""

import json
from datetime import datetime, tzinfo
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from skylens.presenters.weather_presenter import WeatherPresenter

PLACEHOLDER = "--"


def format_temperature(value: float | None) -> str:
    if value is None:
        return PLACEHOLDER
    return f"{value:.1f}"


def format_timestamp(value: datetime | None, tz: tzinfo | None = None) -> str:
    """Medium date and short time, e.g. 'Oct 18, 2023 at 2:30 PM'.

    Converted to ``tz``, or the local timezone when omitted.
    """
    if value is None:
        return PLACEHOLDER
    local = value.astimezone(tz)
    hour = local.hour % 12 or 12
    return f"{local:%b} {local.day}, {local.year} at {hour}:{local:%M %p}"


def format_weather_text(p: "WeatherPresenter", tz: tzinfo | None = None) -> str:
    """Plain text rendering of the weather presenter."""
    lines = [f"{p.selected_city.display_name} ({p.unit_symbol})"]
    if p.error_message is not None:
        lines.append("Weather Unavailable")
        lines.append(p.error_message)
        return "\n".join(lines)
    if p.is_loading:
        lines.append("Loading weather data...")
        return "\n".join(lines)

    lines.append(f"{p.temperature}{p.unit_symbol}  {p.condition}")
    lines.append(f"Feels like: {p.feels_like}{p.unit_symbol}")
    if p.weather_icon_url:
        lines.append(f"Icon: {p.weather_icon_url}")
    lines.append(f"Last updated: {p.last_updated_text(tz)}")
    return "\n".join(lines)


def format_weather_json(p: "WeatherPresenter") -> str:
    """JSON rendering of the weather presenter for programmatic consumption."""
    info = p.weather_info
    data = {
        "state": p.state_name,
        "error": p.error_message,
        "city": p.selected_city.display_name,
        "unit": p.preferred_unit.value,
        "weather": None,
    }
    if info is not None and p.error_message is None:
        data["weather"] = {
            "city_name": info.city_name,
            "condition": info.condition,
            "temperature": info.temperature,
            "feels_like": info.feels_like,
            "last_updated": info.last_updated.isoformat(),
            "weather_code": info.weather_code,
            "icon_url": info.icon_url,
        }
    return json.dumps(data, indent=2)
