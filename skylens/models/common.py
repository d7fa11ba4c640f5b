"""Common types and helpers shared across models."""

from datetime import UTC, datetime
from enum import StrEnum


class City(StrEnum):
    """Supported cities, valued by their weather provider place code."""

    TORONTO = "CAON0696"
    MONTREAL = "CAON0423"
    OTTAWA = "CAON0512"
    VANCOUVER = "CABC0308"
    CALGARY = "CAAB0049"

    @property
    def provider_code(self) -> str:
        return self.value

    @property
    def display_name(self) -> str:
        return _DISPLAY_NAMES[self]

    @classmethod
    def from_name(cls, name: str) -> "City":
        """Look up a city by display name, member name, or provider code."""
        needle = name.strip().lower()
        for city in cls:
            if needle in (city.display_name.lower(), city.name.lower(), city.value.lower()):
                return city
        raise ValueError(f"Unknown city: {name!r}")


_DISPLAY_NAMES: dict[City, str] = {
    City.TORONTO: "Toronto",
    City.MONTREAL: "Montreal",
    City.OTTAWA: "Ottawa",
    City.VANCOUVER: "Vancouver",
    City.CALGARY: "Calgary",
}

DEFAULT_CITY = next(iter(City))


class TemperatureUnit(StrEnum):
    METRIC = "metric"
    IMPERIAL = "imperial"

    @property
    def symbol(self) -> str:
        return "°C" if self is TemperatureUnit.METRIC else "°F"

    def toggled(self) -> "TemperatureUnit":
        if self is TemperatureUnit.METRIC:
            return TemperatureUnit.IMPERIAL
        return TemperatureUnit.METRIC


DEFAULT_UNIT = TemperatureUnit.METRIC


def utc_now() -> datetime:
    return datetime.now(UTC)
