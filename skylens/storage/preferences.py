"""Preferences store: last selected city and preferred temperature unit."""

import logging
import sqlite3
from typing import Protocol

from skylens.models.common import DEFAULT_CITY, DEFAULT_UNIT, City, TemperatureUnit
from skylens.storage import preferences_repo

logger = logging.getLogger(__name__)

LAST_CITY_KEY = "last_selected_city"
PREFERRED_UNIT_KEY = "preferred_unit"


class PreferencesStore(Protocol):
    def get_last_city(self) -> City: ...

    def save_last_city(self, city: City) -> None: ...

    def get_preferred_unit(self) -> TemperatureUnit: ...

    def save_preferred_unit(self, unit: TemperatureUnit) -> None: ...


class SqlitePreferencesStore:
    """Preferences persisted in the ``preferences`` table.

    Missing or unrecognised stored values fall back to the defaults
    (first city in the catalog, metric).
    """

    def __init__(self, conn: sqlite3.Connection):
        self.conn = conn

    def get_last_city(self) -> City:
        raw = preferences_repo.get_preference(self.conn, LAST_CITY_KEY)
        if raw is None:
            return DEFAULT_CITY
        try:
            return City(raw)
        except ValueError:
            logger.warning("Ignoring unknown stored city %r", raw)
            return DEFAULT_CITY

    def save_last_city(self, city: City) -> None:
        preferences_repo.set_preference(self.conn, LAST_CITY_KEY, city.value)

    def get_preferred_unit(self) -> TemperatureUnit:
        raw = preferences_repo.get_preference(self.conn, PREFERRED_UNIT_KEY)
        if raw is None:
            return DEFAULT_UNIT
        try:
            return TemperatureUnit(raw)
        except ValueError:
            logger.warning("Ignoring unknown stored unit %r", raw)
            return DEFAULT_UNIT

    def save_preferred_unit(self, unit: TemperatureUnit) -> None:
        preferences_repo.set_preference(self.conn, PREFERRED_UNIT_KEY, unit.value)


class InMemoryPreferencesStore:
    """Non-persistent store, for embedding and tests."""

    def __init__(
        self, city: City = DEFAULT_CITY, unit: TemperatureUnit = DEFAULT_UNIT
    ):
        self.city = city
        self.unit = unit

    def get_last_city(self) -> City:
        return self.city

    def save_last_city(self, city: City) -> None:
        self.city = city

    def get_preferred_unit(self) -> TemperatureUnit:
        return self.unit

    def save_preferred_unit(self, unit: TemperatureUnit) -> None:
        self.unit = unit
