"""Weather presenter: selected city/unit, load state, and display fields."""

import logging
from datetime import tzinfo
from typing import Protocol

from skylens.ingest.weather_client import WeatherError
from skylens.models.common import City, TemperatureUnit
from skylens.models.presentation import (
    LOADED,
    LOADING,
    ErrorState,
    LoadedState,
    LoadingState,
    ViewState,
)
from skylens.models.weather import WeatherInfo
from skylens.presenters.formatters import format_temperature, format_timestamp
from skylens.presenters.observable import Observable
from skylens.storage.preferences import PreferencesStore

logger = logging.getLogger(__name__)

UNEXPECTED_ERROR_MESSAGE = "An unexpected error occurred. Please try again."


class WeatherService(Protocol):
    async def fetch_weather(self, city: City, unit: TemperatureUnit) -> WeatherInfo: ...


class WeatherPresenter(Observable):
    """Drives the weather screen.

    Every trigger (initial load, refresh, city change, unit change) moves the
    state to loading, fetches, then settles on loaded or error. Each fetch is
    numbered; a completion that is not the most recently started fetch is
    dropped so the last initiated change always wins.
    """

    def __init__(self, service: WeatherService, store: PreferencesStore):
        super().__init__()
        self.service = service
        self.store = store
        self.state: ViewState = LOADING
        self.selected_city = store.get_last_city()
        self.preferred_unit = store.get_preferred_unit()
        self._weather_info: WeatherInfo | None = None
        self._sequence = 0

    async def fetch_weather(self) -> None:
        self._sequence += 1
        seq = self._sequence
        city, unit = self.selected_city, self.preferred_unit
        self._set_state(LOADING)

        info: WeatherInfo | None = None
        try:
            info = await self.service.fetch_weather(city, unit)
            new_state: ViewState = LOADED
        except WeatherError as e:
            logger.warning("Weather fetch failed for %s (%s): %s", city.display_name, e.kind, e)
            new_state = ErrorState(e.user_message)
        except Exception:
            logger.exception("Unexpected error fetching weather for %s", city.display_name)
            new_state = ErrorState(UNEXPECTED_ERROR_MESSAGE)

        if seq != self._sequence:
            logger.debug(
                "Dropping stale weather result for %s (fetch %d, latest %d)",
                city.display_name, seq, self._sequence,
            )
            return

        if info is not None:
            self._weather_info = info
        self._set_state(new_state)

    async def refresh(self) -> None:
        await self.fetch_weather()

    async def select_city(self, city: City) -> None:
        if city == self.selected_city:
            return
        self.selected_city = city
        self.store.save_last_city(city)
        await self.fetch_weather()

    async def toggle_unit(self) -> None:
        self.preferred_unit = self.preferred_unit.toggled()
        self.store.save_preferred_unit(self.preferred_unit)
        await self.fetch_weather()

    def _set_state(self, state: ViewState) -> None:
        self.state = state
        self._notify()

    # --- State queries ---

    @property
    def is_loading(self) -> bool:
        return isinstance(self.state, LoadingState)

    @property
    def is_loaded(self) -> bool:
        return isinstance(self.state, LoadedState)

    @property
    def error_message(self) -> str | None:
        if isinstance(self.state, ErrorState):
            return self.state.message
        return None

    @property
    def state_name(self) -> str:
        if isinstance(self.state, ErrorState):
            return "error"
        return "loaded" if self.is_loaded else "loading"

    # --- Display fields ---

    @property
    def weather_info(self) -> WeatherInfo | None:
        return self._weather_info

    @property
    def city_name(self) -> str:
        if self._weather_info is not None:
            return self._weather_info.city_name
        return self.selected_city.display_name

    @property
    def condition(self) -> str:
        return self._weather_info.condition if self._weather_info else ""

    @property
    def temperature(self) -> str:
        return format_temperature(
            self._weather_info.temperature if self._weather_info else None
        )

    @property
    def temperature_value(self) -> float:
        return self._weather_info.temperature if self._weather_info else 0.0

    @property
    def feels_like(self) -> str:
        return format_temperature(
            self._weather_info.feels_like if self._weather_info else None
        )

    @property
    def last_updated(self) -> str:
        return self.last_updated_text()

    def last_updated_text(self, tz: tzinfo | None = None) -> str:
        return format_timestamp(
            self._weather_info.last_updated if self._weather_info else None, tz
        )

    @property
    def unit_symbol(self) -> str:
        return self.preferred_unit.symbol

    @property
    def weather_icon_url(self) -> str | None:
        return self._weather_info.icon_url if self._weather_info else None
