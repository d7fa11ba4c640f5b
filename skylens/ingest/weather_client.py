"""Current-conditions client for the weather observation API."""

import logging
from datetime import UTC, datetime
from enum import StrEnum

import httpx
from pydantic import ValidationError

from skylens.models.common import City, TemperatureUnit, utc_now
from skylens.models.weather import WeatherInfo, WeatherResponse

logger = logging.getLogger(__name__)

WEATHER_BASE_URL = "https://weatherapi.pelmorex.com/api/v1/observation/placecode"
DEFAULT_USER_AGENT = "skylens/0.1.0"


class WeatherErrorKind(StrEnum):
    INVALID_URL = "invalid_url"
    NETWORK_ERROR = "network_error"
    INVALID_RESPONSE = "invalid_response"
    DECODING_ERROR = "decoding_error"


class WeatherError(Exception):
    """Base class for weather fetch failures."""

    kind: WeatherErrorKind
    user_message = "There was a problem processing the weather data. Please try again later."


class InvalidURLError(WeatherError):
    kind = WeatherErrorKind.INVALID_URL
    user_message = "Invalid weather data source. Please contact support."


class NetworkError(WeatherError):
    kind = WeatherErrorKind.NETWORK_ERROR
    user_message = (
        "Unable to load weather data. Please check your connection and try again."
    )


class InvalidResponseError(WeatherError):
    kind = WeatherErrorKind.INVALID_RESPONSE

    def __init__(self, message: str, status_code: int | None = None):
        super().__init__(message)
        self.status_code = status_code


class DecodingError(WeatherError):
    kind = WeatherErrorKind.DECODING_ERROR


class WeatherClient:
    """Fetches current conditions for a city and maps them to WeatherInfo.

    An ``httpx.AsyncClient`` may be injected; otherwise a short-lived one is
    opened per request. The requested city travels with the call, so
    overlapping fetches for different cities cannot mislabel each other.
    """

    def __init__(
        self,
        base_url: str = WEATHER_BASE_URL,
        timeout: float = 10.0,
        user_agent: str = DEFAULT_USER_AGENT,
        http_client: httpx.AsyncClient | None = None,
    ):
        self.base_url = base_url.rstrip("/")
        self.timeout = timeout
        self.user_agent = user_agent
        self._http = http_client

    def build_url(self, city: City, unit: TemperatureUnit) -> str:
        """Build the observation URL, raising InvalidURLError if it is malformed."""
        raw = f"{self.base_url}/{city.provider_code}?unit={unit.value}"
        try:
            url = httpx.URL(raw)
        except httpx.InvalidURL as e:
            raise InvalidURLError(f"Invalid weather URL {raw!r}: {e}") from e
        if url.scheme not in ("http", "https") or not url.host:
            raise InvalidURLError(f"Invalid weather URL {raw!r}")
        return raw

    async def fetch_weather(self, city: City, unit: TemperatureUnit) -> WeatherInfo:
        url = self.build_url(city, unit)
        logger.debug("Fetching weather for %s (%s): %s", city.display_name, unit, url)

        try:
            resp = await self._get(url)
        except httpx.RequestError as e:
            logger.warning("Weather request failed for %s: %s", city.display_name, e)
            raise NetworkError(f"Request failed: {e}") from e

        if not 200 <= resp.status_code <= 299:
            logger.warning(
                "Weather API %d for %s: %s",
                resp.status_code, city.display_name, resp.text[:200],
            )
            raise InvalidResponseError(
                f"HTTP {resp.status_code}", status_code=resp.status_code
            )

        try:
            payload = WeatherResponse.model_validate_json(resp.content)
        except ValidationError as e:
            logger.warning("Undecodable weather payload for %s: %s", city.display_name, e)
            raise DecodingError(f"Unexpected payload: {e}") from e

        return map_weather_info(payload, city, unit)

    async def _get(self, url: str) -> httpx.Response:
        headers = {"User-Agent": self.user_agent, "Accept": "application/json"}
        if self._http is not None:
            return await self._http.get(url, headers=headers, timeout=self.timeout)
        async with httpx.AsyncClient(timeout=self.timeout) as client:
            return await client.get(url, headers=headers)


def map_weather_info(
    payload: WeatherResponse, city: City, unit: TemperatureUnit
) -> WeatherInfo:
    """Map a decoded payload to WeatherInfo. The API response carries no city name."""
    observation = payload.observation
    return WeatherInfo(
        city_name=city.display_name,
        condition=observation.weather_code.text,
        temperature=observation.temperature,
        feels_like=observation.feels_like,
        last_updated=_parse_timestamp(observation.time.utc) or utc_now(),
        weather_code=observation.weather_code.icon,
        unit=unit,
        image_base_url=payload.display.image_url,
    )


def _parse_timestamp(iso_str: str) -> datetime | None:
    """Parse an ISO timestamp, treating naive values as UTC."""
    try:
        dt = datetime.fromisoformat(iso_str)
    except (ValueError, TypeError):
        return None
    if dt.tzinfo is None:
        dt = dt.replace(tzinfo=UTC)
    return dt.astimezone(UTC)
