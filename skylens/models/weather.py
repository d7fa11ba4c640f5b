"""Weather observation wire schema and the domain record built from it."""

from dataclasses import dataclass
from datetime import datetime

from pydantic import BaseModel, ConfigDict, Field

from skylens.models.common import TemperatureUnit

# --- Wire shape (provider JSON) ---


class _WireModel(BaseModel):
    # strict: quoted numbers and fractional ints are schema mismatches
    model_config = ConfigDict(extra="ignore", populate_by_name=True, strict=True)


class TimeInfo(_WireModel):
    local: str
    utc: str


class WeatherCode(_WireModel):
    value: str
    icon: int
    text: str
    bgimage: str | None = None
    overlay: str | None = None


class Wind(_WireModel):
    direction: str
    speed: int
    gust: int | None = None


class Pressure(_WireModel):
    value: float
    trend_key: int | None = Field(default=None, alias="trendKey")


class Observation(_WireModel):
    time: TimeInfo
    weather_code: WeatherCode = Field(alias="weatherCode")
    temperature: float
    feels_like: float = Field(alias="feelsLike")
    # Not used downstream
    dew_point: float | None = Field(default=None, alias="dewPoint")
    wind: Wind | None = None
    relative_humidity: int | None = Field(default=None, alias="relativeHumidity")
    pressure: Pressure | None = None
    visibility: float | None = None
    ceiling: float | None = None


class DisplayUnits(_WireModel):
    temperature: str
    dew_point: str | None = Field(default=None, alias="dewPoint")
    wind: str | None = None
    relative_humidity: str | None = Field(default=None, alias="relativeHumidity")
    pressure: str | None = None
    visibility: str | None = None
    ceiling: str | None = None


class Display(_WireModel):
    image_url: str = Field(alias="imageUrl")
    unit: DisplayUnits


class WeatherResponse(_WireModel):
    observation: Observation
    display: Display


# --- Domain ---


@dataclass(frozen=True)
class WeatherInfo:
    city_name: str
    condition: str
    temperature: float
    feels_like: float
    last_updated: datetime
    weather_code: int
    unit: TemperatureUnit
    image_base_url: str

    @property
    def icon_url(self) -> str:
        return f"{self.image_base_url}{self.weather_code}.png"
